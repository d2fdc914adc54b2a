"""Tests for the student domain rules."""

import logging
from datetime import date
from unittest.mock import AsyncMock

import pytest

from clinic_management.core.exceptions import AgeRestrictionViolation, DuplicateEmailViolation
from clinic_management.features.students.services.student_manager import StudentManager


class TestCalculateAge:
    """Test calendar-aware age calculation."""
    
    @pytest.mark.parametrize(
        "date_of_birth, reference_date, expected",
        [
            (date(2000, 6, 15), date(2026, 1, 27), 25),
            (date(2008, 1, 27), date(2026, 1, 27), 18),
            (date(2008, 1, 28), date(2026, 1, 27), 17),
            (date(2000, 6, 15), date(2026, 3, 10), 25),
            (date(2000, 6, 15), date(2026, 6, 15), 26),
        ],
    )
    def test_examples(self, date_of_birth, reference_date, expected):
        assert StudentManager.calculate_age(date_of_birth, reference_date) == expected
    
    def test_leap_day_birthday_counts_from_february_28(self):
        """A 29 February birthday is reached on 28 February in common years."""
        assert StudentManager.calculate_age(date(2004, 2, 29), date(2022, 2, 28)) == 18
        assert StudentManager.calculate_age(date(2004, 2, 29), date(2022, 2, 27)) == 17
        assert StudentManager.calculate_age(date(2004, 2, 29), date(2024, 2, 29)) == 20


class TestStudentManagerCreate:
    """Test StudentManager.create validations."""
    
    @pytest.fixture
    def repository(self):
        repo = AsyncMock()
        repo.find_by_email.return_value = None
        return repo
    
    @pytest.fixture
    def manager(self, repository, fixed_today):
        return StudentManager(repository, clock=lambda: fixed_today)
    
    @pytest.mark.asyncio
    async def test_create_returns_unpersisted_student(self, manager, repository, tenant_id):
        student = await manager.create(
            "Jane", "Doe", date(2000, 6, 15), email="jane@example.com", tenant_id=tenant_id
        )
        
        assert student.first_name == "Jane"
        assert student.tenant_id == tenant_id
        assert student.is_deleted is False
        repository.find_by_email.assert_awaited_once_with("jane@example.com", tenant_id, None)
        repository.insert.assert_not_called()
    
    @pytest.mark.asyncio
    async def test_exactly_eighteen_today_is_allowed(self, manager):
        student = await manager.create("Ann", "Lee", date(2008, 1, 27))
        assert student.date_of_birth == date(2008, 1, 27)
    
    @pytest.mark.asyncio
    async def test_under_eighteen_raises_age_error(self, manager, repository):
        with pytest.raises(AgeRestrictionViolation) as exc_info:
            await manager.create("Tom", "Young", date(2008, 1, 28), email="taken@example.com")
        
        assert exc_info.value.error_code == "Student:MustBe18OrOlder"
        assert exc_info.value.details == {"minimum_age": 18}
        repository.find_by_email.assert_not_called()
    
    @pytest.mark.asyncio
    async def test_duplicate_email_raises(self, manager, repository, sample_student, tenant_id):
        repository.find_by_email.return_value = sample_student
        
        with pytest.raises(DuplicateEmailViolation) as exc_info:
            await manager.create(
                "John", "Roe", date(1999, 1, 1), email=sample_student.email, tenant_id=tenant_id
            )
        
        assert exc_info.value.error_code == "Student:DuplicateEmail"
        assert exc_info.value.details == {"email": sample_student.email}

    @pytest.mark.asyncio
    async def test_duplicate_email_is_logged_by_student_id_only(
        self, manager, repository, sample_student, tenant_id, caplog
    ):
        repository.find_by_email.return_value = sample_student

        with caplog.at_level(logging.DEBUG, logger="clinic_management"):
            with pytest.raises(DuplicateEmailViolation):
                await manager.create(
                    "John", "Roe", date(1999, 1, 1), email=sample_student.email, tenant_id=tenant_id
                )

        assert str(sample_student.id) in caplog.text
        assert sample_student.email not in caplog.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", [None, "", "   "])
    async def test_blank_email_skips_uniqueness_check(self, manager, repository, email):
        student = await manager.create("Ann", "Lee", date(1990, 1, 1), email=email)
        
        assert student.email is None
        repository.find_by_email.assert_not_called()


class TestStudentManagerUpdate:
    """Test StudentManager.update validations."""
    
    @pytest.fixture
    def repository(self):
        repo = AsyncMock()
        repo.find_by_email.return_value = None
        return repo
    
    @pytest.fixture
    def manager(self, repository, fixed_today):
        return StudentManager(repository, clock=lambda: fixed_today)
    
    @pytest.mark.asyncio
    async def test_update_excludes_own_id_from_email_check(self, manager, repository, sample_student):
        await manager.update(
            sample_student, "Janet", "Doe", date(2000, 6, 15), email=sample_student.email
        )
        
        repository.find_by_email.assert_awaited_once_with(
            sample_student.email, sample_student.tenant_id, sample_student.id
        )
        assert sample_student.first_name == "Janet"
    
    @pytest.mark.asyncio
    async def test_update_applies_all_fields(self, manager, sample_student):
        await manager.update(
            sample_student, "A", "B", date(1980, 2, 2),
            email=None, phone_number="123", address="Elsewhere",
        )
        
        assert (sample_student.first_name, sample_student.last_name) == ("A", "B")
        assert sample_student.date_of_birth == date(1980, 2, 2)
        assert sample_student.email is None
        assert sample_student.phone_number == "123"
        assert sample_student.address == "Elsewhere"
    
    @pytest.mark.asyncio
    async def test_update_to_underage_leaves_student_untouched(self, manager, sample_student):
        with pytest.raises(AgeRestrictionViolation):
            await manager.update(sample_student, "Kid", "Doe", date(2015, 1, 1))
        
        assert sample_student.first_name == "Jane"
        assert sample_student.date_of_birth == date(2000, 6, 15)
    
    @pytest.mark.asyncio
    async def test_update_to_email_of_other_student_raises(self, manager, repository, sample_student):
        repository.find_by_email.return_value = sample_student
        other = await manager.create("Bob", "Smith", date(1990, 1, 1))
        
        with pytest.raises(DuplicateEmailViolation):
            await manager.update(other, "Bob", "Smith", date(1990, 1, 1), email=sample_student.email)
    
    def test_validate_age_uses_injected_clock(self, repository):
        manager = StudentManager(repository, clock=lambda: date(2030, 1, 1))
        manager.validate_age(date(2011, 12, 31))
        
        with pytest.raises(AgeRestrictionViolation):
            manager.validate_age(date(2012, 1, 2))
    
    def test_default_clock_is_today(self, repository):
        assert StudentManager(repository).clock() == date.today()


@pytest.mark.asyncio
async def test_created_ids_are_time_ordered_uuids(fixed_today):
    repository = AsyncMock()
    repository.find_by_email.return_value = None
    manager = StudentManager(repository, clock=lambda: fixed_today)
    
    first = await manager.create("A", "B", date(1990, 1, 1))
    second = await manager.create("A", "B", date(1990, 1, 1))
    
    assert first.id != second.id
    assert first.id.version == 7
