"""Calendar-aware age arithmetic."""

from datetime import date


def add_years(value: date, years: int) -> date:
    """Shift ``value`` by whole years; 29 February falls back to 28 February."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


def calculate_age(date_of_birth: date, reference_date: date) -> int:
    """Completed years between ``date_of_birth`` and ``reference_date``."""
    age = reference_date.year - date_of_birth.year
    if reference_date < add_years(date_of_birth, age):
        age -= 1
    return age
