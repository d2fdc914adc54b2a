"""Student router dependencies.

The database manager is created by the application lifespan and stored on
``app.state.database``.
"""

from fastapi import Depends, Request

from ....config.settings import AppSettings, get_settings
from ....core.exceptions import ConfigurationError
from ....database.connection import DatabaseManager
from ..repositories.student_repository import StudentDatabaseRepository
from ..services.student_manager import StudentManager
from ..services.student_service import StudentService


def get_database(request: Request) -> DatabaseManager:
    """Database manager owned by the running application."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise ConfigurationError("Database is not initialized")
    return database


def get_student_repository(
    database: DatabaseManager = Depends(get_database),
    settings: AppSettings = Depends(get_settings),
) -> StudentDatabaseRepository:
    return StudentDatabaseRepository(database, settings.db_schema)


def get_student_manager(
    repository: StudentDatabaseRepository = Depends(get_student_repository),
) -> StudentManager:
    return StudentManager(repository)


def get_student_service(
    repository: StudentDatabaseRepository = Depends(get_student_repository),
    manager: StudentManager = Depends(get_student_manager),
) -> StudentService:
    return StudentService(repository, manager)
