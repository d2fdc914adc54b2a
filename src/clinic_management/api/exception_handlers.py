"""
Application exception handlers for the clinic-management API.

Maps the ClinicError hierarchy onto HTTP status codes and a uniform JSON
error body.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    AuthenticationError,
    ClinicError,
    create_error_response,
    get_http_status_code,
)

logger = logging.getLogger(__name__)


class ExceptionHandlerRegistry:
    """Registry for the application's exception handlers."""
    
    def __init__(self, is_production: bool = True):
        """
        Initialize exception handler registry.
        
        Args:
            is_production: Hide unexpected error details when True
        """
        self.is_production = is_production
    
    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application.
        
        Args:
            app: FastAPI application instance
        """
        @app.exception_handler(ClinicError)
        async def clinic_exception_handler(request: Request, exc: ClinicError):
            """Handle domain and infrastructure exceptions."""
            status_code = get_http_status_code(exc)
            if status_code >= 500:
                logger.error(f"{exc.__class__.__name__} on {request.url.path}: {exc.message}")
            else:
                logger.debug(f"{exc.__class__.__name__} on {request.url.path}: {exc.message}")
            
            headers = None
            if isinstance(exc, AuthenticationError):
                headers = {"WWW-Authenticate": "Bearer"}
            
            return JSONResponse(
                status_code=status_code,
                content=create_error_response(exc),
                headers=headers,
            )
        
        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)
            
            message = "An unexpected error occurred" if self.is_production else str(exc)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": {
                        "code": "InternalServerError",
                        "message": message,
                        "details": {},
                        "type": exc.__class__.__name__,
                    }
                },
            )


def register_exception_handlers(app: FastAPI, is_production: bool = True) -> None:
    """
    Register exception handlers for a FastAPI application.
    
    Args:
        app: FastAPI application instance
        is_production: Whether running in production mode
    """
    registry = ExceptionHandlerRegistry(is_production)
    registry.register_handlers(app)
