"""clinic-management: multi-tenant student records service."""

from .__version__ import __version__

__all__ = ["__version__"]
