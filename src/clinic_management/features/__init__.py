"""Feature modules for clinic-management."""
