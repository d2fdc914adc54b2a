"""Student feature utilities."""
