"""Employee Directory API - CRUD service for employee records."""

__version__ = "0.1.0"
