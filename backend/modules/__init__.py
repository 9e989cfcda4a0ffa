"""
Feature modules for Catalog backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- repository.py: Queries over the request's database session
- service.py: Business logic implementation
- routes.py: FastAPI route handlers

Modules communicate through interfaces, not concrete implementations.
"""
