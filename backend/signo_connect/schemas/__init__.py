"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input)
    - JSON keys are camelCase; snake_case field names are also accepted

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
