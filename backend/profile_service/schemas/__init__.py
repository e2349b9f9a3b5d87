"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas parse at the system boundary; business rules live in core/

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
