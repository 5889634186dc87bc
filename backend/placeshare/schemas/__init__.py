"""Pydantic Schemas - request/response contracts for API endpoints.

Invariants:
    - Request schemas are the validation layer: they run before any service call
    - Response schemas never expose password hashes
"""
