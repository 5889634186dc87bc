"""API Layer - FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error response body has the shape {"message": str}

Design Decisions:
    - Thin routes delegate to services and unwrap their Result once
"""
