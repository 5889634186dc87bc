"""Infrastructure Layer - external service clients, storage and cross-cutting concerns.

Invariants:
    - All external calls wrapped with timeout and error mapping
    - Repository implementations satisfy the protocols in core/repository_protocols.py
"""
