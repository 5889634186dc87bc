"""Services Layer - resource operations for places and users.

Invariants:
    - Services depend on repository/resolver protocols only
    - Every operation returns a Result; nothing is raised for expected failures
"""
