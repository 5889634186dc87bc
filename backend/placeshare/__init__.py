"""PlaceShare Application Package - places and users API with geocoding.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
