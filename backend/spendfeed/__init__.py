"""SpendFeed Application Package — social spending journal backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
