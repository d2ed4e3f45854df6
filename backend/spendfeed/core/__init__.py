"""Core Layer — feed visibility and expenditure statistics, no DB, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Pure functions are deterministic; IO only through repository_protocols
"""
