"""Calculator Service — arithmetic and user-record HTTP API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
