"""Infrastructure Layer — store access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports route modules
    - Store exceptions mapped to StoreError before leaving this layer
"""
