"""Infrastructure Layer: database access, store adapters, and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All driver exceptions mapped to numcheck errors before leaving this layer
"""
