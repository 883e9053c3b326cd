"""Services Layer: orchestrates store IO around the pure validation rule.

Invariants:
    - Services receive their collaborators through constructors or factories
    - No service reaches for a global store or engine
"""
