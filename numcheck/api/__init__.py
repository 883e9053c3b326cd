"""API Layer: FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes receive NumberService through Depends, never build stores inline

Design Decisions:
    - Thin routes delegate to services; failures surface through the global handlers
"""
