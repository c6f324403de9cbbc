"""API Layer — FastAPI routes, dependencies, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses with camelCase keys

Design Decisions:
    - Thin routes delegate to services and core helpers
"""
