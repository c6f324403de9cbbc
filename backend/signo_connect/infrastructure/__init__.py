"""Infrastructure Layer — storage backends, external clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All external calls wrapped with retry/timeout/error mapping

Design Decisions:
    - Storage implementations satisfy core.repository_protocols.Storage structurally
"""
