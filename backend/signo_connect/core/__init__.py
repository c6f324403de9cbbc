"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (clock and RNG passed in where needed)

Design Decisions:
    - Functional core separated from imperative shell: Frappe scoring, route
      estimates and trip stats are testable without a server
"""
