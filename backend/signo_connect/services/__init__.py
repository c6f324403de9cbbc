"""Services Layer — orchestration between routes, storage and Frappe.

Invariants:
    - Services receive their collaborators (storage, client, settings) as arguments
    - Domain rule violations raise typed errors from core/errors.py

Design Decisions:
    - Plain async functions per use case, no service classes with hidden state
"""
