"""Validation rules and the orchestrator that runs them.

INVARIANT: Rules are stateless once constructed. They never store
per-record data, so one instance may serve many records and threads.
"""
