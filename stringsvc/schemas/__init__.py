"""Pydantic Schemas: request/response envelopes, one pair per route.

Invariants:
    - Envelopes are frozen: built once by the decode step, never mutated
"""
