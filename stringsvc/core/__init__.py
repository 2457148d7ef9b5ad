"""Core Layer: capability contracts, domain errors, endpoints. No IO, no transport.

Invariants:
    - No module in core/ imports from services/, transport/, api/, or infrastructure/
    - Endpoints depend on capability Protocols only, never on implementations
"""
