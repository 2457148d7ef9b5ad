"""Services Layer: concrete capability implementations.

Invariants:
    - One implementation per capability Protocol
    - Implementations are stateless and safe to share between concurrent calls
"""
