"""Transport Layer: route bindings (decode, endpoint, encode) and the JSON codec.

Invariants:
    - Knows endpoints and envelopes, never capability implementations
    - Holds no state between calls
"""
