"""API Layer: FastAPI application, HTTP route mounting and error handlers.

Invariants:
    - Routes mounted explicitly from the route table passed to create_app
    - Infrastructure errors become structured JSON error envelopes
"""
