"""
Notes API — Middleware Package
===============================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [Token Extractor] → [GZip] → [CORS] → Route

    1. Request ID: client ID if it is a short safe token, otherwise generated
    2. Logging: method, path, status, duration, request ID and auth kind
    3. Token Extractor: `Authorization: bearer <token>` → request.state.token
"""
