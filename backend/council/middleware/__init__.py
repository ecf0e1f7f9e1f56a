"""
Student Council API — Middleware Package
==========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID: correlation ID stored in a ContextVar and echoed in the
      X-Request-ID response header
    - Logging: method, path, status and duration of each request
    - GZip / CORS: FastAPI's stock middleware, configured in main.py
"""
