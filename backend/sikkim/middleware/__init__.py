# Middleware package init
"""
Sikkim Tourism Backend — Middleware Package
=============================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID first, so every later log line can carry the correlation ID
    - Logging measures status and duration of the whole downstream chain
    - GZip / CORS are FastAPI's stock middleware

    The admin token check is NOT middleware: it is a route dependency
    (see sikkim/security.py) applied only to protected routes.
"""
