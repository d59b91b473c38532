# Middleware package init
"""
Storefront Backend - Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [Fault Translation] → [GZip] → [CORS] → Router

    - Request ID first so every later log line carries the correlation ID
    - Logging sees the final status, including 500s produced by
      fault translation
    - Fault Translation wraps the router, so any exception raised by a
      route handler becomes a single JSON or HTML 500 response
"""
