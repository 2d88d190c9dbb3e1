# Middleware package init
"""
QuickNotes Backend — Middleware Package
=========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [CORS] → [Logging] → Route Handler

    1. Request ID: Correlation ID for logs and the X-Request-ID header
    2. CORS: Access-Control-* headers; OPTIONS answered with a bare 200
    3. Logging: Method, path, status and duration; unexpected errors become
       the generic 500 here, inside CORS and Request ID, so that response
       still carries both sets of headers.

    OPTIONS replies never reach the access log.
"""
