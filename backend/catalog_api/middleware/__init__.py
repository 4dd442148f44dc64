"""
Catalog Backend: Middleware Package
====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    The request ID is assigned before the access log line is written, so
    every log entry for a request (access line and service logs) carries
    the same correlation ID. Responses travel back through the chain in
    reverse; the ID is echoed in the X-Request-ID header.
"""
