# Middleware package init
"""
Contact Book Backend — Middleware Package
==========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    1. Request ID: generate a correlation ID for logging and tracing
    2. Logging: log method, path, status and duration with that ID
"""
