# Middleware package init
"""
UserBoard Backend — Middleware Package
========================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: correlation ID for log lines and error bodies
    2. Logging: one access line per request, tagged with the request ID
    3. CORS: FastAPI's CORSMiddleware (handles preflight)

The order is reversed for responses, so the request ID is already set
when the logging middleware records status and duration.
"""
