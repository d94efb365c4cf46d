# Middleware package init
"""
Brewery Backend — Middleware Package
======================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: generate/propagate the correlation ID first
    2. Logging: log the request with that ID and its outcome
    3. CORS: FastAPI's CORSMiddleware (handles preflight)
"""
