# Routes package init
"""
Brewery Backend — API Routes Package
======================================

Route Inventory:
    - beers.py:      /api/v2/beer      (list, get, create, replace, patch, delete)
    - customers.py:  /api/v2/customer  (same operations)
    - health.py:     GET /health       (service health check)
    - streaming.py:  chunked JSON array helper for the collection endpoints

Design Principle:
    Routes are THIN — they handle HTTP concerns only:
    - Extract path parameters and the validated body
    - Call the appropriate service
    - Choose the status code and headers (Location, X-Total-Count)

    Not-found and validation outcomes are exceptions, rendered by the
    handlers registered in main.py.
"""
