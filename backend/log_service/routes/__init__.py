# Routes package init
"""
log-service — API Routes Package
================================

Route Inventory:
    - work.py:    /work?task=<name>  (simulated work, 150 ms delay)
    - health.py:  /healthz           (liveness probe)
    - hello.py:   /  and any other path (greeting)

No route restricts the HTTP method. hello.router is a catch-all and must be
included last.

Design Principle:
    Routes are THIN: they read the request, call a service, and pick the
    response body. Plain text everywhere.
"""

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]
