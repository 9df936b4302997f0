# Services package init
"""
log-service — Services Package
==============================

What:  Work done on behalf of route handlers, kept free of HTTP details.

Service Inventory:
    - work_service.py: WorkService (simulated task with a fixed delay)
"""
