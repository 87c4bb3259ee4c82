# Routes package init
"""
Contact Book Backend — API Routes Package
===========================================

Route Inventory:
    - contacts.py:  /api/v1/contacts         (GET list, POST create)
                    /api/v1/contacts/{id}    (GET, PUT, DELETE)
    - health.py:    GET /health              (service health check)

Routes stay THIN: extract input, call ContactService, map the result to a
status code. SQL lives in app/services/contact_service.py.
"""
