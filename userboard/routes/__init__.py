# Routes package init
"""
UserBoard Backend — API Routes Package
========================================

Route Inventory:
    - users.py:   GET    /api/users          (list users)
                  POST   /api/users          (create user)
                  DELETE /api/users/{id}     (delete user)
    - client.py:  GET    /                   (browser client page)
    - health.py:  GET    /health             (service health check)

Routes are thin: they extract data from the request, call the service,
and pick the status code. Everything else lives below them.
"""
