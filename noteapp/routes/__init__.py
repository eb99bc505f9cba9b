"""
Notes API — API Routes Package
===============================

Route Inventory:
    - notes.py:   GET/POST /api/notes, GET/PUT/DELETE /api/notes/{id}
    - users.py:   GET/POST /api/users
    - login.py:   POST /api/login
    - health.py:  GET /health

Routes are thin: they pull data out of the request, call a service and
return its result. Errors propagate to the handlers registered in main.py.
"""
