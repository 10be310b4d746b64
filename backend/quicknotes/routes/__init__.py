"""
QuickNotes Backend — API Routes Package
=========================================

Route Inventory:
    - notes.py:   GET/POST /notes, GET/PUT/DELETE /notes/{id}
    - health.py:  GET /health

Routes stay thin: extract the request data, call the store, return the
result with the right status code.
"""
