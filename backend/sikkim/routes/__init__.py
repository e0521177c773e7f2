# Routes package init
"""
Sikkim Tourism Backend — API Routes Package
=============================================

Route Inventory (🔒 = admin token required):
    - health.py:        GET    /api/health
    - destinations.py:  GET    /api/destinations
                        GET    /api/destinations/{id}
                        POST   /api/destinations          🔒
    - bookings.py:      POST   /api/bookings
                        GET    /api/bookings              🔒
                        DELETE /api/bookings/{id}         🔒
    - contacts.py:      POST   /api/contact
                        GET    /api/contacts              🔒

Routes stay thin: read input, call the service, wrap the result in the
{"data": ...} envelope. Errors are raised, never formatted here.
"""
