"""
Service layer abstraction.

Services encapsulate business logic for a domain.  API handlers talk to
a service instance and never touch the underlying collection directly,
so the in‑memory store could be swapped for a database without changing
the routes.
"""
