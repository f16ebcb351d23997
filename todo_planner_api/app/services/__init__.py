"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services work
on records held by ``core.store.TodoStore`` so the in‑memory store can
later be swapped for a database without changing API handlers.
"""
