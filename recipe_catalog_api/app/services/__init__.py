"""
Service layer abstraction.

Each service encapsulates logic for a domain.  Endpoints talk to the
``RecipeStore`` protocol rather than a concrete class, so the
in‑memory store can be replaced (for instance by a test double)
without changing API handlers.
"""
