"""
Brewery Backend — Application Package Initializer
==================================================

What:  Marks the `brewery` directory as a Python package.
Why:   Enables module imports like `from brewery.config import settings`.
Who:   Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    Each resource (beer, customer) follows the same layered shape:

    ┌─────────────────────────────────────┐
    │        Routes (Controllers)         │  ← HTTP verbs, status codes, headers
    ├─────────────────────────────────────┤
    │              Services               │  ← Not-found checks, PUT/PATCH merge rules
    ├─────────────────────────────────────┤
    │     Mappers  (entity ↔ DTO)         │  ← Field-for-field conversion
    ├─────────────────────────────────────┤
    │    Repositories (async SQLAlchemy)  │  ← find_all / find_by_id / save / delete / count
    └─────────────────────────────────────┘

    Every layer is assembled once in `create_app()` and handed to the next
    through its constructor, so tests can swap any of them.
"""

__version__ = "2.0.0"
