"""
Catalog Backend: Application Package Initializer
=================================================

What: Marks the `catalog_api` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    This backend follows the same layering for every catalog resource:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Resource Handlers)   │  ← one statement per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy tables + Pydantic
    ├─────────────────────────────────────┤
    │   Gateway & Database (Persistence)  │  ← tagged results, pooled connections
    └─────────────────────────────────────┘

    Resources: banners, dungeon items/categories, products/product types,
    lessons/subjects, skins, users, and read-only report views.
"""

__version__ = "1.0.0"
