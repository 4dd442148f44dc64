"""
Catalog Backend: Pydantic Request/Response Schemas
===================================================

One module per resource. Payload models validate request bodies (missing or
empty required fields fail before any store access); response models define
exactly which columns are exposed (user passwords never are).
"""
