"""
Catalog Backend: Shared Route Parameters
=========================================

Every table key is a 32-bit INTEGER. Path and query ids outside 1..MAX_ID
are rejected with 400 by request validation, so they never reach a driver
that would overflow on them.
"""

from typing import Annotated, Optional

from fastapi import Path, Query

from catalog_api.schemas.common import MAX_ID

ResourceId = Annotated[int, Path(gt=0, le=MAX_ID, description="Resource identifier")]

OptionalIdFilter = Annotated[
    Optional[int], Query(gt=0, le=MAX_ID, description="Exact identifier to filter by")
]
