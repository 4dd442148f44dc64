"""
Catalog Backend: Table Models
==============================

Importing this package registers every table with `Base.metadata`
(used by Alembic and by the test suite to build the schema).
"""

from catalog_api.models.banner import Banner
from catalog_api.models.dungeon import DungeonCategory, DungeonItem
from catalog_api.models.education import Lesson, Subject
from catalog_api.models.product import Product, ProductType
from catalog_api.models.skin import Skin
from catalog_api.models.user import User, UserDownload

__all__ = [
    "Banner",
    "DungeonCategory",
    "DungeonItem",
    "Lesson",
    "Product",
    "ProductType",
    "Skin",
    "Subject",
    "User",
    "UserDownload",
]
