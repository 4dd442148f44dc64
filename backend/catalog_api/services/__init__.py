"""
Catalog Backend: Services Layer
================================

What:  One resource handler per catalog entity, between routes (HTTP) and
       the gateway (persistence).
How:   Each service subclasses ResourceService, builds one Core statement per
       operation and lets the base class translate store failures.

Service Inventory:
    - BannerService                              (banner_service.py)
    - DungeonCategoryService, DungeonItemService (dungeon_service.py)
    - ProductTypeService, ProductService         (product_service.py)
    - SubjectService, LessonService              (education_service.py)
    - SkinService                                (skin_service.py)
    - UserService                                (user_service.py)
    - ReportService                              (report_service.py)
"""
