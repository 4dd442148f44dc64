"""
Catalog Backend: API Routes Package
====================================

What:  HTTP route handlers, one module per catalog area.

Route Inventory:
    - banners.py:    /banners                       (launcher banners)
    - dungeons.py:   /api/categorias, /api/itens    (Minecraft Dungeons items)
    - products.py:   /api/products, /api/product-types (Java Edition downloads)
    - education.py:  /api/education/...             (Education Edition lessons)
    - skins.py:      /api/skins                     (skin shop)
    - users.py:      /api/users                     (accounts)
    - reports.py:    /api/relatorio/itens, /api/reports/user-downloads
    - health.py:     /health

Routes stay thin: read path/query/body, call one service method, pick the
status code. Store access and error translation live in the services.
"""
