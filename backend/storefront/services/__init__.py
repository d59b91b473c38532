# Services package init
"""
Storefront Backend - Services Layer
====================================

What:  Catalog logic sitting between routes (HTTP) and the generated data.

Service Inventory:
    - fake_data.generate_fake_products: Builds the synthetic catalog at startup
    - ProductService: Holds the catalog; list and lookup-by-id
"""
