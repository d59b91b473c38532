"""
Storefront Backend - Application Package Initializer
=====================================================

What:  Marks the `storefront` directory as a Python package.
Who:   Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is a thin layered web application over an in-memory catalog:

    ┌─────────────────────────────────────┐
    │   Routes (views, JSON API, fallback)│  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (ProductService)    │  ← Lookup and listing
    ├─────────────────────────────────────┤
    │      Fake data generator (startup)  │  ← Synthetic Product records
    └─────────────────────────────────────┘

    Faults raised anywhere above the service bubble up to a single
    translation middleware that wraps the whole routing pipeline.
"""

__version__ = "1.0.0"
