"""
Storefront Backend - Product Service
=====================================

What:  Owns the product catalog and answers list / lookup queries.
How:   Keeps the products as an immutable tuple plus an id → Product index
       built once in the constructor.
Who:   Created by create_app() and handed to the route handlers through the
       get_product_service dependency (see routes/dependencies.py).

Concurrency:
    Nothing is mutated after __init__, so one instance is shared by every
    in-flight request without locking.
"""

import logging
from typing import Dict, Iterable, Optional, Tuple

from storefront.exceptions import CatalogError
from storefront.schemas.product import Product

logger = logging.getLogger(__name__)


class ProductService:
    """
    Read-only access to the product catalog.

    Responsibilities:
        - list_products(): The full catalog, in generation order
        - get_by_id():     Single product lookup; None when the id is unknown

    A missing id is not an error here. Returning None keeps "not found"
    separate from genuine faults, which propagate as exceptions.
    """

    def __init__(self, products: Iterable[Product]):
        self._products: Tuple[Product, ...] = tuple(products)

        index: Dict[str, Product] = {}
        for product in self._products:
            if product.id in index:
                raise CatalogError(
                    message=f"Duplicate product id '{product.id}' in catalog",
                    context={"product_id": product.id},
                )
            index[product.id] = product
        self._index = index

        logger.debug("Product catalog loaded with %d items", len(self._products))

    def __len__(self) -> int:
        return len(self._products)

    def list_products(self) -> Tuple[Product, ...]:
        """Return every product, in the order they were generated."""
        return self._products

    def get_by_id(self, product_id: str) -> Optional[Product]:
        """
        Look up a single product.

        Args:
            product_id: Identifier taken from the request path

        Returns:
            The matching Product, or None when no product has that id
        """
        return self._index.get(product_id)
