"""
Storefront Backend - Fake Catalog Generator
============================================

What:  Produces the synthetic product catalog served by the application.
How:   Draws every field from a private random.Random instance. With a seed
       the whole catalog (ids included) is reproducible; without one each
       process start yields a different catalog.
When:  Called once by create_app() before the first request is served.

Generated values:
    name:        "<adjective> <material> <product>", e.g. "Sleek Granite Chair"
    price:       1.00 .. 1000.00, rounded to cents
    category:    one of DEPARTMENTS
    image:       https://picsum.photos/seed/<id>/640/480
"""

import random
import uuid
from typing import List, Optional

from storefront.schemas.product import Product

ADJECTIVES = (
    "Awesome", "Ergonomic", "Fantastic", "Generic", "Gorgeous", "Handcrafted",
    "Handmade", "Incredible", "Intelligent", "Licensed", "Practical", "Refined",
    "Rustic", "Sleek", "Small", "Tasty", "Unbranded", "Elegant", "Modern",
)

MATERIALS = (
    "Bamboo", "Bronze", "Ceramic", "Concrete", "Cotton", "Fresh", "Frozen",
    "Granite", "Metal", "Plastic", "Rubber", "Soft", "Steel", "Wooden", "Marble",
)

PRODUCTS = (
    "Bacon", "Ball", "Bike", "Car", "Chair", "Cheese", "Chicken", "Chips",
    "Computer", "Fish", "Gloves", "Hat", "Keyboard", "Mouse", "Pants", "Pizza",
    "Salad", "Sausages", "Shirt", "Shoes", "Soap", "Table", "Towels", "Tuna",
)

DEPARTMENTS = (
    "Automotive", "Baby", "Beauty", "Books", "Clothing", "Computers",
    "Electronics", "Games", "Garden", "Grocery", "Health", "Home",
    "Industrial", "Jewelery", "Kids", "Movies", "Music", "Outdoors",
    "Shoes", "Sports", "Tools", "Toys",
)

DESCRIPTIONS = (
    "The {name} combines {material_lower} construction with a design made for everyday use.",
    "Our {name} is built to last, crafted from {material_lower} and finished by hand.",
    "Discover the {name}: a {adjective_lower} take on a {product_lower} you will reach for daily.",
    "The {adjective_lower} {product_lower} from our {category} collection, now in {material_lower}.",
    "A bestseller in {category}, the {name} pairs {material_lower} durability with a {adjective_lower} look.",
)

MIN_PRICE = 1.0
MAX_PRICE = 1000.0


def _fake_product(rng: random.Random) -> Product:
    """Build one Product from the given random source."""
    adjective = rng.choice(ADJECTIVES)
    material = rng.choice(MATERIALS)
    product = rng.choice(PRODUCTS)
    category = rng.choice(DEPARTMENTS)
    name = f"{adjective} {material} {product}"

    # uuid4 layout, but the bits come from rng so a seed reproduces ids too
    product_id = str(uuid.UUID(int=rng.getrandbits(128), version=4))

    description = rng.choice(DESCRIPTIONS).format(
        name=name,
        category=category,
        adjective_lower=adjective.lower(),
        material_lower=material.lower(),
        product_lower=product.lower(),
    )

    return Product(
        id=product_id,
        name=name,
        price=round(rng.uniform(MIN_PRICE, MAX_PRICE), 2),
        description=description,
        category=category,
        image=f"https://picsum.photos/seed/{product_id}/640/480",
    )


def generate_fake_products(count: int = 20, seed: Optional[int] = None) -> List[Product]:
    """
    Generate `count` synthetic products.

    Args:
        count: Number of products to produce (0 yields an empty list)
        seed:  Optional seed; identical seeds yield identical catalogs

    Returns:
        Ordered list of Products with unique ids

    Raises:
        ValueError: count is negative
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    rng = random.Random(seed)
    products: List[Product] = []
    seen_ids = set()

    while len(products) < count:
        product = _fake_product(rng)
        # 128 random bits make a clash practically impossible; skip it anyway
        if product.id in seen_ids:
            continue
        seen_ids.add(product.id)
        products.append(product)

    return products
