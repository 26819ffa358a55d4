"""Product domain models."""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Product:
    """Nutrition facts for a packaged food product.

    ``nutrients`` holds per-100g values keyed the way Open Food Facts keys
    them (``sugars_100g``, ``salt_100g``). ``allergens`` may still carry
    language prefixes such as ``en:``.
    """

    nutrients: Mapping[str, float] = field(default_factory=dict)
    allergens: tuple[str, ...] = ()
    quantity: str | None = None
    code: str | None = None
    name: str | None = None
    brands: str | None = None
    ingredients_text: str | None = None
    image_url: str | None = None
