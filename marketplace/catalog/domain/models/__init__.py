from .category import ItemCategory


__all__ = [
    "ItemCategory",
]
