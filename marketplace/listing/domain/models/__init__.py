from .listing import ListingItem, ListingItemTemplate


__all__ = [
    "ListingItem",
    "ListingItemTemplate",
]
