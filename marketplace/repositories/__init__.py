"""
Marketplace repositories

One repository per table. Services receive these through their constructors
(see ``marketplace.container``).
"""

from .base import Repository, get_related_or_none
from .catalog import ItemCategoryRepository
from .listing import ListingItemRepository, ListingItemTemplateRepository
from .payment import (
    CryptocurrencyAddressRepository,
    EscrowRatioRepository,
    EscrowRepository,
    ItemPriceRepository,
    PaymentInformationRepository,
    ShippingPriceRepository,
)

__all__ = [
    "Repository",
    "get_related_or_none",
    "ItemCategoryRepository",
    "ListingItemRepository",
    "ListingItemTemplateRepository",
    "PaymentInformationRepository",
    "EscrowRepository",
    "EscrowRatioRepository",
    "ItemPriceRepository",
    "ShippingPriceRepository",
    "CryptocurrencyAddressRepository",
]
