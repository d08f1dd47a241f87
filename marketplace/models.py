from marketplace.catalog.domain.models import ItemCategory
from marketplace.listing.domain.models import ListingItem, ListingItemTemplate
from marketplace.payment.domain.models import (
    CryptocurrencyAddress,
    Escrow,
    EscrowRatio,
    ItemPrice,
    PaymentInformation,
    ShippingPrice,
)


__all__ = [
    "ItemCategory",
    "ListingItem",
    "ListingItemTemplate",
    "PaymentInformation",
    "Escrow",
    "EscrowRatio",
    "ItemPrice",
    "ShippingPrice",
    "CryptocurrencyAddress",
]
