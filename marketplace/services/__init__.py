"""
Marketplace Service Layer

Services validate request bodies and orchestrate repository calls. They raise
``marketplace.exceptions`` for expected failures.

Services:
- PaymentInformationService: payment information aggregate (escrow, prices)
- EscrowService / EscrowRatioService: escrow rows and buyer/seller ratios
- ItemPriceService / ShippingPriceService / CryptocurrencyAddressService: prices
- ItemCategoryService: category tree CRUD
- DefaultItemCategoryService: default category seeding

Usage:
    from marketplace.container import ServiceContainer

    services = ServiceContainer()
    payment_information = services.payment_information_service().find_one(1)
"""

from .base import BaseService
from .cryptocurrency_address_service import CryptocurrencyAddressService
from .default_item_category_service import DefaultItemCategoryService
from .escrow_ratio_service import EscrowRatioService
from .escrow_service import EscrowService
from .item_category_service import ItemCategoryService
from .item_price_service import ItemPriceService
from .payment_information_service import PaymentInformationService
from .shipping_price_service import ShippingPriceService

__all__ = [
    "BaseService",
    "CryptocurrencyAddressService",
    "DefaultItemCategoryService",
    "EscrowRatioService",
    "EscrowService",
    "ItemCategoryService",
    "ItemPriceService",
    "PaymentInformationService",
    "ShippingPriceService",
]
