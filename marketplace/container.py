"""
Service Container
=================

Builds services together with their repository collaborators. Nothing is
registered globally: each container caches the instances it built, and
callers that need isolation (tests, one RPC request) create their own.

Usage:
    from marketplace.container import ServiceContainer

    services = ServiceContainer()
    category = services.item_category_service().find_root()
"""

import logging

from marketplace.repositories import (
    CryptocurrencyAddressRepository,
    EscrowRatioRepository,
    EscrowRepository,
    ItemCategoryRepository,
    ItemPriceRepository,
    ListingItemRepository,
    ListingItemTemplateRepository,
    PaymentInformationRepository,
    ShippingPriceRepository,
)
from marketplace.services import (
    CryptocurrencyAddressService,
    DefaultItemCategoryService,
    EscrowRatioService,
    EscrowService,
    ItemCategoryService,
    ItemPriceService,
    PaymentInformationService,
    ShippingPriceService,
)


logger = logging.getLogger(__name__)


class ServiceContainer:
    """Lazily constructs and caches services for one unit of work."""

    def __init__(self):
        self._instances = {}

    def _get(self, name, factory):
        if name not in self._instances:
            self._instances[name] = factory()
            logger.debug(f"Created {type(self._instances[name]).__name__}")
        return self._instances[name]

    def listing_item_repository(self) -> ListingItemRepository:
        return self._get("listing_item_repository", ListingItemRepository)

    def listing_item_template_repository(self) -> ListingItemTemplateRepository:
        return self._get("listing_item_template_repository", ListingItemTemplateRepository)

    def escrow_ratio_service(self) -> EscrowRatioService:
        return self._get("escrow_ratio_service", lambda: EscrowRatioService(EscrowRatioRepository()))

    def escrow_service(self) -> EscrowService:
        return self._get(
            "escrow_service",
            lambda: EscrowService(EscrowRepository(), self.escrow_ratio_service()),
        )

    def shipping_price_service(self) -> ShippingPriceService:
        return self._get("shipping_price_service", lambda: ShippingPriceService(ShippingPriceRepository()))

    def cryptocurrency_address_service(self) -> CryptocurrencyAddressService:
        return self._get(
            "cryptocurrency_address_service",
            lambda: CryptocurrencyAddressService(CryptocurrencyAddressRepository()),
        )

    def item_price_service(self) -> ItemPriceService:
        return self._get(
            "item_price_service",
            lambda: ItemPriceService(
                ItemPriceRepository(),
                self.shipping_price_service(),
                self.cryptocurrency_address_service(),
            ),
        )

    def payment_information_service(self) -> PaymentInformationService:
        return self._get(
            "payment_information_service",
            lambda: PaymentInformationService(
                PaymentInformationRepository(),
                self.escrow_service(),
                self.item_price_service(),
                self.listing_item_repository(),
                self.listing_item_template_repository(),
            ),
        )

    def item_category_service(self) -> ItemCategoryService:
        return self._get("item_category_service", lambda: ItemCategoryService(ItemCategoryRepository()))

    def default_item_category_service(self) -> DefaultItemCategoryService:
        return self._get(
            "default_item_category_service",
            lambda: DefaultItemCategoryService(ItemCategoryRepository()),
        )
