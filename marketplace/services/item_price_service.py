"""
ItemPriceService - a price entry with its shipping price and payment address.
"""

from typing import Any, Dict, List, Optional

from django.db import transaction

from marketplace.api.serializers.request_serializers import ItemPriceCreateRequestSerializer, ItemPriceSerializer
from marketplace.payment.domain.models import ItemPrice
from marketplace.repositories import ItemPriceRepository, get_related_or_none
from marketplace.validation import validate_request

from .base import BaseService
from .cryptocurrency_address_service import CryptocurrencyAddressService
from .shipping_price_service import ShippingPriceService


class ItemPriceService(BaseService):
    def __init__(
        self,
        item_price_repository: ItemPriceRepository,
        shipping_price_service: ShippingPriceService,
        cryptocurrency_address_service: CryptocurrencyAddressService,
    ):
        super().__init__()
        self.item_price_repository = item_price_repository
        self.shipping_price_service = shipping_price_service
        self.cryptocurrency_address_service = cryptocurrency_address_service

    @BaseService.log_performance
    def find_all(self) -> List[ItemPrice]:
        return self.item_price_repository.find_all()

    @BaseService.log_performance
    def find_one(self, id: int, with_related: bool = True) -> ItemPrice:
        return self.item_price_repository.find_by_id(id, with_related=with_related)

    @BaseService.log_performance
    def find_by_payment_information(self, payment_information_id: int) -> List[ItemPrice]:
        return self.item_price_repository.find_by_payment_information(payment_information_id)

    @BaseService.log_performance
    def create(self, body: Dict[str, Any]) -> ItemPrice:
        """
        Create an item price followed by its shipping price and address.

        Args:
            body: ``{"currency", "basePrice", "shippingPrice"?, "address"?, "payment_information_id"}``
        """
        validate_request(ItemPriceCreateRequestSerializer, body)

        with transaction.atomic():
            item_price = self.item_price_repository.insert(
                {
                    "currency": body["currency"],
                    "base_price": body["basePrice"],
                    "payment_information_id": body["payment_information_id"],
                }
            )

            if body.get("shippingPrice"):
                self.shipping_price_service.create({**body["shippingPrice"], "item_price_id": item_price.id})
            if body.get("address"):
                self.cryptocurrency_address_service.create({**body["address"], "item_price_id": item_price.id})

        return self.find_one(item_price.id)

    @BaseService.log_performance
    def update(self, id: int, body: Dict[str, Any]) -> ItemPrice:
        """
        Update an item price in place.

        Shipping price and address rows are updated when present, created
        when missing and deleted when the body no longer carries them.
        """
        validate_request(ItemPriceSerializer, body)

        with transaction.atomic():
            item_price = self.item_price_repository.update(
                id, {"currency": body["currency"], "base_price": body["basePrice"]}
            )
            self._sync_child(
                item_price, "shipping_price", body.get("shippingPrice"), self.shipping_price_service
            )
            self._sync_child(
                item_price, "address", body.get("address"), self.cryptocurrency_address_service
            )

        return self.find_one(id)

    @BaseService.log_performance
    def destroy(self, id: int) -> None:
        self.item_price_repository.delete(id)

    def _sync_child(self, item_price: ItemPrice, relation: str, data: Optional[Dict[str, Any]], service) -> None:
        existing = get_related_or_none(item_price, relation)

        if data:
            if existing is not None:
                service.update(existing.id, data)
            else:
                service.create({**data, "item_price_id": item_price.id})
        elif existing is not None:
            service.destroy(existing.id)
