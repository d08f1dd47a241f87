from typing import Any, Dict, List

from marketplace.api.serializers.request_serializers import (
    ShippingPriceCreateRequestSerializer,
    ShippingPriceSerializer,
)
from marketplace.payment.domain.models import ShippingPrice
from marketplace.repositories import ShippingPriceRepository
from marketplace.validation import validate_request

from .base import BaseService


class ShippingPriceService(BaseService):
    """Domestic and international shipping prices of one ItemPrice."""

    def __init__(self, shipping_price_repository: ShippingPriceRepository):
        super().__init__()
        self.shipping_price_repository = shipping_price_repository

    @BaseService.log_performance
    def find_all(self) -> List[ShippingPrice]:
        return self.shipping_price_repository.find_all()

    @BaseService.log_performance
    def find_one(self, id: int) -> ShippingPrice:
        return self.shipping_price_repository.find_by_id(id)

    @BaseService.log_performance
    def create(self, body: Dict[str, Any]) -> ShippingPrice:
        validate_request(ShippingPriceCreateRequestSerializer, body)
        return self.shipping_price_repository.insert(
            {
                "domestic": body["domestic"],
                "international": body["international"],
                "item_price_id": body["item_price_id"],
            }
        )

    @BaseService.log_performance
    def update(self, id: int, body: Dict[str, Any]) -> ShippingPrice:
        validate_request(ShippingPriceSerializer, body)
        return self.shipping_price_repository.update(
            id, {"domestic": body["domestic"], "international": body["international"]}
        )

    @BaseService.log_performance
    def destroy(self, id: int) -> None:
        self.shipping_price_repository.delete(id)
