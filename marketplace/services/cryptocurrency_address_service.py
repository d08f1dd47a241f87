from typing import Any, Dict, List

from marketplace.api.serializers.request_serializers import (
    CryptocurrencyAddressCreateRequestSerializer,
    CryptocurrencyAddressSerializer,
)
from marketplace.payment.domain.models import CryptocurrencyAddress
from marketplace.repositories import CryptocurrencyAddressRepository
from marketplace.validation import validate_request

from .base import BaseService


class CryptocurrencyAddressService(BaseService):
    def __init__(self, cryptocurrency_address_repository: CryptocurrencyAddressRepository):
        super().__init__()
        self.cryptocurrency_address_repository = cryptocurrency_address_repository

    @BaseService.log_performance
    def find_all(self) -> List[CryptocurrencyAddress]:
        return self.cryptocurrency_address_repository.find_all()

    @BaseService.log_performance
    def find_one(self, id: int) -> CryptocurrencyAddress:
        return self.cryptocurrency_address_repository.find_by_id(id)

    @BaseService.log_performance
    def create(self, body: Dict[str, Any]) -> CryptocurrencyAddress:
        validate_request(CryptocurrencyAddressCreateRequestSerializer, body)
        return self.cryptocurrency_address_repository.insert(
            {"type": body["type"], "address": body["address"], "item_price_id": body["item_price_id"]}
        )

    @BaseService.log_performance
    def update(self, id: int, body: Dict[str, Any]) -> CryptocurrencyAddress:
        validate_request(CryptocurrencyAddressSerializer, body)
        return self.cryptocurrency_address_repository.update(id, {"type": body["type"], "address": body["address"]})

    @BaseService.log_performance
    def destroy(self, id: int) -> None:
        self.cryptocurrency_address_repository.delete(id)
