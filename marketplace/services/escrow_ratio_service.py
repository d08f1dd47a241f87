"""
EscrowRatioService - buyer/seller weights of an escrow.
"""

from typing import Any, Dict, List

from marketplace.api.serializers.request_serializers import (
    EscrowRatioCreateRequestSerializer,
    EscrowRatioSerializer,
)
from marketplace.payment.domain.models import EscrowRatio
from marketplace.repositories import EscrowRatioRepository
from marketplace.validation import validate_request

from .base import BaseService


class EscrowRatioService(BaseService):
    def __init__(self, escrow_ratio_repository: EscrowRatioRepository):
        super().__init__()
        self.escrow_ratio_repository = escrow_ratio_repository

    @BaseService.log_performance
    def find_all(self) -> List[EscrowRatio]:
        return self.escrow_ratio_repository.find_all()

    @BaseService.log_performance
    def find_one(self, id: int) -> EscrowRatio:
        return self.escrow_ratio_repository.find_by_id(id)

    @BaseService.log_performance
    def create(self, body: Dict[str, Any]) -> EscrowRatio:
        validate_request(EscrowRatioCreateRequestSerializer, body)
        return self.escrow_ratio_repository.insert(
            {"buyer": body["buyer"], "seller": body["seller"], "escrow_id": body["escrow_id"]}
        )

    @BaseService.log_performance
    def update(self, id: int, body: Dict[str, Any]) -> EscrowRatio:
        validate_request(EscrowRatioSerializer, body)
        return self.escrow_ratio_repository.update(id, {"buyer": body["buyer"], "seller": body["seller"]})

    @BaseService.log_performance
    def destroy(self, id: int) -> None:
        self.escrow_ratio_repository.delete(id)
