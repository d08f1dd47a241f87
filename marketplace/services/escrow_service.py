"""
EscrowService - Escrow rows and their ratio.

An Escrow always travels with its EscrowRatio: creating an escrow creates the
ratio, updating it updates (or creates) the ratio in place.
"""

from typing import Any, Dict, List

from django.db import transaction

from marketplace.api.serializers.request_serializers import EscrowCreateRequestSerializer, EscrowSerializer
from marketplace.payment.domain.models import Escrow
from marketplace.repositories import EscrowRepository, get_related_or_none
from marketplace.validation import validate_request

from .base import BaseService
from .escrow_ratio_service import EscrowRatioService


class EscrowService(BaseService):
    def __init__(self, escrow_repository: EscrowRepository, escrow_ratio_service: EscrowRatioService):
        super().__init__()
        self.escrow_repository = escrow_repository
        self.escrow_ratio_service = escrow_ratio_service

    @BaseService.log_performance
    def find_all(self) -> List[Escrow]:
        return self.escrow_repository.find_all()

    @BaseService.log_performance
    def find_one(self, id: int, with_related: bool = True) -> Escrow:
        return self.escrow_repository.find_by_id(id, with_related=with_related)

    @BaseService.log_performance
    def create(self, body: Dict[str, Any]) -> Escrow:
        """
        Create an escrow and its ratio.

        Args:
            body: ``{"type", "ratio": {"buyer", "seller"}, "payment_information_id"}``

        Returns:
            The new Escrow with ``ratio`` attached
        """
        validate_request(EscrowCreateRequestSerializer, body)

        with transaction.atomic():
            escrow = self.escrow_repository.insert(
                {"type": body["type"], "payment_information_id": body["payment_information_id"]}
            )
            self.escrow_ratio_service.create({**body["ratio"], "escrow_id": escrow.id})

        return self.find_one(escrow.id)

    @BaseService.log_performance
    def update(self, id: int, body: Dict[str, Any]) -> Escrow:
        validate_request(EscrowSerializer, body)

        with transaction.atomic():
            escrow = self.escrow_repository.update(id, {"type": body["type"]})

            ratio = get_related_or_none(escrow, "ratio")
            if ratio is not None:
                self.escrow_ratio_service.update(ratio.id, body["ratio"])
            else:
                self.escrow_ratio_service.create({**body["ratio"], "escrow_id": escrow.id})

        return self.find_one(id)

    @BaseService.log_performance
    def destroy(self, id: int) -> None:
        self.escrow_repository.delete(id)
