"""
PaymentInformationService - assembler for the payment information aggregate.

A PaymentInformation row is the root of a small tree::

    PaymentInformation
    ├── Escrow (0..1)
    │   └── EscrowRatio (1)
    └── ItemPrice (0..n)
        ├── ShippingPrice (0..1)
        └── CryptocurrencyAddress (0..1)

The service builds, updates, fetches and removes the whole tree from a single
request body. Parents are always written before their children so foreign
keys resolve, and every write path runs inside one transaction.
"""

from typing import Any, Dict, List, Optional

from django.db import transaction

from marketplace.api.serializers.request_serializers import (
    PaymentInformationCreateRequestSerializer,
    PaymentInformationUpdateRequestSerializer,
)
from marketplace.payment.domain.models import ItemPrice, PaymentInformation
from marketplace.repositories import (
    ListingItemRepository,
    ListingItemTemplateRepository,
    PaymentInformationRepository,
    get_related_or_none,
)
from marketplace.validation import validate_request

from .base import BaseService
from .escrow_service import EscrowService
from .item_price_service import ItemPriceService


class PaymentInformationService(BaseService):
    """
    Service for the payment information aggregate.

    Responsibilities:
    - Validate request bodies before touching the database
    - Create the root row, then escrow/ratio, then each item price with its
      shipping price and address
    - Update existing child rows in place, create missing ones and remove
      ones the body no longer describes
    - Fetch a single tree with all relations, or all roots without them
    - Destroy a root (children follow through ON DELETE CASCADE)
    """

    def __init__(
        self,
        payment_information_repository: PaymentInformationRepository,
        escrow_service: EscrowService,
        item_price_service: ItemPriceService,
        listing_item_repository: ListingItemRepository,
        listing_item_template_repository: ListingItemTemplateRepository,
    ):
        super().__init__()
        self.payment_information_repository = payment_information_repository
        self.escrow_service = escrow_service
        self.item_price_service = item_price_service
        self.listing_item_repository = listing_item_repository
        self.listing_item_template_repository = listing_item_template_repository

    @BaseService.log_performance
    def find_all(self) -> List[PaymentInformation]:
        """Return every root row. Relations are not loaded."""
        return self.payment_information_repository.find_all()

    @BaseService.log_performance
    def find_one(self, id: int, with_related: bool = True) -> PaymentInformation:
        """
        Get a payment information tree by ID.

        Raises:
            NotFoundException: if no row has this ID
        """
        return self.payment_information_repository.find_by_id(id, with_related=with_related)

    @BaseService.log_performance
    def find_one_by_listing_item_template(
        self, listing_item_template_id: int, with_related: bool = True
    ) -> PaymentInformation:
        return self.payment_information_repository.find_by_listing_item_template(
            listing_item_template_id, with_related=with_related
        )

    @BaseService.log_performance
    def create(self, body: Dict[str, Any]) -> PaymentInformation:
        """
        Build a full payment information tree.

        Args:
            body: ``{"type", "escrow"?, "itemPrice"?, "listing_item_id" | "listing_item_template_id"}``

        Returns:
            The new PaymentInformation, re-fetched with all relations

        Raises:
            ValidationException: body shape is invalid (nothing is written)
            NotFoundException: the referenced listing item or template is missing
        """
        validate_request(PaymentInformationCreateRequestSerializer, body)
        self._check_parent(body)

        with transaction.atomic():
            payment_information = self.payment_information_repository.insert(
                {
                    "type": body["type"],
                    "listing_item_id": body.get("listing_item_id"),
                    "listing_item_template_id": body.get("listing_item_template_id"),
                }
            )

            escrow = body.get("escrow")
            if escrow:
                self.escrow_service.create({**escrow, "payment_information_id": payment_information.id})

            for item_price in body.get("itemPrice") or []:
                self.item_price_service.create({**item_price, "payment_information_id": payment_information.id})

        self.logger.info(f"Created PaymentInformation {payment_information.id} ({body['type']})")
        return self.find_one(payment_information.id)

    @BaseService.log_performance
    def update(self, id: int, body: Dict[str, Any]) -> PaymentInformation:
        """
        Replace the fields of an existing tree in place.

        Item prices are matched by position: entry *i* of ``itemPrice``
        updates the *i*-th existing row, extra entries are created and
        surplus rows removed. A body without ``escrow`` removes the escrow.

        Raises:
            ValidationException: body shape is invalid (nothing is written)
            NotFoundException: no payment information with this ID
        """
        validate_request(PaymentInformationUpdateRequestSerializer, body)
        payment_information = self.find_one(id)
        self._check_parent(body)

        with transaction.atomic():
            self.payment_information_repository.update(
                id,
                {
                    "type": body["type"],
                    "listing_item_id": body.get("listing_item_id"),
                    "listing_item_template_id": body.get("listing_item_template_id"),
                },
            )
            self._sync_escrow(payment_information, body.get("escrow"))
            self._sync_item_prices(payment_information, body.get("itemPrice") or [])

        self.logger.info(f"Updated PaymentInformation {id} ({body['type']})")
        return self.find_one(id)

    @BaseService.log_performance
    def destroy(self, id: int) -> None:
        """
        Delete a payment information row.

        Escrow, ratio, item prices, shipping prices and addresses are removed
        by the database cascade.
        """
        self.payment_information_repository.delete(id)
        self.logger.info(f"Deleted PaymentInformation {id}")

    def _check_parent(self, body: Dict[str, Any]) -> None:
        if body.get("listing_item_id") is not None:
            self.listing_item_repository.find_by_id(body["listing_item_id"])
        if body.get("listing_item_template_id") is not None:
            self.listing_item_template_repository.find_by_id(body["listing_item_template_id"])

    def _sync_escrow(self, payment_information: PaymentInformation, escrow: Optional[Dict[str, Any]]) -> None:
        existing = get_related_or_none(payment_information, "escrow")

        if escrow:
            if existing is not None:
                self.escrow_service.update(existing.id, escrow)
            else:
                self.escrow_service.create({**escrow, "payment_information_id": payment_information.id})
        elif existing is not None:
            self.escrow_service.destroy(existing.id)

    def _sync_item_prices(self, payment_information: PaymentInformation, item_prices: List[Dict[str, Any]]) -> None:
        existing: List[ItemPrice] = list(payment_information.item_prices.all())

        for index, item_price in enumerate(item_prices):
            if index < len(existing):
                self.item_price_service.update(existing[index].id, item_price)
            else:
                self.item_price_service.create({**item_price, "payment_information_id": payment_information.id})

        for surplus in existing[len(item_prices):]:
            self.item_price_service.destroy(surplus.id)
