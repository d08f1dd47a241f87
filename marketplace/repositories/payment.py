from typing import Any

from django.db.models import Prefetch

from marketplace.exceptions import NotFoundException
from marketplace.payment.domain.models import (
    CryptocurrencyAddress,
    Escrow,
    EscrowRatio,
    ItemPrice,
    PaymentInformation,
    ShippingPrice,
)

from .base import Repository


class PaymentInformationRepository(Repository[PaymentInformation]):
    model = PaymentInformation
    select_related = ("escrow", "escrow__ratio")
    prefetch_related = (
        Prefetch("item_prices", queryset=ItemPrice.objects.select_related("shipping_price", "address")),
    )

    def find_by_listing_item_template(self, listing_item_template_id: Any, with_related: bool = False):
        try:
            return self.get_queryset(with_related).get(listing_item_template_id=listing_item_template_id)
        except PaymentInformation.DoesNotExist:
            raise NotFoundException(
                listing_item_template_id,
                f"PaymentInformation for ListingItemTemplate {listing_item_template_id} does not exist",
            )


class EscrowRepository(Repository[Escrow]):
    model = Escrow
    select_related = ("ratio",)


class EscrowRatioRepository(Repository[EscrowRatio]):
    model = EscrowRatio


class ItemPriceRepository(Repository[ItemPrice]):
    model = ItemPrice
    select_related = ("shipping_price", "address")

    def find_by_payment_information(self, payment_information_id: Any):
        return list(self.get_queryset().filter(payment_information_id=payment_information_id).order_by("id"))


class ShippingPriceRepository(Repository[ShippingPrice]):
    model = ShippingPrice


class CryptocurrencyAddressRepository(Repository[CryptocurrencyAddress]):
    model = CryptocurrencyAddress
