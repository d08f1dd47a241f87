from decimal import Decimal

import factory
from faker import Faker

from marketplace.enums import CryptocurrencyAddressType, Currency, EscrowType, PaymentType
from marketplace.models import (
    CryptocurrencyAddress,
    Escrow,
    EscrowRatio,
    ItemCategory,
    ItemPrice,
    ListingItem,
    ListingItemTemplate,
    PaymentInformation,
    ShippingPrice,
)

fake = Faker()  # Instantiate Faker once


class ListingItemTemplateFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ListingItemTemplate

    hash = factory.LazyFunction(lambda: fake.sha256())


class ListingItemFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ListingItem

    hash = factory.LazyFunction(lambda: fake.sha256())
    listing_item_template = factory.SubFactory(ListingItemTemplateFactory)


class ItemCategoryFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ItemCategory

    key = None
    name = factory.Sequence(lambda n: f"Category {n}")
    description = factory.Faker("sentence", nb_words=6)
    parent = None


class PaymentInformationFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = PaymentInformation

    type = PaymentType.SALE
    listing_item_template = factory.SubFactory(ListingItemTemplateFactory)


class EscrowFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Escrow

    type = EscrowType.MAD
    payment_information = factory.SubFactory(PaymentInformationFactory)


class EscrowRatioFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = EscrowRatio

    buyer = Decimal("100")
    seller = Decimal("100")
    escrow = factory.SubFactory(EscrowFactory)


class ItemPriceFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ItemPrice

    currency = Currency.PARTICL
    base_price = factory.LazyFunction(lambda: Decimal(str(fake.pydecimal(left_digits=2, right_digits=4, positive=True))))
    payment_information = factory.SubFactory(PaymentInformationFactory)


class ShippingPriceFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ShippingPrice

    domestic = Decimal("0.5")
    international = Decimal("1.5")
    item_price = factory.SubFactory(ItemPriceFactory)


class CryptocurrencyAddressFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = CryptocurrencyAddress

    type = CryptocurrencyAddressType.NORMAL
    address = factory.LazyFunction(lambda: fake.pystr(min_chars=26, max_chars=34))
    item_price = factory.SubFactory(ItemPriceFactory)


def payment_information_body(**overrides):
    """Request body for a full SALE tree with one BITCOIN price."""
    body = {
        "type": PaymentType.SALE,
        "escrow": {
            "type": EscrowType.MAD,
            "ratio": {"buyer": 100, "seller": 100},
        },
        "itemPrice": [
            {
                "currency": Currency.BITCOIN,
                "basePrice": 0.0001,
                "shippingPrice": {"domestic": 0.123, "international": 1.234},
                "address": {"type": CryptocurrencyAddressType.NORMAL, "address": "1234"},
            }
        ],
    }
    body.update(overrides)
    return body


def updated_payment_information_body(**overrides):
    """Request body for a FREE tree with one PARTICL price."""
    body = {
        "type": PaymentType.FREE,
        "escrow": {
            "type": EscrowType.NOP,
            "ratio": {"buyer": 0, "seller": 0},
        },
        "itemPrice": [
            {
                "currency": Currency.PARTICL,
                "basePrice": 0.002,
                "shippingPrice": {"domestic": 1.234, "international": 2.345},
                "address": {"type": CryptocurrencyAddressType.STEALTH, "address": "4567"},
            }
        ],
    }
    body.update(overrides)
    return body
