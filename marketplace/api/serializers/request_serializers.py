"""
Request Serializers

Shape contracts for service inputs. They are only used to check a request
body before anything is persisted; services keep working with the body they
were given. Keys follow the wire format of the RPC API (camelCase for nested
values, snake_case for foreign keys).
"""

from decimal import Decimal

from rest_framework import serializers

from marketplace.enums import CryptocurrencyAddressType, Currency, EscrowType, PaymentType


def amount_field(**kwargs):
    return serializers.DecimalField(max_digits=20, decimal_places=8, min_value=Decimal("0"), **kwargs)


# ===== Escrow =====


class EscrowRatioSerializer(serializers.Serializer):
    buyer = amount_field(help_text="Buyer deposit weight")
    seller = amount_field(help_text="Seller deposit weight")


class EscrowRatioCreateRequestSerializer(EscrowRatioSerializer):
    escrow_id = serializers.IntegerField(help_text="Owning escrow")


class EscrowSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=EscrowType.choices, help_text="Escrow type")
    ratio = EscrowRatioSerializer(help_text="Buyer/seller ratio")


class EscrowCreateRequestSerializer(EscrowSerializer):
    payment_information_id = serializers.IntegerField(help_text="Owning payment information")


# ===== Pricing =====


class ShippingPriceSerializer(serializers.Serializer):
    domestic = amount_field(help_text="Domestic shipping price")
    international = amount_field(help_text="International shipping price")


class ShippingPriceCreateRequestSerializer(ShippingPriceSerializer):
    item_price_id = serializers.IntegerField(help_text="Owning item price")


class CryptocurrencyAddressSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=CryptocurrencyAddressType.choices, help_text="Address type")
    address = serializers.CharField(max_length=255, help_text="Payment address")


class CryptocurrencyAddressCreateRequestSerializer(CryptocurrencyAddressSerializer):
    item_price_id = serializers.IntegerField(help_text="Owning item price")


class ItemPriceSerializer(serializers.Serializer):
    currency = serializers.ChoiceField(choices=Currency.choices, help_text="Price currency")
    basePrice = amount_field(help_text="Item base price")
    shippingPrice = ShippingPriceSerializer(required=False, allow_null=True)
    address = CryptocurrencyAddressSerializer(required=False, allow_null=True)


class ItemPriceCreateRequestSerializer(ItemPriceSerializer):
    payment_information_id = serializers.IntegerField(help_text="Owning payment information")


# ===== Payment information =====


class PaymentInformationSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=PaymentType.choices, help_text="Payment type")
    escrow = EscrowSerializer(required=False, allow_null=True)
    itemPrice = ItemPriceSerializer(many=True, required=False)
    listing_item_id = serializers.IntegerField(required=False, allow_null=True, min_value=0)
    listing_item_template_id = serializers.IntegerField(required=False, allow_null=True, min_value=0)

    def validate(self, attrs):
        has_listing_item = attrs.get("listing_item_id") is not None
        has_template = attrs.get("listing_item_template_id") is not None

        if not has_listing_item and not has_template:
            raise serializers.ValidationError("Either listing_item_id or listing_item_template_id is required")
        if has_listing_item and has_template:
            raise serializers.ValidationError(
                "Only one of listing_item_id and listing_item_template_id may be given"
            )
        return attrs


class PaymentInformationCreateRequestSerializer(PaymentInformationSerializer):
    """Request body for building a payment information tree"""


class PaymentInformationUpdateRequestSerializer(PaymentInformationSerializer):
    """Request body for replacing a payment information tree"""


# ===== Item categories =====


class ItemCategoryCreateRequestSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200, help_text="Category name")
    description = serializers.CharField(required=False, allow_blank=True, help_text="Category description")
    key = serializers.CharField(max_length=100, required=False, allow_null=True)
    parent_item_category_id = serializers.IntegerField(required=False, allow_null=True)


class ItemCategoryUpdateRequestSerializer(ItemCategoryCreateRequestSerializer):
    """Request body for updating a category"""
