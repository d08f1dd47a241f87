"""
Response Serializers

Shape service results for the RPC API. Related entities are rendered under
capitalised keys (``Escrow``, ``Ratio``, ``ItemPrice``, ``ShippingPrice``,
``Address``) the way RPC clients expect; a missing one-to-one child renders as
``null``.
"""

from rest_framework import serializers

from marketplace.catalog.domain.models import ItemCategory
from marketplace.payment.domain.models import (
    CryptocurrencyAddress,
    Escrow,
    EscrowRatio,
    ItemPrice,
    PaymentInformation,
    ShippingPrice,
)


def amount_field(**kwargs):
    return serializers.DecimalField(max_digits=20, decimal_places=8, read_only=True, **kwargs)


# ===== Payment information =====


class EscrowRatioResponseSerializer(serializers.ModelSerializer):
    buyer = amount_field()
    seller = amount_field()

    class Meta:
        model = EscrowRatio
        fields = ["id", "buyer", "seller", "created_at", "updated_at"]


class EscrowResponseSerializer(serializers.ModelSerializer):
    Ratio = EscrowRatioResponseSerializer(source="ratio", read_only=True, allow_null=True)

    class Meta:
        model = Escrow
        fields = ["id", "type", "Ratio", "created_at", "updated_at"]


class ShippingPriceResponseSerializer(serializers.ModelSerializer):
    domestic = amount_field()
    international = amount_field()

    class Meta:
        model = ShippingPrice
        fields = ["id", "domestic", "international", "created_at", "updated_at"]


class CryptocurrencyAddressResponseSerializer(serializers.ModelSerializer):
    class Meta:
        model = CryptocurrencyAddress
        fields = ["id", "type", "address", "created_at", "updated_at"]


class ItemPriceResponseSerializer(serializers.ModelSerializer):
    basePrice = amount_field(source="base_price")
    ShippingPrice = ShippingPriceResponseSerializer(source="shipping_price", read_only=True, allow_null=True)
    Address = CryptocurrencyAddressResponseSerializer(source="address", read_only=True, allow_null=True)

    class Meta:
        model = ItemPrice
        fields = ["id", "currency", "basePrice", "ShippingPrice", "Address", "created_at", "updated_at"]


class PaymentInformationListResponseSerializer(serializers.ModelSerializer):
    """Root fields only, used for list results where relations are not loaded"""

    listing_item_id = serializers.IntegerField(read_only=True, allow_null=True)
    listing_item_template_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = PaymentInformation
        fields = ["id", "type", "listing_item_id", "listing_item_template_id", "created_at", "updated_at"]


class PaymentInformationResponseSerializer(PaymentInformationListResponseSerializer):
    Escrow = EscrowResponseSerializer(source="escrow", read_only=True, allow_null=True)
    ItemPrice = ItemPriceResponseSerializer(source="item_prices", many=True, read_only=True)

    class Meta(PaymentInformationListResponseSerializer.Meta):
        fields = PaymentInformationListResponseSerializer.Meta.fields + ["Escrow", "ItemPrice"]


# ===== Item categories =====


class ItemCategoryListResponseSerializer(serializers.ModelSerializer):
    parent_item_category_id = serializers.IntegerField(source="parent_id", read_only=True, allow_null=True)

    class Meta:
        model = ItemCategory
        fields = ["id", "key", "name", "description", "parent_item_category_id", "created_at", "updated_at"]


class ItemCategoryResponseSerializer(ItemCategoryListResponseSerializer):
    ParentItemCategory = ItemCategoryListResponseSerializer(source="parent", read_only=True, allow_null=True)
    ChildItemCategories = serializers.SerializerMethodField()

    class Meta(ItemCategoryListResponseSerializer.Meta):
        fields = ItemCategoryListResponseSerializer.Meta.fields + ["ParentItemCategory", "ChildItemCategories"]

    def get_ChildItemCategories(self, obj):
        return ItemCategoryTreeSerializer(obj.children.all(), many=True).data


class ItemCategoryTreeSerializer(ItemCategoryListResponseSerializer):
    ChildItemCategories = serializers.SerializerMethodField()

    class Meta(ItemCategoryListResponseSerializer.Meta):
        fields = ItemCategoryListResponseSerializer.Meta.fields + ["ChildItemCategories"]

    def get_ChildItemCategories(self, obj):
        return ItemCategoryTreeSerializer(obj.children.all(), many=True).data


# ===== RPC envelope (documentation only) =====


class RpcErrorSerializer(serializers.Serializer):
    code = serializers.IntegerField(help_text="JSON-RPC error code")
    message = serializers.CharField(help_text="Human-readable error message")
    data = serializers.JSONField(required=False, help_text="Field errors or the missing identifier")


class RpcResponseSerializer(serializers.Serializer):
    jsonrpc = serializers.CharField(default="2.0")
    id = serializers.JSONField(allow_null=True)
    result = serializers.JSONField(required=False, help_text="Command result")
    error = RpcErrorSerializer(required=False)
