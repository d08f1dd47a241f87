# Marketplace API Serializers

from .request_serializers import (
    EscrowCreateRequestSerializer,
    ItemCategoryCreateRequestSerializer,
    ItemCategoryUpdateRequestSerializer,
    ItemPriceCreateRequestSerializer,
    PaymentInformationCreateRequestSerializer,
    PaymentInformationUpdateRequestSerializer,
)
from .response_serializers import (
    ItemCategoryListResponseSerializer,
    ItemCategoryResponseSerializer,
    PaymentInformationListResponseSerializer,
    PaymentInformationResponseSerializer,
    RpcResponseSerializer,
)


__all__ = [
    # Request shapes
    "EscrowCreateRequestSerializer",
    "ItemCategoryCreateRequestSerializer",
    "ItemCategoryUpdateRequestSerializer",
    "ItemPriceCreateRequestSerializer",
    "PaymentInformationCreateRequestSerializer",
    "PaymentInformationUpdateRequestSerializer",
    # Responses
    "ItemCategoryListResponseSerializer",
    "ItemCategoryResponseSerializer",
    "PaymentInformationListResponseSerializer",
    "PaymentInformationResponseSerializer",
    "RpcResponseSerializer",
]
