from .item_category import (
    ItemCategoriesGetCommand,
    ItemCategoryCreateCommand,
    ItemCategoryGetCommand,
    ItemCategoryRemoveCommand,
    ItemCategoryUpdateCommand,
)
from .payment_information import PaymentInformationGetCommand, PaymentInformationUpdateCommand


__all__ = [
    "ItemCategoriesGetCommand",
    "ItemCategoryCreateCommand",
    "ItemCategoryGetCommand",
    "ItemCategoryRemoveCommand",
    "ItemCategoryUpdateCommand",
    "PaymentInformationGetCommand",
    "PaymentInformationUpdateCommand",
]
