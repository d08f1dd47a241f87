from .escrow import Escrow, EscrowRatio
from .payment_information import PaymentInformation
from .pricing import CryptocurrencyAddress, ItemPrice, ShippingPrice


__all__ = [
    "PaymentInformation",
    "Escrow",
    "EscrowRatio",
    "ItemPrice",
    "ShippingPrice",
    "CryptocurrencyAddress",
]
