from marketplace.api.serializers.response_serializers import PaymentInformationResponseSerializer
from marketplace.enums import CryptocurrencyAddressType
from marketplace.exceptions import NotFoundException
from marketplace.payment.domain.models import PaymentInformation
from marketplace.repositories import get_related_or_none
from marketplace.rpc.command import RpcCommand
from marketplace.rpc.request import RpcRequest
from marketplace.services import PaymentInformationService


class PaymentInformationCommand(RpcCommand):
    response_serializer_class = PaymentInformationResponseSerializer

    def __init__(self, payment_information_service: PaymentInformationService):
        super().__init__()
        self.payment_information_service = payment_information_service


class PaymentInformationGetCommand(PaymentInformationCommand):
    name = "getpaymentinformation"

    def execute(self, request: RpcRequest) -> PaymentInformation:
        return self.payment_information_service.find_one_by_listing_item_template(self.id_param(request, 0))

    def help(self) -> str:
        return "getpaymentinformation <listingItemTemplateId>  -  Return the template's payment information."


class PaymentInformationUpdateCommand(PaymentInformationCommand):
    name = "updatepaymentinformation"

    def execute(self, request: RpcRequest) -> PaymentInformation:
        """
        params:
         [0]: listing item template id
         [1]: payment type
         [2]: currency
         [3]: base price
         [4]: domestic shipping price
         [5]: international shipping price
         [6]: payment address

        Creates the payment information when the template has none yet. An
        existing escrow is kept as it is.
        """
        listing_item_template_id = self.id_param(request, 0)
        body = {
            "listing_item_template_id": listing_item_template_id,
            "type": self.param(request, 1),
            "itemPrice": [
                {
                    "currency": self.param(request, 2),
                    "basePrice": self.param(request, 3),
                    "shippingPrice": {
                        "domestic": self.param(request, 4),
                        "international": self.param(request, 5),
                    },
                    "address": {
                        "type": CryptocurrencyAddressType.NORMAL,
                        "address": self.param(request, 6),
                    },
                }
            ],
        }

        try:
            existing = self.payment_information_service.find_one_by_listing_item_template(listing_item_template_id)
        except NotFoundException:
            return self.payment_information_service.create(body)

        escrow = get_related_or_none(existing, "escrow")
        if escrow is not None:
            ratio = get_related_or_none(escrow, "ratio")
            body["escrow"] = {
                "type": escrow.type,
                "ratio": {"buyer": ratio.buyer, "seller": ratio.seller} if ratio else {"buyer": 0, "seller": 0},
            }
        return self.payment_information_service.update(existing.id, body)

    def help(self) -> str:
        return (
            "updatepaymentinformation <listingItemTemplateId> <paymentType> <currency> <basePrice> "
            "<domesticShippingPrice> <internationalShippingPrice> <paymentAddress>"
        )
