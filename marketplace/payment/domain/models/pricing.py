from django.core.validators import MinValueValidator
from django.db import models

from marketplace.enums import CryptocurrencyAddressType, Currency

from .payment_information import PaymentInformation


class ItemPrice(models.Model):
    currency = models.CharField(max_length=20, choices=Currency.choices)
    base_price = models.DecimalField(max_digits=20, decimal_places=8, validators=[MinValueValidator(0)])
    payment_information = models.ForeignKey(
        PaymentInformation, on_delete=models.CASCADE, related_name="item_prices"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        # Insertion order is the order of the request's itemPrice list
        ordering = ["id"]
        app_label = "marketplace"

    def __str__(self):
        return f"{self.base_price} {self.currency}"


class ShippingPrice(models.Model):
    domestic = models.DecimalField(max_digits=20, decimal_places=8, validators=[MinValueValidator(0)])
    international = models.DecimalField(max_digits=20, decimal_places=8, validators=[MinValueValidator(0)])
    item_price = models.OneToOneField(ItemPrice, on_delete=models.CASCADE, related_name="shipping_price")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketplace"


class CryptocurrencyAddress(models.Model):
    type = models.CharField(max_length=20, choices=CryptocurrencyAddressType.choices)
    address = models.CharField(max_length=255)
    item_price = models.OneToOneField(ItemPrice, on_delete=models.CASCADE, related_name="address")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketplace"
        verbose_name_plural = "cryptocurrency addresses"

    def __str__(self):
        return self.address
