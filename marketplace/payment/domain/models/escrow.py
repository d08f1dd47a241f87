from django.core.validators import MinValueValidator
from django.db import models

from marketplace.enums import EscrowType

from .payment_information import PaymentInformation


class Escrow(models.Model):
    type = models.CharField(max_length=20, choices=EscrowType.choices)
    payment_information = models.OneToOneField(
        PaymentInformation, on_delete=models.CASCADE, related_name="escrow"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketplace"

    def __str__(self):
        return f"Escrow {self.pk} ({self.type})"


class EscrowRatio(models.Model):
    """Relative weighting of buyer and seller deposits for an escrow."""

    buyer = models.DecimalField(max_digits=20, decimal_places=8, validators=[MinValueValidator(0)])
    seller = models.DecimalField(max_digits=20, decimal_places=8, validators=[MinValueValidator(0)])
    escrow = models.OneToOneField(Escrow, on_delete=models.CASCADE, related_name="ratio")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketplace"

    def __str__(self):
        return f"{self.buyer}:{self.seller}"
