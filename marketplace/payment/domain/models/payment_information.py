from django.db import models

from marketplace.enums import PaymentType
from marketplace.listing.domain.models.listing import ListingItem, ListingItemTemplate


class PaymentInformation(models.Model):
    """
    Root of the payment aggregate.

    Belongs to exactly one ListingItem or ListingItemTemplate and owns an
    optional Escrow plus any number of ItemPrice rows. Children are removed
    with the root through ``on_delete=CASCADE``.
    """

    type = models.CharField(max_length=20, choices=PaymentType.choices)

    listing_item = models.OneToOneField(
        ListingItem,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="payment_information",
    )
    listing_item_template = models.OneToOneField(
        ListingItemTemplate,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="payment_information",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        app_label = "marketplace"
        verbose_name_plural = "payment information"

    def __str__(self):
        return f"PaymentInformation {self.pk} ({self.type})"
