from django.db import models


class ListingItemTemplate(models.Model):
    """Seller-side draft of a listing. Owns at most one PaymentInformation."""

    hash = models.CharField(max_length=100, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        app_label = "marketplace"

    def __str__(self):
        return f"ListingItemTemplate {self.pk}"


class ListingItem(models.Model):
    """A listing published to the market, optionally created from a template."""

    hash = models.CharField(max_length=100, unique=True)
    listing_item_template = models.ForeignKey(
        ListingItemTemplate,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="listing_items",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        app_label = "marketplace"

    def __str__(self):
        return self.hash
