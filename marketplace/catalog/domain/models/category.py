from django.db import models


class ItemCategory(models.Model):
    # Only the seeded default categories carry a key
    key = models.CharField(max_length=100, unique=True, null=True, blank=True)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    parent = models.ForeignKey(
        "self",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="children",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        app_label = "marketplace"
        verbose_name_plural = "item categories"

    @property
    def is_default(self) -> bool:
        return bool(self.key)

    def __str__(self):
        return self.name
