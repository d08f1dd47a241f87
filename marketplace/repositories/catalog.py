from django.db.models import Prefetch

from marketplace.catalog.domain.models import ItemCategory
from marketplace.exceptions import NotFoundException

from .base import Repository


class ItemCategoryRepository(Repository[ItemCategory]):
    model = ItemCategory
    select_related = ("parent",)
    # Two levels of children are enough to render the default tree
    prefetch_related = (
        Prefetch("children", queryset=ItemCategory.objects.prefetch_related("children")),
    )

    def find_by_key(self, key: str, with_related: bool = False) -> ItemCategory:
        try:
            return self.get_queryset(with_related).get(key=key)
        except ItemCategory.DoesNotExist:
            raise NotFoundException(key)
