"""
DefaultItemCategoryService - seeds the default category tree.

Seeding is idempotent: categories are matched by ``key`` and updated when
they already exist, so running it again after a release that renames a
default category simply refreshes the rows.
"""

from typing import Any, Dict, Optional

from django.db import transaction

from marketplace.catalog.default_categories import ROOT_CATEGORY
from marketplace.catalog.domain.models import ItemCategory
from marketplace.exceptions import NotFoundException
from marketplace.repositories import ItemCategoryRepository

from .base import BaseService


class DefaultItemCategoryService(BaseService):
    def __init__(self, item_category_repository: ItemCategoryRepository, tree: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.item_category_repository = item_category_repository
        self.tree = tree or ROOT_CATEGORY

    @BaseService.log_performance
    def seed_default_categories(self) -> ItemCategory:
        """
        Insert or refresh every category of the default tree.

        Returns:
            The root category
        """
        with transaction.atomic():
            root = self._upsert(self.tree, parent=None)
        return self.item_category_repository.find_by_id(root.id, with_related=True)

    def _upsert(self, node: Dict[str, Any], parent: Optional[ItemCategory]) -> ItemCategory:
        data = {
            "name": node["name"],
            "description": node.get("description", ""),
            "parent_id": parent.id if parent else None,
        }

        try:
            existing = self.item_category_repository.find_by_key(node["key"])
            item_category = self.item_category_repository.update(existing.id, data)
        except NotFoundException:
            item_category = self.item_category_repository.insert({"key": node["key"], **data})
            self.logger.debug(f"Seeded category {node['key']}")

        for child in node.get("children", []):
            self._upsert(child, parent=item_category)

        return item_category
