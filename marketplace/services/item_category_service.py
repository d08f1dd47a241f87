"""
ItemCategoryService - category tree CRUD.

Categories form a tree under the root category. Categories seeded from
``marketplace.catalog.default_categories`` carry a ``key`` and are read-only
through this service; user-defined categories have no key.
"""

from typing import Any, Dict, List

from django.conf import settings
from django.db import transaction

from marketplace.api.serializers.request_serializers import (
    ItemCategoryCreateRequestSerializer,
    ItemCategoryUpdateRequestSerializer,
)
from marketplace.catalog.domain.models import ItemCategory
from marketplace.exceptions import MessageException
from marketplace.repositories import ItemCategoryRepository
from marketplace.validation import validate_request

from .base import BaseService


class ItemCategoryService(BaseService):
    def __init__(self, item_category_repository: ItemCategoryRepository):
        super().__init__()
        self.item_category_repository = item_category_repository

    @BaseService.log_performance
    def find_all(self) -> List[ItemCategory]:
        return self.item_category_repository.find_all()

    @BaseService.log_performance
    def find_one(self, id: int, with_related: bool = True) -> ItemCategory:
        return self.item_category_repository.find_by_id(id, with_related=with_related)

    @BaseService.log_performance
    def find_one_by_key(self, key: str, with_related: bool = True) -> ItemCategory:
        return self.item_category_repository.find_by_key(key, with_related=with_related)

    @BaseService.log_performance
    def find_root(self) -> ItemCategory:
        return self.find_one_by_key(settings.MARKETPLACE["ROOT_CATEGORY_KEY"])

    @BaseService.log_performance
    def create(self, body: Dict[str, Any]) -> ItemCategory:
        """
        Create a category.

        Args:
            body: ``{"name", "description"?, "key"?, "parent_item_category_id"?}``

        Raises:
            ValidationException: body shape is invalid
            NotFoundException: the parent category does not exist
        """
        validate_request(ItemCategoryCreateRequestSerializer, body)

        parent_id = body.get("parent_item_category_id")
        if parent_id is not None:
            self.item_category_repository.find_by_id(parent_id)

        item_category = self.item_category_repository.insert(
            {
                "key": body.get("key"),
                "name": body["name"],
                "description": body.get("description") or "",
                "parent_id": parent_id,
            }
        )
        return self.find_one(item_category.id)

    @BaseService.log_performance
    def update(self, id: int, body: Dict[str, Any]) -> ItemCategory:
        validate_request(ItemCategoryUpdateRequestSerializer, body)

        item_category = self.item_category_repository.find_by_id(id)
        if item_category.is_default:
            raise MessageException(f"Default category {item_category.key} can't be updated")

        parent_id = body.get("parent_item_category_id")
        if parent_id is not None:
            parent = self.item_category_repository.find_by_id(parent_id)
            if parent_id == id:
                raise MessageException("A category can't be its own parent")
            self._check_not_descendant(id, parent)

        self.item_category_repository.update(
            id,
            {
                "name": body["name"],
                "description": body.get("description") or "",
                "parent_id": parent_id,
            },
        )
        return self.find_one(id)

    @BaseService.log_performance
    def destroy(self, id: int) -> None:
        """Delete a user-defined category and, through the cascade, its subcategories."""
        item_category = self.item_category_repository.find_by_id(id)
        if item_category.is_default:
            raise MessageException(f"Default category {item_category.key} can't be removed")

        with transaction.atomic():
            self.item_category_repository.delete(id)

    def _check_not_descendant(self, id: int, parent: ItemCategory) -> None:
        ancestor_id = parent.parent_id
        while ancestor_id is not None:
            if ancestor_id == id:
                raise MessageException("A category can't be moved under its own subcategory")
            ancestor_id = self.item_category_repository.find_by_id(ancestor_id).parent_id
