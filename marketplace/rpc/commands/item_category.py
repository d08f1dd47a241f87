from typing import Optional

from marketplace.api.serializers.response_serializers import (
    ItemCategoryResponseSerializer,
    ItemCategoryTreeSerializer,
)
from marketplace.catalog.domain.models import ItemCategory
from marketplace.rpc.command import RpcCommand
from marketplace.rpc.lookup import Lookup, LookupKind
from marketplace.rpc.request import RpcRequest
from marketplace.services import ItemCategoryService


class ItemCategoryCommand(RpcCommand):
    response_serializer_class = ItemCategoryResponseSerializer

    def __init__(self, item_category_service: ItemCategoryService):
        super().__init__()
        self.item_category_service = item_category_service

    def find(self, lookup: Lookup) -> ItemCategory:
        if lookup.kind is LookupKind.BY_ID:
            return self.item_category_service.find_one(lookup.value)
        return self.item_category_service.find_one_by_key(lookup.value)

    def find_parent_id(self, request: RpcRequest, index: int) -> Optional[int]:
        """Resolve an optional parent id-or-key parameter; defaults to the root category."""
        param = self.param(request, index, default=None)
        if param is None:
            return self.item_category_service.find_root().id
        return self.find(Lookup.from_param(param, field=f"params.{index}")).id


class ItemCategoryGetCommand(ItemCategoryCommand):
    name = "getcategory"

    def execute(self, request: RpcRequest) -> ItemCategory:
        """
        params:
         [0]: category id (number) or key (string)
        """
        return self.find(Lookup.from_param(self.param(request, 0)))

    def help(self) -> str:
        return "getcategory <categoryId|categoryKey>  -  Return the category with its parent and children."


class ItemCategoriesGetCommand(ItemCategoryCommand):
    name = "getcategories"
    response_serializer_class = ItemCategoryTreeSerializer

    def execute(self, request: RpcRequest) -> ItemCategory:
        return self.item_category_service.find_root()

    def help(self) -> str:
        return "getcategories  -  Return the whole category tree starting at the root category."


class ItemCategoryCreateCommand(ItemCategoryCommand):
    name = "addcategory"

    def execute(self, request: RpcRequest) -> ItemCategory:
        """
        params:
         [0]: name
         [1]: description
         [2]: parent category id or key, root category when omitted
        """
        return self.item_category_service.create(
            {
                "name": self.param(request, 0),
                "description": self.param(request, 1, default=""),
                "parent_item_category_id": self.find_parent_id(request, 2),
            }
        )

    def help(self) -> str:
        return "addcategory <name> [description] [parentCategoryId|parentCategoryKey]  -  Create a custom category."


class ItemCategoryUpdateCommand(ItemCategoryCommand):
    name = "updatecategory"

    def execute(self, request: RpcRequest) -> ItemCategory:
        """
        params:
         [0]: category id
         [1]: name
         [2]: description
         [3]: parent category id or key, root category when omitted
        """
        lookup = Lookup.from_param(self.param(request, 0))
        return self.item_category_service.update(
            self.find(lookup).id,
            {
                "name": self.param(request, 1),
                "description": self.param(request, 2, default=""),
                "parent_item_category_id": self.find_parent_id(request, 3),
            },
        )

    def help(self) -> str:
        return "updatecategory <categoryId> <name> [description] [parentCategoryId|parentCategoryKey]"


class ItemCategoryRemoveCommand(ItemCategoryCommand):
    name = "removecategory"
    response_serializer_class = None

    def execute(self, request: RpcRequest) -> None:
        item_category = self.find(Lookup.from_param(self.param(request, 0)))
        self.item_category_service.destroy(item_category.id)
        self.log.info(f"Removed category {item_category.id}")

    def help(self) -> str:
        return "removecategory <categoryId|categoryKey>  -  Remove a custom category and its subcategories."
