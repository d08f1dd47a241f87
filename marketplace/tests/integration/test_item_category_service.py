from io import StringIO

import pytest
from django.core.management import call_command

from marketplace.api.serializers.response_serializers import ItemCategoryResponseSerializer
from marketplace.catalog.default_categories import ROOT_CATEGORY
from marketplace.container import ServiceContainer
from marketplace.exceptions import MessageException, NotFoundException, ValidationException
from marketplace.models import ItemCategory
from marketplace.tests.factories import ItemCategoryFactory


def count_nodes(node):
    return 1 + sum(count_nodes(child) for child in node.get("children", []))


@pytest.fixture
def services():
    return ServiceContainer()


@pytest.fixture
def root(services):
    return services.default_item_category_service().seed_default_categories()


@pytest.mark.integration
@pytest.mark.django_db
class TestDefaultItemCategories:
    def test_seed_creates_default_tree(self, root):
        assert root.key == "cat_ROOT"
        assert root.parent is None
        assert ItemCategory.objects.count() == count_nodes(ROOT_CATEGORY)

        children = {child.key for child in root.children.all()}
        assert {"cat_high_value", "cat_electronics", "cat_home_kitchen"} <= children

    def test_seed_is_idempotent(self, services, root):
        ItemCategory.objects.filter(key="cat_electronics").update(name="Renamed")

        again = services.default_item_category_service().seed_default_categories()

        assert again.id == root.id
        assert ItemCategory.objects.count() == count_nodes(ROOT_CATEGORY)
        assert ItemCategory.objects.get(key="cat_electronics").name == "Electronics and Technology"

    def test_seed_categories_command(self):
        out = StringIO()

        call_command("seed_categories", stdout=out)
        call_command("seed_categories", "--clear", stdout=out)

        assert ItemCategory.objects.count() == count_nodes(ROOT_CATEGORY)
        assert "Category seeding complete" in out.getvalue()


@pytest.mark.integration
@pytest.mark.django_db
class TestItemCategoryService:
    def test_find_by_id_and_key_return_same_row(self, services, root):
        service = services.item_category_service()

        by_key = service.find_one_by_key("cat_electronics")
        by_id = service.find_one(by_key.id)

        assert by_id.id == by_key.id
        assert by_id.parent.id == root.id
        assert by_id.children.count() == 9

    def test_find_unknown_key_raises(self, services, root):
        with pytest.raises(NotFoundException) as exc_info:
            services.item_category_service().find_one_by_key("cat_nope")

        assert exc_info.value.id == "cat_nope"

    def test_find_root(self, services, root):
        assert services.item_category_service().find_root().id == root.id

    def test_create_under_parent(self, services, root):
        service = services.item_category_service()

        created = service.create({"name": "Drones", "description": "", "parent_item_category_id": root.id})

        assert created.key is None
        assert created.parent.id == root.id
        assert not created.is_default

    def test_create_with_missing_parent_raises(self, services):
        with pytest.raises(NotFoundException):
            services.item_category_service().create({"name": "Orphan", "parent_item_category_id": 123456})

        assert not ItemCategory.objects.exists()

    def test_create_without_name_raises(self, services):
        with pytest.raises(ValidationException) as exc_info:
            services.item_category_service().create({"description": "nameless"})

        assert exc_info.value.details == [{"field": "name", "message": "This field is required."}]

    def test_update_custom_category(self, services, root):
        custom = ItemCategoryFactory(parent=root)
        electronics = ItemCategory.objects.get(key="cat_electronics")

        updated = services.item_category_service().update(
            custom.id, {"name": "Gadgets", "description": "Small things", "parent_item_category_id": electronics.id}
        )

        assert updated.name == "Gadgets"
        assert updated.parent.id == electronics.id

    def test_default_category_is_read_only(self, services, root):
        service = services.item_category_service()

        with pytest.raises(MessageException):
            service.update(root.id, {"name": "Renamed"})
        with pytest.raises(MessageException):
            service.destroy(root.id)

    def test_category_cannot_be_its_own_parent(self, services):
        custom = ItemCategoryFactory()

        with pytest.raises(MessageException):
            services.item_category_service().update(
                custom.id, {"name": custom.name, "parent_item_category_id": custom.id}
            )

    def test_category_cannot_move_under_its_subcategory(self, services):
        parent = ItemCategoryFactory()
        child = ItemCategoryFactory(parent=parent)
        grandchild = ItemCategoryFactory(parent=child)
        service = services.item_category_service()

        with pytest.raises(MessageException):
            service.update(parent.id, {"name": parent.name, "parent_item_category_id": child.id})
        with pytest.raises(MessageException):
            service.update(parent.id, {"name": parent.name, "parent_item_category_id": grandchild.id})

        parent.refresh_from_db()
        assert parent.parent_id is None
        data = ItemCategoryResponseSerializer(service.find_one(parent.id)).data
        assert [category["id"] for category in data["ChildItemCategories"]] == [child.id]

    def test_destroy_removes_subcategories(self, services):
        parent = ItemCategoryFactory()
        child = ItemCategoryFactory(parent=parent)

        services.item_category_service().destroy(parent.id)

        assert not ItemCategory.objects.filter(id__in=[parent.id, child.id]).exists()
