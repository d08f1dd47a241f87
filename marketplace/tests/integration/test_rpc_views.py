from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.container import ServiceContainer
from marketplace.models import ItemCategory, PaymentInformation
from marketplace.tests.factories import ListingItemTemplateFactory


class RpcViewIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("marketplace:rpc")
        self.root = ServiceContainer().default_item_category_service().seed_default_categories()

    def rpc(self, method, *params, rpc_id=1):
        return self.client.post(
            self.url, {"jsonrpc": "2.0", "method": method, "params": list(params), "id": rpc_id}, format="json"
        )

    def test_getcategory_by_id(self):
        response = self.rpc("getcategory", self.root.id)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["jsonrpc"], "2.0")
        self.assertEqual(response.data["id"], 1)
        result = response.data["result"]
        self.assertEqual(result["key"], "cat_ROOT")
        self.assertIsNone(result["ParentItemCategory"])
        self.assertEqual(len(result["ChildItemCategories"]), 6)

    def test_getcategory_by_key(self):
        response = self.rpc("getcategory", "cat_electronics")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        result = response.data["result"]
        self.assertEqual(result["name"], "Electronics and Technology")
        self.assertEqual(result["ParentItemCategory"]["id"], self.root.id)
        self.assertEqual(result["parent_item_category_id"], self.root.id)

    def test_getcategory_unknown_id(self):
        response = self.rpc("getcategory", 987654)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"]["code"], -32001)
        self.assertEqual(response.data["error"]["data"], {"id": 987654})

    def test_getcategories_returns_tree(self):
        response = self.rpc("getcategories")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        electronics = next(
            child for child in response.data["result"]["ChildItemCategories"] if child["key"] == "cat_electronics"
        )
        self.assertEqual(len(electronics["ChildItemCategories"]), 9)

    def test_add_update_and_remove_category(self):
        response = self.rpc("addcategory", "Drones", "Flying things", "cat_electronics")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        category_id = response.data["result"]["id"]
        self.assertIsNone(response.data["result"]["key"])

        response = self.rpc("updatecategory", category_id, "Quadcopters", "Four rotors")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["result"]["name"], "Quadcopters")
        self.assertEqual(response.data["result"]["parent_item_category_id"], self.root.id)

        response = self.rpc("removecategory", category_id)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(response.data["result"])
        self.assertFalse(ItemCategory.objects.filter(id=category_id).exists())

    def test_remove_default_category_is_refused(self):
        response = self.rpc("removecategory", "cat_electronics")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], -32000)
        self.assertTrue(ItemCategory.objects.filter(key="cat_electronics").exists())

    def test_unknown_method(self):
        response = self.rpc("sellstuff", rpc_id="abc")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["id"], "abc")
        self.assertEqual(response.data["error"]["code"], -32601)
        self.assertEqual(response.data["error"]["message"], "Method sellstuff not found")

    def test_missing_method_is_invalid_request(self):
        response = self.client.post(self.url, {"params": []}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], -32602)
        self.assertIn({"field": "method", "message": "This field is required."}, response.data["error"]["data"])

    def test_invalid_lookup_param(self):
        response = self.rpc("getcategory", True)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["data"][0]["field"], "params.0")

    def test_help_lists_commands(self):
        response = self.rpc("help")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("updatepaymentinformation", response.data["result"])
        self.assertIn("getcategory", response.data["result"])


class PaymentInformationRpcIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("marketplace:rpc")
        self.template = ListingItemTemplateFactory()

    def rpc(self, method, *params):
        return self.client.post(
            self.url, {"jsonrpc": "2.0", "method": method, "params": list(params), "id": 1}, format="json"
        )

    def test_get_without_payment_information(self):
        response = self.rpc("getpaymentinformation", self.template.id)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"]["code"], -32001)

    def test_update_creates_then_updates(self):
        response = self.rpc("updatepaymentinformation", self.template.id, "SALE", "BITCOIN", 1.5, 0.1, 0.2, "addr-1")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        result = response.data["result"]
        self.assertEqual(result["type"], "SALE")
        self.assertEqual(result["listing_item_template_id"], self.template.id)
        self.assertIsNone(result["Escrow"])
        self.assertEqual(len(result["ItemPrice"]), 1)
        item_price = result["ItemPrice"][0]
        self.assertEqual(item_price["currency"], "BITCOIN")
        self.assertEqual(Decimal(str(item_price["basePrice"])), Decimal("1.5"))
        self.assertEqual(Decimal(str(item_price["ShippingPrice"]["international"])), Decimal("0.2"))
        self.assertEqual(item_price["Address"]["type"], "NORMAL")
        self.assertEqual(item_price["Address"]["address"], "addr-1")
        item_price_id = item_price["id"]

        response = self.rpc("updatepaymentinformation", self.template.id, "RENT", "PARTICL", 3, 0, 0, "addr-2")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        result = response.data["result"]
        self.assertEqual(result["type"], "RENT")
        self.assertEqual(result["ItemPrice"][0]["id"], item_price_id)
        self.assertEqual(result["ItemPrice"][0]["currency"], "PARTICL")
        self.assertEqual(PaymentInformation.objects.count(), 1)

        response = self.rpc("getpaymentinformation", self.template.id)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["result"]["ItemPrice"][0]["Address"]["address"], "addr-2")

    def test_update_with_invalid_currency(self):
        response = self.rpc("updatepaymentinformation", self.template.id, "SALE", "EUR", 1, 0, 0, "addr")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["data"][0]["field"], "itemPrice.0.currency")
        self.assertFalse(PaymentInformation.objects.exists())

    def test_non_numeric_template_id_is_rejected(self):
        for method, params in [
            ("getpaymentinformation", ["abc"]),
            ("updatepaymentinformation", ["abc", "SALE", "BITCOIN", 1, 0, 0, "addr"]),
        ]:
            response = self.rpc(method, *params)

            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data["error"]["code"], -32602)
            self.assertEqual(response.data["error"]["data"][0]["field"], "params.0")

        self.assertFalse(PaymentInformation.objects.exists())
