from unittest.mock import MagicMock, call, patch

import pytest

from marketplace.exceptions import NotFoundException, ValidationException
from marketplace.services import PaymentInformationService
from marketplace.tests.factories import payment_information_body, updated_payment_information_body


@pytest.fixture
def mock_repository():
    return MagicMock()


@pytest.fixture
def mock_escrow_service():
    return MagicMock()


@pytest.fixture
def mock_item_price_service():
    return MagicMock()


@pytest.fixture
def mock_listing_item_repository():
    return MagicMock()


@pytest.fixture
def mock_template_repository():
    return MagicMock()


@pytest.fixture
def payment_information_service(
    mock_repository,
    mock_escrow_service,
    mock_item_price_service,
    mock_listing_item_repository,
    mock_template_repository,
):
    return PaymentInformationService(
        payment_information_repository=mock_repository,
        escrow_service=mock_escrow_service,
        item_price_service=mock_item_price_service,
        listing_item_repository=mock_listing_item_repository,
        listing_item_template_repository=mock_template_repository,
    )


@pytest.fixture(autouse=True)
def mock_transaction():
    with patch("marketplace.services.payment_information_service.transaction") as mock_tx:
        yield mock_tx


@pytest.mark.unit
class TestPaymentInformationServiceCreate:
    def test_create_rejects_invalid_body_before_writing(
        self, payment_information_service, mock_repository, mock_escrow_service, mock_item_price_service
    ):
        with pytest.raises(ValidationException) as exc_info:
            payment_information_service.create({"type": "BARTER"})

        fields = {detail["field"] for detail in exc_info.value.details}
        assert "type" in fields
        mock_repository.insert.assert_not_called()
        mock_escrow_service.create.assert_not_called()
        mock_item_price_service.create.assert_not_called()

    def test_create_rejects_missing_parent_reference(self, payment_information_service, mock_repository):
        with pytest.raises(ValidationException) as exc_info:
            payment_information_service.create(payment_information_body())

        assert exc_info.value.details == [
            {"field": "", "message": "Either listing_item_id or listing_item_template_id is required"}
        ]
        mock_repository.insert.assert_not_called()

    def test_create_rejects_both_parent_references(self, payment_information_service, mock_repository):
        body = payment_information_body(listing_item_id=1, listing_item_template_id=2)

        with pytest.raises(ValidationException):
            payment_information_service.create(body)

        mock_repository.insert.assert_not_called()

    def test_create_rejects_negative_amount(self, payment_information_service, mock_repository):
        body = payment_information_body(listing_item_template_id=1)
        body["itemPrice"][0]["basePrice"] = -1

        with pytest.raises(ValidationException) as exc_info:
            payment_information_service.create(body)

        assert exc_info.value.details[0]["field"] == "itemPrice.0.basePrice"
        mock_repository.insert.assert_not_called()

    def test_create_missing_template_raises_not_found(
        self, payment_information_service, mock_repository, mock_template_repository
    ):
        mock_template_repository.find_by_id.side_effect = NotFoundException(7)

        with pytest.raises(NotFoundException):
            payment_information_service.create(payment_information_body(listing_item_template_id=7))

        mock_repository.insert.assert_not_called()

    def test_create_writes_parents_before_children(
        self, payment_information_service, mock_repository, mock_escrow_service, mock_item_price_service
    ):
        manager = MagicMock()
        manager.attach_mock(mock_repository.insert, "insert")
        manager.attach_mock(mock_escrow_service.create, "create_escrow")
        manager.attach_mock(mock_item_price_service.create, "create_item_price")
        mock_repository.insert.return_value = MagicMock(id=11)

        body = payment_information_body(listing_item_template_id=3)
        body["itemPrice"].append(dict(body["itemPrice"][0], currency="PARTICL"))

        payment_information_service.create(body)

        assert manager.mock_calls == [
            call.insert({"type": "SALE", "listing_item_id": None, "listing_item_template_id": 3}),
            call.create_escrow({**body["escrow"], "payment_information_id": 11}),
            call.create_item_price({**body["itemPrice"][0], "payment_information_id": 11}),
            call.create_item_price({**body["itemPrice"][1], "payment_information_id": 11}),
        ]
        mock_repository.find_by_id.assert_called_once_with(11, with_related=True)

    def test_create_without_escrow_skips_escrow(
        self, payment_information_service, mock_repository, mock_escrow_service, mock_item_price_service
    ):
        mock_repository.insert.return_value = MagicMock(id=5)

        payment_information_service.create(payment_information_body(listing_item_id=1, escrow=None, itemPrice=[]))

        mock_escrow_service.create.assert_not_called()
        mock_item_price_service.create.assert_not_called()


@pytest.mark.unit
class TestPaymentInformationServiceUpdate:
    def test_update_unknown_id_raises_not_found(self, payment_information_service, mock_repository):
        mock_repository.find_by_id.side_effect = NotFoundException(99)

        with pytest.raises(NotFoundException):
            payment_information_service.update(99, updated_payment_information_body(listing_item_template_id=1))

        mock_repository.update.assert_not_called()

    def test_update_syncs_children(
        self, payment_information_service, mock_repository, mock_escrow_service, mock_item_price_service
    ):
        existing = MagicMock(id=4)
        existing.escrow.id = 8
        first, second = MagicMock(id=20), MagicMock(id=21)
        existing.item_prices.all.return_value = [first, second]
        mock_repository.find_by_id.return_value = existing

        body = updated_payment_information_body(listing_item_template_id=1)

        payment_information_service.update(4, body)

        mock_repository.update.assert_called_once_with(
            4, {"type": "FREE", "listing_item_id": None, "listing_item_template_id": 1}
        )
        mock_escrow_service.update.assert_called_once_with(8, body["escrow"])
        mock_item_price_service.update.assert_called_once_with(20, body["itemPrice"][0])
        mock_item_price_service.destroy.assert_called_once_with(21)
        mock_item_price_service.create.assert_not_called()

    def test_update_without_escrow_destroys_existing(
        self, payment_information_service, mock_repository, mock_escrow_service
    ):
        existing = MagicMock(id=4)
        existing.escrow.id = 8
        existing.item_prices.all.return_value = []
        mock_repository.find_by_id.return_value = existing

        payment_information_service.update(4, updated_payment_information_body(listing_item_id=2, escrow=None))

        mock_escrow_service.destroy.assert_called_once_with(8)
        mock_escrow_service.update.assert_not_called()


@pytest.mark.unit
class TestPaymentInformationServiceRead:
    def test_find_all_does_not_load_relations(self, payment_information_service, mock_repository):
        mock_repository.find_all.return_value = [MagicMock()]

        result = payment_information_service.find_all()

        assert len(result) == 1
        mock_repository.find_all.assert_called_once_with()

    def test_destroy_delegates_to_repository(self, payment_information_service, mock_repository):
        payment_information_service.destroy(3)

        mock_repository.delete.assert_called_once_with(3)
