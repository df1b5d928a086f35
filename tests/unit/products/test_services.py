"""Unit tests for ProductService.

Covers:
- list_products: ordering/limit delegated to the repository.
- get_product / update_product / toggle_availability / delete_product:
  happy path and not found (no mutation attempted).
- create_product: fields passed through from the DTO.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda p, **kwargs: p
    return repo


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _product(**overrides) -> Product:
    defaults = {"id": 1, "name": "Widget", "price": Decimal("19.99"), "availability": True}
    defaults.update(overrides)
    return Product(**defaults)


class TestListProducts:
    def test_requests_top_fifty_by_price(self, service, mock_repo):
        mock_repo.list.return_value = []
        assert service.list_products() == []
        mock_repo.list.assert_called_once_with(order_by=("-price", "id"), limit=50)


class TestGetProduct:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()
        assert service.get_product(1).name == "Widget"

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.get_product(2000)


class TestCreateProduct:
    def test_passes_dto_fields(self, service, mock_repo):
        mock_repo.create.return_value = _product(availability=False)
        dto = CreateProductDTO(name="Mouse", price=50, availability=False)
        service.create_product(dto)
        mock_repo.create.assert_called_once_with(
            name="Mouse", price=Decimal("50.00"), availability=False
        )


class TestUpdateProduct:
    def test_replaces_all_fields(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()
        dto = UpdateProductDTO(name="Monitor", price=300, availability=False)
        product = service.update_product(1, dto)
        assert (product.name, product.price, product.availability) == (
            "Monitor",
            Decimal("300.00"),
            False,
        )
        mock_repo.save.assert_called_once()

    def test_not_found_does_not_save(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        dto = UpdateProductDTO(name="Ghost", price=1, availability=True)
        with pytest.raises(ProductNotFound):
            service.update_product(2000, dto)
        mock_repo.save.assert_not_called()


class TestToggleAvailability:
    def test_flips_and_keeps_other_fields(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product(availability=True)
        product = service.toggle_availability(1)
        assert product.availability is False
        assert product.name == "Widget"
        mock_repo.save.assert_called_once_with(product, update_fields=["availability"])

    def test_not_found_does_not_save(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.toggle_availability(2000)
        mock_repo.save.assert_not_called()


class TestDeleteProduct:
    def test_deletes_resolved_product(self, service, mock_repo):
        product = _product()
        mock_repo.get_by_id.return_value = product
        service.delete_product(1)
        mock_repo.delete.assert_called_once_with(product)

    def test_not_found_does_not_delete(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.delete_product(2000)
        mock_repo.delete.assert_not_called()
