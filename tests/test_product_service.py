"""Tests for ProductService.

The service forwards every call to the repository unchanged; these tests
check each operation against a mocked repository.
"""

from decimal import Decimal
from unittest.mock import create_autospec

import pytest

from product_catalog.models import Product
from product_catalog.repositories import ProductRepository
from product_catalog.services import ProductService


class TestProductService:
    """Test that ProductService passes calls through."""

    @pytest.fixture
    def repository(self):
        return create_autospec(ProductRepository, instance=True)

    @pytest.fixture
    def service(self, repository):
        return ProductService(repository)

    def test_get_all(self, service, repository):
        products = [Product(id=1, name="A", price=Decimal("1.00"), stock=1)]
        repository.get_all.return_value = products

        assert service.get_all() is products
        repository.get_all.assert_called_once_with()

    def test_get_all_empty(self, service, repository):
        repository.get_all.return_value = []

        assert service.get_all() == []

    def test_get_by_id(self, service, repository):
        product = Product(id=3, name="C", price=Decimal("3.00"), stock=3)
        repository.get_by_id.return_value = product

        assert service.get_by_id(3) is product
        repository.get_by_id.assert_called_once_with(3)

    def test_get_by_id_absent(self, service, repository):
        repository.get_by_id.return_value = None

        assert service.get_by_id(-1) is None
        repository.get_by_id.assert_called_once_with(-1)

    def test_insert(self, service, repository):
        product = Product(name="New", price=Decimal("2.50"), stock=4)
        repository.insert.return_value = 12

        assert service.insert(product) == 12
        repository.insert.assert_called_once_with(product)

    @pytest.mark.parametrize("result", [True, False])
    def test_update(self, service, repository, result):
        product = Product(id=5, name="E", price=Decimal("5.00"), stock=5)
        repository.update.return_value = result

        assert service.update(product) is result
        repository.update.assert_called_once_with(product)

    @pytest.mark.parametrize("result", [True, False])
    def test_delete(self, service, repository, result):
        repository.delete.return_value = result

        assert service.delete(9) is result
        repository.delete.assert_called_once_with(9)
