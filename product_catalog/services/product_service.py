"""Product service: the seam between the controller and the repository."""

from typing import List, Optional

from ..models import Product
from ..repositories import ProductRepository


class ProductService:
    """Forwards product operations to the repository unchanged."""

    _repository: ProductRepository

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    def get_all(self) -> List[Product]:
        return self._repository.get_all()

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self._repository.get_by_id(product_id)

    def insert(self, product: Product) -> int:
        return self._repository.insert(product)

    def update(self, product: Product) -> bool:
        return self._repository.update(product)

    def delete(self, product_id: int) -> bool:
        return self._repository.delete(product_id)
