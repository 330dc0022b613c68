from copy import deepcopy
from typing import Dict, Iterable, List
from allocation.config import get_logger
from allocation.domain.exceptions import InexistentProduct, ProductAlreadyExists
from allocation.domain.model import Batch, Product
from allocation.domain.ports import AbstractRepository


logger = get_logger()


class InMemoryRepository(AbstractRepository):
    """Keeps one deep copy of each product, keyed by SKU."""

    def __init__(self) -> None:
        self._products: Dict[str, Product] = {}


    @classmethod
    def from_batches(cls, batches: Iterable[Batch]) -> 'InMemoryRepository':
        """Builds a repository holding one product per SKU found in `batches`."""
        grouped: Dict[str, List[Batch]] = {}
        for batch in batches:
            grouped.setdefault(batch.sku, []).append(batch)

        repo = cls()
        for sku, sku_batches in grouped.items():
            repo.write(Product(sku, sku_batches))
        return repo


    def write(self, product: Product) -> None:
        if product.sku in self._products:
            raise ProductAlreadyExists(sku=product.sku)

        self._products[product.sku] = deepcopy(product)
        logger.debug(f"Wrote product '{product.sku}'")


    def update(self, product: Product) -> None:
        self._products[product.sku] = deepcopy(product)
        logger.debug(f"Updated product '{product.sku}'")


    def read(self, sku: str) -> Product:
        try:
            return deepcopy(self._products[sku])
        except KeyError:
            raise InexistentProduct(sku=sku)


    def remove(self, sku: str) -> None:
        try:
            del self._products[sku]
        except KeyError:
            raise InexistentProduct(sku=sku)
        logger.debug(f"Removed product '{sku}'")


    def list(self) -> List[Product]:
        return [deepcopy(product) for product in self._products.values()]
