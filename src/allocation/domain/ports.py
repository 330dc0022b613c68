from abc import ABC, abstractmethod
from typing import List

from allocation.domain.model import Product


class AbstractRepository(ABC):
    """Storage for Product aggregates, one per SKU.

    Products handed out by `read` are detached from storage: changes only
    persist once the product is passed back to `write` or `update`.
    """

    @abstractmethod
    def write(self, product: Product) -> None:
        """Stores a new product.

        Raises:
            ProductAlreadyExists: a product with the same SKU is stored.
        """
        raise NotImplementedError()


    @abstractmethod
    def update(self, product: Product) -> None:
        """Stores `product`, replacing whatever was stored for its SKU."""
        raise NotImplementedError()


    @abstractmethod
    def read(self, sku: str) -> Product:
        """Returns the product for `sku`.

        Raises:
            InexistentProduct: no product is stored for `sku`.
        """
        raise NotImplementedError()


    @abstractmethod
    def remove(self, sku: str) -> None:
        """Deletes the product for `sku` along with its batches.

        Raises:
            InexistentProduct: no product is stored for `sku`.
        """
        raise NotImplementedError()


    @abstractmethod
    def list(self) -> List[Product]:
        raise NotImplementedError()
