from typing import List
from django.db import transaction
from allocation.config import get_logger
from allocation.domain import model as domain_
from allocation.domain.exceptions import InexistentProduct, ProductAlreadyExists
from allocation.domain.ports import AbstractRepository
from dddjango.alloc import models as orm


logger = get_logger()


class DjangoRepository(AbstractRepository):
    """Stores each product as a row with its batches and allocations.

    Every write replaces the product's batch rows inside one transaction, so
    a product is always read back exactly as it was last stored.
    """

    def write(self, product: domain_.Product) -> None:
        with transaction.atomic():
            if orm.Product.objects.filter(sku=product.sku).exists():
                raise ProductAlreadyExists(sku=product.sku)
            orm.Product.from_domain(product)
        logger.debug(f"Wrote product '{product.sku}'")


    def update(self, product: domain_.Product) -> None:
        with transaction.atomic():
            orm.Product.objects.filter(sku=product.sku).delete()
            orm.Product.from_domain(product)
        logger.debug(f"Updated product '{product.sku}'")


    def read(self, sku: str) -> domain_.Product:
        try:
            return orm.Product.objects.get(sku=sku).to_domain()
        except orm.Product.DoesNotExist:
            raise InexistentProduct(sku=sku)


    def remove(self, sku: str) -> None:
        deleted, _ = orm.Product.objects.filter(sku=sku).delete()
        if not deleted:
            raise InexistentProduct(sku=sku)
        logger.debug(f"Removed product '{sku}'")


    def list(self) -> List[domain_.Product]:
        return [p.to_domain() for p in orm.Product.objects.all()]
