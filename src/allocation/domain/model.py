from dataclasses import dataclass
from datetime import date
from allocation.domain.exceptions import (
    DuplicateBatch, InvalidSKU, LineIsNotAllocatedError, OutOfStock
)
from allocation.domain.validators import ValidQtyMixin
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple


@dataclass(frozen=True)
class OrderLine(ValidQtyMixin):
    order_id: str
    sku: str
    qty: int


class Batch:

    def __init__(self, ref: str, sku: str, qty: int,
                 eta: Optional[date] = None) -> None:
        self.reference = ref
        self.sku = sku
        self.eta = eta
        self._purchased_qty = qty
        self._allocations: Set[OrderLine] = set()


    def __repr__(self) -> str:
        return f'<Batch {self.reference}>'


    def __eq__(self, other) -> bool:
        if not isinstance(other, Batch):
            return False
        return other.reference == self.reference


    def __hash__(self) -> int:
        return hash(self.reference)


    @property
    def purchased_qty(self) -> int:
        return self._purchased_qty


    @property
    def allocated_quantity(self) -> int:
        return sum(line.qty for line in self._allocations)


    @property
    def available_quantity(self) -> int:
        return self._purchased_qty - self.allocated_quantity


    @property
    def allocations(self) -> FrozenSet[OrderLine]:
        return frozenset(self._allocations)


    def can_allocate(self, line: OrderLine) -> bool:
        return self.sku == line.sku and self.available_quantity >= line.qty


    def allocate(self, line: OrderLine) -> None:
        if self.can_allocate(line):
            self._allocations.add(line)


    def deallocate(self, line: OrderLine) -> None:
        self._allocations.discard(line)


def preference_key(batch: Batch) -> Tuple[bool, date]:
    """Rank of a batch in the allocation policy.

    Batches already in stock (no ETA) come first, then shipments by
    earliest ETA.
    """
    if batch.eta is None:
        return (False, date.min)
    return (True, batch.eta)


def allocate(line: OrderLine, batches: Iterable[Batch]) -> str:
    try:
        batch = next(b for b in sorted(batches, key=preference_key)
                     if b.can_allocate(line))
    except StopIteration:
        raise OutOfStock(sku=line.sku)

    batch.allocate(line)
    return batch.reference


class Product:
    """Aggregate for batches."""

    def __init__(self, sku: str, batches: Optional[List[Batch]] = None) -> None:
        self._sku = sku
        self._batches: List[Batch] = []

        for batch in batches or []:
            self.append_batch(batch)


    def __repr__(self) -> str:
        return f'<Product {self._sku}>'


    @property
    def sku(self) -> str:
        return self._sku


    @property
    def batches(self) -> List[Batch]:
        """A copy of the batch list. The batches themselves stay owned by the
        product: allocate and append through the product, never on a batch
        taken from here."""
        return list(self._batches)


    @property
    def available_quantity(self) -> int:
        return sum(batch.available_quantity for batch in self._batches)


    def append_batch(self, batch: Batch) -> None:
        self.validate_sku(batch.sku)

        if batch in self._batches:
            raise DuplicateBatch(ref=batch.reference)

        self._batches.append(batch)


    def allocate(self, line: OrderLine) -> str:
        self.validate_sku(line.sku)
        return allocate(line, self._batches)


    def deallocate(self, line: OrderLine) -> str:
        self.validate_sku(line.sku)

        try:
            batch = next(b for b in self._batches if line in b.allocations)
        except StopIteration:
            raise LineIsNotAllocatedError(line_info=(line.order_id, line.sku))

        batch.deallocate(line)
        return batch.reference


    def allocation_for(self, line: OrderLine) -> Optional[str]:
        return next(
            (b.reference for b in self._batches if line in b.allocations),
            None
        )


    def validate_sku(self, sku: str) -> None:
        if sku != self._sku:
            raise InvalidSKU(sku=sku)
