from dataclasses import dataclass
from allocation.domain.exceptions import InvalidQuantity, InvalidTypeForQuantity


@dataclass(frozen=True)
class ValidQtyMixin:
    def __post_init__(self):
        # bool is an int subclass, but never a meaningful quantity
        if not isinstance(self.qty, int) or isinstance(self.qty, bool):
            raise InvalidTypeForQuantity()

        if self.qty < 1:
            raise InvalidQuantity()
