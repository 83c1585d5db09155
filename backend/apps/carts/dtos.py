from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Tuple


@dataclass(frozen=True)
class LineItemDTO:
    id: Any
    quantity: Any
    fields: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def as_dict(self):
        return {"id": self.id, **self.fields, "quantity": self.quantity}


@dataclass(frozen=True)
class CartDTO:
    items: Tuple[LineItemDTO, ...]

    @property
    def item_count(self) -> int:
        return len(self.items)

    def as_list(self):
        return [i.as_dict() for i in self.items]
