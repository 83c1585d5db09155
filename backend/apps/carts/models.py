from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from django.dispatch import Signal

ACTION_ADD = "add"
ACTION_INCREMENT = "increment"
ACTION_REMOVE = "remove"
ACTION_UPDATE = "update"
ACTION_CLEAR = "clear"


def _same_id(a: Any, b: Any) -> bool:
    # True and 1 are distinct ids even though they compare equal
    return isinstance(a, bool) == isinstance(b, bool) and a == b


@dataclass
class LineItem:
    """One distinct product in a cart.

    ``fields`` is a shallow copy of whatever the product carried besides its
    id when it was first added; the cart never reads or changes it.
    """

    id: Any
    quantity: Any = 1
    fields: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {"id": self.id, **self.fields, "quantity": self.quantity}


class Cart:
    """Ordered, unique-by-id collection of line items.

    ``items`` is the live list: callers holding a reference see every
    mutation. Each mutation is announced on ``changed`` with
    ``sender=self``, ``action`` and ``item`` keyword arguments.
    """

    def __init__(self) -> None:
        self.items: List[LineItem] = []
        self.changed = Signal()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.items)

    def __contains__(self, item_id: object) -> bool:
        return self._find(item_id)[1] is not None

    def __repr__(self) -> str:
        return f"Cart(items={self.items!r})"

    def _find(self, item_id: object) -> Tuple[int, Optional[LineItem]]:
        for index, item in enumerate(self.items):
            if _same_id(item.id, item_id):
                return index, item
        return -1, None

    def _notify(self, action: str, item: Optional[LineItem]) -> None:
        self.changed.send(sender=self, action=action, item=item)

    def get(self, item_id: object) -> Optional[LineItem]:
        return self._find(item_id)[1]

    def add(self, item_id: Any, fields: Optional[Dict[str, Any]] = None) -> LineItem:
        """Increment an existing item or append a new one with quantity 1.

        The fields of an existing item are kept as they are; ``fields`` is
        only used when a new item is appended.
        """
        _, existing = self._find(item_id)
        if existing is not None:
            existing.quantity += 1
            self._notify(ACTION_INCREMENT, existing)
            return existing
        item = LineItem(id=item_id, quantity=1, fields=dict(fields or {}))
        self.items.append(item)
        self._notify(ACTION_ADD, item)
        return item

    def remove(self, item_id: object) -> Optional[LineItem]:
        index, item = self._find(item_id)
        if item is None:
            return None
        del self.items[index]
        self._notify(ACTION_REMOVE, item)
        return item

    def set_quantity(self, item_id: object, quantity: Any) -> Optional[LineItem]:
        # stored as given; zero or negative quantities do not remove the item
        _, item = self._find(item_id)
        if item is None:
            return None
        item.quantity = quantity
        self._notify(ACTION_UPDATE, item)
        return item

    def clear(self) -> int:
        removed = len(self.items)
        if not removed:
            return 0
        self.items.clear()
        self._notify(ACTION_CLEAR, None)
        return removed
