from __future__ import annotations

from typing import Any, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.carts.dtos import CartDTO
    from apps.carts.models import Cart, LineItem


class CartListener(Protocol):
    """Receiver connected to ``Cart.changed``."""

    def __call__(
        self,
        sender: "Cart",
        *,
        action: str,
        item: Optional["LineItem"],
        **kwargs: Any,
    ) -> None:
        ...


class CartMapperProtocol(Protocol):
    def to_dto(self, cart: "Cart") -> "CartDTO":
        ...
