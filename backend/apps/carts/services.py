from __future__ import annotations

from typing import Any, Callable, List, Optional

from apps.common import get_logger
from .commands import AddToCartCommand
from .dtos import CartDTO
from .models import Cart, LineItem
from .protocols import CartListener, CartMapperProtocol

logger = get_logger(__name__).bind(component="carts", layer="service")


class CartService:
    """Handle a consumer holds for one cart.

    ``cart_items`` is the cart's live list. The three mutations never raise
    for unknown ids; they are logged and ignored.
    """

    def __init__(self, cart: Cart, cart_mapper: CartMapperProtocol):
        self.cart = cart
        self.cart_mapper = cart_mapper
        self.logger = logger.bind(service="CartService")

    @property
    def cart_items(self) -> List[LineItem]:
        return self.cart.items

    def add_to_cart(self, product: Any) -> LineItem:
        try:
            cmd = AddToCartCommand.from_raw(product)
        except ValueError as exc:
            self.logger.warning("Rejected product payload", error=str(exc))
            raise
        item = self.cart.add(cmd.product_id, cmd.fields)
        self.logger.debug(
            "Added to cart", item_id=item.id, quantity=item.quantity, size=len(self.cart)
        )
        return item

    def remove_from_cart(self, item_id: Any) -> None:
        removed = self.cart.remove(item_id)
        if removed is None:
            self.logger.debug("Remove skipped; item not in cart", item_id=item_id)
            return
        self.logger.debug("Removed from cart", item_id=item_id, size=len(self.cart))

    def update_quantity(self, item_id: Any, quantity: Any) -> None:
        item = self.cart.set_quantity(item_id, quantity)
        if item is None:
            self.logger.debug("Quantity update skipped; item not in cart", item_id=item_id)
            return
        self.logger.debug("Quantity updated", item_id=item_id, quantity=quantity)

    def get_item(self, item_id: Any) -> Optional[LineItem]:
        return self.cart.get(item_id)

    def clear_cart(self) -> int:
        removed = self.cart.clear()
        self.logger.debug("Cart cleared", removed=removed)
        return removed

    def snapshot(self) -> CartDTO:
        return self.cart_mapper.to_dto(self.cart)

    def subscribe(self, listener: CartListener) -> Callable[[], bool]:
        """Connect ``listener`` to this cart's change signal.

        The listener is held strongly until disconnected; call the returned
        function (or ``unsubscribe``) to detach it.
        """
        self.cart.changed.connect(listener, sender=self.cart, weak=False)
        self.logger.debug("Listener subscribed", listener=_listener_name(listener))
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: CartListener) -> bool:
        disconnected = self.cart.changed.disconnect(listener, sender=self.cart)
        self.logger.debug(
            "Listener unsubscribed",
            listener=_listener_name(listener),
            disconnected=disconnected,
        )
        return disconnected


def _listener_name(listener: Any) -> str:
    return getattr(listener, "__qualname__", None) or type(listener).__name__
