from __future__ import annotations

from .mappers import CartMapper, LineItemMapper
from .models import Cart
from .services import CartService


def build_cart_service() -> CartService:
    line_item_mapper = LineItemMapper()
    cart_mapper = CartMapper(line_item_mapper)
    return CartService(cart=Cart(), cart_mapper=cart_mapper)


# one fresh cart per caller, mirroring a per-session composable
use_cart = build_cart_service
