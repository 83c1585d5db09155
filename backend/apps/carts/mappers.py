from types import MappingProxyType
from typing import Iterable, List, Optional
from .models import Cart, LineItem
from .dtos import CartDTO, LineItemDTO


class LineItemMapper:
    def to_dto(self, item: LineItem) -> LineItemDTO:
        return LineItemDTO(
            id=item.id,
            quantity=item.quantity,
            fields=MappingProxyType(dict(item.fields)),
        )

    def many_to_dto(self, items: Iterable[LineItem]) -> List[LineItemDTO]:
        return [self.to_dto(i) for i in items]


class CartMapper:
    def __init__(self, line_item_mapper: Optional[LineItemMapper] = None) -> None:
        self.line_item_mapper = line_item_mapper or LineItemMapper()

    def to_dto(self, cart: Cart) -> CartDTO:
        return CartDTO(items=tuple(self.line_item_mapper.many_to_dto(cart.items)))
