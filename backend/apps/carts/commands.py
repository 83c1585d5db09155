"""Input normalisation for cart operations. No cart state lives here."""
from dataclasses import dataclass, field, fields as dataclass_fields, is_dataclass
from typing import Any, Dict, Mapping

RESERVED_FIELDS = ("id", "quantity")


def _product_fields(product: Any) -> Dict[str, Any]:
    if isinstance(product, Mapping):
        return dict(product)
    if is_dataclass(product) and not isinstance(product, type):
        # shallow copy; dataclasses.asdict would deep-copy nested values
        return {f.name: getattr(product, f.name) for f in dataclass_fields(product)}
    if isinstance(product, type):
        raise ValueError(f"Product must be an instance, got class {product.__name__}")
    if isinstance(product, tuple) and hasattr(product, "_asdict"):
        return dict(product._asdict())
    raw: Dict[str, Any] = {}
    for klass in reversed(type(product).__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and hasattr(product, name):
                raw[name] = getattr(product, name)
    if hasattr(product, "__dict__"):
        raw.update(vars(product))
    if raw or hasattr(product, "__dict__"):
        return raw
    raise ValueError(
        f"Product must be a mapping or an object with attributes, got {type(product).__name__}"
    )


@dataclass
class AddToCartCommand:
    product_id: Any
    fields: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_raw(product: Any):
        raw = _product_fields(product)
        # a missing id is kept as None and matches at most one entry
        product_id = raw.get("id")
        extra = {k: v for k, v in raw.items() if k not in RESERVED_FIELDS}
        return AddToCartCommand(product_id=product_id, fields=extra)

