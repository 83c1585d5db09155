from .container import build_cart_service, use_cart

__all__ = ["build_cart_service", "use_cart"]
