from .cart_payloads import cart_items_to_loggable

__all__ = ["cart_items_to_loggable"]
