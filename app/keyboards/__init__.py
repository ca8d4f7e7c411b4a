"""Keyboards package - reply keyboards shared by handlers.

Inline keyboards of the cart screen live next to their handlers in
``handlers.customer.cart.cart_ui``.
"""

from .user import main_menu_customer

__all__ = ["main_menu_customer"]
