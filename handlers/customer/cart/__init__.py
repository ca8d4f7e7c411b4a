"""Cart module for customers.

Provides cart functionality:
- View cart (row list, totals, checkout button)
- Edit/Done toggle and row deletion
- Add and clear commands
"""
from .router import router, setup_dependencies, show_cart
from .screen import CartMode, CartScreen

__all__ = ["router", "setup_dependencies", "show_cart", "CartMode", "CartScreen"]
