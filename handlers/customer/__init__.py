"""Customer handlers - cart screen and cart commands."""

from .cart import router as cart_router

__all__ = ["cart_router"]
