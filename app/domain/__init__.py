"""Domain package."""

from .cart import Cart, Money, Product

__all__ = ["Cart", "Product", "Money"]
