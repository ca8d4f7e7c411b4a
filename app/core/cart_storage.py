"""In-memory per-user cart storage shared by bot handlers.

Carts live in process memory only and expire after a period of inactivity.
"""
from __future__ import annotations

import time
from collections.abc import Callable

from cachetools import TTLCache

from app.domain.cart import Cart, Product
from logging_config import logger


class CartStorage:
    """Holds one `Cart` per Telegram user with idle expiry."""

    CART_EXPIRY_SECONDS = 24 * 60 * 60
    MAX_CARTS = 10_000

    def __init__(
        self,
        ttl_seconds: int | None = None,
        max_carts: int | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._carts: TTLCache[int, Cart] = TTLCache(
            maxsize=max_carts or self.MAX_CARTS,
            ttl=ttl_seconds or self.CART_EXPIRY_SECONDS,
            timer=timer,
        )

    def get_cart(self, user_id: int) -> Cart:
        """Return the user's cart, creating an empty one if needed.

        The same object is returned on every call while the cart is alive,
        so screens and commands share it.
        """
        cart = self._carts.get(int(user_id))
        if cart is None:
            cart = Cart()
        # re-inserting refreshes the expiry timer
        self._carts[int(user_id)] = cart
        return cart

    def add_product(self, user_id: int, name: str, price: object) -> Product:
        product = Product(name=name, price=price)
        self.get_cart(user_id).add(product)
        logger.info("Cart add: user=%s product=%r price=%s", user_id, product.name, product.price)
        return product

    def clear_cart(self, user_id: int) -> None:
        cart = self._carts.pop(int(user_id), None)
        if cart is not None:
            cart.clear()
        logger.info("Cart cleared: user=%s", user_id)

    def is_empty(self, user_id: int) -> bool:
        cart = self._carts.get(int(user_id))
        return cart is None or cart.count == 0


__all__ = ["CartStorage"]
