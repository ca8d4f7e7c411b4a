"""Cart router wiring the cart screen and cart content commands."""
from __future__ import annotations

from aiogram import Router

from app.core.cart_storage import CartStorage
from app.core.price_formatter import PriceFormatter
from localization import DEFAULT_LANGUAGE

from . import add as cart_add
from . import view as cart_view
from .common import setup_dependencies as _setup_common_dependencies

router = Router(name="cart")

# Handlers are registered at import time so tests and the bot share one router.
cart_view.register(router)
cart_add.register(router)


def setup_dependencies(
    storage: CartStorage,
    formatter: PriceFormatter,
    language: str = DEFAULT_LANGUAGE,
) -> None:
    """Initialize shared cart dependencies (storage, formatter, language)."""
    _setup_common_dependencies(storage, formatter, language)


from .view import show_cart  # noqa: E402,F401
