"""Common cart dependencies and small helpers.

This module centralizes shared globals (cart storage, price formatter,
default language) used across cart submodules.
"""
from __future__ import annotations

import html
from typing import Any

from app.core.cart_storage import CartStorage
from app.core.price_formatter import PriceFormatter
from localization import DEFAULT_LANGUAGE, resolve_language

# These will be set from `setup_dependencies` in `router.py`.
cart_storage: CartStorage = CartStorage()
price_formatter: PriceFormatter = PriceFormatter()
default_language: str = DEFAULT_LANGUAGE


def setup_dependencies(
    storage: CartStorage,
    formatter: PriceFormatter,
    language: str = DEFAULT_LANGUAGE,
) -> None:
    """Initialize shared cart dependencies."""
    global cart_storage, price_formatter, default_language
    cart_storage = storage
    price_formatter = formatter
    default_language = language


def user_language(user: Any) -> str:
    """Pick the UI language for a Telegram user."""
    code = getattr(user, "language_code", None) if user else None
    return resolve_language(code, default_language)


def esc(val: Any) -> str:
    """HTML-escape helper used in cart texts."""
    if val is None:
        return ""
    return html.escape(str(val))
