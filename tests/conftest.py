"""Shared pytest fixtures for cart tests."""
from __future__ import annotations

import os
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import User as TgUser

from app.core.cart_storage import CartStorage
from app.core.price_formatter import PriceFormatter
from app.domain.cart import Cart, Product
from handlers.customer.cart import common as cart_common


@pytest.fixture(scope="session", autouse=True)
def _test_env_vars() -> None:
    """Provide minimal env vars required for imports in tests."""
    if not os.getenv("TELEGRAM_BOT_TOKEN"):
        os.environ["TELEGRAM_BOT_TOKEN"] = "TEST_TOKEN"


@pytest.fixture()
def formatter() -> PriceFormatter:
    return PriceFormatter(symbol="$", position="prefix")


@pytest.fixture()
def sample_cart() -> Cart:
    """Cart with two products: Widget 9.99 and Gadget 4.50."""
    return Cart(
        [
            Product(name="Widget", price=Decimal("9.99")),
            Product(name="Gadget", price=Decimal("4.50")),
        ]
    )


@pytest.fixture()
def storage() -> CartStorage:
    return CartStorage(ttl_seconds=60, max_carts=100)


@pytest.fixture()
def cart_deps(storage: CartStorage, formatter: PriceFormatter):
    """Install fresh cart dependencies and restore the previous ones afterwards."""
    previous = (cart_common.cart_storage, cart_common.price_formatter, cart_common.default_language)
    cart_common.setup_dependencies(storage, formatter, "en")
    try:
        yield storage
    finally:
        cart_common.setup_dependencies(*previous)


@pytest.fixture()
def tg_user() -> TgUser:
    return TgUser(id=1001, is_bot=False, first_name="Buyer", language_code="en")


@pytest.fixture()
def fsm_state(tg_user: TgUser) -> FSMContext:
    return FSMContext(
        storage=MemoryStorage(),
        key=StorageKey(bot_id=42, chat_id=tg_user.id, user_id=tg_user.id),
    )


def _make_callback(data: str, user: TgUser) -> MagicMock:
    """CallbackQuery stand-in with awaitable answer/edit/delete."""
    callback = MagicMock()
    callback.data = data
    callback.from_user = user
    callback.answer = AsyncMock()
    callback.message = MagicMock()
    callback.message.edit_text = AsyncMock()
    callback.message.answer = AsyncMock()
    callback.message.delete = AsyncMock()
    return callback


def _make_message(text: str, user: TgUser) -> MagicMock:
    message = MagicMock()
    message.text = text
    message.from_user = user
    message.answer = AsyncMock()
    return message


@pytest.fixture()
def make_callback():
    return _make_callback


@pytest.fixture()
def make_message():
    return _make_message
