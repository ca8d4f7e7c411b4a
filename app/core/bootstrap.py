"""Application bootstrap wiring bot, dispatcher and cart dependencies."""
from __future__ import annotations

from aiogram import Bot, Dispatcher
from aiogram.fsm.storage.memory import MemoryStorage

from handlers.common import common_router
from handlers.customer.cart import router as cart_router
from handlers.customer.cart import setup_dependencies as setup_cart_dependencies
from logging_config import logger

from .cart_storage import CartStorage
from .config import Settings
from .price_formatter import PriceFormatter


def build_application(settings: Settings) -> tuple[Bot, Dispatcher, CartStorage]:
    """Create bot runtime components from configuration."""
    bot = Bot(token=settings.bot_token)

    # Screen modes only matter for the message currently shown
    storage = MemoryStorage()
    logger.info("Using MemoryStorage for FSM state")

    cart_storage = CartStorage(
        ttl_seconds=settings.cart_ttl_seconds,
        max_carts=settings.cart_max_users,
    )
    setup_cart_dependencies(
        cart_storage,
        PriceFormatter.from_config(settings.currency),
        settings.default_language,
    )

    dispatcher = Dispatcher(storage=storage)
    # Cart before common handlers so the cart reply button wins
    dispatcher.include_router(cart_router)
    dispatcher.include_router(common_router)

    return bot, dispatcher, cart_storage
