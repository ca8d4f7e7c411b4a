"""Cart content commands: /add and /clear.

These stand in for the catalog side of the shop; the cart screen itself
never adds products.
"""
from __future__ import annotations

from aiogram import Router, types
from aiogram.filters import Command, CommandObject

from app.core.exceptions import ValidationException
from localization import get_text
from logging_config import logger

from . import common


def parse_add_arguments(args: str | None) -> tuple[str, str]:
    """Split '/add' arguments into (name, price).

    The price is the last word, everything before it is the name.
    """
    if not args:
        raise ValueError("missing arguments")
    parts = args.strip().rsplit(maxsplit=1)
    if len(parts) != 2:
        raise ValueError("expected a name and a price")
    name, price = parts
    # allow "9,99" as typed on many phone keyboards
    return name.strip(), price.replace(",", ".")


async def cart_add_command(message: types.Message, command: CommandObject) -> None:
    if not message.from_user:
        return

    lang = common.user_language(message.from_user)

    try:
        name, price = parse_add_arguments(command.args)
    except ValueError:
        await message.answer(get_text(lang, "cart_add_usage"))
        return

    try:
        product = common.cart_storage.add_product(message.from_user.id, name, price)
    except ValidationException as e:
        logger.warning("Rejected /add from user %s: %s", message.from_user.id, e.message)
        await message.answer(get_text(lang, "cart_add_invalid_price"))
        return

    await message.answer(
        get_text(
            lang,
            "cart_added",
            name=product.name,
            price=common.price_formatter.format(product.price) or "",
        )
    )


async def cart_clear_command(message: types.Message) -> None:
    if not message.from_user:
        return

    lang = common.user_language(message.from_user)
    common.cart_storage.clear_cart(message.from_user.id)
    await message.answer(get_text(lang, "cart_cleared"))


def register(router: Router) -> None:
    """Register cart content commands on the given router."""
    router.message.register(cart_add_command, Command("add"))
    router.message.register(cart_clear_command, Command("clear"))
