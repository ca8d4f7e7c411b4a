"""Cart screen handlers.

Contains `show_cart`, which opens a fresh screen, and the callback handlers for the
screen actions: Edit/Done, row delete, Cancel and Checkout.
"""
from __future__ import annotations

from aiogram import F, Router, types
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext

from app.core.exceptions import CartIndexError
from localization import get_button_variants, get_text
from logging_config import logger

from . import common
from .cart_ui import (
    CB_CANCEL,
    CB_CHECKOUT,
    CB_DELETE_PREFIX,
    CB_EDIT,
    CB_NOOP,
    build_cart_keyboard,
    build_cart_text,
    parse_delete_callback,
)
from .screen import CartMode, CartScreen

# FSM data key holding the mode of the screen currently shown
MODE_KEY = "cart_mode"


def open_screen(user: types.User, mode: CartMode | None = None) -> CartScreen:
    """Build, load and show a cart screen for `user`."""
    screen = CartScreen(
        common.cart_storage.get_cart(user.id),
        price_formatter=common.price_formatter,
        lang=common.user_language(user),
    )
    screen.load()
    if mode is not None:
        screen.set_mode(mode)
    screen.appear()
    return screen


async def _stored_mode(state: FSMContext) -> CartMode:
    data = await state.get_data()
    try:
        return CartMode(data.get(MODE_KEY, CartMode.BROWSING.value))
    except ValueError:
        return CartMode.BROWSING


async def _render(callback: types.CallbackQuery, screen: CartScreen) -> None:
    text = build_cart_text(screen)
    kb = build_cart_keyboard(screen)
    try:
        await callback.message.edit_text(text, parse_mode="HTML", reply_markup=kb.as_markup())
    except TelegramBadRequest as e:
        if "message is not modified" in str(e):
            return
        logger.warning("Cart edit failed, sending a new message: %s", e)
        await callback.message.answer(text, parse_mode="HTML", reply_markup=kb.as_markup())


async def show_cart(message: types.Message, state: FSMContext) -> None:
    """Open a fresh cart screen (mode reset to browsing)."""
    if not message.from_user:
        return

    await state.clear()
    screen = open_screen(message.from_user)
    await state.update_data({MODE_KEY: screen.mode.value})

    await message.answer(
        build_cart_text(screen),
        parse_mode="HTML",
        reply_markup=build_cart_keyboard(screen).as_markup(),
    )


async def cart_toggle_edit(callback: types.CallbackQuery, state: FSMContext) -> None:
    if not callback.message or not callback.from_user:
        await callback.answer()
        return

    screen = open_screen(callback.from_user, await _stored_mode(state))
    new_mode = screen.toggle_editing()
    await state.update_data({MODE_KEY: new_mode.value})

    await _render(callback, screen)
    await callback.answer()


async def cart_delete_row(callback: types.CallbackQuery, state: FSMContext) -> None:
    if not callback.message or not callback.from_user:
        await callback.answer()
        return

    lang = common.user_language(callback.from_user)

    try:
        revision, index = parse_delete_callback(callback.data)
    except ValueError:
        logger.warning("Malformed cart delete callback: %r", callback.data)
        await callback.answer(get_text(lang, "error"), show_alert=True)
        return

    screen = open_screen(callback.from_user, await _stored_mode(state))

    removed = None
    if revision != screen.cart.revision:
        # Keyboard drawn for an older cart: its positions no longer match
        logger.warning(
            "Stale cart delete from user %s: revision %s, cart is at %s",
            callback.from_user.id,
            revision,
            screen.cart.revision,
        )
    else:
        try:
            removed = screen.commit_delete(index)
        except CartIndexError as e:
            logger.warning("Cart delete rejected for user %s: %s", callback.from_user.id, e)

    if removed is None:
        await _render(callback, screen)
        await callback.answer(get_text(lang, "cart_item_missing"), show_alert=True)
        return

    await _render(callback, screen)
    await callback.answer(get_text(lang, "cart_item_removed", name=removed.name))


async def cart_cancel(callback: types.CallbackQuery, state: FSMContext) -> None:
    if not callback.message or not callback.from_user:
        await callback.answer()
        return

    await state.clear()
    logger.info("Cart screen dismissed by user %s", callback.from_user.id)

    try:
        await callback.message.delete()
    except TelegramBadRequest:
        # Old messages cannot be deleted; close them in place instead
        try:
            await callback.message.edit_text(
                get_text(common.user_language(callback.from_user), "cart_closed")
            )
        except TelegramBadRequest as e:
            logger.warning("Cart message could not be closed: %s", e)
    await callback.answer()


async def cart_checkout(callback: types.CallbackQuery) -> None:
    lang = common.user_language(callback.from_user)
    logger.info(
        "Checkout tapped by user %s",
        callback.from_user.id if callback.from_user else None,
    )
    await callback.answer(get_text(lang, "cart_checkout_unavailable"), show_alert=True)


async def cart_noop(callback: types.CallbackQuery) -> None:
    await callback.answer()


def register(router: Router) -> None:
    """Register cart screen handlers on the given router."""
    router.message.register(show_cart, Command("cart"))
    router.message.register(show_cart, F.text.in_(get_button_variants("my_cart")))
    router.callback_query.register(cart_toggle_edit, F.data == CB_EDIT)
    router.callback_query.register(cart_delete_row, F.data.startswith(CB_DELETE_PREFIX))
    router.callback_query.register(cart_cancel, F.data == CB_CANCEL)
    router.callback_query.register(cart_checkout, F.data == CB_CHECKOUT)
    router.callback_query.register(cart_noop, F.data == CB_NOOP)
