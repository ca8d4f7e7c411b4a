"""
User command handlers (start, help).
"""
from aiogram import Router, types
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext

from app.keyboards import main_menu_customer
from handlers.customer.cart import common as cart_common
from localization import get_text
from logging_config import logger

router = Router(name="commands")


@router.message(CommandStart())
async def cmd_start(message: types.Message, state: FSMContext) -> None:
    """Greet the user and show the main menu."""
    if not message.from_user:
        return

    await state.clear()
    lang = cart_common.user_language(message.from_user)
    logger.info("Start command from user %s (lang=%s)", message.from_user.id, lang)

    await message.answer(
        get_text(lang, "welcome", name=cart_common.esc(message.from_user.first_name)),
        parse_mode="HTML",
        reply_markup=main_menu_customer(lang),
    )


@router.message(Command("help"))
async def cmd_help(message: types.Message) -> None:
    lang = cart_common.user_language(message.from_user)
    await message.answer(get_text(lang, "help"), parse_mode="HTML")
