"""User-specific keyboards."""
from __future__ import annotations

from aiogram.types import ReplyKeyboardMarkup
from aiogram.utils.keyboard import ReplyKeyboardBuilder

from localization import get_text


def main_menu_customer(lang: str = "en") -> ReplyKeyboardMarkup:
    """Main menu for customers - a single cart button."""
    builder = ReplyKeyboardBuilder()
    builder.button(text=get_text(lang, "my_cart"))
    builder.adjust(1)
    return builder.as_markup(resize_keyboard=True)
