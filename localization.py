# Localization for the cart bot

from logging_config import logger

DEFAULT_LANGUAGE = "en"

LANGUAGES = {"en": "🇬🇧 English", "ru": "🇷🇺 Русский", "uz": "🇺🇿 O'zbekcha"}

TEXTS = {
    "en": {
        "welcome": "👋 <b>Hi, {name}!</b>\n\nAdd products with /add and open your cart with /cart.",
        "help": "<b>Commands</b>\n/add Widget 9.99 - add a product\n/cart - open the cart\n/clear - empty the cart",
        # Reply keyboard
        "my_cart": "🛒 Cart",
        # Cart screen
        "cart_title": "Cart ({count})",
        "cart_empty": "Your cart is empty",
        "cart_empty_hint": "Add products with /add <name> <price>",
        "cart_cancel_button": "✖️ Cancel",
        "cart_edit_button": "✏️ Edit",
        "cart_done_button": "✅ Done",
        "cart_delete_button": "🗑",
        "cart_checkout_button": "Check out ({total})",
        "cart_checkout_hint": "Purchase the items in the cart",
        "cart_checkout_unavailable": "Checkout is not available yet",
        "cart_item_missing": "This item is no longer in the cart",
        "cart_more_rows": "… and {count} more",
        "cart_item_removed": "Removed: {name}",
        "cart_closed": "Cart closed",
        # Cart commands
        "cart_added": "✅ {name} added to cart ({price})",
        "cart_add_usage": "Usage: /add <name> <price>\nExample: /add Widget 9.99",
        "cart_add_invalid_price": "❌ Price must be a non-negative number",
        "cart_cleared": "🗑 Cart cleared",
        "error": "❌ Error",
    },
    "ru": {
        "welcome": "👋 <b>Привет, {name}!</b>\n\nДобавляйте товары командой /add и открывайте корзину командой /cart.",
        "help": "<b>Команды</b>\n/add Хлеб 9.99 - добавить товар\n/cart - открыть корзину\n/clear - очистить корзину",
        "my_cart": "🛒 Корзина",
        "cart_title": "Корзина ({count})",
        "cart_empty": "Корзина пуста",
        "cart_empty_hint": "Добавьте товар командой /add <название> <цена>",
        "cart_cancel_button": "✖️ Отмена",
        "cart_edit_button": "✏️ Изменить",
        "cart_done_button": "✅ Готово",
        "cart_delete_button": "🗑",
        "cart_checkout_button": "Оформить ({total})",
        "cart_checkout_hint": "Купить товары из корзины",
        "cart_checkout_unavailable": "Оформление заказа пока недоступно",
        "cart_item_missing": "Этого товара уже нет в корзине",
        "cart_more_rows": "… и ещё {count}",
        "cart_item_removed": "Удалено: {name}",
        "cart_closed": "Корзина закрыта",
        "cart_added": "✅ {name} добавлен в корзину ({price})",
        "cart_add_usage": "Использование: /add <название> <цена>\nПример: /add Хлеб 9.99",
        "cart_add_invalid_price": "❌ Цена должна быть неотрицательным числом",
        "cart_cleared": "🗑 Корзина очищена",
        "error": "❌ Ошибка",
    },
    "uz": {
        "welcome": "👋 <b>Salom, {name}!</b>\n\nMahsulotlarni /add bilan qo'shing, savatni /cart bilan oching.",
        "help": "<b>Buyruqlar</b>\n/add Non 9.99 - mahsulot qo'shish\n/cart - savatni ochish\n/clear - savatni tozalash",
        "my_cart": "🛒 Savat",
        "cart_title": "Savat ({count})",
        "cart_empty": "Savat bo'sh",
        "cart_empty_hint": "Mahsulot qo'shish: /add <nomi> <narxi>",
        "cart_cancel_button": "✖️ Bekor qilish",
        "cart_edit_button": "✏️ Tahrirlash",
        "cart_done_button": "✅ Tayyor",
        "cart_delete_button": "🗑",
        "cart_checkout_button": "Rasmiylashtirish ({total})",
        "cart_checkout_hint": "Savatdagi mahsulotlarni sotib olish",
        "cart_checkout_unavailable": "Buyurtma berish hozircha mavjud emas",
        "cart_item_missing": "Bu mahsulot savatda yo'q",
        "cart_more_rows": "… yana {count} ta",
        "cart_item_removed": "O'chirildi: {name}",
        "cart_closed": "Savat yopildi",
        "cart_added": "✅ {name} savatga qo'shildi ({price})",
        "cart_add_usage": "Foydalanish: /add <nomi> <narxi>\nMisol: /add Non 9.99",
        "cart_add_invalid_price": "❌ Narx manfiy bo'lmagan son bo'lishi kerak",
        "cart_cleared": "🗑 Savat tozalandi",
        "error": "❌ Xatolik",
    },
}


def get_text(lang: str, key: str, **kwargs: object) -> str:
    """Return the text for `key` in `lang`, formatted with kwargs.

    Falls back to the default language and finally to the key itself.
    """
    texts = TEXTS.get(lang, TEXTS[DEFAULT_LANGUAGE])
    text = texts.get(key, key)

    if text == key and lang != DEFAULT_LANGUAGE:
        text = TEXTS[DEFAULT_LANGUAGE].get(key, key)

    if kwargs and text != key:
        try:
            return text.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.warning("Format error in get_text: %s, key=%s, lang=%s", e, key, lang)
            return text

    return text


def get_language_name(lang: str) -> str:
    """Return the display name of a language."""
    return LANGUAGES.get(lang, LANGUAGES[DEFAULT_LANGUAGE])


def resolve_language(language_code: str | None, default: str = DEFAULT_LANGUAGE) -> str:
    """Map a Telegram language_code (e.g. 'ru-RU') to a supported language."""
    if not language_code:
        return default
    code = language_code.split("-")[0].strip().lower()
    return code if code in TEXTS else default


def get_button_variants(key: str) -> list[str]:
    """All translations of a button label, used for reply keyboard matching."""
    return [texts[key] for texts in TEXTS.values() if key in texts]
