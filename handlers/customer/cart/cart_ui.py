"""
Cart UI components - screen text and keyboard builders.

Draws a `CartScreen` as one Telegram message: the text lists the rows,
the inline keyboard carries the navigation actions, the row controls and
the checkout button.
"""
from __future__ import annotations

from aiogram.utils.keyboard import InlineKeyboardBuilder

from localization import get_text

from .common import esc
from .screen import CartScreen, ProductRow

CB_CANCEL = "cart_cancel"
CB_EDIT = "cart_edit"
CB_CHECKOUT = "cart_checkout"
CB_NOOP = "cart_noop"
CB_DELETE_PREFIX = "cart_delete_"

ROW_LABEL_MAX = 25
ROW_NAME_MAX = 64
DIVIDER = "─" * 25

# Telegram limits: 4096 characters of message text, 100 inline buttons
MESSAGE_TEXT_MAX = 4096
LISTED_ROWS_MAX = 40
TEXT_TAIL_RESERVE = 256


def delete_callback(revision: int, index: int) -> str:
    return f"{CB_DELETE_PREFIX}{revision}_{index}"


def parse_delete_callback(data: str | None) -> tuple[int, int]:
    """Return the `(revision, index)` pair encoded in a delete callback.

    Raises ValueError for anything that is not a delete callback with a
    non-negative revision and index.
    """
    if not data or not data.startswith(CB_DELETE_PREFIX):
        raise ValueError(f"Not a cart delete callback: {data!r}")
    revision_part, sep, index_part = data[len(CB_DELETE_PREFIX):].partition("_")
    if not sep:
        raise ValueError(f"Cart delete callback without revision: {data!r}")
    revision, index = int(revision_part), int(index_part)
    if revision < 0 or index < 0:
        raise ValueError(f"Negative revision or row index: {data!r}")
    return revision, index


def _short(text: str, limit: int = ROW_LABEL_MAX) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def _listed_rows(screen: CartScreen) -> list[ProductRow]:
    return screen.visible_rows()[:LISTED_ROWS_MAX]


def build_cart_text(screen: CartScreen) -> str:
    """Build cart screen text.

    Long carts are cut short with a "more items" line so the message stays
    within Telegram's text limit.
    """
    lang = screen.lang
    lines: list[str] = [f"🛒 <b>{esc(screen.title)}</b>"]

    rows = screen.visible_rows()
    if not rows:
        lines.append("")
        lines.append(get_text(lang, "cart_empty"))
        lines.append(f"<i>{esc(get_text(lang, 'cart_empty_hint'))}</i>")
        return "\n".join(lines)

    length = len(lines[0])
    listed = 0
    for row in _listed_rows(screen):
        block = [f"\n<b>{row.position + 1}. {esc(_short(row.name, ROW_NAME_MAX))}</b>"]
        if row.details:
            block.append(f"   {esc(row.details)}")
        block_length = sum(len(line) + 1 for line in block)
        if length + block_length > MESSAGE_TEXT_MAX - TEXT_TAIL_RESERVE:
            break
        lines.extend(block)
        length += block_length
        listed += 1

    if listed < len(rows):
        more = get_text(lang, "cart_more_rows", count=len(rows) - listed)
        lines.append(f"\n<i>{esc(more)}</i>")

    # Footer spacer below the last row
    if screen.list_view.footer_height:
        lines.append("\n" + DIVIDER)

    return "\n".join(lines)


def build_cart_keyboard(screen: CartScreen) -> InlineKeyboardBuilder:
    """Build cart screen keyboard.

    Layout: [Cancel] [Edit|Done], one row per product (with a delete
    button while editing), then the checkout button.
    """
    kb = InlineKeyboardBuilder()
    adjust_pattern: list[int] = []

    if screen.left_action:
        kb.button(text=screen.left_action.text, callback_data=CB_CANCEL)
    if screen.right_action:
        kb.button(text=screen.right_action.text, callback_data=CB_EDIT)
    adjust_pattern.append(int(screen.left_action is not None) + int(screen.right_action is not None))

    editing = screen.list_view.is_editing
    for row in _listed_rows(screen):
        label = f"{row.position + 1}. {_short(row.name)}"
        if row.details:
            label = f"{label} · {row.details}"
        kb.button(text=label, callback_data=CB_NOOP)
        if editing and screen.can_edit_row(row.position):
            kb.button(
                text=get_text(screen.lang, "cart_delete_button"),
                callback_data=delete_callback(screen.cart.revision, row.position),
            )
            adjust_pattern.append(2)
        else:
            adjust_pattern.append(1)

    kb.button(text=screen.checkout_button.text, callback_data=CB_CHECKOUT)
    adjust_pattern.append(1)

    kb.adjust(*[size for size in adjust_pattern if size])
    return kb
