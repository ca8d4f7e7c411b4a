"""Cart screen presenter.

Binds a `Cart` to a `RowListView`, keeps the title and checkout label in
sync with the cart, and owns the Browsing/Editing toggle. The presenter is
transport-agnostic: `cart_ui` turns it into a Telegram message.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from app.core.exceptions import MissingCartException, ScreenRestoreNotSupported
from app.core.price_formatter import PriceFormatter
from app.domain.cart import Cart, Product
from localization import DEFAULT_LANGUAGE, get_text
from logging_config import logger

from .list_view import RowListView


class CartMode(str, Enum):
    """View state of the cart screen."""

    BROWSING = "browsing"
    EDITING = "editing"


@dataclass(frozen=True)
class ModeAffordances:
    action: str
    label_key: str
    rows_deletable: bool


def mode_affordances(mode: CartMode) -> ModeAffordances:
    """Right-hand action and row controls exposed in each mode."""
    if mode is CartMode.EDITING:
        return ModeAffordances(action="done", label_key="cart_done_button", rows_deletable=True)
    return ModeAffordances(action="edit", label_key="cart_edit_button", rows_deletable=False)


@dataclass(frozen=True)
class ProductRow:
    position: int
    name: str
    details: str


def make_product_row(product: Product, formatter: PriceFormatter, position: int) -> ProductRow:
    """Build the row shown for one cart product."""
    return ProductRow(
        position=position,
        name=product.name,
        details=formatter.format(product.price) or "",
    )


@dataclass
class ActionButton:
    identifier: str
    text: str
    hint: str = ""


@dataclass(frozen=True)
class GradientOverlay:
    start_point: float = 0.9
    end_point: float = 1.0
    from_rgba: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    to_rgba: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.4)
    user_interaction: bool = False


@dataclass(frozen=True)
class FloatingButtonLayout:
    left: int = 10
    right: int = 10
    bottom: int = 10
    height: int = 50


@dataclass(frozen=True)
class ScreenLayout:
    """Visual structure built once on load, back to front."""

    overlay: GradientOverlay = field(default_factory=GradientOverlay)
    checkout: FloatingButtonLayout = field(default_factory=FloatingButtonLayout)
    # keeps the last row clear of the floating checkout button
    footer_height: int = 80
    estimated_row_height: int = 60


class CartScreen:
    """Presenter for the cart screen.

    The cart is injected and shared; the screen never creates or destroys
    it and only removes entries when the user deletes a row.
    """

    SECTION_COUNT = 1

    def __init__(
        self,
        cart: Cart,
        price_formatter: PriceFormatter | None = None,
        lang: str = DEFAULT_LANGUAGE,
    ) -> None:
        if cart is None:
            raise MissingCartException()
        self.cart = cart
        self.price_formatter = price_formatter or PriceFormatter()
        self.lang = lang

        self.title = ""
        self.layout: ScreenLayout | None = None
        self.list_view: RowListView[ProductRow] = RowListView()
        self.left_action: ActionButton | None = None
        self.right_action: ActionButton | None = None
        self.checkout_button = ActionButton(
            identifier="checkout",
            text="",
            hint=get_text(lang, "cart_checkout_hint"),
        )
        self.is_loaded = False
        self.is_dismissed = False
        self._mode = CartMode.BROWSING

    @classmethod
    def from_state(cls, state: Any) -> CartScreen:
        """Screens are always built from a live cart, never from stored state."""
        raise ScreenRestoreNotSupported()

    # Lifecycle

    def load(self) -> None:
        self.layout = ScreenLayout()
        self.list_view.estimated_row_height = self.layout.estimated_row_height
        self.list_view.footer_height = self.layout.footer_height
        self.list_view.data_source = self
        self.list_view.reload_data()

        self.left_action = ActionButton(
            identifier="cancel", text=get_text(self.lang, "cart_cancel_button")
        )
        self._apply_mode(CartMode.BROWSING)
        self.is_loaded = True

    def appear(self) -> None:
        self.update_totals()

    def update_totals(self) -> None:
        self.title = get_text(self.lang, "cart_title", count=self.cart.count)
        total = self.price_formatter.format(self.cart.total_price) or ""
        self.checkout_button.text = get_text(self.lang, "cart_checkout_button", total=total)

    # Mode

    @property
    def mode(self) -> CartMode:
        return self._mode

    def set_mode(self, mode: CartMode) -> None:
        self._apply_mode(CartMode(mode))

    def toggle_editing(self) -> CartMode:
        new_mode = CartMode.BROWSING if self._mode is CartMode.EDITING else CartMode.EDITING
        self._apply_mode(new_mode)
        return new_mode

    def _apply_mode(self, mode: CartMode) -> None:
        affordances = mode_affordances(mode)
        self._mode = mode
        self.list_view.set_editing(affordances.rows_deletable)
        self.right_action = ActionButton(
            identifier=affordances.action, text=get_text(self.lang, affordances.label_key)
        )

    # Row data source

    def number_of_sections(self) -> int:
        return self.SECTION_COUNT

    def number_of_rows(self, section: int = 0) -> int:
        if section != 0:
            raise IndexError(f"Cart screen has a single section, got {section}")
        return self.cart.count

    def row_at(self, index: int, section: int = 0) -> ProductRow:
        return make_product_row(self.cart.product(index), self.price_formatter, index)

    def can_edit_row(self, index: int) -> bool:
        return True

    def visible_rows(self) -> list[ProductRow]:
        return self.list_view.visible_rows()

    # Actions

    def commit_delete(self, index: int) -> Product:
        """Remove the product at `index` from the cart and its row from the list."""
        if not self.is_loaded:
            raise RuntimeError("CartScreen.load() must run before rows can be deleted")

        with self.list_view.batch_updates():
            removed = self.cart.remove(index)
            self.update_totals()
            self.list_view.delete_rows([index])

        logger.info(
            "Cart row deleted: index=%s product=%r remaining=%s",
            index,
            removed.name,
            self.cart.count,
        )
        return removed

    def cancel(self) -> None:
        self.is_dismissed = True
