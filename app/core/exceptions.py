"""Custom exceptions for the cart bot."""
from __future__ import annotations


class CartBotException(Exception):
    """Base exception for all cart bot errors."""

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message


class ValidationException(CartBotException):
    """Input validation errors."""

    pass


class CartIndexError(CartBotException, IndexError):
    """Cart position outside the current contents."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"Cart index {index} out of range for {count} item(s)")
        self.index = index
        self.count = count


class MissingCartException(CartBotException):
    """Screen constructed without a cart."""

    def __init__(self) -> None:
        super().__init__("Cart screen requires a cart")


class ScreenRestoreNotSupported(CartBotException):
    """Cart screen cannot be rebuilt from serialized state."""

    def __init__(self) -> None:
        super().__init__("Cart screen cannot be restored from stored state; pass a cart instead")


class ListConsistencyError(CartBotException):
    """Row list and its data source disagree on the number of rows."""

    def __init__(
        self, section: int, expected: int, actual: int, message: str | None = None
    ) -> None:
        super().__init__(
            message
            or f"Invalid row count in section {section}: list has {expected}, "
            f"data source has {actual}"
        )
        self.section = section
        self.expected = expected
        self.actual = actual


class ConfigurationException(CartBotException):
    """Configuration errors."""

    pass
