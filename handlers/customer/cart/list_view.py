"""Section-based row list model backing the cart screen keyboard.

Keeps its own snapshot of row counts and checks it against the data source
after every batch of updates, so a row removed from the data without being
removed from the list (or the other way round) is caught immediately.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Generic, Protocol, TypeVar

from app.core.exceptions import ListConsistencyError

RowT = TypeVar("RowT", covariant=True)


class RowDataSource(Protocol[RowT]):
    def number_of_sections(self) -> int: ...

    def number_of_rows(self, section: int) -> int: ...

    def row_at(self, index: int, section: int = 0) -> RowT: ...


class RowListView(Generic[RowT]):
    """Rows grouped in sections with an editing flag and batched deletes."""

    def __init__(self, estimated_row_height: int = 60, footer_height: int = 0) -> None:
        self.estimated_row_height = estimated_row_height
        self.footer_height = footer_height
        self.data_source: RowDataSource[RowT] | None = None
        self._row_counts: list[int] = []
        self._editing = False
        self._update_depth = 0

    @property
    def is_editing(self) -> bool:
        return self._editing

    def set_editing(self, editing: bool) -> None:
        self._editing = bool(editing)

    def reload_data(self) -> None:
        if self.data_source is None:
            self._row_counts = []
            return
        self._row_counts = [
            self.data_source.number_of_rows(section)
            for section in range(self.data_source.number_of_sections())
        ]

    def number_of_sections(self) -> int:
        return len(self._row_counts)

    def number_of_rows(self, section: int = 0) -> int:
        return self._row_counts[section]

    def begin_updates(self) -> None:
        self._update_depth += 1

    def end_updates(self) -> None:
        if self._update_depth == 0:
            raise RuntimeError("end_updates() called without begin_updates()")
        self._update_depth -= 1
        if self._update_depth == 0:
            self._verify()

    @contextmanager
    def batch_updates(self) -> Iterator[None]:
        self.begin_updates()
        try:
            yield
        except BaseException:
            # the batch did not complete; skip verification and re-raise
            self._update_depth -= 1
            raise
        self.end_updates()

    def delete_rows(self, indexes: Iterable[int], section: int = 0) -> None:
        rows = sorted(set(indexes))
        count = self._row_counts[section]
        for index in rows:
            if index < 0 or index >= count:
                raise ListConsistencyError(
                    section,
                    count,
                    count,
                    message=f"Cannot delete row {index} in section {section} of {count} row(s)",
                )
        self._row_counts[section] = count - len(rows)
        if self._update_depth == 0:
            self._verify()

    def visible_rows(self, section: int = 0) -> list[RowT]:
        if self.data_source is None or not self._row_counts:
            return []
        return [
            self.data_source.row_at(index, section)
            for index in range(self._row_counts[section])
        ]

    def _verify(self) -> None:
        if self.data_source is None:
            return
        for section, expected in enumerate(self._row_counts):
            actual = self.data_source.number_of_rows(section)
            if actual != expected:
                raise ListConsistencyError(section, expected, actual)
