"""Tests for the RowListView model."""
from __future__ import annotations

import pytest

from app.core.exceptions import ListConsistencyError
from handlers.customer.cart.list_view import RowListView


class FakeDataSource:
    def __init__(self, rows: list[str]) -> None:
        self.rows = rows

    def number_of_sections(self) -> int:
        return 1

    def number_of_rows(self, section: int) -> int:
        return len(self.rows)

    def row_at(self, index: int, section: int = 0) -> str:
        return self.rows[index]


@pytest.fixture
def source() -> FakeDataSource:
    return FakeDataSource(["a", "b", "c"])


@pytest.fixture
def list_view(source: FakeDataSource) -> RowListView[str]:
    view: RowListView[str] = RowListView(estimated_row_height=60, footer_height=80)
    view.data_source = source
    view.reload_data()
    return view


def test_without_data_source_is_empty() -> None:
    view: RowListView[str] = RowListView()
    view.reload_data()

    assert view.number_of_sections() == 0
    assert view.visible_rows() == []


def test_reload_snapshots_counts(list_view: RowListView[str], source: FakeDataSource) -> None:
    assert list_view.number_of_rows(0) == 3

    source.rows.append("d")
    assert list_view.number_of_rows(0) == 3

    list_view.reload_data()
    assert list_view.number_of_rows(0) == 4


def test_visible_rows(list_view: RowListView[str]) -> None:
    assert list_view.visible_rows() == ["a", "b", "c"]


def test_editing_flag(list_view: RowListView[str]) -> None:
    assert list_view.is_editing is False
    list_view.set_editing(True)
    assert list_view.is_editing is True


def test_lockstep_delete_passes(list_view: RowListView[str], source: FakeDataSource) -> None:
    with list_view.batch_updates():
        source.rows.pop(1)
        list_view.delete_rows([1])

    assert list_view.visible_rows() == ["a", "c"]


def test_delete_without_data_change_is_rejected(list_view: RowListView[str]) -> None:
    with pytest.raises(ListConsistencyError) as exc_info:
        with list_view.batch_updates():
            list_view.delete_rows([0])

    assert exc_info.value.expected == 2
    assert exc_info.value.actual == 3


def test_data_change_without_delete_is_rejected(
    list_view: RowListView[str], source: FakeDataSource
) -> None:
    with pytest.raises(ListConsistencyError):
        with list_view.batch_updates():
            source.rows.pop(0)


def test_unbatched_delete_is_verified_immediately(
    list_view: RowListView[str], source: FakeDataSource
) -> None:
    source.rows.pop()
    list_view.delete_rows([2])

    assert list_view.number_of_rows(0) == 2


def test_delete_out_of_range_row(list_view: RowListView[str]) -> None:
    with pytest.raises(ListConsistencyError):
        list_view.delete_rows([3])
    assert list_view.number_of_rows(0) == 3


def test_failed_batch_skips_verification(list_view: RowListView[str]) -> None:
    with pytest.raises(KeyError):
        with list_view.batch_updates():
            raise KeyError("boom")

    # depth was unwound, so a later batch still verifies normally
    with list_view.batch_updates():
        pass


def test_end_updates_without_begin(list_view: RowListView[str]) -> None:
    with pytest.raises(RuntimeError):
        list_view.end_updates()
