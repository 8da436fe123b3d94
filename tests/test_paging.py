import pytest

from qaforum.paging import Pager


def test_first_page_after_reset():
    pager = Pager(4)
    assert pager.reset(range(10)) == [0, 1, 2, 3]
    assert pager.current_page == 1
    assert pager.page_count == 3


def test_next_pages_and_last_partial_page():
    pager = Pager(4, range(10))
    assert pager.next_page()
    assert pager.window() == [4, 5, 6, 7]
    assert pager.next_page()
    assert pager.window() == [8, 9]
    assert not pager.next_page()
    assert pager.window() == [8, 9]
    assert pager.current_page == pager.page_count


def test_previous_page_stops_at_start():
    pager = Pager(4, range(10))
    assert not pager.previous_page()
    pager.next_page()
    assert pager.previous_page()
    assert pager.window() == [0, 1, 2, 3]


def test_go_to():
    pager = Pager(4, range(10))
    assert pager.go_to(3)
    assert pager.window() == [8, 9]
    assert not pager.go_to(3)
    assert pager.go_to(1)
    assert pager.current_page == 1


@pytest.mark.parametrize("page", [0, 4, -1])
def test_go_to_out_of_range(page):
    pager = Pager(4, range(10))
    with pytest.raises(ValueError):
        pager.go_to(page)


def test_windows_cover_all_items_once():
    pager = Pager(3, range(11))
    seen = list(pager.window())
    while pager.next_page():
        seen.extend(pager.window())
    assert seen == list(range(11))


def test_empty_pager():
    pager = Pager(5)
    assert pager.window() == []
    assert pager.page_count == 0
    assert not pager.next_page()


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        Pager(0)