import pytest

from logic.paging import Paging, page_window


def test_paging_offsets_and_links():
    paging = Paging(page=3, per_page=10, total_rows=95)

    assert paging.num_pages == 10
    assert paging.offset == 20
    assert paging.start_link == 1
    assert paging.end_link == 10
    assert paging.prev_page == 2
    assert paging.next_page == 4


def test_paging_clamps_page_and_handles_empty_result():
    empty = Paging(page=5, per_page=10, total_rows=0)
    assert empty.num_pages == 1
    assert empty.page == 1
    assert empty.offset == 0
    assert empty.prev_page is None
    assert empty.next_page is None

    assert Paging(page=0, per_page=10, total_rows=30).page == 1
    assert Paging(page=99, per_page=10, total_rows=30).page == 3


def test_paging_rejects_non_positive_per_page():
    with pytest.raises(ValueError):
        Paging(page=1, per_page=0, total_rows=5)


def test_page_window_is_clipped_to_links():
    paging = Paging(page=1, per_page=5, total_rows=100)

    assert page_window(paging, 1) == [1, 2, 3, 4]
    assert page_window(paging, 10) == [7, 8, 9, 10, 11, 12, 13]
    assert page_window(paging, 20) == [17, 18, 19, 20]
    assert page_window(paging, 10, paging_range=1) == [9, 10, 11]
