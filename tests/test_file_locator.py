from __future__ import annotations

import pytest
from fakes import FakeFrame

from admin_errors import ListingTimeout, SessionClosed
from FileLocator import NOT_FOUND, FileLocator
from FileManagerState import FileManagerState
from RequestGate import RequestGate

LIST_SELECTOR = "#column-right a"


def make_locator(entries, listing=None):
    state = FileManagerState(RequestGate("route=common/filemanager/files"))
    frame = FakeFrame(entries=entries, list_selector=LIST_SELECTOR)
    state.open(frame)
    state.listing = listing
    return frame, FileLocator(state, LIST_SELECTOR)


@pytest.mark.parametrize(("file_name", "index"), [("cat.png", 0), ("dog", 1), ("dog.jpg", 1), ("/home/me/dog.jpg", 1)])
def test_locate_known_files(file_name: str, index: int) -> None:
    _, locator = make_locator(["cat.png", "dog.jpg"], listing=["cat.png", "dog.jpg"])

    assert locator.locate(file_name) == index


def test_prefix_is_not_a_match() -> None:
    frame, locator = make_locator(["cat.png", "dog.jpg"], listing=["cat.png", "dog.jpg"])

    assert locator.locate("do") == NOT_FOUND
    assert frame.calls == []


def test_unlisted_file_needs_no_frame_access() -> None:
    frame, locator = make_locator(["cat.png", "dog.jpg"], listing=["cat.png", "dog.jpg"])

    assert locator.locate("frog.png") == NOT_FOUND
    assert frame.calls == []


def test_without_listing_the_page_is_asked() -> None:
    frame, locator = make_locator(["cat.png", "dog.jpg"])

    assert locator.locate("dog") == 1
    assert ("wait_function", "dog") in frame.calls


def test_without_listing_a_missing_file_times_out() -> None:
    _, locator = make_locator(["cat.png"])

    with pytest.raises(ListingTimeout):
        locator.locate("frog")


def test_select_file_clicks_the_entry() -> None:
    frame, locator = make_locator(["cat.png", "dog.jpg"], listing=["cat.png", "dog.jpg"])

    assert locator.select_file("dog") is True

    assert ("scroll", 1) in frame.calls
    assert frame.calls[-1] == ("click", "dog.jpg", 1)


def test_select_missing_file() -> None:
    _, locator = make_locator(["cat.png"], listing=["cat.png"])

    assert locator.select_file("frog.png") is False


def test_get_file_requires_open_session() -> None:
    _, locator = make_locator(["cat.png"], listing=["cat.png"])
    locator.state.close()

    with pytest.raises(SessionClosed):
        locator.get_file("cat.png")
