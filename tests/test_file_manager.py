from __future__ import annotations

from pathlib import Path

import pytest
from fakes import FakePage, FakeProductPage

from admin_errors import InvalidArgument
from FileManager import FileManager
from opencart_config import VERSION_CONFIG
from RequestGate import RequestGate

SUCCESS = "Success: Your file has been uploaded!"
SELECTORS = VERSION_CONFIG["1.5"]["file_manager_selectors"]


def make_file_manager(listings=None):
    gate = RequestGate(VERSION_CONFIG["1.5"]["file_manager_files_route"])
    page = FakePage(gate, listings, success_msg=SUCCESS)
    product_page = FakeProductPage(page.log)
    return page, FileManager(page, product_page, gate, SELECTORS, SUCCESS)


def clicked(page: FakePage) -> list:
    return [entry[1] for entry in page.log if entry[0] == "click"]


def test_open_and_close() -> None:
    page, file_manager = make_file_manager()

    file_manager.open_file_manager("data", 0)
    file_manager.open_file_manager("data", 0)

    assert file_manager.is_open
    assert file_manager.cursor == ""
    assert clicked(page) == ["upload:data[0]"]

    file_manager.close_file_manager()
    file_manager.close_file_manager()

    assert not file_manager.is_open
    assert file_manager.cursor is None
    assert clicked(page) == ["upload:data[0]", SELECTORS["close_btn"]]


def test_navigate_and_upload_file() -> None:
    page, file_manager = make_file_manager({"2024/spring": ["banner.png"]})
    page.frame.entries = ["banner.png"]
    page.frame.entry_clicks["banner.png"] = lambda click_count: page.raise_dialog(SUCCESS)

    file_manager.open_file_manager("data", 0)
    file_manager.navigate("2024/spring")

    assert file_manager.listing == ["banner.png"]
    assert file_manager.upload_file("banner") is True
    assert not file_manager.is_open


def test_upload_batch_skips_missing_files(tmp_path: Path) -> None:
    page, file_manager = make_file_manager()
    first = tmp_path / "a.png"
    second = tmp_path / "b.png"
    first.write_bytes(b"a")
    second.write_bytes(b"b")
    missing = str(tmp_path / "missing.png")

    uploaded = file_manager.upload_batch([str(first), missing, str(second)])

    assert uploaded == [str(first), str(second)]
    assert page.uploads == [[str(first)], [str(second)]]
    assert clicked(page) == [
        "add:image",
        "upload:image[0]",
        SELECTORS["close_btn"],
        "add:image",
        "upload:image[1]",
        SELECTORS["close_btn"],
    ]
    assert not file_manager.is_open


def test_upload_batch_navigates_for_the_first_file_only(tmp_path: Path) -> None:
    page, file_manager = make_file_manager({"2024": []})
    paths = []
    for name in ("a.png", "b.png"):
        path = tmp_path / name
        path.write_bytes(b"x")
        paths.append(str(path))

    assert file_manager.upload_batch(paths, directory="2024") == paths

    directory_clicks = [call for call in page.frame.calls if call[:2] == ("click", '[directory="2024"]')]
    assert len(directory_clicks) == 1


def test_upload_batch_omits_unconfirmed_upload(tmp_path: Path) -> None:
    page, file_manager = make_file_manager()
    first = tmp_path / "a.png"
    second = tmp_path / "b.png"
    first.write_bytes(b"a")
    second.write_bytes(b"b")
    page.dialog_messages[str(first)] = None

    assert file_manager.upload_batch([str(first), str(second)]) == [str(second)]
    assert not file_manager.is_open


def test_upload_batch_rejects_non_string_paths() -> None:
    page, file_manager = make_file_manager()

    with pytest.raises(InvalidArgument):
        file_manager.upload_batch(["a.png", 3])

    assert page.log == []


def test_upload_batch_survives_missing_file_chooser(tmp_path: Path) -> None:
    page, file_manager = make_file_manager()
    first = tmp_path / "a.png"
    second = tmp_path / "b.png"
    first.write_bytes(b"a")
    second.write_bytes(b"b")
    page.missed_choosers = 1

    assert file_manager.upload_batch([str(first), str(second)]) == [str(second)]
    assert page.uploads == [[str(second)]]
    assert clicked(page).count(SELECTORS["close_btn"]) == 2
    assert not file_manager.is_open
