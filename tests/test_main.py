from __future__ import annotations

from pathlib import Path

import pytest

import main
from admin_errors import ListingTimeout
from OpenCartAdmin import validate_config


class RecordingAdmin:
    def __init__(self, error=None, uploaded=None) -> None:
        self.error = error
        self.uploaded = uploaded
        self.calls: list = []

    def fill_product_page(self, product_id, description, image_paths, dir_path=None):
        self.calls.append((product_id, description, image_paths, dir_path))
        if self.error is not None:
            raise self.error
        return image_paths if self.uploaded is None else self.uploaded


def test_parse_full_product_line() -> None:
    product = main.parse_product_line("MUG-1 | /2024/spring/ | mug.txt | mug-front.png, mug-back.png\n")

    assert product == {
        "id": "MUG-1",
        "directory": "2024/spring",
        "description_file": "mug.txt",
        "images": ["mug-front.png", "mug-back.png"],
    }


def test_parse_id_only_line() -> None:
    assert main.parse_product_line("MUG-2") == {"id": "MUG-2", "directory": None, "description_file": None, "images": []}


@pytest.mark.parametrize("line", ["", "   \n", "# MUG-3 | x | y | z"])
def test_ignored_lines(line: str) -> None:
    assert main.parse_product_line(line) is None


def test_load_and_remove_products(tmp_path: Path) -> None:
    input_file = tmp_path / "products.txt"
    input_file.write_text("# jobs\nMUG-1 | a\n\nMUG-2 | b\nMUG-1 | c\n", encoding="utf-8")

    products = main.load_products_to_process(str(input_file))
    assert [product["id"] for product in products] == ["MUG-1", "MUG-2", "MUG-1"]

    assert main.remove_product_line_from_input_file("MUG-1", str(input_file)) is True
    assert input_file.read_text(encoding="utf-8") == "# jobs\n\nMUG-2 | b\nMUG-1 | c\n"
    assert main.remove_product_line_from_input_file("MUG-9", str(input_file)) is False


def test_missing_input_file_has_no_products(tmp_path: Path) -> None:
    assert main.load_products_to_process(str(tmp_path / "nope.txt")) == []


def test_build_admin_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENCART_BASE_URL", "https://shop.test")
    monkeypatch.setenv("OPENCART_USERNAME", "admin")
    monkeypatch.setenv("OPENCART_PASSWORD", "secret")
    monkeypatch.setenv("OPENCART_SUCCESS_MSG", "Success")
    monkeypatch.setenv("OPENCART_OVERWRITE_MAIN_IMAGE", "True")
    monkeypatch.delenv("OPENCART_VERSION", raising=False)

    config, version = main.build_admin_config()

    validate_config(config, version)
    assert version == "1.5"
    assert config["credentials"] == {"username": "admin", "password": "secret"}
    assert config["product_page_options"]["overwrite_main_image"] is True
    assert config["product_page_options"]["overwrite_description"] is False


def test_process_product_reads_description(tmp_path: Path) -> None:
    description = tmp_path / "mug.txt"
    description.write_text("A sturdy mug.\n", encoding="utf-8")
    image = tmp_path / "mug.png"
    image.write_bytes(b"x")
    admin = RecordingAdmin()
    product = {"id": "MUG-1", "directory": "mugs", "description_file": str(description), "images": [str(image)]}

    assert main.process_product(admin, product) is True
    assert admin.calls == [("MUG-1", "A sturdy mug.", [str(image)], "mugs")]


def test_process_product_reports_failures() -> None:
    admin = RecordingAdmin(error=ListingTimeout("listing of 'mugs' did not arrive"))
    product = {"id": "MUG-1", "directory": "mugs", "description_file": None, "images": []}

    assert main.process_product(admin, product) is False


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(5, "5s"), (65, "1m 5s"), (3725, "1h 2m 5s"), (90061, "1d 1h 1m 1s")],
)
def test_calculate_execution_time(seconds: int, expected: str) -> None:
    assert main.calculate_execution_time(seconds) == expected
