from __future__ import annotations

from contextlib import contextmanager

import pytest
from playwright.sync_api import Error as PlaywrightError

from admin_errors import AdminNavigationError, InvalidArgument, NavigationBlocked, UnsupportedFeature
from OpenCartAdmin import OpenCartAdmin, validate_config
from opencart_config import DEFAULT_CONFIG, deep_merge

CATALOG_HTML = """
<table class="list">
  <tbody>
    <tr>
      <td><input type="checkbox"></td><td><img src="a.png"></td><td>Blue mug</td><td>MUG-1</td>
      <td class="right">[ <a href="index.php?route=catalog/product/update&amp;token=abc&amp;product_id=7">Edit</a> ]</td>
    </tr>
    <tr>
      <td><input type="checkbox"></td><td><img src="b.png"></td><td>Red mug</td><td>MUG-2</td>
      <td class="right">[ <a href="index.php?route=catalog/product/update&amp;token=abc&amp;product_id=8">Edit</a> ]</td>
    </tr>
  </tbody>
</table>
"""


def make_config(**overrides):
    config = {
        "base_url": "https://shop.test/some/page",
        "credentials": {"username": "admin", "password": "secret"},
        "file_manager_options": {"success_msg": "Success: Your file has been uploaded!"},
    }
    config.update(overrides)
    return config


class CatalogPage:
    def __init__(self, url: str, html: str) -> None:
        self.url = url
        self.html = html
        self.filtered = None

    def eval_on_selector(self, selector, script, arg=None):
        self.filtered = arg

    def wait_for_function(self, script, arg=None, timeout=None):
        return True

    def content(self) -> str:
        return self.html


def test_urls_are_built_from_the_base_url() -> None:
    admin = OpenCartAdmin(make_config())

    assert admin.urls["admin"] == "https://shop.test/admin/"
    assert admin.urls["dashboard"] == "https://shop.test/admin/index.php?route=common/home"
    assert admin.urls["catalog"] == "https://shop.test/admin/index.php?route=catalog/product"
    assert admin.file_manager is None


def test_defaults_are_merged_under_user_options() -> None:
    admin = OpenCartAdmin(make_config(product_page_options={"overwrite_main_image": True}))

    assert admin.product_page_options["overwrite_main_image"] is True
    assert admin.product_page_options["overwrite_description"] is False
    assert admin.gate.files_path == "route=common/filemanager/files"
    assert admin.gate.block_assets is True


def test_unknown_version_is_unsupported() -> None:
    with pytest.raises(UnsupportedFeature):
        OpenCartAdmin(make_config(), version="4.0")


@pytest.mark.parametrize(
    "config",
    [
        make_config(base_url=None),
        make_config(credentials={"username": "admin"}),
        make_config(file_manager_options={}),
        make_config(product_page_options={"overwrite_description": "yes"}),
    ],
)
def test_invalid_configs_are_rejected(config) -> None:
    with pytest.raises(InvalidArgument):
        validate_config(config, "1.5")


def test_tokenize_after_login() -> None:
    admin = OpenCartAdmin(make_config())
    admin.token = "abc"

    admin.tokenize()
    admin.tokenize()

    assert admin.urls["catalog"].endswith("route=catalog/product&token=abc")


def test_product_pages_need_a_product_id() -> None:
    admin = OpenCartAdmin(make_config())

    with pytest.raises(InvalidArgument):
        admin.nav_to("product")


def test_unknown_tab_is_unsupported() -> None:
    admin = OpenCartAdmin(make_config())

    with pytest.raises(UnsupportedFeature):
        admin.get_tab_selector("seo")


def test_extract_product_page_url_from_catalog() -> None:
    admin = OpenCartAdmin(make_config())
    admin.page = CatalogPage(admin.urls["catalog"] + "&token=abc", CATALOG_HTML)

    url = admin.extract_product_page_url("MUG-2")

    assert url == "https://shop.test/admin/index.php?route=catalog/product/update&token=abc&product_id=8"
    assert admin.page.filtered == "MUG-2"


def test_extract_product_page_url_requires_catalog() -> None:
    admin = OpenCartAdmin(make_config())
    admin.page = CatalogPage(admin.urls["dashboard"], CATALOG_HTML)

    with pytest.raises(AdminNavigationError):
        admin.extract_product_page_url("MUG-2")


def test_empty_inputs_leave_the_product_alone() -> None:
    admin = OpenCartAdmin(make_config())

    assert admin.fill_product_description("") is False
    assert admin.upload_main_product_image("") is False
    assert admin.upload_secondary_product_images([]) == []


def test_close_without_launch_is_a_no_op() -> None:
    admin = OpenCartAdmin(make_config())

    admin.close()

    assert admin.browser is None


def test_deep_merge_leaves_inputs_untouched() -> None:
    override = {"product_page_options": {"overwrite_description": True}, "block_assets": False}

    merged = deep_merge(DEFAULT_CONFIG, override)

    assert merged["product_page_options"]["overwrite_description"] is True
    assert merged["product_page_options"]["auto_delete_description"] is False
    assert merged["block_assets"] is False
    assert DEFAULT_CONFIG["product_page_options"]["overwrite_description"] is False
    assert DEFAULT_CONFIG["block_assets"] is True


class BlockedPage:
    """Page whose navigations are stopped by the browser security warning."""

    def __init__(self, url: str, error: str) -> None:
        self.url = url
        self.error = error
        self.calls: list = []

    def goto(self, url, wait_until=None):
        self.calls.append(("goto", url))
        raise PlaywrightError(self.error)

    def wait_for_selector(self, selector, timeout=None):
        self.calls.append(("wait", selector))

    def wait_for_timeout(self, timeout):
        self.calls.append(("sleep", timeout))

    @contextmanager
    def expect_navigation(self, wait_until=None):
        yield None
        self.calls.append(("navigated", wait_until))

    def evaluate(self, script, arg=None):
        self.calls.append(("evaluate", script))


def test_blocked_navigation_raises_without_bypass() -> None:
    admin = OpenCartAdmin(make_config())
    admin.page = BlockedPage("about:blank", "net::ERR_BLOCKED_BY_CLIENT at https://shop.test/admin/")

    with pytest.raises(NavigationBlocked):
        admin.nav_to("admin")

    assert admin.page.calls == [("goto", admin.urls["admin"])]


def test_blocked_navigation_proceeds_past_security_warning() -> None:
    admin = OpenCartAdmin(make_config())
    admin.page = BlockedPage("about:blank", "net::ERR_BLOCKED_BY_CLIENT at https://shop.test/admin/")

    admin.nav_to("admin", bypass_security_warning=True)

    assert ("wait", "#proceed-button") in admin.page.calls
    assert admin.page.calls[-1] == ("navigated", "domcontentloaded")


def test_other_navigation_errors_propagate() -> None:
    admin = OpenCartAdmin(make_config())
    admin.page = BlockedPage("about:blank", "net::ERR_CONNECTION_REFUSED at https://shop.test/admin/")

    with pytest.raises(PlaywrightError) as error:
        admin.nav_to("admin", bypass_security_warning=True)

    assert not isinstance(error.value, NavigationBlocked)
    assert ("wait", "#proceed-button") not in admin.page.calls
