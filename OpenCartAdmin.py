"""
================================================================================
OpenCart Admin
================================================================================
Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    This module provides the OpenCartAdmin class for automating administrative
    tasks of an OpenCart-based website through a headless Chromium browser.
    It logs in as admin, finds products in the catalog, and fills product pages
    with descriptions and images uploaded through the OpenCart file manager.

    Key features include:
        - Browser launch with request interception (file listing gate, asset blocking)
        - Admin login and session token handling
        - Navigation to admin pages, product pages and product page tabs
        - Bypass of the browser security warning page
        - Product description filling and deletion
        - Main and secondary product image upload and deletion
        - One-call product page filling (description + uploads + save)

Usage:
    1. Create an instance with the website configuration:
            admin = OpenCartAdmin({
                "base_url": "https://shop.example",
                "credentials": {"username": "admin", "password": "secret"},
                "file_manager_options": {"success_msg": "Success: Your file has been uploaded!"},
            })
    2. Launch the browser and log in:
            admin.start()
    3. Fill a product page:
            admin.fill_product_page("SKU-1", "Description", ["./Images/a.png"], "2024/spring")
    4. Close the browser:
            admin.close()

Dependencies:
    - Python >= 3.8
    - playwright
    - beautifulsoup4
    - colorama

Assumptions & Notes:
    - Every instance drives its own browser; instances are independent.
    - Selectors and paths come from opencart_config.VERSION_CONFIG.
    - Admin page structure may change between OpenCart versions.
"""


import os  # Environment variables
from FileManager import FileManager  # File manager automation
from RequestGate import RequestGate  # File listing request filter
from admin_errors import AdminNavigationError, InvalidArgument, NavigationBlocked, UnsupportedFeature  # Typed errors
from bs4 import BeautifulSoup  # Parse the catalog table
from colorama import Style  # For coloring the terminal
from opencart_config import DEFAULT_CONFIG, VERSION_CONFIG, deep_merge  # Configuration tables
from playwright.sync_api import sync_playwright, Error as PlaywrightError  # Browser automation framework
from typing import Any, Dict, List, Optional  # Type hints
from url_utils import extract_token, get_base_url, tokenize_url  # Admin URL helpers
from urllib.parse import urljoin  # Relative URL resolution
from validation_utils import validate_type  # Eager argument checks


# Macros:
class BackgroundColors:  # Colors for the terminal
    CYAN = "\033[96m"  # Cyan
    GREEN = "\033[92m"  # Green
    YELLOW = "\033[93m"  # Yellow
    RED = "\033[91m"  # Red
    BOLD = "\033[1m"  # Bold
    UNDERLINE = "\033[4m"  # Underline
    CLEAR_TERMINAL = "\033[H\033[J"  # Clear the terminal


# Execution Constants:
VERBOSE = False  # Set to True to output verbose messages

# Browser Constants:
HEADLESS = os.getenv("HEADLESS", "True").lower() == "true"  # Headless mode flag
CHROME_EXECUTABLE_PATH = os.getenv("CHROME_EXECUTABLE_PATH", "")  # Path to Chrome executable
BROWSER_ARGS = ["--disable-gpu", "--ignore-certificate-errors"]  # Chromium launch arguments
PAGE_LOAD_TIMEOUT = 30000  # Milliseconds to wait for a page navigation
SECURITY_WARNING_DELAY = 1000  # Milliseconds to wait before proceeding past the security warning

# Error Constants:
BLOCKED_BY_CLIENT_ERROR = "net::ERR_BLOCKED_BY_CLIENT"  # Navigation blocked by the browser itself

# Page Scripts:
FILL_CREDENTIALS_SCRIPT = """([selectors, credentials]) => {
    document.querySelector(selectors.username).value = credentials.username;
    document.querySelector(selectors.password).value = credentials.password;
}"""  # Fills the login form

FILTER_MODEL_SCRIPT = """(input, id) => {
    input.value = id;
    input.dispatchEvent(new KeyboardEvent('keydown', { key: 'Enter', keyCode: 13, bubbles: true }));
}"""  # Filters the catalog by product model

FIND_PRODUCT_ROW_SCRIPT = """([id, selectors]) => {
    return Array.from(document.querySelectorAll(selectors.table_rows)).some(row => {
        const modelCell = row.querySelector(selectors.model_cell);
        return modelCell !== null && modelCell.textContent.trim() === id;
    });
}"""  # True once the filtered catalog shows the product

IS_TAB_SELECTED_SCRIPT = """element => element.className.includes('selected')"""  # Whether a tab is the current one

WAIT_TAB_SELECTED_SCRIPT = """selector => {
    const tab = document.querySelector(selector);
    return tab !== null && tab.className.includes('selected');
}"""  # True once a tab is the current one

HAS_IMAGE_SCRIPT = """(element, placeholder) => element.getAttribute('src') !== placeholder"""  # Whether a slot holds an image

HAS_ANY_IMAGE_SCRIPT = """(elements, placeholder) => elements.some(element => element.getAttribute('src') !== placeholder)"""  # Whether any slot holds an image

IS_PLACEHOLDER_SCRIPT = """([selector, placeholder]) => {
    const image = document.querySelector(selector);
    return image !== null && image.getAttribute('src') === placeholder;
}"""  # True once the main image is back to the placeholder

SLOT_BUTTON_EXISTS_SCRIPT = """([selector, index]) => document.querySelectorAll(selector).length > index"""  # True once a slot button is rendered


# Functions Definitions:


def verbose_output(true_string="", false_string=""):
    """
    Outputs a message if the VERBOSE constant is set to True.

    :param true_string: The string to be outputted if the VERBOSE constant is set to True.
    :param false_string: The string to be outputted if the VERBOSE constant is set to False.
    :return: None
    """

    if VERBOSE and true_string != "":  # If VERBOSE is True and a true_string was provided
        print(true_string)  # Output the true statement string
    elif false_string != "":  # If a false_string was provided
        print(false_string)  # Output the false statement string


def validate_config(config, version):
    """
    Validate the user configuration of OpenCartAdmin.

    :param config: User configuration dictionary
    :param version: OpenCart version string
    :return: None
    """

    validate_type("config", "dict", config)
    validate_type("config.base_url", "string", config.get("base_url"))
    validate_type("config.credentials", "dict", config.get("credentials"))
    validate_type("config.credentials.username", "string", config["credentials"].get("username"))
    validate_type("config.credentials.password", "string", config["credentials"].get("password"))
    validate_type("config.file_manager_options", "dict", config.get("file_manager_options"))
    validate_type("config.file_manager_options.success_msg", "string", config["file_manager_options"].get("success_msg"))
    validate_type("config.product_page_options", "dict", config.get("product_page_options"), optional=True)

    for option_name, option_value in (config.get("product_page_options") or {}).items():  # Every option is a flag
        validate_type(f"config.product_page_options.{option_name}", "boolean", option_value)

    validate_type("config.placeholder_image", "string", config.get("placeholder_image"), optional=True)
    validate_type("version", "string", version)

    if version not in VERSION_CONFIG:  # No selectors for it
        raise UnsupportedFeature(f"OpenCart version {version} is not supported")


# Classes Definitions:

class OpenCartAdmin:
    """
    Automates the admin panel of an OpenCart-based website.

    :return: None
    """


    def __init__(self, config: Dict[str, Any], version: str = "1.5") -> None:
        """
        Initializes the automation for a website. No browser is launched yet.

        :param config: Website configuration (base_url, credentials, file_manager_options, product_page_options, placeholder_image)
        :param version: Supported OpenCart version (see opencart_config.VERSION_CONFIG)
        :return: None
        """

        validate_config(config, version)

        self.version = version  # OpenCart version
        self.config = deep_merge(deep_merge(DEFAULT_CONFIG, config), VERSION_CONFIG[version])  # Defaults < user < version
        self.config["base_url"] = get_base_url(self.config["base_url"])  # Keep scheme://host only

        self.playwright = None  # Placeholder for Playwright instance
        self.browser = None  # Placeholder for browser instance
        self.page = None  # Placeholder for page object
        self.token = ""  # Admin session token
        self.gate = RequestGate(self.config["file_manager_files_route"], self.config["block_assets"])  # File listing filter
        self.file_manager = None  # FileManager, available once the browser is launched

        admin_url = urljoin(self.config["base_url"] + "/", "admin/")  # Admin root
        self.urls = {"admin": admin_url}  # Absolute URLs of the supported pages
        for page_name, page_path in self.config["paths"].items():  # Resolve every admin page
            self.urls[page_name] = urljoin(admin_url, page_path)

        self.credentials = self.config["credentials"]  # Admin credentials
        self.product_page_options = self.config["product_page_options"]  # Overwrite/auto-delete flags
        self.login_selectors = self.config["login_selectors"]  # Login form
        self.catalog_selectors = self.config["catalog_selectors"]  # Catalog table
        self.product_page_selectors = self.config["product_page_selectors"]  # Product form

        verbose_output(f"{BackgroundColors.GREEN}OpenCart admin initialized for {BackgroundColors.CYAN}{self.config['base_url']}{Style.RESET_ALL}")


    def launch(self, headless: bool = HEADLESS, **options) -> None:
        """
        Launches a browser, opens a page and installs the request interception.

        Nothing happens if the browser is already launched.

        :param headless: Headless mode flag
        :param options: Extra Playwright launch options
        :return: None
        """

        if self.browser:  # One browser per instance
            return

        verbose_output(f"{BackgroundColors.GREEN}Launching Chromium browser...{Style.RESET_ALL}")
        launch_options = {"headless": headless, "args": list(BROWSER_ARGS)}  # Base launch options
        if CHROME_EXECUTABLE_PATH:  # Verify if custom Chrome executable path is provided
            launch_options["executable_path"] = CHROME_EXECUTABLE_PATH
        launch_options.update(options)  # Caller overrides win

        self.playwright = sync_playwright().start()  # Start Playwright
        self.browser = self.playwright.chromium.launch(**launch_options)  # Launch Chromium
        context = self.browser.new_context(ignore_https_errors=True, bypass_csp=True, no_viewport=True)  # Admin panels often use self-signed certificates
        self.page = context.new_page()  # Single page for the whole session
        self.page.set_default_timeout(PAGE_LOAD_TIMEOUT)  # Default wait budget
        self.page.route("**/*", self.gate.handle_route)  # Every request goes through the gate

        fm_options = self.config["file_manager_options"]  # File manager options
        self.file_manager = FileManager(
            self.page,
            self,
            self.gate,
            self.config["file_manager_selectors"],
            fm_options["success_msg"],
            max_click_attempts=fm_options.get("max_click_attempts"),
        )

        verbose_output(f"{BackgroundColors.GREEN}Browser launched successfully.{Style.RESET_ALL}")


    def start(self, page_name: str = "admin", **options) -> None:
        """
        Launches the browser and logs in as admin.

        :param page_name: Page to start with
        :param options: Extra Playwright launch options
        :return: None
        """

        self.launch(**options)
        self.nav_to(page_name, True)
        self.login()


    def close(self) -> None:
        """
        Closes the browser and forgets the session.

        :return: None
        """

        if not self.browser:  # Nothing launched
            return

        verbose_output(f"{BackgroundColors.GREEN}Closing browser...{Style.RESET_ALL}")
        try:  # Always stop Playwright, even if the browser is already gone
            self.browser.close()
        finally:
            self.playwright.stop()

        self.playwright = None
        self.browser = None
        self.page = None
        self.token = ""
        self.tokenize()
        self.gate.reset()

        if self.file_manager:  # Invalidate the file manager session
            self.file_manager.state.close()
        self.file_manager = None


    def is_page(self, page_name: str) -> bool:
        """
        Verify if the current page is a specific admin page.

        :param page_name: Page name (see the "paths" of the version config, plus "admin")
        :return: True if the current URL belongs to that page
        """

        validate_type("page_name", "string", page_name)

        if page_name not in self.urls:  # No URL for it
            raise UnsupportedFeature(f"Interaction with a {page_name} page is not supported by OpenCart {self.version}")

        return self.page.url.startswith(self.urls[page_name])


    def require_page(self, page_name: str) -> None:
        """
        Raise AdminNavigationError if the current page is not a specific admin page.

        :param page_name: Page name
        :return: None
        """

        if not self.is_page(page_name):  # Wrong page
            raise AdminNavigationError(f"Current page is not a {page_name} page")


    def tokenize(self) -> None:
        """
        Adds the current token to the URLs that require it.

        :return: None
        """

        for page_name in ("dashboard", "catalog"):  # Pages reached by URL after login
            if page_name in self.urls:
                self.urls[page_name] = tokenize_url(self.urls[page_name], self.token)


    def login(self) -> None:
        """
        Logs in as admin. The current page must be an admin one.

        :return: None
        """

        self.require_page("admin")

        self.page.evaluate(FILL_CREDENTIALS_SCRIPT, [self.login_selectors, self.credentials])  # Fill the form

        with self.page.expect_navigation(wait_until="domcontentloaded") as navigation_info:  # Armed before the click
            self.page.click(self.login_selectors["btn"])
        response = navigation_info.value  # Response of the dashboard

        if response is None or not response.ok:  # Wrong credentials or server error
            raise AdminNavigationError("Cannot navigate to an admin page after logging in")

        self.token = extract_token(response.url)  # Session token
        self.tokenize()

        print(f"{BackgroundColors.GREEN}Logged in as {BackgroundColors.CYAN}{self.credentials['username']}{Style.RESET_ALL}")


    def bypass_security_warning(self) -> None:
        """
        Proceeds past the browser security warning page.

        :return: None
        """

        self.page.wait_for_selector("#proceed-button")
        self.page.wait_for_timeout(SECURITY_WARNING_DELAY)  # The button ignores early clicks

        with self.page.expect_navigation(wait_until="domcontentloaded"):  # Armed before the click
            self.page.evaluate("() => document.querySelector('#proceed-button').click()")


    def nav_to(self, page_name: str, bypass_security_warning: bool = False) -> None:
        """
        Navigates to an admin page. Nothing happens if it is the current page.

        Product pages are reached with nav_to_product_page instead.

        :param page_name: Page name
        :param bypass_security_warning: Proceed past the security warning if the navigation is blocked
        :return: None
        """

        validate_type("page_name", "string", page_name)

        if page_name == "product":  # Needs a product ID
            raise InvalidArgument('"nav_to" cannot be used for product pages. Use "nav_to_product_page" instead')

        if self.is_page(page_name):  # Already there
            return

        try:  # The browser may block the admin behind a security warning
            self.page.goto(self.urls[page_name], wait_until="domcontentloaded")
        except PlaywrightError as e:
            if BLOCKED_BY_CLIENT_ERROR not in str(e):  # A real failure
                raise
            if not bypass_security_warning:  # The caller did not ask to bypass it
                raise NavigationBlocked(f"Navigation to the {page_name} page was blocked by the browser") from e
            self.bypass_security_warning()


    def extract_product_page_url(self, product_id: str) -> Optional[str]:
        """
        Extracts the URL of a product page from the catalog. The current page must be the catalog.

        :param product_id: Product model (ID)
        :return: Absolute URL of the product page, or None if the row has no edit link
        """

        validate_type("product_id", "string", product_id)
        self.require_page("catalog")

        self.page.eval_on_selector(self.catalog_selectors["input_model"], FILTER_MODEL_SCRIPT, product_id)  # Filter by model
        self.page.wait_for_function(FIND_PRODUCT_ROW_SCRIPT, arg=[product_id, self.catalog_selectors])  # Wait for the row

        soup = BeautifulSoup(self.page.content(), "html.parser")  # Parse the filtered catalog
        for row in soup.select(self.catalog_selectors["table_rows"]):  # Find the product row
            model_cell = row.select_one(self.catalog_selectors["model_cell"])
            if model_cell is None or model_cell.get_text(strip=True) != product_id:  # Another product
                continue

            link_cell = row.select_one(self.catalog_selectors["link_cell"])
            link = link_cell.find("a") if link_cell is not None else None  # Edit link
            href = link.get("href") if link is not None else None
            return urljoin(self.page.url, str(href)) if href else None

        return None


    def nav_to_product_page(self, product_id: str) -> None:
        """
        Navigates to a product page by product ID.

        :param product_id: Product model (ID)
        :return: None
        """

        self.nav_to("catalog")
        product_page_url = self.extract_product_page_url(product_id)

        if not product_page_url:  # The catalog row has no edit link
            raise AdminNavigationError(f"Product {product_id} has no product page link")

        self.page.goto(product_page_url, wait_until="domcontentloaded")
        verbose_output(f"{BackgroundColors.GREEN}Product page of {BackgroundColors.CYAN}{product_id}{BackgroundColors.GREEN} opened.{Style.RESET_ALL}")


    def get_tab_selector(self, tab_name: str) -> str:
        """
        Get the selector of a product page tab.

        :param tab_name: Product page tab name
        :return: CSS selector of the tab button
        """

        tab_selector = self.product_page_selectors["tabs"].get(tab_name)

        if not tab_selector:  # No selector for it
            raise UnsupportedFeature(f"Interaction with a {tab_name} tab is not supported by OpenCart {self.version}")

        return tab_selector


    def is_product_page_tab(self, tab_name: str) -> bool:
        """
        Verify if a product page tab is selected. The current page must be a product one.

        :param tab_name: Product page tab name
        :return: True if the tab is the selected one
        """

        validate_type("tab_name", "string", tab_name)
        self.require_page("product")

        return self.page.eval_on_selector(self.get_tab_selector(tab_name), IS_TAB_SELECTED_SCRIPT)


    def nav_to_product_page_tab(self, tab_name: str) -> None:
        """
        Selects a product page tab. Nothing happens if it is the current tab.

        :param tab_name: Product page tab name
        :return: None
        """

        if self.is_product_page_tab(tab_name):  # Already selected
            return

        tab_selector = self.get_tab_selector(tab_name)
        self.page.click(tab_selector)
        self.page.wait_for_function(WAIT_TAB_SELECTED_SCRIPT, arg=tab_selector)


    def get_product_page_upload_button(self, tab_name: str, index: int):
        """
        Get the (index + 1)-th upload button of a product page tab.

        :param tab_name: "data" (main image) or "image" (secondary images)
        :param index: Zero-based index of the button
        :return: Playwright ElementHandle of the button
        """

        self.nav_to_product_page_tab(tab_name)

        tab_selectors = self.product_page_selectors.get(tab_name, {})  # Selectors of the tab

        if tab_name == "data":  # A single slot
            return self.page.query_selector(tab_selectors["upload_btn"])

        if tab_name == "image":  # One slot per secondary image
            self.page.wait_for_function(SLOT_BUTTON_EXISTS_SCRIPT, arg=[tab_selectors["upload_btns"], index])
            return self.page.query_selector_all(tab_selectors["upload_btns"])[index]

        raise UnsupportedFeature(f"The {tab_name} tab has no upload buttons")


    def get_product_page_add_button(self, tab_name: str):
        """
        Get the button adding an image slot to a product page tab.

        :param tab_name: Product page tab name
        :return: Playwright ElementHandle of the button
        """

        self.nav_to_product_page_tab(tab_name)

        add_selector = self.product_page_selectors.get(tab_name, {}).get("add_btn")  # Only tabs with slots have one

        if not add_selector:  # No slots on that tab
            raise UnsupportedFeature(f"The {tab_name} tab has no add button")

        return self.page.query_selector(add_selector)


    def open_description_editor(self):
        """
        Selects the general tab and returns the frame of the description editor.

        :return: Playwright Frame of the rich text editor
        """

        self.nav_to_product_page_tab("general")

        editor_element = self.page.wait_for_selector(self.product_page_selectors["general"]["editor"])
        return editor_element.content_frame()


    def fill_product_description(self, description: str) -> bool:
        """
        Fills the product description.

        An empty description deletes the current one only if auto_delete_description is on.

        :param description: New product description
        :return: True if the description was changed
        """

        validate_type("description", "string", description)

        if not description:  # Nothing to write
            if self.product_page_options["auto_delete_description"]:
                self.delete_product_description()
                return True
            return False

        editor_frame = self.open_description_editor()
        text_area = self.product_page_selectors["general"]["editor_text_area"]

        old_description = editor_frame.eval_on_selector(text_area, "element => element.textContent")
        if old_description.strip() and not self.product_page_options["overwrite_description"]:  # Keep the existing one
            return False

        editor_frame.eval_on_selector(text_area, "element => { element.textContent = ''; }")  # Clear
        editor_frame.type(text_area, description)  # Type like a user so the editor registers it

        return True


    def delete_product_description(self) -> None:
        """
        Deletes the product description.

        :return: None
        """

        editor_frame = self.open_description_editor()
        editor_frame.eval_on_selector(self.product_page_selectors["general"]["editor_text_area"], "element => { element.textContent = ''; }")


    def upload_main_product_image(self, image_name: str, dir_path: Optional[str] = None) -> bool:
        """
        Chooses the main product image from the file manager.

        An empty name deletes the current main image only if auto_delete_main_image is on.

        :param image_name: name.extension (a bare name works too). A path is reduced to its file name.
        :param dir_path: Directory to navigate to before choosing the file
        :return: True if the main image was changed
        """

        validate_type("image_name", "string", image_name)
        validate_type("dir_path", "string", dir_path, optional=True)

        if not image_name:  # Nothing to upload
            if self.product_page_options["auto_delete_main_image"]:
                self.delete_main_product_image()
                return True
            return False

        self.nav_to_product_page_tab("data")

        has_main_image = self.page.eval_on_selector(self.product_page_selectors["data"]["image"], HAS_IMAGE_SCRIPT, self.config["placeholder_image"])
        if has_main_image and not self.product_page_options["overwrite_main_image"]:  # Keep the existing one
            return False

        self.file_manager.open_file_manager("data", 0)
        if dir_path is not None:  # Move to the right directory first
            self.file_manager.navigate(dir_path)

        return self.file_manager.upload_file(image_name)


    def delete_main_product_image(self) -> None:
        """
        Deletes the main product image and waits for the placeholder to come back.

        :return: None
        """

        self.nav_to_product_page_tab("data")

        data_selectors = self.product_page_selectors["data"]
        self.page.click(data_selectors["delete_btn"])
        self.page.wait_for_function(IS_PLACEHOLDER_SCRIPT, arg=[data_selectors["image"], self.config["placeholder_image"]])


    def upload_secondary_product_images(self, image_names: List[str], dir_path: Optional[str] = None) -> List[bool]:
        """
        Chooses secondary product images from the file manager, one slot per image.

        An empty list deletes the current secondary images only if auto_delete_secondary_images is on.

        :param image_names: name.extension values (bare names work too). Paths are reduced to their file names.
        :param dir_path: Directory to navigate to before choosing the first file
        :return: One flag per image telling whether it was chosen
        """

        validate_type("image_names", "list", image_names)
        validate_type("dir_path", "string", dir_path, optional=True)

        for index, image_name in enumerate(image_names):  # Shape check before any remote interaction
            validate_type(f"image_names[{index}]", "string", image_name)

        if not image_names:  # Nothing to upload
            if self.product_page_options["auto_delete_secondary_images"]:
                self.delete_secondary_product_images()
            return []

        self.nav_to_product_page_tab("image")

        image_selectors = self.product_page_selectors["image"]
        has_image = self.page.eval_on_selector_all(image_selectors["images"], HAS_ANY_IMAGE_SCRIPT, self.config["placeholder_image"])
        if has_image and not self.product_page_options["overwrite_secondary_images"]:  # Keep the existing ones
            return [False] * len(image_names)

        self.delete_secondary_product_images()

        uploaded = []  # One flag per image
        for index, image_name in enumerate(image_names):  # One slot per image
            self.get_product_page_add_button("image").click()  # New empty slot
            self.file_manager.open_file_manager("image", index)
            if dir_path is not None and index == 0:  # The file manager stays in this directory afterwards
                self.file_manager.navigate(dir_path)
            uploaded.append(self.file_manager.upload_file(image_name))

        return uploaded


    def delete_secondary_product_images(self) -> None:
        """
        Deletes every secondary product image slot.

        :return: None
        """

        self.nav_to_product_page_tab("image")

        delete_selector = self.product_page_selectors["image"]["delete_btns"]
        delete_button = self.page.query_selector(delete_selector)

        while delete_button:  # Until no slot remains
            try:  # The slot may already be gone
                delete_button.click()
                delete_button.wait_for_element_state("hidden")  # Detached slots count as hidden
            except PlaywrightError as e:
                if "not attached" not in str(e):  # A real failure
                    raise

            delete_button = self.page.query_selector(delete_selector)


    def save_product_page_changes(self) -> None:
        """
        Saves the product page and waits for the catalog page.

        :return: None
        """

        self.require_page("product")

        with self.page.expect_navigation(wait_until="domcontentloaded") as navigation_info:  # Armed before the click
            self.page.click(self.product_page_selectors["save_btn"])
        response = navigation_info.value

        if response is None or not response.ok:  # The save did not go through
            raise AdminNavigationError("Cannot navigate to the catalog page after saving changes")


    def fill_product_page(self, product_id: str, description: str, image_paths: List[str], dir_path: Optional[str] = None) -> List[str]:
        """
        Fills a product page with a description and images, then saves it.

        The images are uploaded to the file manager first. The first successful upload
        becomes the main image and the others become secondary images.

        :param product_id: Product model (ID)
        :param description: New product description
        :param image_paths: Paths of local images
        :param dir_path: Directory of the file manager to upload into. The top directory is the default.
        :return: Paths of the successfully uploaded images
        """

        validate_type("image_paths", "list", image_paths)
        validate_type("dir_path", "string", dir_path, optional=True)

        self.nav_to_product_page(product_id)
        self.fill_product_description(description)

        self.file_manager.open_file_manager()
        self.file_manager.navigate(dir_path or "")
        uploaded = self.file_manager.upload_files(image_paths)
        self.file_manager.close_file_manager()

        self.upload_main_product_image(uploaded[0] if uploaded else "", dir_path)
        self.upload_secondary_product_images(uploaded[1:], dir_path)

        self.save_product_page_changes()

        print(f"{BackgroundColors.GREEN}Product {BackgroundColors.CYAN}{product_id}{BackgroundColors.GREEN} saved with {BackgroundColors.CYAN}{len(uploaded)}{BackgroundColors.GREEN} image(s).{Style.RESET_ALL}")

        return uploaded
