"""
================================================================================
Directory Navigator
================================================================================
Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    This module provides the DirectoryNavigator class, which moves the open
    directory of the OpenCart file manager tree from the current cursor to a
    requested path and captures the file listing of that path.

    Navigation steps:
        - Short-circuit when the path is already open.
        - Forget the cached listing and disarm the request gate so
          intermediate clicks fetch nothing.
        - Tear down: close the directories of the cursor below the common
          ancestor (deepest first), then collapse the ancestor itself.
        - Build up: double click every intermediate directory (opens the branch
          without waiting for its files), then click the target directory while
          waiting for its file listing, with the gate armed for that listing only.
        - The cursor advances after every settled step, so a failed navigation
          leaves it at the last directory that was really opened.

Usage:
    navigator = DirectoryNavigator(page, state)
    navigator.navigate("2024/spring")
    state.listing  # ["banner.png", "sale.jpg"]

Assumptions & Notes:
    - Closing a directory swaps its "open" class for "closed". Closing a leaf
      or an already closed directory changes nothing.
    - Navigation calls must be serialized by the caller.
"""


from admin_errors import AcknowledgementTimeout, ListingTimeout  # Typed navigation failures
from click_utils import ACK_TIMEOUT, confirmed_click  # Acknowledged clicks
from colorama import Style  # For coloring the terminal
from path_utils import ROOT_PATH, build_directory_payload, get_dir_selector, get_parent_path, plan_navigation  # Path diff helpers
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError  # Browser automation timeouts
from typing import List, Optional  # Type hints
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

# Timing Constants:
LISTING_TIMEOUT = 30000  # Milliseconds to wait for the file listing of a directory
SELECTOR_TIMEOUT = 30000  # Milliseconds to wait for a directory node to be attached

# Click Constants:
BRANCH_CLICK_COUNT = 2  # Double click opens a branch
ROOT_CLICK_COUNT = 1  # The top directory lists its files on a single click
LEAF_CLICK_COUNT = 2  # Other directories list their files on a double click

# Page Scripts:
CLOSE_DIR_SCRIPT = """element => {
    element.className = element.className.replace('open', 'closed');
}"""  # Collapses a directory node

ISOLATE_DIR_SCRIPT = """selector => {
    const main = document.querySelector(selector);
    const others = main.parentElement.querySelectorAll(`:scope > :not(${selector})`);
    Array.from(others).forEach(element => { element.style.display = 'none'; });
    main.style.display = 'block';
}"""  # Hides the siblings of a directory node so the click lands on it


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


# Classes Definitions:

class DirectoryNavigator:
    """
    Reconciles the open directory of the file manager tree with a requested path.

    :return: None
    """


    def __init__(self, page, state, listing_timeout: int = LISTING_TIMEOUT, ack_timeout: int = ACK_TIMEOUT, max_click_attempts: Optional[int] = None) -> None:
        """
        Initializes the navigator.

        :param page: Playwright Page hosting the file manager iframe
        :param state: FileManagerState of the session
        :param listing_timeout: Milliseconds to wait for a file listing
        :param ack_timeout: Milliseconds to wait for the acknowledgement of a single click
        :param max_click_attempts: Attempt cap of a confirmed click, or None for no cap
        :return: None
        """

        self.page = page  # Page receiving the listing responses
        self.state = state  # Shared session state
        self.listing_timeout = listing_timeout  # Listing wait budget
        self.ack_timeout = ack_timeout  # Click acknowledgement budget per attempt
        self.max_click_attempts = max_click_attempts  # Optional attempt cap


    def close_dir(self, path: str = ROOT_PATH) -> None:
        """
        Collapses a directory node. Leaves and closed directories are left as they are.

        :param path: Directory path. The top directory is the default.
        :return: None
        """

        validate_type("path", "string", path)
        frame = self.state.require_open()

        frame.eval_on_selector(get_dir_selector(path), CLOSE_DIR_SCRIPT)  # Swap "open" for "closed"


    def click_dir(self, path: str = ROOT_PATH, click_count: int = 1) -> int:
        """
        Clicks a directory node until the node acknowledges the click.

        :param path: Directory path. The top directory is the default.
        :param click_count: 1 for a single click, 2 for a double click
        :return: Number of click attempts
        """

        validate_type("path", "string", path)
        validate_type("click_count", "number", click_count)
        frame = self.state.require_open()

        selector = get_dir_selector(path)  # Node of the directory
        if path:  # Sub-directories may be overlapped by their siblings
            frame.evaluate(ISOLATE_DIR_SCRIPT, selector)

        return confirmed_click(
            frame,
            selector,
            click_count=click_count,
            ack_timeout=self.ack_timeout,
            max_attempts=self.max_click_attempts,
            deadline=self.listing_timeout,
        )


    def destroy_nav(self, path: str = ROOT_PATH) -> str:
        """
        Closes the currently open directories that are not ancestors of the next path.

        :param path: Directory path of the next navigation. The top directory is the default.
        :return: The common ancestor the cursor was moved to
        """

        validate_type("path", "string", path)
        frame = self.state.require_open()

        close_paths, ancestor, _ = plan_navigation(self.state.cursor, path)  # Divergent suffix of the cursor

        frame.wait_for_selector(get_dir_selector(self.state.cursor), state="visible", timeout=SELECTOR_TIMEOUT)  # The tree is rendered

        for close_path in close_paths:  # Deepest first
            self.close_dir(close_path)  # Collapse it
            self.state.cursor = get_parent_path(close_path)  # The parent is now the deepest open directory

        self.close_dir(ancestor)  # Collapse the ancestor too
        self.state.cursor = ancestor  # Ancestor reached

        verbose_output(f"{BackgroundColors.GREEN}Closed {BackgroundColors.CYAN}{len(close_paths)}{BackgroundColors.GREEN} directories down to {BackgroundColors.CYAN}'{ancestor}'{Style.RESET_ALL}")

        return ancestor


    def capture_listing(self, path: str, trigger) -> List[str]:
        """
        Runs a trigger while waiting for the file listing of a directory.

        The gate is armed before the trigger so only the listing of path reaches the server.

        :param path: Directory path whose listing is expected
        :param trigger: Callable performing the click that makes the page request the listing
        :return: File names of the directory, in the order returned by the server
        """

        gate = self.state.gate  # Request gate of the session
        gate.allow(build_directory_payload(path), True)  # Only this listing, and only once

        try:  # The listing wait is armed before the trigger runs
            with self.page.expect_response(gate.is_allowed_response, timeout=self.listing_timeout) as response_info:
                try:  # Separate click failures from listing failures
                    trigger()
                except PlaywrightTimeoutError as e:
                    raise AcknowledgementTimeout(f"Directory '{path}' could not be clicked: {e}") from e
            response = response_info.value  # The real listing response
        except PlaywrightTimeoutError as e:
            raise ListingTimeout(f"Listing of directory '{path}' did not arrive within {self.listing_timeout} ms") from e

        files = response.json()  # [{"filename": ..., ...}, ...]
        gate.permit_repeat()  # Later reloads of the same listing may pass

        return [entry["filename"] for entry in files]


    def navigate(self, path: str) -> bool:
        """
        Navigates the file manager tree to a directory and captures its file listing.

        :param path: Directory path. Set this to "" to navigate to the top directory.
        :return: True if the tree was navigated, False if the directory was already open
        """

        validate_type("path", "string", path)
        frame = self.state.require_open()

        if self.state.cursor == path:  # Already there
            return False

        verbose_output(f"{BackgroundColors.GREEN}Navigating file manager from {BackgroundColors.CYAN}'{self.state.cursor}'{BackgroundColors.GREEN} to {BackgroundColors.CYAN}'{path}'{Style.RESET_ALL}")

        self.state.listing = None  # The previous listing no longer describes the open directory
        self.state.gate.disallow()  # Intermediate clicks must not fetch listings

        _, _, open_paths = plan_navigation(self.state.cursor, path)  # Directories to open, shallowest first
        self.destroy_nav(path)  # Close the divergent part of the cursor

        *branch_paths, target_path = open_paths  # Every directory but the last only opens a branch

        for branch_path in branch_paths:  # Shallowest first
            frame.wait_for_selector(get_dir_selector(branch_path), state="attached", timeout=SELECTOR_TIMEOUT)
            self.click_dir(branch_path, BRANCH_CLICK_COUNT)
            self.state.cursor = branch_path  # Branch opened

        frame.wait_for_selector(get_dir_selector(target_path), state="attached", timeout=SELECTOR_TIMEOUT)

        click_count = ROOT_CLICK_COUNT if target_path == ROOT_PATH else LEAF_CLICK_COUNT  # Activation that lists files
        self.state.listing = self.capture_listing(target_path, lambda: self.click_dir(target_path, click_count))
        self.state.cursor = target_path  # Clicked and listed

        verbose_output(f"{BackgroundColors.GREEN}Directory {BackgroundColors.CYAN}'{path}'{BackgroundColors.GREEN} holds {BackgroundColors.CYAN}{len(self.state.listing)}{BackgroundColors.GREEN} files.{Style.RESET_ALL}")

        return True
