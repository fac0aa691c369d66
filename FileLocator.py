"""
================================================================================
File Locator
================================================================================
Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    This module provides the FileLocator class, which finds a file by name in
    the listing column of the OpenCart file manager.

    The cached directory listing and the rendered listing entries are filled
    asynchronously and not in lock-step right after a navigation. The locator
    therefore:
        - fails fast, without touching the page, when the cached listing of the
          directory has no matching file;
        - otherwise waits until a matching entry is rendered and returns its index.

    Matching: an entry matches "name" when it equals it or is "name" followed
    by an extension. A bare prefix ("do" for "dog.jpg") never matches.

Usage:
    locator = FileLocator(state, "#column-right a")
    locator.locate("/home/me/Pictures/dog.jpg")  # Index of "dog.jpg" or NOT_FOUND
    locator.select_file("dog")  # True if clicked
"""


from admin_errors import ListingTimeout  # Raised when an expected entry never renders
from colorama import Style  # For coloring the terminal
from path_utils import extract_file_name, file_name_matches  # File name helpers
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError  # Browser automation timeouts
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

# Locator Constants:
NOT_FOUND = -1  # Index returned when a file is not in the directory
LOCATE_TIMEOUT = 30000  # Milliseconds to wait for a listed file to be rendered

# Page Scripts:
FIND_FILE_INDEX_SCRIPT = """([listSelector, fileName]) => {
    const list = document.querySelectorAll(listSelector);
    for (let i = 0; i < list.length; i++) {
        const text = list[i].textContent.trim();
        if (text === fileName || text.startsWith(fileName + '.')) return i + 1;
    }
    return 0;
}"""  # (index + 1) of the first matching entry, 0 when none matches

SCROLL_TO_FILE_SCRIPT = """([listSelector, index]) => {
    const file = document.querySelectorAll(listSelector)[index];
    file.scrollIntoView({ behavior: 'instant', block: 'center' });
}"""  # Brings an entry into view before it is clicked


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

class FileLocator:
    """
    Finds files of the current directory in the file manager listing column.

    :return: None
    """


    def __init__(self, state, list_selector, locate_timeout=LOCATE_TIMEOUT):
        """
        Initializes the locator.

        :param state: FileManagerState of the session
        :param list_selector: CSS selector matching every rendered file entry
        :param locate_timeout: Milliseconds to wait for a listed file to be rendered
        :return: None
        """

        self.state = state  # Shared session state
        self.list_selector = list_selector  # Rendered entries of the listing column
        self.locate_timeout = locate_timeout  # Rendering wait budget


    def is_listed(self, file_name):
        """
        Verify against the cached listing whether a file may be in the current directory.

        :param file_name: Cleared file name, with or without extension
        :return: False only if the cached listing proves the file is absent
        """

        if self.state.listing is None:  # Nothing cached, only the page can tell
            return True

        return any(file_name_matches(entry, file_name) for entry in self.state.listing)


    def locate(self, file_name):
        """
        Get the index of a file among the rendered listing entries.

        :param file_name: name.extension (a bare name works too). A path is reduced to its file name.
        :return: Index of the entry, or NOT_FOUND
        """

        validate_type("file_name", "string", file_name)

        cleared_file_name = extract_file_name(file_name)  # "dir/dog.jpg" -> "dog.jpg"

        if not cleared_file_name or not self.is_listed(cleared_file_name):  # Provably absent
            verbose_output(f"{BackgroundColors.YELLOW}File {BackgroundColors.CYAN}{file_name}{BackgroundColors.YELLOW} is not in the current directory.{Style.RESET_ALL}")
            return NOT_FOUND

        frame = self.state.require_open()
        arguments = [self.list_selector, cleared_file_name]  # Script arguments

        try:  # The entry may render after the listing arrived
            frame.wait_for_function(FIND_FILE_INDEX_SCRIPT, arg=arguments, timeout=self.locate_timeout)
        except PlaywrightTimeoutError as e:
            raise ListingTimeout(f"File {cleared_file_name} was not rendered within {self.locate_timeout} ms") from e

        return frame.evaluate(FIND_FILE_INDEX_SCRIPT, arguments) - 1  # Back to a zero-based index


    def get_file(self, file_name):
        """
        Find a file and bring its entry into view.

        :param file_name: name.extension (a bare name works too). A path is reduced to its file name.
        :return: Playwright ElementHandle of the entry, or None if the file is not found
        """

        validate_type("file_name", "string", file_name)
        frame = self.state.require_open()

        index = self.locate(file_name)  # Zero-based index or NOT_FOUND
        if index == NOT_FOUND:  # Nothing to interact with
            return None

        frame.evaluate(SCROLL_TO_FILE_SCRIPT, [self.list_selector, index])  # Make it clickable

        return frame.query_selector_all(self.list_selector)[index]


    def select_file(self, file_name):
        """
        Find a file and select it with a single click.

        :param file_name: name.extension (a bare name works too). A path is reduced to its file name.
        :return: True if the file was found and clicked
        """

        file = self.get_file(file_name)  # Entry handle or None

        if file is not None:  # Found
            file.click()

        return file is not None
