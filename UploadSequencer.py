"""
================================================================================
Upload Sequencer
================================================================================
Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    This module provides the UploadSequencer class, which performs the uploads
    of the OpenCart file manager. Every upload is confirmed by a native browser
    dialog whose message tells whether it succeeded, so every trigger is issued
    inside a dialog expectation ("start both, wait for both").

    Key features include:
        - Choosing a listed file into a product slot with a double click
        - Uploading local files through the native file chooser
        - One-shot dialog acceptance matched against the configured success message

Usage:
    sequencer = UploadSequencer(page, state, locator, "Success: Your file has been uploaded!")
    sequencer.upload_files(["/tmp/a.png", "/tmp/b.png"], "#upload")

Assumptions & Notes:
    - The double click that chooses a file closes the file manager, which may
      destroy the execution context before the click returns. That error is
      expected and ignored, and the session is closed afterwards in any case.
    - Uploads that fail (dialog without success, or no dialog) are reported
      as omitted paths, never retried.
"""


import os  # Local file verification
from admin_errors import DialogTimeout  # Raised when no confirmation dialog pops up
from colorama import Style  # For coloring the terminal
from playwright.sync_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError  # Browser automation errors
from typing import List  # Type hints
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
DIALOG_TIMEOUT = 30000  # Milliseconds to wait for the confirmation dialog of an upload
FILE_CHOOSER_TIMEOUT = 30000  # Milliseconds to wait for the native file chooser

# Error Constants:
CONTEXT_DESTROYED_MESSAGES = (
    "Execution context was destroyed",
    "Frame was detached",
)  # Errors raised when a click closes the frame it was issued in


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


def is_context_destroyed_error(error):
    """
    Verify if a Playwright error was caused by the frame closing under a click.

    :param error: Playwright Error
    :return: True if the error is the expected context destruction
    """

    return any(message in str(error) for message in CONTEXT_DESTROYED_MESSAGES)


def is_local_file(path):
    """
    Verify if a value is the path of an existing local file.

    :param path: Candidate path
    :return: True if path is a string naming an existing file
    """

    return isinstance(path, str) and os.path.isfile(path)


# Classes Definitions:

class UploadSequencer:
    """
    Uploads files through the file manager, each confirmed by a browser dialog.

    :return: None
    """


    def __init__(self, page, state, locator, success_msg: str, dialog_timeout: int = DIALOG_TIMEOUT) -> None:
        """
        Initializes the sequencer.

        :param page: Playwright Page raising the confirmation dialogs
        :param state: FileManagerState of the session
        :param locator: FileLocator of the session
        :param success_msg: Text contained in the dialog message of a successful upload
        :param dialog_timeout: Milliseconds to wait for a confirmation dialog
        :return: None
        """

        self.page = page  # Page raising the dialogs
        self.state = state  # Shared session state
        self.locator = locator  # Finds files to choose
        self.success_msg = success_msg  # Success marker of the dialog message
        self.dialog_timeout = dialog_timeout  # Dialog wait budget


    def confirm_dialog(self, trigger) -> bool:
        """
        Runs a trigger while waiting for the confirmation dialog, then accepts the dialog.

        :param trigger: Callable performing the action that raises the dialog
        :return: True if the dialog message contains the success message
        """

        try:  # The dialog wait is armed before the trigger runs
            with self.page.expect_event("dialog", timeout=self.dialog_timeout) as dialog_info:
                trigger()
            dialog = dialog_info.value  # The confirmation dialog
        except PlaywrightTimeoutError as e:
            raise DialogTimeout(f"No confirmation dialog within {self.dialog_timeout} ms") from e

        message = dialog.message  # Read before the dialog goes away
        dialog.accept()  # Unblock the page

        verbose_output(f"{BackgroundColors.GREEN}Upload dialog: {BackgroundColors.CYAN}{message}{Style.RESET_ALL}")

        return self.success_msg in message


    def double_click_file(self, file) -> None:
        """
        Double clicks a file entry, tolerating the frame closing under the click.

        :param file: Playwright ElementHandle of the entry
        :return: None
        """

        try:  # The second click closes the file manager
            file.click(click_count=2)
        except PlaywrightError as e:
            if not is_context_destroyed_error(e):  # A real failure
                raise
            verbose_output(f"{BackgroundColors.YELLOW}File manager closed during the double click.{Style.RESET_ALL}")


    def upload_file(self, file_name: str) -> bool:
        """
        Chooses a file of the current directory into the product slot the file manager was opened for.

        The file manager closes as a side effect, so the session is closed afterwards in any case.

        :param file_name: name.extension (a bare name works too). A path is reduced to its file name.
        :return: True if the file was found and the dialog reported success
        """

        file = self.locator.get_file(file_name)  # Entry handle or None

        if file is None:  # Nothing to choose
            return False

        try:  # Choose the file and read the verdict
            return self.confirm_dialog(lambda: self.double_click_file(file))
        finally:  # The frame is gone whatever happened
            self.state.close()


    def upload_local_file(self, upload_button_selector: str, path: str) -> bool:
        """
        Uploads a single local file through the native file chooser of the file manager.

        :param upload_button_selector: CSS selector of the upload button inside the file manager
        :param path: Path of the local file
        :return: True if the dialog reported success
        """

        frame = self.state.require_open()

        try:  # The chooser wait is armed before the click
            with self.page.expect_file_chooser(timeout=FILE_CHOOSER_TIMEOUT) as chooser_info:
                frame.click(upload_button_selector)
            file_chooser = chooser_info.value  # Native file chooser
        except PlaywrightTimeoutError as e:
            raise DialogTimeout(f"No file chooser within {FILE_CHOOSER_TIMEOUT} ms for {path}") from e

        return self.confirm_dialog(lambda: file_chooser.set_files([path]))


    def upload_files(self, paths, upload_button_selector: str) -> List[str]:
        """
        Uploads local files into the current directory of the file manager, one by one.

        :param paths: Paths of local files. Paths that are not existing files are skipped.
        :param upload_button_selector: CSS selector of the upload button inside the file manager
        :return: Paths of the successfully uploaded files, in order
        """

        validate_type("paths", "list", paths)
        frame = self.state.require_open()

        frame.wait_for_selector(upload_button_selector)  # The file manager is ready

        uploaded = []  # Confirmed uploads
        for path in paths:  # Keep the given order
            if not is_local_file(path):  # Not a local file
                verbose_output(f"{BackgroundColors.YELLOW}Skipping missing file: {BackgroundColors.CYAN}{path}{Style.RESET_ALL}")
                continue

            try:  # A silent failure only omits the file
                is_uploaded = self.upload_local_file(upload_button_selector, path)
            except DialogTimeout as e:
                print(f"{BackgroundColors.YELLOW}Upload of {BackgroundColors.CYAN}{path}{BackgroundColors.YELLOW} was not confirmed: {e}{Style.RESET_ALL}")
                is_uploaded = False

            if is_uploaded:  # Confirmed by the dialog
                uploaded.append(path)

        return uploaded
