"""
================================================================================
File Manager
================================================================================
Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    This module provides the FileManager class, the entry point to the OpenCart
    file manager (the image manager iframe opened from a product page).

    Key features include:
        - Opening the file manager for a product page upload slot, and closing it
        - Navigating its directory tree while capturing the file listing
        - Selecting a listed file, or choosing it into the product slot
        - Uploading local files into the current directory
        - Batch uploads, one product slot per file

    The session state (frame, cursor, listing, request gate) lives in a
    FileManagerState shared by the DirectoryNavigator, the FileLocator and the
    UploadSequencer.

Usage:
    file_manager = FileManager(page, admin, gate, selectors, "Success: Your file has been uploaded!")
    file_manager.open_file_manager("data", 0)
    file_manager.navigate("2024/spring")
    file_manager.upload_file("banner.png")

Assumptions & Notes:
    - The product layer supplies the upload and add buttons through
      get_product_page_upload_button(tab, index) and get_product_page_add_button(tab).
    - Calls must be serialized: one page, one file manager frame at a time.
"""


from colorama import Style  # For coloring the terminal
from DirectoryNavigator import DirectoryNavigator, LISTING_TIMEOUT  # Directory tree reconciliation
from FileLocator import FileLocator  # File lookup in the listing column
from FileManagerState import FileManagerState  # Session state
from UploadSequencer import DIALOG_TIMEOUT, UploadSequencer, is_local_file  # Confirmed uploads
from admin_errors import DialogTimeout, InvalidArgument  # Typed errors
from click_utils import ACK_TIMEOUT  # Click acknowledgement budget
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

# Frame Constants:
FRAME_TIMEOUT = 30000  # Milliseconds to wait for the file manager iframe


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

class FileManager:
    """
    Drives the OpenCart file manager of a product page.

    :return: None
    """


    def __init__(self, page, product_page, gate, selectors, success_msg, listing_timeout=LISTING_TIMEOUT, ack_timeout=ACK_TIMEOUT, max_click_attempts=None, dialog_timeout=DIALOG_TIMEOUT):
        """
        Initializes a closed file manager.

        :param page: Playwright Page of the product page
        :param product_page: Object providing get_product_page_upload_button(tab, index) and get_product_page_add_button(tab)
        :param gate: RequestGate installed on the page routes
        :param selectors: File manager selectors ("frame", "close_btn", "upload_btn", "list")
        :param success_msg: Text contained in the dialog message of a successful upload
        :param listing_timeout: Milliseconds to wait for a file listing
        :param ack_timeout: Milliseconds to wait for the acknowledgement of a single click
        :param max_click_attempts: Attempt cap of a confirmed click, or None for no cap
        :param dialog_timeout: Milliseconds to wait for an upload confirmation dialog
        :return: None
        """

        self.page = page  # Page hosting the iframe
        self.product_page = product_page  # Supplies the buttons opening the file manager
        self.selectors = selectors  # File manager selectors
        self.state = FileManagerState(gate)  # Frame, cursor, listing and gate
        self.navigator = DirectoryNavigator(page, self.state, listing_timeout, ack_timeout, max_click_attempts)  # Tree reconciliation
        self.locator = FileLocator(self.state, selectors["list"])  # File lookup
        self.sequencer = UploadSequencer(page, self.state, self.locator, success_msg, dialog_timeout)  # Confirmed uploads


    @property
    def is_open(self):
        """
        Whether a file manager session is open.

        :return: True if the file manager frame is attached
        """

        return self.state.is_open


    @property
    def cursor(self):
        """
        Directory path believed to be open.

        :return: Path string, or None when closed
        """

        return self.state.cursor


    @property
    def listing(self):
        """
        File names of the directory last settled by a navigation.

        :return: List of file names, or None if none was captured in this session
        """

        return self.state.listing


    def open_file_manager(self, tab_name="data", index=0):
        """
        Opens the file manager by clicking the (index + 1)-th upload button of a product page tab.

        Nothing happens if it is already open.

        :param tab_name: Product page tab holding the upload button
        :param index: Zero-based index of the upload button
        :return: None
        """

        validate_type("tab_name", "string", tab_name)
        validate_type("index", "number", index)

        if self.state.is_open:  # One session at a time
            return

        upload_button = self.product_page.get_product_page_upload_button(tab_name, index)  # Slot button
        upload_button.click()  # Opens the dialog with the iframe

        frame_element = self.page.wait_for_selector(self.selectors["frame"], timeout=FRAME_TIMEOUT)  # The iframe
        self.state.open(frame_element.content_frame())  # Cursor at the top directory

        verbose_output(f"{BackgroundColors.GREEN}File manager opened for {BackgroundColors.CYAN}{tab_name}[{index}]{Style.RESET_ALL}")


    def close_file_manager(self):
        """
        Closes the file manager. Nothing happens if it is already closed.

        :return: None
        """

        if not self.state.is_open:  # Nothing to close
            return

        close_button = self.page.wait_for_selector(self.selectors["close_btn"], timeout=FRAME_TIMEOUT)  # Dialog close button
        close_button.click()

        self.state.close()  # Cursor, listing and gate are void now

        verbose_output(f"{BackgroundColors.GREEN}File manager closed.{Style.RESET_ALL}")


    def navigate(self, path):
        """
        Navigates to a directory and captures its file listing.

        :param path: Directory path. Set this to "" to navigate to the top directory.
        :return: True if the tree was navigated, False if the directory was already open
        """

        return self.navigator.navigate(path)


    def destroy_nav(self, path=""):
        """
        Closes the open directories that are not ancestors of path.

        :param path: Directory path of the next navigation. The top directory is the default.
        :return: The common ancestor the cursor was moved to
        """

        return self.navigator.destroy_nav(path)


    def select_file(self, file_name):
        """
        Selects a file of the current directory with a single click.

        :param file_name: name.extension (a bare name works too). A path is reduced to its file name.
        :return: True if the file was found and clicked
        """

        return self.locator.select_file(file_name)


    def upload_file(self, file_name):
        """
        Chooses a file of the current directory into the product slot. The file manager closes afterwards.

        :param file_name: name.extension (a bare name works too). A path is reduced to its file name.
        :return: True if the file was found and the dialog reported success
        """

        return self.sequencer.upload_file(file_name)


    def upload_files(self, paths):
        """
        Uploads local files into the current directory.

        :param paths: Paths of local files. Paths that are not existing files are skipped.
        :return: Paths of the successfully uploaded files, in order
        """

        return self.sequencer.upload_files(paths, self.selectors["upload_btn"])


    def upload_batch(self, paths, directory=None, tab_name="image"):
        """
        Uploads local files, one product slot per file.

        For every file: click the tab "add" control, open the file manager for the new
        slot, navigate to directory (first file only), upload through the file chooser
        and close the file manager.

        A non-string entry in paths is a caller bug and raises InvalidArgument before any
        remote interaction. Strings that are not existing files are skipped instead.

        :param paths: Paths of local files. Paths that are not existing files are skipped up front.
        :param directory: Directory path to upload into, or None for the directory the file manager opens in
        :param tab_name: Product page tab holding the slots
        :return: Paths of the successfully uploaded files, in order
        """

        validate_type("paths", "list", paths)
        validate_type("directory", "string", directory, optional=True)
        validate_type("tab_name", "string", tab_name)

        for index, path in enumerate(paths):  # Shape check before any remote interaction
            if not isinstance(path, str):
                raise InvalidArgument(f"paths[{index}] must be a string, got {type(path).__name__}")

        local_paths = [path for path in paths if is_local_file(path)]  # Missing files never reach the page
        skipped = len(paths) - len(local_paths)  # Number of filtered inputs
        if skipped:  # Tell the user which inputs vanished
            print(f"{BackgroundColors.YELLOW}Skipping {BackgroundColors.CYAN}{skipped}{BackgroundColors.YELLOW} missing file(s).{Style.RESET_ALL}")

        self.close_file_manager()  # Every slot gets its own session

        uploaded = []  # Confirmed uploads
        for index, path in enumerate(local_paths):  # One slot per file
            add_button = self.product_page.get_product_page_add_button(tab_name)  # Adds an empty slot
            add_button.click()

            self.open_file_manager(tab_name, index)  # Session for this slot

            try:  # The session is closed whatever the outcome
                if directory is not None and index == 0:  # The file manager stays in this directory afterwards
                    self.navigate(directory)

                try:  # A silent failure only omits the file
                    is_uploaded = self.sequencer.upload_local_file(self.selectors["upload_btn"], path)
                except DialogTimeout as e:
                    print(f"{BackgroundColors.YELLOW}Upload of {BackgroundColors.CYAN}{path}{BackgroundColors.YELLOW} was not confirmed: {e}{Style.RESET_ALL}")
                    is_uploaded = False
            finally:
                self.close_file_manager()

            if is_uploaded:  # Confirmed by the dialog
                uploaded.append(path)

        return uploaded
