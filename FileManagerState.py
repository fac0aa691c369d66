"""
================================================================================
File Manager State
================================================================================
Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    This module provides the FileManagerState class, the explicit state of one
    file manager session shared by the directory navigator, the file locator
    and the upload sequencer:
        - frame: the Playwright Frame of the file manager iframe (None when closed)
        - cursor: the directory path believed to be open ("" is the top
          directory, CLOSED when no session is open)
        - listing: file names of the directory last settled by a navigation
        - gate: the RequestGate filtering file listing requests

    Only the navigator moves the cursor. Opening a session resets the cursor to
    the top directory; closing it invalidates the cursor, the listing and the
    gate.

Usage:
    state = FileManagerState(RequestGate("filemanager/files"))
    state.open(frame)
    state.require_open()
"""


from admin_errors import SessionClosed  # Raised when no session is open
from path_utils import ROOT_PATH  # Top directory path


# Constants:
CLOSED = None  # Cursor value while no file manager session is open


# Classes Definitions:

class FileManagerState:
    """
    State of a file manager session: frame handle, cursor, listing and request gate.

    :return: None
    """


    def __init__(self, gate):
        """
        Initializes a closed session state.

        :param gate: RequestGate filtering the file listing requests of the page
        :return: None
        """

        self.gate = gate  # Request gate shared with the page route handler
        self.frame = None  # Playwright Frame of the file manager
        self.cursor = CLOSED  # Directory path believed to be open
        self.listing = None  # File names of the last settled directory


    @property
    def is_open(self):
        """
        Whether a file manager session is currently open.

        :return: True if a frame is attached
        """

        return self.frame is not None


    def open(self, frame):
        """
        Starts a session on a file manager frame.

        :param frame: Playwright Frame of the file manager
        :return: None
        """

        self.frame = frame  # Attach the frame
        self.cursor = ROOT_PATH  # A fresh file manager shows the top directory
        self.listing = None  # Nothing captured yet
        self.gate.reset()  # No listing request is expected yet


    def close(self):
        """
        Ends the session and invalidates everything derived from it.

        :return: None
        """

        self.frame = None
        self.cursor = CLOSED
        self.listing = None
        self.gate.reset()


    def require_open(self):
        """
        Raise SessionClosed if no file manager session is open.

        :return: The Playwright Frame of the file manager
        """

        if not self.is_open:  # Nothing to operate on
            raise SessionClosed("file manager is closed")

        return self.frame
