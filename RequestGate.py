"""
================================================================================
Request Gate
================================================================================
Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    This module provides the RequestGate class, a single-flight filter over the
    XHRs the OpenCart file manager sends to list the files of a directory.

    Every click on a directory of the file manager tree makes the page POST a
    listing request. While a path is being opened only the listing of the final
    directory matters, and after that last click the page may additionally send
    several identical requests or requests for intermediate directories. The
    gate therefore:
        - forwards only the request whose payload equals the allowed one;
        - suppresses an immediate duplicate of the last seen payload;
        - answers every suppressed request with an empty synthetic response,
          marked with a header, so the page does not hang and listeners can
          tell synthetic answers from real ones.

    Requests that are not file listings are continued, except images and
    stylesheets which are aborted when block_assets is on.

Usage:
    gate = RequestGate("filemanager/files")
    page.route("**/*", gate.handle_route)
    gate.allow("directory=2024%2Fspring")

Assumptions & Notes:
    - The heuristic relies on payload matching. If the file manager changes
      the way it requests listings, the gate silently stops filtering.
"""


from colorama import Style  # For coloring the terminal


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

# Request Constants:
TRACKED_RESOURCE_TYPES = ("xhr", "fetch")  # Resource types of file listing requests
TRACKED_METHOD = "POST"  # HTTP method of file listing requests
BLOCKED_RESOURCE_TYPES = ("image", "stylesheet")  # Resources aborted when block_assets is on
SUPPRESSED_HEADER = "x-request-gate"  # Header marking a synthetic response
SUPPRESSED_VALUE = "suppressed"  # Value of the marker header


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

class RequestGate:
    """
    Single-flight filter over the file listing XHRs of the file manager.

    :return: None
    """


    def __init__(self, files_path, block_assets=True):
        """
        Initializes a disarmed gate.

        :param files_path: Part of the URL identifying file listing requests (e.g. "filemanager/files")
        :param block_assets: Abort image and stylesheet requests when True
        :return: None
        """

        self.files_path = files_path  # URL fragment of file listing requests
        self.block_assets = block_assets  # Whether images and stylesheets are aborted
        self.allowed_payload = None  # Only tracked requests with this payload may reach the server
        self.block_duplicates = False  # Suppress a tracked request repeating the last seen payload
        self.last_seen_payload = None  # Payload of the last tracked request, forwarded or not


    def allow(self, payload_key, block_duplicates=True):
        """
        Arms the gate to forward only tracked requests carrying payload_key.

        :param payload_key: Form-encoded request body to let through
        :param block_duplicates: Suppress immediate duplicates of the forwarded request
        :return: None
        """

        self.last_seen_payload = None  # A new arming starts a new sequence
        self.allowed_payload = payload_key  # The only payload allowed from now on
        self.block_duplicates = block_duplicates  # Duplicate policy for this sequence
        verbose_output(f"{BackgroundColors.GREEN}Request gate allows: {BackgroundColors.CYAN}{payload_key}{Style.RESET_ALL}")


    def disallow(self):
        """
        Arms the gate to forward no tracked request at all.

        :return: None
        """

        self.allow(None)


    def permit_repeat(self):
        """
        Lets duplicates of the allowed payload through without changing it.

        :return: None
        """

        self.last_seen_payload = None  # Forget the last payload
        self.block_duplicates = False  # Duplicates are forwarded again


    def suppress_repeat(self):
        """
        Suppresses duplicates of the allowed payload without changing it.

        :return: None
        """

        self.last_seen_payload = None  # Forget the last payload
        self.block_duplicates = True  # Duplicates are suppressed again


    def reset(self):
        """
        Brings the gate back to its initial, disarmed state.

        :return: None
        """

        self.allowed_payload = None
        self.block_duplicates = False
        self.last_seen_payload = None


    def is_tracked_request(self, request):
        """
        Verify if a request is a file listing request of the file manager.

        :param request: Playwright Request
        :return: True if the request is tracked by the gate
        """

        return (
            request.resource_type in TRACKED_RESOURCE_TYPES
            and request.method == TRACKED_METHOD
            and self.files_path in request.url
        )


    def should_forward(self, payload):
        """
        Decide whether a tracked request reaches the server, and record its payload.

        :param payload: Request body of the tracked request
        :return: True if the request may be forwarded, False if it must be suppressed
        """

        last_seen_payload = self.last_seen_payload  # Payload of the previous tracked request
        self.last_seen_payload = payload  # Every tracked request is seen, forwarded or not

        if self.allowed_payload is None or payload != self.allowed_payload:  # Not the listing being settled
            return False

        if self.block_duplicates and payload == last_seen_payload:  # Immediate duplicate of the last one
            return False

        return True


    def is_allowed_response(self, response):
        """
        Verify if a response is the real answer to the currently allowed listing request.

        :param response: Playwright Response
        :return: True if the response belongs to the allowed request and was not synthesized by the gate
        """

        request = response.request  # Request the response answers
        if not self.is_tracked_request(request):  # Not a file listing
            return False
        if self.allowed_payload is None or request.post_data != self.allowed_payload:  # Another directory
            return False

        return response.headers.get(SUPPRESSED_HEADER) != SUPPRESSED_VALUE  # Skip synthetic answers


    def handle_route(self, route):
        """
        Playwright route handler applying the gate policy to every request of the page.

        :param route: Playwright Route
        :return: None
        """

        request = route.request  # Intercepted request

        if self.is_tracked_request(request):  # File listing request
            if self.should_forward(request.post_data):  # Allowed and not a duplicate
                verbose_output(f"{BackgroundColors.GREEN}Forwarding listing request: {BackgroundColors.CYAN}{request.post_data}{Style.RESET_ALL}")
                route.continue_()
            else:  # Answer locally so the page does not wait forever
                verbose_output(f"{BackgroundColors.YELLOW}Suppressing listing request: {BackgroundColors.CYAN}{request.post_data}{Style.RESET_ALL}")
                route.fulfill(status=200, headers={SUPPRESSED_HEADER: SUPPRESSED_VALUE}, body="")
            return

        if self.block_assets and request.resource_type in BLOCKED_RESOURCE_TYPES:  # Assets are not needed to automate the admin
            route.abort()
            return

        route.continue_()
