"""
click_utils.py — Acknowledged clicks on unreliable widgets

Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    The file manager tree occasionally swallows clicks (mid-animation or while
    re-rendering) and offers no synchronous signal telling whether a click took
    effect. The only reliable signal is the element's own "click" event.

    `confirmed_click` arms a one-shot click listener on the element, clicks it,
    and waits a few milliseconds for the listener to fire. When it does not,
    the stale listener is detached and the click is issued again. The loop is
    bounded by an attempt cap (optional) and an overall deadline.

Usage:
    from click_utils import confirmed_click
    attempts = confirmed_click(frame, '[directory="2024"]', click_count=2)
"""


import time  # Deadline bookkeeping
from admin_errors import AcknowledgementTimeout  # Raised when the retry budget is exhausted
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

# Timing Constants:
ACK_TIMEOUT = 50  # Milliseconds to wait for the acknowledgement of a single click
CLICK_DEADLINE = 30000  # Milliseconds after which retrying a click gives up

# Page Scripts:
ARM_ACK_LISTENER_SCRIPT = """element => {
    if (element.__ackListener) element.removeEventListener('click', element.__ackListener);
    element.__ackFired = false;
    element.__ackListener = () => { element.__ackFired = true; };
    element.addEventListener('click', element.__ackListener, { once: true });
}"""  # Attaches a one-shot acknowledgement listener to the clicked element

AWAIT_ACK_SCRIPT = """(element, timeout) => new Promise(resolve => {
    let timerId = null;
    const settle = fired => {
        clearTimeout(timerId);
        element.removeEventListener('click', onClick);
        element.removeEventListener('click', element.__ackListener);
        element.__ackListener = null;
        resolve(fired);
    };
    const onClick = () => settle(true);
    if (element.__ackFired === true) { settle(true); return; }
    element.addEventListener('click', onClick, { once: true });
    timerId = setTimeout(() => settle(element.__ackFired === true), timeout);
})"""  # Resolves true once the listener fired, false after the timeout


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


def confirmed_click(frame, selector, click_count=1, ack_timeout=ACK_TIMEOUT, max_attempts=None, deadline=CLICK_DEADLINE):
    """
    Click an element until the element acknowledges the click.

    :param frame: Playwright Frame (or Page) containing the element
    :param selector: CSS selector of the element
    :param click_count: Number of clicks per attempt (2 for a double click)
    :param ack_timeout: Milliseconds to wait for the acknowledgement of each attempt
    :param max_attempts: Maximum number of attempts, or None for no cap
    :param deadline: Milliseconds after which the retries give up, or None for no deadline
    :return: Number of attempts (physical clicks issued) until the acknowledgement
    """

    started_at = time.monotonic()  # Start of the retry budget
    attempts = 0  # Physical click issuances

    while True:  # Retry until acknowledged or out of budget
        attempts += 1  # Count this attempt
        frame.eval_on_selector(selector, ARM_ACK_LISTENER_SCRIPT)  # Listen before clicking
        frame.click(selector, click_count=click_count)  # Issue the click

        if frame.eval_on_selector(selector, AWAIT_ACK_SCRIPT, ack_timeout):  # The element saw the click
            verbose_output(f"{BackgroundColors.GREEN}Click on {BackgroundColors.CYAN}{selector}{BackgroundColors.GREEN} acknowledged after {BackgroundColors.CYAN}{attempts}{BackgroundColors.GREEN} attempt(s).{Style.RESET_ALL}")
            return attempts

        verbose_output(f"{BackgroundColors.YELLOW}Click on {BackgroundColors.CYAN}{selector}{BackgroundColors.YELLOW} was swallowed, retrying...{Style.RESET_ALL}")

        if max_attempts is not None and attempts >= max_attempts:  # Attempt cap reached
            raise AcknowledgementTimeout(f"Click on {selector} was not acknowledged after {attempts} attempts")

        elapsed = (time.monotonic() - started_at) * 1000  # Milliseconds spent so far
        if deadline is not None and elapsed >= deadline:  # Overall budget exhausted
            raise AcknowledgementTimeout(f"Click on {selector} was not acknowledged within {deadline} ms")
