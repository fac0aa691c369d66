"""
url_utils.py — Admin URL helpers

Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    Helpers to build and tokenize OpenCart admin URLs:

    - `get_base_url` reduces any URL to its scheme://host base.
    - `extract_token` reads the admin session token from a URL.
    - `tokenize_url` appends (or replaces) the admin token of a URL.

Usage:
    from url_utils import get_base_url, extract_token, tokenize_url
"""


import re  # Token extraction and replacement
from admin_errors import InvalidArgument  # Raised for malformed URLs
from urllib.parse import urlparse  # URL parsing
from validation_utils import validate_type  # Eager argument checks


# Regex Constants:
TOKEN_PATTERN = re.compile(r"token=(\w*)")  # Token query parameter anywhere in the URL
TRAILING_TOKEN_PATTERN = re.compile(r"&token=\w*$")  # Token query parameter at the end of the URL


# Functions Definitions:


def get_base_url(url):
    """
    Reduce a URL to its base (scheme and host).

    :param url: Any absolute URL of the website
    :return: The base URL, e.g. "https://shop.example"
    """

    validate_type("url", "string", url)

    parsed_url = urlparse(url)  # Split the URL into its components
    if not parsed_url.scheme or not parsed_url.netloc:  # Relative or garbage input
        raise InvalidArgument(f"{url} is not a valid URL")

    return f"{parsed_url.scheme}://{parsed_url.netloc}"  # Rebuild scheme://host


def extract_token(url):
    """
    Extract the admin session token from a URL of any admin page.

    :param url: Admin page URL
    :return: The token string
    """

    validate_type("url", "string", url)

    match = TOKEN_PATTERN.search(url)  # Find the token parameter
    if not match:  # Logged-in admin URLs always carry a token
        raise InvalidArgument(f"{url} does not contain a token")

    return match.group(1)  # Return only the value


def tokenize_url(url, token):
    """
    Add a token to an admin page URL. An existing trailing token is replaced.

    :param url: Admin page URL
    :param token: Admin session token
    :return: The tokenized URL
    """

    validate_type("url", "string", url)
    validate_type("token", "string", token)

    cleared_url = TRAILING_TOKEN_PATTERN.sub("", url)  # Drop a previous token
    return f"{cleared_url}&token={token}"  # Append the new token
