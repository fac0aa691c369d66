"""
================================================================================
OpenCart Admin Errors
================================================================================
Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    Exception types raised by the OpenCart admin automation. Every error
    derives from OpenCartAdminError so callers can catch the whole family at
    once (the CLI does this per product job).

    Domain-level absence (a file that is not in the directory listing, an
    upload dialog that did not report success) is never an exception: those
    are reported as booleans or omitted list entries.

Usage:
    from admin_errors import SessionClosed, ListingTimeout
"""


class OpenCartAdminError(Exception):
    """
    Base class of every error raised by the OpenCart admin automation.
    """


class InvalidArgument(OpenCartAdminError, TypeError):
    """
    An argument has the wrong type or shape. Raised before any remote interaction.
    """


class SessionClosed(OpenCartAdminError):
    """
    A file manager operation was attempted while no file manager session is open.
    """


class AcknowledgementTimeout(OpenCartAdminError):
    """
    A click was never acknowledged by the remote widget within the retry budget.
    """


class ListingTimeout(OpenCartAdminError):
    """
    The file listing of a directory did not arrive in time.
    """


class DialogTimeout(OpenCartAdminError):
    """
    The confirmation dialog of an upload did not pop up in time.
    """


class NavigationBlocked(OpenCartAdminError):
    """
    The browser blocked a navigation on the client side (net::ERR_BLOCKED_BY_CLIENT).
    """


class AdminNavigationError(OpenCartAdminError):
    """
    A page navigation (login, save, catalog) did not end with an OK response.
    """


class UnsupportedFeature(OpenCartAdminError):
    """
    The requested OpenCart version, page or tab is not supported.
    """
