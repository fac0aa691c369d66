"""
path_utils.py — File manager directory path utilities

Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    Pure helpers over file manager directory paths. A path is a "/"-delimited
    sequence of directory names and "" is the top directory. Nothing in this
    module touches the browser, so the navigation plan can be computed and
    verified on its own.

    The main export is `plan_navigation`, which diffs the currently open path
    against a target path (a lowest-common-ancestor computation):

    - the directories of the old path below the common ancestor are closed,
      deepest first;
    - the directories of the new path below the common ancestor are opened,
      shallowest first;
    - shared ancestors are never reopened, except the target itself when the
      target is the common ancestor (navigating up), so its listing is fetched.

Usage:
    from path_utils import plan_navigation
    close_paths, ancestor, open_paths = plan_navigation("2023/winter", "2023/spring/sale")
    # (["2023/winter"], "2023", ["2023/spring", "2023/spring/sale"])
"""


import re  # File name extraction
from typing import List, Optional, Tuple  # Type hints
from urllib.parse import urlencode  # Form encoding of listing payloads


# Constants:
ROOT_PATH = ""  # The top directory of the file manager
PATH_SEPARATOR = "/"  # Separator between directory names
FILE_NAME_PATTERN = re.compile(r"(?:[^\\/.]+\.)?[^\\/.]+$")  # Trailing "name.extension" (or bare "name") of a path


# Functions Definitions:


def get_parent_path(path: str) -> str:
    """
    Get the parent of a path. The parent of a top-level directory is the root.

    :param path: Directory path
    :return: Parent directory path
    """

    return path[:path.rfind(PATH_SEPARATOR)] if PATH_SEPARATOR in path else ROOT_PATH


def is_ancestor_or_self(ancestor: str, path: str) -> bool:
    """
    Verify if a path is the same as, or an ancestor of, another path.

    The comparison is segment-wise: "20" is not an ancestor of "2024".

    :param ancestor: Candidate ancestor path
    :param path: Descendant path
    :return: True if ancestor is "" or equal to path or a proper prefix of it on a "/" boundary
    """

    return ancestor == ROOT_PATH or ancestor == path or path.startswith(ancestor + PATH_SEPARATOR)


def find_common_ancestor(current_path: str, target_path: str) -> str:
    """
    Find the nearest ancestor of the target path that is also an ancestor of (or equal to) the current path.

    The target is truncated at its last "/" until it matches or the root is reached.

    :param current_path: Currently open directory path (the cursor)
    :param target_path: Directory path to navigate to
    :return: The common ancestor path
    """

    ancestor = target_path  # Start with the target itself
    while ancestor and not is_ancestor_or_self(ancestor, current_path):  # Climb until it is shared with the cursor
        ancestor = get_parent_path(ancestor)  # Truncate at the last separator

    return ancestor


def get_path_chain(ancestor: str, path: str) -> List[str]:
    """
    List the paths strictly below an ancestor down to (and including) a path.

    :param ancestor: Ancestor path (excluded from the result)
    :param path: Descendant path (included in the result)
    :return: Paths ordered from the shallowest to the deepest
    """

    chain = []  # Paths collected from the deepest up
    while path != ancestor:  # Stop at the ancestor
        chain.append(path)  # Keep the current level
        path = get_parent_path(path)  # Move one level up

    chain.reverse()  # Shallowest first
    return chain


def plan_navigation(current_path: str, target_path: str) -> Tuple[List[str], str, List[str]]:
    """
    Compute the close/open plan to move the open path from current_path to target_path.

    :param current_path: Currently open directory path (the cursor)
    :param target_path: Directory path to navigate to
    :return: Tuple (close_paths deepest first, common ancestor, open_paths shallowest first)
    """

    if current_path == target_path:  # Nothing to do
        return [], current_path, []

    ancestor = find_common_ancestor(current_path, target_path)  # Lowest common ancestor
    close_paths = list(reversed(get_path_chain(ancestor, current_path)))  # Deepest first
    open_paths = get_path_chain(ancestor, target_path) or [target_path]  # Shallowest first, an ancestor target is reopened for its listing

    return close_paths, ancestor, open_paths


def get_dir_selector(path: str) -> str:
    """
    Build the CSS selector of a directory node of the file manager tree.

    :param path: Directory path (value of the "directory" attribute). "" selects the top directory.
    :return: CSS selector string
    """

    if not path:  # The top directory is the first node carrying the attribute
        return "[directory]"

    escaped_path = path.replace("\\", "\\\\").replace('"', '\\"')  # Keep the attribute value a valid CSS string
    return f'[directory="{escaped_path}"]'


def build_directory_payload(path: str) -> str:
    """
    Build the form-encoded POST body the file manager sends to list a directory.

    :param path: Directory path
    :return: Payload string, e.g. "directory=2024%2Fspring"
    """

    return urlencode({"directory": path})  # Same encoding as a jQuery form post


def extract_file_name(file_name: str) -> Optional[str]:
    """
    Extract the trailing "name.extension" (or bare "name") of a file name or path.

    :param file_name: File name or full path
    :return: The cleared file name, or None if there is none
    """

    match = FILE_NAME_PATTERN.search(file_name)  # Last path component
    return match.group(0) if match else None


def file_name_matches(entry: str, file_name: str) -> bool:
    """
    Verify if a listing entry is the given file. The extension of file_name is optional.

    :param entry: File name as reported by the listing
    :param file_name: Cleared file name, with or without extension
    :return: True if entry equals file_name or is file_name followed by an extension
    """

    return entry == file_name or entry.startswith(file_name + ".")
