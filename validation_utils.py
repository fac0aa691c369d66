"""
validation_utils.py — Eager argument type checks

Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    Small utility module used by every public operation to validate its
    arguments before touching the browser. The main export is
    `validate_type`, which raises `InvalidArgument` naming the offending
    argument when the value is not of the expected kind.

    Supported kinds: "string", "number", "boolean", "list", "dict".
    Booleans are never accepted as numbers.

Usage:
    from validation_utils import validate_type
    validate_type("path", "string", path)
    validate_type("config.placeholderImage", "string", value, optional=True)
"""


from admin_errors import InvalidArgument  # Typed error raised on validation failure


# Kind Constants:
TYPE_CHECKS = {
    "string": lambda value: isinstance(value, str),  # Text values
    "number": lambda value: isinstance(value, (int, float)) and not isinstance(value, bool),  # Numbers, never booleans
    "boolean": lambda value: isinstance(value, bool),  # Flags
    "list": lambda value: isinstance(value, (list, tuple)),  # Ordered sequences
    "dict": lambda value: isinstance(value, dict),  # Mappings
}  # Mapping of kind names to their predicates


# Functions Definitions:


def is_type(expected_type, value):
    """
    Verify if a value is of the given kind.

    :param expected_type: One of the TYPE_CHECKS keys
    :param value: The value to verify
    :return: True if the value is of the expected kind, False otherwise
    """

    if expected_type not in TYPE_CHECKS:  # Unknown kinds are a programming error
        raise ValueError(f"Unknown type kind: {expected_type}")

    return TYPE_CHECKS[expected_type](value)  # Apply the matching predicate


def validate_type(name, expected_type, value, optional=False):
    """
    Raise InvalidArgument if a value is not of the expected kind.

    :param name: Argument name used in the error message
    :param expected_type: One of the TYPE_CHECKS keys
    :param value: The value to verify
    :param optional: When True, None is accepted
    :return: None
    """

    if optional and value is None:  # Optional arguments may be omitted
        return

    if not is_type(expected_type, value):  # Wrong kind
        raise InvalidArgument(f"{name} must be a {expected_type}, got {type(value).__name__}")
