"""
Centralized error handling for the static site CDK project.

Configuration-shape problems are raised while the construct tree is being
built, before anything reaches CloudFormation. Everything here raises and
nothing catches: errors propagate straight to the caller of the stack.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Iterable, Tuple, Type, Union

class ErrorHandler:
    """
    Validation helpers shared by the config loader and the site builder.
    """

    @staticmethod
    def validate_path_exists(
            path: Union[str, Path],
            path_type: str = "Path"
        ) -> None:
        """
        Validate that a path exists and is a directory.

        Args:
            path: Path to validate
            path_type: Type description for error messages

        Raises:
            FileNotFoundError: If path does not exist or is not a directory
        """
        if not Path(path).is_dir():
            raise FileNotFoundError(f"{path_type} not found: {path}")

    @staticmethod
    def validate_type(
            value: Any,
            expected_type: Union[Type, Tuple[Type, ...]],
            field_name: str,
            context: str = "Configuration"
        ) -> None:
        """
        Validate that a value is of the expected type.

        Raises:
            TypeError: If value is not of the expected type
        """
        if not isinstance(value, expected_type):
            expected = (
                " or ".join(t.__name__ for t in expected_type)
                if isinstance(expected_type, tuple)
                else expected_type.__name__
            )
            raise TypeError(
                f"{context} field '{field_name}' must be of type {expected}, got {type(value).__name__}"
            )

    @staticmethod
    def validate_string_not_empty(
            value: Any,
            field_name: str,
            context: str = "Configuration"
        ) -> None:
        """
        Validate that a value is a non-empty string.

        Raises:
            ValueError: If value is not a non-empty string
        """
        if not isinstance(value, str) or value.strip() == "":
            raise ValueError(f"{context} field '{field_name}' must be a non-empty string")

    @staticmethod
    def validate_string_list(
            value: Any,
            field_name: str,
            context: str = "Configuration"
        ) -> None:
        """
        Validate that a value is a list or tuple of strings (empty strings allowed).

        Raises:
            TypeError: If value is not a sequence of strings
        """
        ErrorHandler.validate_type(value, (list, tuple), field_name, context)
        for i, item in enumerate(value):
            ErrorHandler.validate_type(item, str, f"{field_name}[{i}]", context)

    @staticmethod
    def validate_schema_errors(
            messages: Iterable[str],
            context: str = "Configuration"
        ) -> None:
        """
        Raise a single error listing every schema violation collected.

        Raises:
            ValueError: If any messages were collected
        """
        messages = list(messages)
        if messages:
            raise ValueError(f"{context} is invalid: " + "; ".join(messages))
