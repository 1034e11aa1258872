"""
Argument validation module for pyxmltv

Handles validation of command-line arguments: output format, JSON indentation,
input location and network options.
"""

from typing import Optional, Tuple

from ..config import ConfigManager
from ..sources import SourceLoader


class ArgumentValidator:
    """Validates command-line arguments"""

    MAX_INDENT = 8
    MAX_TIMEOUT = 600

    @classmethod
    def validate_format(cls, output_format: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate format parameter

        Args:
            output_format: Requested output format

        Returns:
            Tuple of (is_valid, error_message)
        """
        if output_format is None:
            return True, None

        if output_format not in ConfigManager.FORMATS:
            return False, (
                f"Parameter [--format] must be one of {', '.join(ConfigManager.FORMATS)}, "
                f"got: {output_format}"
            )

        return True, None

    @classmethod
    def validate_indent(cls, indent: Optional[int]) -> Tuple[bool, Optional[str]]:
        """
        Validate indent parameter

        Args:
            indent: JSON indentation width

        Returns:
            Tuple of (is_valid, error_message)
        """
        if indent is None:
            return True, None

        if indent < 0 or indent > cls.MAX_INDENT:
            return False, f"Parameter [--indent] must be 0-{cls.MAX_INDENT}, got: {indent}"

        return True, None

    @classmethod
    def validate_timeout(cls, timeout: Optional[int]) -> Tuple[bool, Optional[str]]:
        """Validate timeout parameter (seconds)"""
        if timeout is None:
            return True, None

        if timeout < 1 or timeout > cls.MAX_TIMEOUT:
            return False, f"Parameter [--timeout] must be 1-{cls.MAX_TIMEOUT} seconds, got: {timeout}"

        return True, None

    @classmethod
    def validate_input(cls, location: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate input location: "-", an http(s) URL or a non-empty path

        Local paths are not checked for existence here; reading reports that.
        """
        if location is None or not location.strip():
            return False, "An input file, URL or - (stdin) is required"

        if "://" in location and not SourceLoader.is_remote(location):
            scheme = location.split("://", 1)[0]
            return False, f"Unsupported URL scheme: {scheme} (expected http or https)"

        return True, None

    @classmethod
    def validate_all_arguments(cls, args) -> list:
        """
        Validate all arguments at once

        Args:
            args: Parsed arguments object

        Returns:
            List of error messages (empty if all valid)
        """
        errors = []

        for valid, error in (
            cls.validate_input(getattr(args, "input", None)),
            cls.validate_format(getattr(args, "format", None)),
            cls.validate_indent(getattr(args, "indent", None)),
            cls.validate_timeout(getattr(args, "timeout", None)),
        ):
            if not valid:
                errors.append(error)

        return errors
