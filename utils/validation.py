"""
Validation Utilities
Helper functions for validating Discord IDs and user input
"""

import re
from typing import Any, Optional, Union

# Discord snowflake ID pattern: 17-20 digits
SNOWFLAKE_REGEX = re.compile(r"^[0-9]{17,20}$")

# Channel mention: <#123456789012345678>
CHANNEL_MENTION_REGEX = re.compile(r"^<#([0-9]+)>$")

# Language codes are module names in the languages package
LANGUAGE_CODE_REGEX = re.compile(r"^[a-z]{2,3}(_[a-z]{2,4})?$")


class ValidationResult:
    """Result of a validation operation."""

    def __init__(
        self,
        valid: bool,
        error: Optional[str] = None,
        sanitized: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        self.valid = valid
        self.error = error
        self.sanitized = sanitized
        self.value = value

    def __bool__(self) -> bool:
        return self.valid


class ValidationUtils:
    """Utility class for input validation."""

    @staticmethod
    def is_valid_snowflake(id_value: Union[str, int]) -> bool:
        """
        Check if value is a valid Discord snowflake ID.

        Args:
            id_value: ID to validate

        Returns:
            True if valid snowflake
        """
        if not isinstance(id_value, (str, int)):
            return False
        return bool(SNOWFLAKE_REGEX.match(str(id_value)))

    @staticmethod
    def validate_channel_id(channel_id: Optional[Union[str, int]]) -> ValidationResult:
        """
        Validate a channel ID or channel mention.

        Args:
            channel_id: Raw ID or "<#id>" mention

        Returns:
            ValidationResult with the integer ID in value
        """
        if not channel_id:
            return ValidationResult(valid=False, error="Channel ID is required")

        sanitized = ValidationUtils.sanitize_input(str(channel_id))

        mention = CHANNEL_MENTION_REGEX.match(sanitized)
        if mention:
            sanitized = mention.group(1)

        if not ValidationUtils.is_valid_snowflake(sanitized):
            return ValidationResult(valid=False, error="Invalid channel ID format")

        return ValidationResult(valid=True, sanitized=sanitized, value=int(sanitized))

    @staticmethod
    def validate_language_code(code: Optional[str]) -> ValidationResult:
        """Validate a language code typed by a user."""
        if not code:
            return ValidationResult(valid=False, error="Language code is required")

        sanitized = ValidationUtils.sanitize_input(code).lower()

        if not LANGUAGE_CODE_REGEX.match(sanitized):
            return ValidationResult(valid=False, error="Invalid language code format")

        return ValidationResult(valid=True, sanitized=sanitized)

    @staticmethod
    def sanitize_input(input_value: str) -> str:
        """
        Sanitize user input.

        Args:
            input_value: Input to sanitize

        Returns:
            Sanitized input string
        """
        if not isinstance(input_value, str):
            return ""

        sanitized = input_value.strip()

        # Remove zero-width characters
        sanitized = re.sub(r"[\u200B-\u200D\uFEFF]", "", sanitized)

        # Remove control characters
        sanitized = re.sub(r"[\x00-\x1F\x7F-\x9F]", "", sanitized)

        return sanitized
