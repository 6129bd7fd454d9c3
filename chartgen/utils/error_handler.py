"""
Error Handling Utilities.

Standardized error handling patterns shared by the HTTP layer and the image
generation client. Provides consistent error handling with tuple returns
(result, error).
"""

import traceback
from collections.abc import Callable
from typing import TypeVar

from loguru import logger

T = TypeVar("T")


class ErrorHandler:
    """Standardized error handling utilities."""

    @staticmethod
    def safe_execute(
        func: Callable[..., T],
        *args,
        error_message_prefix: str = "Operation failed",
        log_errors: bool = True,
        return_none_on_error: bool = True,
        **kwargs,
    ) -> tuple[T | None, str | None]:
        """
        Execute a function safely with standardized error handling.

        Args:
            func: Function to execute
            *args: Arguments to pass to the function
            error_message_prefix: Prefix for error messages
            log_errors: Whether to log errors
            return_none_on_error: Whether to return None on error or raise
            **kwargs: Keyword arguments to pass to the function

        Returns:
            Tuple[Optional[T], Optional[str]]: (result, error_message)
            - On success: (result, None)
            - On failure: (None, error_message) if return_none_on_error=True

        """
        try:
            result = func(*args, **kwargs)
            return result, None
        except Exception as e:
            error_msg = f"{error_message_prefix}: {str(e)}"

            if log_errors:
                logger.error(error_msg)
                logger.debug(f"Traceback: {traceback.format_exc()}")

            if return_none_on_error:
                return None, error_msg
            else:
                raise

    @staticmethod
    def safe_execute_with_default(
        func: Callable[..., T],
        default_value: T,
        *args,
        error_message_prefix: str = "Operation failed",
        log_errors: bool = True,
        **kwargs,
    ) -> tuple[T, str | None]:
        """
        Execute a function safely, returning a default value on error.

        Args:
            func: Function to execute
            default_value: Value to return if function fails
            *args: Arguments to pass to the function
            error_message_prefix: Prefix for error messages
            log_errors: Whether to log errors
            **kwargs: Keyword arguments to pass to the function

        Returns:
            Tuple[T, Optional[str]]: (result_or_default, error_message)

        """
        result, error = ErrorHandler.safe_execute(
            func,
            *args,
            error_message_prefix=error_message_prefix,
            log_errors=log_errors,
            return_none_on_error=True,
            **kwargs,
        )

        if error is not None:
            return default_value, error
        return result, None

    @staticmethod
    def safe_provider_operation(
        operation: Callable[..., T],
        *args,
        provider_name: str = "Image provider",
        **kwargs,
    ) -> tuple[T | None, str | None]:
        """
        Execute a call to an external image provider safely.

        Configuration errors are not provider failures and are re-raised so
        the caller can report them immediately.

        Args:
            operation: Provider call to execute
            *args: Arguments to pass to the operation
            provider_name: Name of the provider for error messages
            **kwargs: Keyword arguments to pass to the operation

        Returns:
            Tuple[Optional[T], Optional[str]]: (result, error_message)

        """
        try:
            return operation(*args, **kwargs), None
        except ConfigurationError:
            raise
        except Exception as e:
            error_msg = f"{provider_name} failed: {str(e)}"
            logger.warning(error_msg)
            return None, error_msg


class ServiceError(Exception):
    """Base exception for service-level errors."""


class ConfigurationError(ServiceError):
    """Exception for configuration-related errors."""


class ImageGenerationError(ServiceError):
    """Exception for image provider failures."""


class InvalidChartKindError(ValueError):
    """Raised when a chart kind name is not supported."""
