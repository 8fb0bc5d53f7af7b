"""Custom exceptions used throughout the lifesim package."""

from typing import Any, Optional


class LifeSimError(Exception):
    """Base exception for all lifesim errors.

    All package-specific exceptions inherit from this class, so callers can
    catch every simulation error with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(LifeSimError):
    """Raised when there's an error in configuration.

    This includes:
    - Unreadable or malformed YAML
    - Missing required configuration
    - Values that fail validation (non-positive sizes, bad template points)
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class GridException(LifeSimError):
    """Base exception for all grid-related errors."""

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if index is not None:
            details = details or {}
            details["index"] = index

        super().__init__(message=message, details=details)
        self.index = index


class GridBoundsError(GridException):
    """Raised when a cell access falls outside the grid.

    Examples:
    - linear index >= width * height
    - (row, col) seeding coordinates beyond the universe dimensions
    """

    def __init__(
        self,
        index: int,
        size: int,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"Cell index {index} out of bounds for grid of {size} cells"
        super().__init__(message=message, index=index, details=details)
        self.size = size


class GridSizeError(GridException):
    """Raised when a universe dimension is smaller than one cell."""

    def __init__(
        self,
        dimension: str,
        value: int,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"Universe {dimension} must be >= 1, got {value}"
        super().__init__(message=message, details=details)
        self.dimension = dimension
        self.value = value
