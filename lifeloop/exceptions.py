"""Custom exceptions used throughout the lifeloop package."""

from typing import Any, Dict, Optional


class LifeLoopError(Exception):
    """Base exception for all lifeloop errors.

    Every package-specific exception inherits from this class so callers
    can catch all of them with a single except clause.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(LifeLoopError):
    """Raised when a board, history or simulation is configured with invalid values.

    This includes:
    - Non-positive grid dimensions or history capacity
    - Unsupported hash widths
    - Malformed configuration files or seed coordinates
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
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


class TouchCountUnderflowError(LifeLoopError):
    """Raised when a cell is untouched more often than it was touched.

    Only a broken touch phase can trigger this; the count is never wrapped.
    """

    def __init__(self, x: Optional[int] = None, y: Optional[int] = None):
        if x is None or y is None:
            message = "Touch count underflow on cell"
        else:
            message = f"Touch count underflow on cell ({x}, {y})"
        super().__init__(message, details={"x": x, "y": y})


class SimulationHaltedError(LifeLoopError):
    """Raised when a halted board is asked to advance another generation."""

    def __init__(self, generation: int):
        super().__init__(
            f"Board halted at generation {generation}; no further generations may run",
            details={"generation": generation},
        )
        self.generation = generation
