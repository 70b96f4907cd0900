"""AnimSynth Exception Hierarchy.

Provides structured exception classes for synthesis and clip storage.

Hierarchy:
    AnimSynthError (base)
    ├── ConfigurationError
    │   └── InvalidConfigError
    ├── SynthesisError
    │   └── InvalidInputError
    └── ClipError
        ├── ClipReadError
        └── ClipWriteError
"""

from typing import Any


class AnimSynthError(Exception):
    """Base exception for all AnimSynth errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error
        recoverable: Whether the caller can report and carry on
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(AnimSynthError):
    """Base exception for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self,
        config_key: str,
        value: Any,
        reason: str,
    ) -> None:
        super().__init__(
            message=f"Invalid configuration for {config_key}: {reason}",
            details={
                "config_key": config_key,
                "value": str(value),
                "reason": reason,
            },
            recoverable=False,
        )


# =============================================================================
# Synthesis Errors
# =============================================================================


class SynthesisError(AnimSynthError):
    """Base exception for clip synthesis errors."""

    pass


class InvalidInputError(SynthesisError):
    """Raised when synthesis is invoked without a base or any target.

    Raised before any work is done, so no output exists when it surfaces.
    """

    def __init__(self, reason: str, argument: str | None = None) -> None:
        details: dict[str, Any] = {"reason": reason}
        if argument:
            details["argument"] = argument
        super().__init__(
            message=f"Invalid synthesis input: {reason}",
            details=details,
            recoverable=True,  # Caller reports and moves on
        )
        self.argument = argument


# =============================================================================
# Clip Storage Errors
# =============================================================================


class ClipError(AnimSynthError):
    """Base exception for clip file errors."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
        recoverable: bool = False,
    ) -> None:
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details, recoverable)
        self.path = path


class ClipReadError(ClipError):
    """Raised when a source clip cannot be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            message=f"Failed to read clip {path}: {reason}",
            path=path,
            details={"reason": reason},
            recoverable=False,
        )


class ClipWriteError(ClipError):
    """Raised when a synthesized clip cannot be persisted."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            message=f"Failed to write clip {path}: {reason}",
            path=path,
            details={"reason": reason},
            recoverable=True,  # Can retry with another output path
        )
