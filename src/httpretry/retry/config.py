"""
Retry configuration.
"""

from dataclasses import dataclass

from .backoff import WaitTimeFunc, default_wait_time
from .classify import ResponseValidator, validate_response
from ..exceptions import ConfigurationError

DEFAULT_ATTEMPTS = 6


@dataclass(frozen=True)
class RetryConfig:
    """
    Configuration for retry behavior.

    Instances are immutable and may be shared between clients and threads.

    Attributes:
        max_attempts: Total number of transport calls allowed (default: 6)
        wait_time: Maps a one-based failed-attempt index to a delay in seconds
        validator: Raises `InvalidStatusError` for responses worth retrying
    """

    max_attempts: int = DEFAULT_ATTEMPTS
    wait_time: WaitTimeFunc = default_wait_time
    validator: ResponseValidator = validate_response

    def __post_init__(self) -> None:
        if (
            not isinstance(self.max_attempts, int)
            or isinstance(self.max_attempts, bool)
            or self.max_attempts <= 0
        ):
            raise ConfigurationError(
                f"max_attempts must be a positive integer, got {self.max_attempts!r}"
            )
        if not callable(self.wait_time):
            raise ConfigurationError("wait_time must be callable")
        if not callable(self.validator):
            raise ConfigurationError("validator must be callable")

    @classmethod
    def aggressive(cls) -> "RetryConfig":
        """Preset for aggressive retry (more attempts)."""
        return cls(max_attempts=10)

    @classmethod
    def conservative(cls) -> "RetryConfig":
        """Preset for conservative retry (fewer attempts)."""
        return cls(max_attempts=3)

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset for no retry (single attempt only)."""
        return cls(max_attempts=1)
