"""Message - Refusal messages produced when trail metadata is not acceptable.

Validators return a ValidationMessage (or None when valid) instead of raising,
so the form collaborator can show the reason next to the offending field.
TrailFinalizer wraps the same message in TrailValidationError when it refuses
to build a Trail.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationMessage(ABC):
    """Abstract base class for metadata refusal reasons.

    Subclasses store the specific parameters and compute the text as a property.
    Use isinstance() to check the refusal type.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable refusal reason."""
        raise NotImplementedError

    @property
    @abstractmethod
    def field(self) -> str:
        """Metadata field the refusal refers to."""
        raise NotImplementedError

    def log(self) -> None:
        """Write this message to the log."""
        logger.info(f"[VALIDATION] {self.field}: {self.message}")

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class TrailNameRequiredMessage(ValidationMessage):
    """Trail name is missing or only whitespace."""

    @property
    def field(self) -> str:
        return "name"

    @property
    def message(self) -> str:
        return "Trail name is required"


@dataclass(frozen=True)
class DifficultyRequiredMessage(ValidationMessage):
    """No difficulty level was chosen."""

    @property
    def field(self) -> str:
        return "difficulty"

    @property
    def message(self) -> str:
        return "Choose a difficulty level"


@dataclass(frozen=True)
class SurfaceTypeRequiredMessage(ValidationMessage):
    """No surface type was chosen."""

    @property
    def field(self) -> str:
        return "surface_type"

    @property
    def message(self) -> str:
        return "Choose a surface type"


@dataclass(frozen=True)
class UnknownOptionMessage(ValidationMessage):
    """A value is not one of the allowed options for its field."""

    field_name: str
    value: str
    allowed: tuple[str, ...]

    @property
    def field(self) -> str:
        return self.field_name

    @property
    def message(self) -> str:
        return f"Unknown {self.field_name} '{self.value}' (expected one of: {', '.join(self.allowed)})"


@dataclass(frozen=True)
class SessionStillActiveMessage(ValidationMessage):
    """Finalize was requested while the session is still recording or paused."""

    phase: str

    @property
    def field(self) -> str:
        return "session"

    @property
    def message(self) -> str:
        return f"Stop recording before saving the trail (session is {self.phase})"


class TrailValidationError(ValueError):
    """Raised by TrailFinalizer when it refuses to build a Trail.

    Attributes:
        message: The ValidationMessage describing the first failing check
    """

    def __init__(self, message: ValidationMessage) -> None:
        super().__init__(message.message)
        self.message = message
