"""Validators - Input validation for trail finalization.

Centralizes all metadata validation. Validators return Optional[ValidationMessage]:
- None if valid
- A ValidationMessage if invalid (caller displays it)

Design Principles:
- No exceptions for expected validation failures
- Messages know which field they refer to
- The form collaborator pre-checks with these; TrailFinalizer re-checks
"""

from collections.abc import Iterable
from enum import Enum

from trail_recorder.model.accessibility import AccessibilityFeature, DifficultyLevel, SurfaceType
from trail_recorder.model.message import (
    DifficultyRequiredMessage,
    SessionStillActiveMessage,
    SurfaceTypeRequiredMessage,
    TrailNameRequiredMessage,
    UnknownOptionMessage,
    ValidationMessage,
)
from trail_recorder.model.trail import TrailMetadata
from trail_recorder.session.state_machine import RecordingPhase


def _validate_option(value: Enum | str, enum_cls: type[Enum], field_name: str) -> ValidationMessage | None:
    if isinstance(value, enum_cls):
        return None
    allowed = tuple(member.value for member in enum_cls)
    if isinstance(value, str) and value in allowed:
        return None
    return UnknownOptionMessage(field_name=field_name, value=str(value), allowed=allowed)


def validate_trail_name(name: str | None) -> ValidationMessage | None:
    """Validate that the trail name is non-empty after trimming.

    Returns:
        None if valid, TrailNameRequiredMessage otherwise.
    """
    if name is None or not name.strip():
        return TrailNameRequiredMessage()
    return None


def validate_difficulty(difficulty: DifficultyLevel | str | None) -> ValidationMessage | None:
    """Validate that a known difficulty level was chosen.

    Returns:
        None if valid, DifficultyRequiredMessage if absent, UnknownOptionMessage if unknown.
    """
    if difficulty is None or difficulty == "":
        return DifficultyRequiredMessage()
    return _validate_option(value=difficulty, enum_cls=DifficultyLevel, field_name="difficulty")


def validate_surface_type(surface_type: SurfaceType | str | None) -> ValidationMessage | None:
    """Validate that a known surface type was chosen.

    Returns:
        None if valid, SurfaceTypeRequiredMessage if absent, UnknownOptionMessage if unknown.
    """
    if surface_type is None or surface_type == "":
        return SurfaceTypeRequiredMessage()
    return _validate_option(value=surface_type, enum_cls=SurfaceType, field_name="surface_type")


def validate_accessibility_features(
    features: Iterable[AccessibilityFeature | str] | AccessibilityFeature | str | None,
) -> ValidationMessage | None:
    """Validate that every accessibility tag is a known feature.

    A single tag is checked as one tag (a string is never split into characters).

    Returns:
        None if all valid (None or an empty collection is valid), else UnknownOptionMessage for the first unknown tag.
    """
    if features is None:
        return None
    if isinstance(features, (str, AccessibilityFeature)):
        features = (features,)
    for feature in features:
        message = _validate_option(value=feature, enum_cls=AccessibilityFeature, field_name="accessibility_feature")
        if message is not None:
            return message
    return None


def validate_session_stopped(phase: RecordingPhase) -> ValidationMessage | None:
    """Validate that recording has ended before a trail is built.

    Returns:
        None if idle, SessionStillActiveMessage while recording or paused.
    """
    if phase is not RecordingPhase.IDLE:
        return SessionStillActiveMessage(phase=phase.value)
    return None


def validate_trail_metadata(metadata: TrailMetadata) -> ValidationMessage | None:
    """Run all metadata validators in form order.

    Returns:
        None if valid, otherwise the first failing check's message.
    """
    for message in (
        validate_trail_name(name=metadata.name),
        validate_difficulty(difficulty=metadata.difficulty),
        validate_surface_type(surface_type=metadata.surface_type),
        validate_accessibility_features(features=metadata.accessibility_features),
    ):
        if message is not None:
            return message
    return None
