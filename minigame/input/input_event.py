"""
Input Event - Represents a single raw host input action.

Uses Pydantic for validation and immutability.
"""
from typing import Optional

from pydantic import BaseModel, field_validator, ConfigDict

from models import Point2D, InputKind


class InputEvent(BaseModel):
    """Immutable input event from any source.

    All input sources must convert their host events to this common format
    before handing them to subscribers.

    Attributes:
        kind: What happened (key down, pointer move, touch end, ...)
        timestamp: Time when the event occurred (seconds, from monotonic clock)
        position: Host coordinates of the pointer/touch, None for key events
        key: Key code for key events, None otherwise
        contacts: Number of simultaneous touch points (1 for mouse and keys)
    """
    kind: InputKind
    timestamp: float
    position: Optional[Point2D] = None
    key: Optional[int] = None
    contacts: int = 1

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    @field_validator('contacts')
    @classmethod
    def validate_contacts(cls, v: int) -> int:
        """Validate the contact count is not negative."""
        if v < 0:
            raise ValueError(f'Contact count must be non-negative, got {v}')
        return v

    model_config = ConfigDict(frozen=True)

    def coordinates(self) -> Optional[Point2D]:
        """Return the single contact position of this event.

        Multi-finger touches are not supported and yield None, as do
        events without a position.
        """
        if self.kind.is_touch and self.contacts != 1:
            return None
        return self.position

    def __str__(self) -> str:
        """String representation for debugging."""
        where = f"({self.position.x:.2f}, {self.position.y:.2f})" if self.position else "-"
        return (f"InputEvent(kind={self.kind.value}, pos={where}, key={self.key}, "
                f"t={self.timestamp:.3f})")
