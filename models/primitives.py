"""
Geometry shared by the input layer, the scheduler and the games.

Coordinates follow pygame: x grows to the right, y grows downwards, and a
rectangle's position is its top-left corner. Host coordinates are window
pixels; arena-local coordinates are relative to the arena's top-left corner
(see Rectangle.to_local).
"""

from pydantic import BaseModel, ConfigDict, computed_field, field_validator


class Point2D(BaseModel):
    """Immutable point, used for pointer positions, poses and spawn points.

    Examples:
        >>> Point2D(x=3.0, y=4.0).offset(-3.0, 1.0)
        Point2D(x=0.0, y=5.0)
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> 'Point2D':
        """Copy moved by (dx, dy)."""
        return Point2D(x=self.x + dx, y=self.y + dy)

    def __str__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f})"


class Rectangle(BaseModel):
    """Immutable axis-aligned box: arena bounds and collision boxes.

    Both hit tests are inclusive, so a point on an edge is inside and two
    boxes sharing an edge overlap.

    Examples:
        >>> arena = Rectangle(x=0.0, y=80.0, width=480.0, height=480.0)
        >>> arena.contains_point(Point2D(x=240.0, y=80.0))
        True
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_size(cls, v: float) -> float:
        """Reject empty and inverted boxes."""
        if v <= 0:
            raise ValueError(f'Rectangle size must be positive, got {v}')
        return v

    @computed_field
    @property
    def left(self) -> float:
        return self.x

    @computed_field
    @property
    def top(self) -> float:
        return self.y

    @computed_field
    @property
    def right(self) -> float:
        return self.x + self.width

    @computed_field
    @property
    def bottom(self) -> float:
        return self.y + self.height

    @computed_field
    @property
    def center(self) -> Point2D:
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    def contains_point(self, point: Point2D) -> bool:
        """True if `point` lies inside or on an edge."""
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def intersects(self, other: 'Rectangle') -> bool:
        """True if the boxes overlap or touch."""
        if self.right < other.left or other.right < self.left:
            return False
        return not (self.bottom < other.top or other.bottom < self.top)

    def to_local(self, point: Point2D) -> Point2D:
        """Express a point given in the parent space relative to this box."""
        return point.offset(-self.x, -self.y)

    def __str__(self) -> str:
        return f"[{self.x:.1f}, {self.y:.1f} {self.width:.1f}x{self.height:.1f}]"
