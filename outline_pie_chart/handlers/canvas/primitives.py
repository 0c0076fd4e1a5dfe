from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Literal, Optional, Tuple

RgbaTuple = Tuple[float, float, float, float]
StrokeCap = Literal["butt", "round"]


@dataclass(frozen=True)
class Rect:
    """
    Прямоугольник в экранной системе координат:
    начало в левом верхнем углу, ось Y направлена вниз.
    """

    left: float
    top: float
    width: float
    height: float

    @classmethod
    def from_ltwh(cls, left: float, top: float, width: float, height: float) -> "Rect":
        return cls(left=float(left), top=float(top), width=float(width), height=float(height))

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.left + self.width / 2.0, self.top + self.height / 2.0)

    @property
    def shortestSide(self) -> float:
        return min(self.width, self.height)

    def shift(self, dx: float, dy: float) -> "Rect":
        return replace(self, left=self.left + dx, top=self.top + dy)


@dataclass(frozen=True)
class Paint:
    # shader имеет приоритет над color
    color: Optional[RgbaTuple] = None
    shader: Optional[Any] = None
    strokeWidth: float = 20.0
    cap: StrokeCap = "butt"
    blurSigma: Optional[float] = None


@dataclass(frozen=True)
class ArcCommand:
    rect: Rect
    startAngle: float  # radians
    sweepAngle: float  # radians
    useCenter: bool
    paint: Paint
