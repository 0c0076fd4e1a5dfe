from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

from ..handlers.canvas.primitives import Rect, RgbaTuple
from .schema import LinearGradient, RadialGradient, SweepGradient


def lerp_color(colors: Tuple[RgbaTuple, ...], stops: Tuple[float, ...], t: float) -> RgbaTuple:
    if t <= stops[0]:
        return colors[0]
    if t >= stops[-1]:
        return colors[-1]

    for index in range(len(stops) - 1):
        stopFrom = stops[index]
        stopTo = stops[index + 1]
        if stopFrom <= t <= stopTo:
            if stopTo == stopFrom:
                return colors[index + 1]
            k = (t - stopFrom) / (stopTo - stopFrom)
            colorFrom = colors[index]
            colorTo = colors[index + 1]
            return tuple(a + (b - a) * k for a, b in zip(colorFrom, colorTo))

    return colors[-1]


@dataclass(frozen=True)
class Shader(ABC):
    colors: Tuple[RgbaTuple, ...]
    stops: Tuple[float, ...]

    @abstractmethod
    def position_at(self, x: float, y: float) -> float:
        """Положение точки на цветовой линии градиента (0..1 внутри диапазона)."""

    def color_at(self, x: float, y: float) -> RgbaTuple:
        return lerp_color(self.colors, self.stops, self.position_at(x, y))


@dataclass(frozen=True)
class LinearShader(Shader):
    start: Tuple[float, float] = (0.0, 0.0)
    end: Tuple[float, float] = (1.0, 0.0)

    def position_at(self, x: float, y: float) -> float:
        dirX = self.end[0] - self.start[0]
        dirY = self.end[1] - self.start[1]
        lengthSquared = dirX * dirX + dirY * dirY
        if lengthSquared == 0:
            return 0.0
        return ((x - self.start[0]) * dirX + (y - self.start[1]) * dirY) / lengthSquared


@dataclass(frozen=True)
class RadialShader(Shader):
    center: Tuple[float, float] = (0.0, 0.0)
    radius: float = 1.0

    def position_at(self, x: float, y: float) -> float:
        if self.radius <= 0:
            return 1.0
        return math.hypot(x - self.center[0], y - self.center[1]) / self.radius


@dataclass(frozen=True)
class SweepShader(Shader):
    center: Tuple[float, float] = (0.0, 0.0)
    startAngle: float = 0.0
    endAngle: float = math.pi * 2

    def position_at(self, x: float, y: float) -> float:
        # ось Y вниз, поэтому atan2 сразу дает угол по часовой стрелке
        angle = math.atan2(y - self.center[1], x - self.center[0]) % (math.pi * 2)
        return (angle - self.startAngle) / (self.endAngle - self.startAngle)


def create_shader(gradient, rect: Rect) -> Shader:
    """
    Строит shader для градиента сегмента.
    Shader всегда привязан к прямоугольнику всего графика, а не сегмента.
    """
    if isinstance(gradient, LinearGradient):
        return LinearShader(
            colors=tuple(gradient.colors),
            stops=gradient.resolved_stops(),
            start=gradient.begin.resolve(rect),
            end=gradient.end.resolve(rect),
        )

    if isinstance(gradient, RadialGradient):
        return RadialShader(
            colors=tuple(gradient.colors),
            stops=gradient.resolved_stops(),
            center=gradient.center.resolve(rect),
            radius=gradient.radius * rect.shortestSide,
        )

    if isinstance(gradient, SweepGradient):
        return SweepShader(
            colors=tuple(gradient.colors),
            stops=gradient.resolved_stops(),
            center=gradient.center.resolve(rect),
            startAngle=gradient.startAngle,
            endAngle=gradient.endAngle,
        )

    raise TypeError(f"Unsupported gradient kind: {type(gradient).__name__}")
