import math
from typing import List, Tuple

from .primitives import Rect

# то же значение, что и у painter.radians()
DEGREES_TO_RADIANS = math.pi / 180.0

# В kivy 0° у Ellipse/Line(ellipse=...) — это 12 часов, а не 3
KIVY_ANGLE_OFFSET = 90.0


def to_degrees(angle: float) -> float:
    return angle / DEGREES_TO_RADIANS


def to_kivy_ellipse(rect: Rect, originX: float, originTop: float) -> Tuple[float, float, float, float]:
    """
    Переводит прямоугольник из экранных координат (Y вниз)
    в координаты виджета kivy (Y вверх).
    originTop — верхняя граница области рисования в координатах kivy.
    """
    return (
        originX + rect.left,
        originTop - rect.bottom,
        rect.width,
        rect.height,
    )


def to_kivy_angles(startAngle: float, sweepAngle: float) -> Tuple[float, float]:
    angleStart = to_degrees(startAngle) + KIVY_ANGLE_OFFSET
    return (angleStart, angleStart + to_degrees(sweepAngle))


def split_arc(startAngle: float, sweepAngle: float, maxSliceDegrees: float) -> List[Tuple[float, float]]:
    """Режет дугу (радианы) на куски не шире maxSliceDegrees."""
    sweepDegrees = abs(to_degrees(sweepAngle))
    slicesCount = max(1, int(math.ceil(sweepDegrees / maxSliceDegrees)))
    sliceSweep = sweepAngle / slicesCount
    return [(startAngle + i * sliceSweep, sliceSweep) for i in range(slicesCount)]


def arc_point(rect: Rect, angle: float) -> Tuple[float, float]:
    centerX, centerY = rect.center
    return (
        centerX + rect.width / 2.0 * math.cos(angle),
        centerY + rect.height / 2.0 * math.sin(angle),
    )


def blur_layers(halfWidth: float, blurSigma: float, steps: int, alpha: float = 1.0) -> List[Tuple[float, float]]:
    """
    Имитация размытия: несколько все более широких и прозрачных обводок.
    Возвращает (ширина, альфа слоя), от самой широкой к самой узкой.

    Наложенные слои смешиваются как 1 - П(1 - a_i), поэтому прозрачность
    (1 - alpha) делится между слоями степенями: в центре, где лежат все
    слои, получается ровно alpha.
    """
    if blurSigma <= 0 or steps <= 0:
        return [(halfWidth, alpha)]

    transparency = 1.0 - alpha
    weightsTotal = steps * (steps + 1) / 2.0

    layers = []
    for step in range(steps, 0, -1):
        layerWidth = halfWidth + blurSigma * step / steps
        weight = (steps - step + 1) / weightsTotal
        layers.append((layerWidth, 1.0 - transparency ** weight))
    return layers


def to_kivy_point(point: Tuple[float, float], originX: float, originTop: float) -> Tuple[float, float]:
    x, y = point
    return (originX + x, originTop - y)


def kivy_cap(cap: str) -> str:
    return "round" if cap == "round" else "none"
