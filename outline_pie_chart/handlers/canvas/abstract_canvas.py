from abc import ABC, abstractmethod
from typing import List

from .primitives import ArcCommand, Paint, Rect


class AbstractChartCanvas(ABC):
    """
    Поверхность, на которой painter рисует дуги.
    Углы приходят в радианах: 0 — на 3 часа, по часовой стрелке.
    """

    @abstractmethod
    def draw_arc(self, rect: Rect, startAngle: float, sweepAngle: float, useCenter: bool, paint: Paint) -> None:
        pass


class RecordingCanvas(AbstractChartCanvas):
    def __init__(self) -> None:
        self.commands: List[ArcCommand] = []

    def draw_arc(self, rect: Rect, startAngle: float, sweepAngle: float, useCenter: bool, paint: Paint) -> None:
        self.commands.append(
            ArcCommand(
                rect=rect,
                startAngle=startAngle,
                sweepAngle=sweepAngle,
                useCenter=useCenter,
                paint=paint,
            )
        )

    def clear(self) -> None:
        self.commands = []
