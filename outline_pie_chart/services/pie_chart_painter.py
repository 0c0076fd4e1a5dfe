from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..handlers.canvas.abstract_canvas import AbstractChartCanvas
from ..handlers.canvas.primitives import ArcCommand, Paint, Rect
from ..handlers.logers.loger_handlers import LogerHandler
from .percentages import adjust_percentages
from .schema import ChartConfig, Segment, Shadow
from .shaders import create_shader

DEGREES_TO_RADIANS = math.pi / 180.0

# 0° — 3 часа, углы растут по часовой стрелке (ось Y вниз)
BASE_ANGLE_LTR = 270.0
BASE_ANGLE_RTL = 0.0


def radians(degrees: float) -> float:
    return degrees * DEGREES_TO_RADIANS


@dataclass(frozen=True)
class SegmentArc:
    index: int
    segment: Segment
    cursorStart: float
    animatedSweep: float
    startAngle: float  # degrees, с учетом половины зазора
    sweepAngle: float  # degrees, 0 если сегмент не рисуется
    isDrawn: bool


@dataclass(frozen=True)
class ArcLayout:
    baseAngle: float
    endAngle: float
    arcs: Tuple[SegmentArc, ...]

    @property
    def cursorAdvance(self) -> float:
        return self.endAngle - self.baseAngle

    @property
    def drawnSweeps(self) -> List[float]:
        return [arc.sweepAngle for arc in self.arcs]


class PieChartPainter:
    """
    Раскладывает сегменты по кольцу и рисует их дугами.

    Зазор (gap) только сужает видимую дугу: половина зазора в начале,
    половина в конце. Курсор всегда сдвигается на полный animatedSweep,
    поэтому сегменты вместе покрывают ровно 360° * animationValue.
    """

    def __init__(self, config: ChartConfig, logerHandler: Optional[LogerHandler] = None) -> None:
        self.config = config
        self.logerHandler = logerHandler

    @property
    def baseAngle(self) -> float:
        return BASE_ANGLE_RTL if self.config.isRTL else BASE_ANGLE_LTR

    @staticmethod
    def chart_rect(size: Sequence[float]) -> Rect:
        width, height = size
        side = min(float(width), float(height))
        return Rect.from_ltwh(0, 0, side, side)

    def layout(self) -> ArcLayout:
        adjustedSegments = adjust_percentages(self.config.segments)
        gap = self.config.gap
        cursor = self.baseAngle

        arcs = []
        for index, segment in enumerate(adjustedSegments):
            fullSweepAngle = segment.percentage * 360.0
            animatedSweepAngle = fullSweepAngle * self.config.animationValue

            startAngle = cursor
            sweepAngle = 0.0
            isDrawn = False

            if animatedSweepAngle > 0:
                adjustedSweepAngle = animatedSweepAngle - gap
                startAngle = cursor + gap / 2.0
                if adjustedSweepAngle > 0:
                    sweepAngle = adjustedSweepAngle
                    isDrawn = True

            arcs.append(
                SegmentArc(
                    index=index,
                    segment=segment,
                    cursorStart=cursor,
                    animatedSweep=animatedSweepAngle,
                    startAngle=startAngle,
                    sweepAngle=sweepAngle,
                    isDrawn=isDrawn,
                )
            )

            cursor += animatedSweepAngle

        return ArcLayout(baseAngle=self.baseAngle, endAngle=cursor, arcs=tuple(arcs))

    def paint(self, canvas: AbstractChartCanvas, size: Sequence[float]) -> List[ArcCommand]:
        rect = self.chart_rect(size)
        if rect.width <= 0:
            self._log_debug(f"Nothing to paint, size={tuple(size)}")
            return []

        commands: List[ArcCommand] = []
        for arc in self.layout().arcs:
            if not arc.isDrawn:
                self._log_debug(
                    f"Segment {arc.index} skipped: animatedSweep={arc.animatedSweep:.3f}, gap={self.config.gap}"
                )
                continue
            commands.extend(self._draw_segment_with_effects(canvas, rect, arc.segment, arc.startAngle, arc.sweepAngle))

        return commands

    def should_repaint(self, oldPainter) -> bool:
        if not isinstance(oldPainter, PieChartPainter):
            return True

        oldConfig = oldPainter.config
        return (
            oldConfig.segments != self.config.segments
            or oldConfig.strokeWidth != self.config.strokeWidth
            or oldConfig.gap != self.config.gap
            or oldConfig.animationValue != self.config.animationValue
            or oldConfig.isRTL != self.config.isRTL
        )

    def _draw_segment_with_effects(
        self,
        canvas: AbstractChartCanvas,
        rect: Rect,
        segment: Segment,
        startAngle: float,
        sweepAngle: float,
    ) -> List[ArcCommand]:
        strokeWidth = self.config.strokeWidth
        commands: List[ArcCommand] = []

        # тени рисуются первыми, под основной дугой
        for shadow in segment.shadowList:
            commands.append(self._draw_shadow(canvas, rect, shadow, startAngle, sweepAngle, strokeWidth))

        paint = Paint(
            color=None if segment.gradient is not None else segment.color,
            shader=create_shader(segment.gradient, rect) if segment.gradient is not None else None,
            strokeWidth=strokeWidth,
            cap="round" if segment.hasRoundCaps else "butt",
        )
        commands.append(self._issue(canvas, rect, startAngle, sweepAngle, paint))
        return commands

    def _draw_shadow(
        self,
        canvas: AbstractChartCanvas,
        rect: Rect,
        shadow: Shadow,
        startAngle: float,
        sweepAngle: float,
        strokeWidth: float,
    ) -> ArcCommand:
        # смещение тени поворачивается вместе с серединой дуги
        middleAngleRad = radians(startAngle + sweepAngle / 2.0)
        offsetX = shadow.offset.dx * math.cos(middleAngleRad)
        offsetY = shadow.offset.dy * math.sin(middleAngleRad)

        shadowPaint = Paint(
            color=shadow.color,
            strokeWidth=strokeWidth,
            blurSigma=shadow.blurRadius,
        )
        return self._issue(canvas, rect.shift(offsetX, offsetY), startAngle, sweepAngle, shadowPaint)

    @staticmethod
    def _issue(canvas: AbstractChartCanvas, rect: Rect, startAngle: float, sweepAngle: float, paint: Paint) -> ArcCommand:
        command = ArcCommand(
            rect=rect,
            startAngle=radians(startAngle),
            sweepAngle=radians(sweepAngle),
            useCenter=False,
            paint=paint,
        )
        canvas.draw_arc(command.rect, command.startAngle, command.sweepAngle, command.useCenter, command.paint)
        return command

    def _log_debug(self, message: str) -> None:
        if self.logerHandler is not None:
            self.logerHandler.logerClient.debug(message)
