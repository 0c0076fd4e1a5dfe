from __future__ import annotations

from typing import Any, Optional, Sequence

from kivy.animation import AnimationTransition
from kivy.clock import Clock
from kivy.properties import BooleanProperty, ListProperty, NumericProperty, StringProperty
from kivy.uix.widget import Widget

from ..handlers.canvas.kivy_canvas import KivyChartCanvas
from ..handlers.canvas.primitives import Paint, Rect
from ..handlers.logers.loger_handlers import LogerHandler
from ..services.pie_chart_painter import PieChartPainter, radians
from ..services.schema import ChartConfig, Segment


class OutlinePieChartWidget(Widget):
    """
    Рисует outline pie chart (кольцо из дуг).
    - set_segments([...]) принимает Segment или dict
    - animationValue 0..1 — прогресс прорисовки, его ведет Clock виджета
    - если сегментов нет, рисует "пустое кольцо"

    На каждый кадр собирается новый ChartConfig; если его fingerprint
    и геометрия виджета не поменялись, перерисовки нет.
    """

    segments = ListProperty([])
    strokeWidth = NumericProperty(20)  # px
    gap = NumericProperty(4.0)  # degrees
    isRTL = BooleanProperty(False)
    animationValue = NumericProperty(1.0)

    animationDuration = NumericProperty(1.0)  # seconds
    transition = StringProperty("out_cubic")
    autoAnimate = BooleanProperty(True)

    emptyRingColor = ListProperty([0.20, 0.20, 0.20, 1])

    def __init__(self, logerHandler: Optional[LogerHandler] = None, **kwargs):
        super().__init__(**kwargs)
        self.logerHandler = logerHandler

        self._animationEvent = None
        self._animationElapsed = 0.0
        self._lastFingerprint: Optional[str] = None
        self._lastGeometry = None

        # Перерисовка при любом изменении геометрии/параметров
        self.bind(pos=self._redraw, size=self._redraw)
        self.bind(
            segments=self._redraw,
            strokeWidth=self._redraw,
            gap=self._redraw,
            isRTL=self._redraw,
            animationValue=self._redraw,
            emptyRingColor=self._redraw,
        )

    def set_segments(self, segments: Sequence[Any]) -> None:
        validated = [item if isinstance(item, Segment) else Segment.model_validate(item) for item in segments]
        self.segments = validated

        if self.autoAnimate:
            self.start_animation()

    def clear(self) -> None:
        self.stop_animation()
        self.segments = []

    def build_config(self) -> ChartConfig:
        return ChartConfig(
            segments=tuple(self.segments),
            strokeWidth=float(self.strokeWidth),
            gap=float(self.gap),
            animationValue=float(self.animationValue),
            isRTL=bool(self.isRTL),
        )

    # ---------- Animation ----------
    def start_animation(self) -> None:
        self.stop_animation()
        self._animationElapsed = 0.0

        if self.animationDuration <= 0:
            self.animationValue = 1.0
            return

        self.animationValue = 0.0
        self._animationEvent = Clock.schedule_interval(self._on_animation_tick, 0)

    def stop_animation(self) -> None:
        if self._animationEvent is not None:
            self._animationEvent.cancel()
            self._animationEvent = None

    @property
    def isAnimating(self) -> bool:
        return self._animationEvent is not None

    def _on_animation_tick(self, dt: float):
        self._animationElapsed += dt
        progress = min(self._animationElapsed / float(self.animationDuration), 1.0)

        easing = getattr(AnimationTransition, self.transition, AnimationTransition.linear)
        # out_back/out_elastic могут выходить за 0..1
        self.animationValue = min(max(float(easing(progress)), 0.0), 1.0)

        if progress >= 1.0:
            self.animationValue = 1.0
            self._animationEvent = None
            return False
        return True

    # ---------- Drawing ----------
    def _redraw(self, *_args) -> None:
        config = self.build_config()
        fingerprint = config.fingerprint()
        geometry = (float(self.x), float(self.y), float(self.width), float(self.height), tuple(self.emptyRingColor))

        if fingerprint == self._lastFingerprint and geometry == self._lastGeometry:
            return

        self._lastFingerprint = fingerprint
        self._lastGeometry = geometry
        self.canvas.clear()

        # Размер кольца — минимальная сторона виджета минус обводка
        sizeValue = min(float(self.width), float(self.height))
        strokeWidth = float(self.strokeWidth)
        side = sizeValue - strokeWidth
        if side <= 0:
            return

        # Центрируем кольцо; половина обводки уходит внутрь виджета
        originX = float(self.x) + (float(self.width) - sizeValue) / 2.0 + strokeWidth / 2.0
        originTop = float(self.y) + (float(self.height) + sizeValue) / 2.0 - strokeWidth / 2.0

        chartCanvas = KivyChartCanvas(self.canvas, originX=originX, originTop=originTop)

        # Нет данных — рисуем пустое кольцо
        if len(config.segments) == 0:
            chartCanvas.draw_arc(
                Rect.from_ltwh(0, 0, side, side),
                radians(0.0),
                radians(360.0),
                False,
                Paint(color=tuple(self.emptyRingColor), strokeWidth=strokeWidth),
            )
            return

        painter = PieChartPainter(config, logerHandler=self.logerHandler)
        painter.paint(chartCanvas, (side, side))
