from kivy.graphics import Color, Ellipse, Line

from .abstract_canvas import AbstractChartCanvas
from .kivy_geometry import (
    arc_point,
    blur_layers,
    kivy_cap,
    split_arc,
    to_kivy_angles,
    to_kivy_ellipse,
    to_kivy_point,
)
from .primitives import Paint, Rect


class KivyChartCanvas(AbstractChartCanvas):
    """
    Рисует команды painter-а инструкциями kivy.graphics.

    target — canvas виджета или InstructionGroup (нужен только метод add).
    Градиент строится из коротких кусков дуги, каждый своим цветом.
    Размытие тени имитируется несколькими полупрозрачными обводками.
    """

    def __init__(self, target, originX: float = 0.0, originTop: float = 0.0, maxSliceDegrees: float = 3.0, blurSteps: int = 4) -> None:
        self.target = target
        self.originX = float(originX)
        self.originTop = float(originTop)
        self.maxSliceDegrees = float(maxSliceDegrees)
        self.blurSteps = int(blurSteps)

    def draw_arc(self, rect: Rect, startAngle: float, sweepAngle: float, useCenter: bool, paint: Paint) -> None:
        ellipse = to_kivy_ellipse(rect, self.originX, self.originTop)
        # Line в kivy задает полуширину обводки
        halfWidth = paint.strokeWidth / 2.0

        if paint.shader is None:
            color = paint.color or (1.0, 1.0, 1.0, 1.0)
            self._add_stroke(ellipse, startAngle, sweepAngle, color, halfWidth, paint.cap, paint.blurSigma)
            return

        pieces = []
        for sliceStart, sliceSweep in split_arc(startAngle, sweepAngle, self.maxSliceDegrees):
            x, y = arc_point(rect, sliceStart + sliceSweep / 2.0)
            pieces.append((sliceStart, sliceSweep, paint.shader.color_at(x, y)))

        # у кусков плоские концы, иначе скругления ложатся на соседей
        for pieceStart, pieceSweep, color in pieces:
            self._add_stroke(ellipse, pieceStart, pieceSweep, color, halfWidth, "butt", paint.blurSigma)

        if paint.cap == "round":
            self._add_round_end(rect, startAngle, pieces[0][2], halfWidth)
            self._add_round_end(rect, startAngle + sweepAngle, pieces[-1][2], halfWidth)

    def _add_stroke(self, ellipse, startAngle, sweepAngle, color, halfWidth, cap, blurSigma) -> None:
        angleStart, angleEnd = to_kivy_angles(startAngle, sweepAngle)
        red, green, blue, alpha = color

        for layerWidth, layerAlpha in blur_layers(halfWidth, blurSigma or 0.0, self.blurSteps, alpha):
            self.target.add(Color(red, green, blue, layerAlpha))
            self.target.add(
                Line(
                    ellipse=(*ellipse, angleStart, angleEnd),
                    width=layerWidth,
                    cap=kivy_cap(cap),
                )
            )

    def _add_round_end(self, rect: Rect, angle: float, color, halfWidth: float) -> None:
        centerX, centerY = to_kivy_point(arc_point(rect, angle), self.originX, self.originTop)
        self.target.add(Color(*color))
        self.target.add(
            Ellipse(
                pos=(centerX - halfWidth, centerY - halfWidth),
                size=(halfWidth * 2.0, halfWidth * 2.0),
            )
        )
