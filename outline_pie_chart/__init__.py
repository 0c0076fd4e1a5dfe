"""
Outline pie chart: кольцо из дуг с зазорами, градиентами, тенями и анимацией.

Ядро (schema, percentages, shaders, pie_chart_painter) не зависит от kivy;
виджет лежит в outline_pie_chart.widgets.outline_pie_chart_widget.
"""

from .handlers.canvas.abstract_canvas import AbstractChartCanvas, RecordingCanvas
from .handlers.canvas.primitives import ArcCommand, Paint, Rect
from .handlers.logers.loger_handlers import LogerHandler
from .services.percentages import adjust_percentages
from .services.pie_chart_painter import ArcLayout, PieChartPainter, SegmentArc, radians
from .services.schema import (
    Alignment,
    ChartConfig,
    LinearGradient,
    Offset,
    RadialGradient,
    Segment,
    Shadow,
    SweepGradient,
)
from .services.shaders import LinearShader, RadialShader, SweepShader, create_shader

__all__ = [
    "AbstractChartCanvas",
    "Alignment",
    "ArcCommand",
    "ArcLayout",
    "ChartConfig",
    "LinearGradient",
    "LinearShader",
    "LogerHandler",
    "Offset",
    "Paint",
    "PieChartPainter",
    "RadialGradient",
    "RadialShader",
    "Rect",
    "RecordingCanvas",
    "Segment",
    "SegmentArc",
    "Shadow",
    "SweepGradient",
    "SweepShader",
    "adjust_percentages",
    "create_shader",
    "radians",
]
