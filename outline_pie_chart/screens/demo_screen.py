from __future__ import annotations

import math
from typing import List, Optional

from kivy.clock import Clock
from kivy.properties import BooleanProperty, StringProperty
from kivy.uix.screenmanager import Screen

from ..handlers.logers.loger_handlers import LogerHandler
from ..services.schema import Segment

_palette = [
    (0.27, 0.62, 0.97, 1),
    (0.20, 0.80, 0.55, 1),
    (0.95, 0.55, 0.20, 1),
    (0.75, 0.35, 0.95, 1),
    (0.95, 0.20, 0.45, 1),
    (0.65, 0.65, 0.65, 1),
]


def build_demo_segments(mode: str) -> List[Segment]:
    """
    basic   — только цвета
    effects — градиенты, тени и скругленные концы
    """
    if mode == "effects":
        return [
            Segment(
                percentage=0.45,
                color=_palette[0],
                gradient={"kind": "linear", "colors": [_palette[0], _palette[3]]},
                shadowList=[{"offset": {"dx": 3, "dy": 3}, "blurRadius": 4, "color": (0, 0, 0, 0.35)}],
                cornerRadius=6,
            ),
            Segment(
                percentage=0.35,
                color=_palette[1],
                gradient={"kind": "sweep", "colors": [_palette[1], _palette[2]], "endAngle": math.pi * 2},
                cornerRadius=6,
            ),
            Segment(
                percentage=0.20,
                color=_palette[4],
                gradient={"kind": "radial", "colors": [_palette[4], _palette[5]], "radius": 0.6},
                shadowList=[{"offset": {"dx": 2, "dy": 2}, "blurRadius": 2, "color": (0, 0, 0, 0.25)}],
            ),
        ]

    return [
        Segment(percentage=0.64, color=_palette[0]),
        Segment(percentage=0.36, color=_palette[2]),
    ]


class DemoScreen(Screen):
    mode = StringProperty("basic")
    isRTL = BooleanProperty(False)
    legendText = StringProperty("")

    def __init__(self, animationDuration: float = 1.0, logerHandler: Optional[LogerHandler] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._animationDuration = animationDuration
        self._logerHandler = logerHandler
        self._isLoadedOnce = False

        # первый экран может не получить on_pre_enter
        Clock.schedule_once(lambda _: self._load_once(), 0)

    def on_pre_enter(self, *args) -> None:
        super().on_pre_enter(*args)
        self._load_once()

    def _load_once(self) -> None:
        if self._isLoadedOnce:
            return
        self._isLoadedOnce = True
        self._apply_segments()

    # ---------- UI ----------
    def set_mode(self, mode: str) -> None:
        normalizedMode = (mode or "").strip().lower()
        if normalizedMode not in ("basic", "effects"):
            return

        if self.mode == normalizedMode:
            return

        self.mode = normalizedMode
        self._apply_segments()

    def on_rtl_click(self) -> None:
        self.isRTL = not self.isRTL
        chart = self.ids.get("pieChart")
        if chart is not None:
            chart.isRTL = self.isRTL

    def on_replay_click(self) -> None:
        chart = self.ids.get("pieChart")
        if chart is not None:
            chart.start_animation()

    def _apply_segments(self) -> None:
        segments = build_demo_segments(self.mode)
        self.legendText = " • ".join(f"{segment.percentage * 100:.0f}%" for segment in segments)

        chart = self.ids.get("pieChart")
        if chart is None:
            return

        chart.logerHandler = self._logerHandler
        chart.animationDuration = self._animationDuration
        chart.set_segments(segments)
