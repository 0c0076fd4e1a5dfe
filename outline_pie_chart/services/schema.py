import math
from typing import Annotated, Any, Literal, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator, model_validator

from ..handlers.canvas.primitives import Rect


def _to_rgba(value: Any) -> Tuple[float, float, float, float]:
    """
    Цвет в формате kivy: (r, g, b, a), каждая компонента 0..1.
    (r, g, b) дополняется альфой 1.0.
    """
    if not isinstance(value, (list, tuple)):
        raise ValueError("color must be a sequence of 3 or 4 floats")

    channels = [float(x) for x in value]
    if len(channels) == 3:
        channels.append(1.0)
    if len(channels) != 4:
        raise ValueError("color must have 3 or 4 channels")

    for channel in channels:
        if not 0.0 <= channel <= 1.0:
            raise ValueError(f"color channel {channel} is out of 0..1")

    return tuple(channels)


RgbaColor = Annotated[Tuple[float, float, float, float], BeforeValidator(_to_rgba)]


class ChartModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Offset(ChartModel):
    dx: float = Field(default=0.0)
    dy: float = Field(default=0.0)


class Alignment(ChartModel):
    # -1,-1 — левый верхний угол, 0,0 — центр, 1,1 — правый нижний
    x: float = Field(default=0.0)
    y: float = Field(default=0.0)

    def resolve(self, rect: Rect) -> Tuple[float, float]:
        centerX, centerY = rect.center
        return (
            centerX + self.x * rect.width / 2.0,
            centerY + self.y * rect.height / 2.0,
        )


class Shadow(ChartModel):
    offset: Offset = Field(default_factory=Offset)
    blurRadius: float = Field(default=0.0, ge=0)
    color: RgbaColor = Field(default=(0.0, 0.0, 0.0, 0.26))


class GradientBase(ChartModel):
    colors: Tuple[RgbaColor, ...] = Field()
    stops: Optional[Tuple[float, ...]] = Field(default=None)

    @model_validator(mode="after")
    def check_color_stops(self):
        if len(self.colors) < 2:
            raise ValueError("gradient needs at least two colors")

        if self.stops is not None:
            if len(self.stops) != len(self.colors):
                raise ValueError("stops must have the same length as colors")
            for stop in self.stops:
                if not 0.0 <= stop <= 1.0:
                    raise ValueError(f"stop {stop} is out of 0..1")
            for prev, curr in zip(self.stops, self.stops[1:]):
                if curr < prev:
                    raise ValueError("stops must be non-decreasing")
        return self

    def resolved_stops(self) -> Tuple[float, ...]:
        if self.stops is not None:
            return self.stops
        lastIndex = len(self.colors) - 1
        return tuple(i / lastIndex for i in range(len(self.colors)))


class LinearGradient(GradientBase):
    kind: Literal["linear"] = "linear"
    begin: Alignment = Field(default_factory=lambda: Alignment(x=-1.0, y=0.0))
    end: Alignment = Field(default_factory=lambda: Alignment(x=1.0, y=0.0))


class RadialGradient(GradientBase):
    kind: Literal["radial"] = "radial"
    center: Alignment = Field(default_factory=Alignment)
    # доля от меньшей стороны прямоугольника
    radius: float = Field(default=0.5, gt=0)


class SweepGradient(GradientBase):
    kind: Literal["sweep"] = "sweep"
    center: Alignment = Field(default_factory=Alignment)
    startAngle: float = Field(default=0.0)
    endAngle: float = Field(default=math.pi * 2)

    @model_validator(mode="after")
    def check_angles(self):
        if self.endAngle <= self.startAngle:
            raise ValueError("endAngle must be greater than startAngle")
        return self


Gradient = Annotated[
    Union[LinearGradient, RadialGradient, SweepGradient],
    Field(discriminator="kind"),
]


class Segment(ChartModel):
    percentage: float = Field(ge=0)
    color: RgbaColor = Field()
    gradient: Optional[Gradient] = Field(default=None)
    shadowList: Tuple[Shadow, ...] = Field(default=())
    cornerRadius: Optional[float] = Field(default=None)

    @field_validator("shadowList", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return () if value is None else value

    @property
    def hasRoundCaps(self) -> bool:
        return self.cornerRadius is not None and self.cornerRadius > 0

    def copy_with(self, **changes) -> "Segment":
        payload = self.model_dump()
        payload.update(changes)
        return Segment.model_validate(payload)


class ChartConfig(ChartModel):
    segments: Tuple[Segment, ...] = Field(default=())
    strokeWidth: float = Field(default=20.0, ge=0)
    gap: float = Field(default=4.0, ge=0)
    animationValue: float = Field(default=1.0, allow_inf_nan=False)
    isRTL: bool = Field(default=False)

    @field_validator("animationValue")
    @classmethod
    def clamp_animation_value(cls, value: float) -> float:
        return min(max(value, 0.0), 1.0)

    def fingerprint(self) -> str:
        return self.model_dump_json()
