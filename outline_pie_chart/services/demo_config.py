import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class DemoConfig:
    isDesktopPreview: bool = True
    windowWidth: int = 360
    windowHeight: int = 640
    animationDuration: float = 1.2
    logsFilePath: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DemoConfig":
        environ = os.environ if environ is None else environ

        try:
            animationDuration = float(environ.get("OUTLINE_PIE_DURATION", cls.animationDuration))
        except ValueError:
            animationDuration = cls.animationDuration

        return cls(
            isDesktopPreview=environ.get("OUTLINE_PIE_PREVIEW", "1") == "1",
            animationDuration=max(animationDuration, 0.0),
            logsFilePath=environ.get("OUTLINE_PIE_LOG_FILE") or None,
        )
