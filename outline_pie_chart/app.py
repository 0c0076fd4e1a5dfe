import os

from kivy.lang import Builder
from kivy.uix.screenmanager import ScreenManager

from .handlers.logers.loger_handlers import LogerHandler
from .screens.demo_screen import DemoScreen
from .services.demo_config import DemoConfig


class OutlinePieUiApp:
    def __init__(self, demoConfig: DemoConfig) -> None:
        self._demoConfig = demoConfig
        self._logerHandler = LogerHandler(logsFilePath=demoConfig.logsFilePath)

    def build(self) -> ScreenManager:
        baseAppPath = os.path.dirname(__file__)

        Builder.load_file(os.path.join(baseAppPath, "kv", "demo_screen.kv"))

        screenManager = ScreenManager()
        screenManager.add_widget(
            DemoScreen(
                name="demo",
                animationDuration=self._demoConfig.animationDuration,
                logerHandler=self._logerHandler,
            )
        )
        screenManager.current = "demo"

        self._logerHandler.logerClient.info("Demo UI built")
        return screenManager
