import os

os.environ.setdefault("KIVY_WINDOW", "sdl2")

from kivy.config import Config
from kivymd.app import MDApp

from outline_pie_chart.app import OutlinePieUiApp
from outline_pie_chart.services.demo_config import DemoConfig

demoConfig = DemoConfig.from_env()

if demoConfig.isDesktopPreview:
    Config.set("graphics", "width", str(demoConfig.windowWidth))
    Config.set("graphics", "height", str(demoConfig.windowHeight))
    Config.set("graphics", "resizable", "0")
    Config.set("input", "mouse", "mouse,multitouch_on_demand")


class OutlinePieDemoApp(MDApp):
    def build(self):
        self.theme_cls.theme_style = "Dark"
        return OutlinePieUiApp(demoConfig=demoConfig).build()


def run() -> None:
    OutlinePieDemoApp().run()


if __name__ == "__main__":
    run()
