import os

# kivy не должен разбирать аргументы pytest и писать логи в консоль
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
os.environ.setdefault("KIVY_NO_FILELOG", "1")

import pytest

from outline_pie_chart.services.schema import Segment

BLUE = (0.27, 0.62, 0.97, 1.0)
ORANGE = (0.95, 0.55, 0.20, 1.0)
GREEN = (0.20, 0.80, 0.55, 1.0)


@pytest.fixture
def makeSegments():
    def _make(*percentages):
        palette = [BLUE, ORANGE, GREEN]
        return [Segment(percentage=p, color=palette[i % len(palette)]) for i, p in enumerate(percentages)]

    return _make
