import logging

from outline_pie_chart.handlers.logers.loger_handlers import LogerHandler


def test_console_only_by_default():
    logerClient = LogerHandler(logerName="outline_pie_chart.tests.console").logerClient

    assert logerClient.level == logging.DEBUG
    assert len(logerClient.handlers) == 1
    assert not any(isinstance(h, logging.FileHandler) for h in logerClient.handlers)


def test_file_handler_when_path_given(tmp_path):
    logsFilePath = tmp_path / "chart.log"
    logerClient = LogerHandler(str(logsFilePath), logerName="outline_pie_chart.tests.file").logerClient

    logerClient.info("painted")
    for handler in logerClient.handlers:
        handler.flush()

    assert any(isinstance(h, logging.FileHandler) for h in logerClient.handlers)
    assert "painted" in logsFilePath.read_text(encoding="utf-8")


def test_handlers_are_not_duplicated():
    first = LogerHandler(logerName="outline_pie_chart.tests.shared").logerClient
    second = LogerHandler(logerName="outline_pie_chart.tests.shared").logerClient

    assert first is second
    assert len(second.handlers) == 1
