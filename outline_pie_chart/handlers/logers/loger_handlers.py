import logging
from typing import Optional


class LogerHandler:
    def __init__(self, logsFilePath: Optional[str] = None, logerName='outline_pie_chart'):
        self.logerClient = self.__setLogsFormat(logerName, logsFilePath)

    def __setLogsFormat(self, logerName, fileName):
        myLoger = logging.getLogger(logerName)

        if myLoger.handlers:
            return myLoger

        myLoger.setLevel(level=logging.DEBUG)

        formatter = logging.Formatter("[%(asctime)s] {%(name)s}  %(levelname)s %(funcName)s(%(lineno)d) - %(message)s")

        # Логи в консоль
        consoleHandler = logging.StreamHandler()
        consoleHandler.setLevel(logging.DEBUG)
        consoleHandler.setFormatter(formatter)
        myLoger.addHandler(consoleHandler)

        # Логи в файл, только если задан путь
        if fileName:
            fileLogHandler = logging.FileHandler(filename=fileName, mode='a', encoding="UTF-8")
            fileLogHandler.setFormatter(formatter)
            fileLogHandler.setLevel(logging.INFO)
            myLoger.addHandler(fileLogHandler)

        return myLoger
