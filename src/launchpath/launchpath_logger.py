"""
Multi-purpose logger used across launchpath.
"""

import inspect
import logging
import os
from datetime import datetime

from pydantic import BaseModel


class LogLine(BaseModel):
    """
    Represents a line in the launchpath log
    """

    time: str
    level: str
    caller_file: str
    caller_name: str
    caller_line: int
    message: str


class LaunchpathLogger:
    """
    Logger class. Records are emitted on the "launchpath" logger, the host
    application decides where they end up by attaching handlers.
    """

    def __init__(self, name: str = "launchpath") -> None:
        self.logger = logging.getLogger(name)

    def log(self, debug_message: str, level: int) -> None:
        """
        Log the debug message as a single JSON line
        """
        debug_message = debug_message.replace("\n", " ")

        caller_file = ""
        caller_name = ""
        caller_line = 0
        frame = inspect.currentframe()
        caller_frame = frame.f_back if frame is not None else None
        if caller_frame is not None:
            caller_file = os.path.basename(caller_frame.f_code.co_filename)
            caller_name = caller_frame.f_code.co_name
            caller_line = caller_frame.f_lineno
        del frame, caller_frame

        self.logger.log(
            level=level,
            msg=LogLine(
                time=str(datetime.now()),
                level=logging.getLevelName(level),
                caller_file=caller_file,
                caller_name=caller_name,
                caller_line=caller_line,
                message=debug_message,
            ).model_dump_json(),
        )
