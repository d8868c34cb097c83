# colorparse/logger.py

import os, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

class Logger:
    """
    Thin wrapper over a stdlib logger.

    Silent by default (NullHandler). When enabled, records at or above
    `level` are appended to `log_file`, which defaults to
    logs/colorparse_debug.log at the project root. Wrappers sharing a name
    share one handler per kind and file.
    """
    def __init__(self, name: str = 'colorparse', logging_enabled: bool = False,
                 log_file: Optional[str] = None, level: int = logging.DEBUG):
        self._logger = logging.getLogger(name)
        if logging_enabled:
            if log_file is None:
                project_root = os.path.dirname(os.path.dirname(__file__))
                log_file = os.path.join(project_root, 'logs', 'colorparse_debug.log')
            self._add_file_handler(os.path.abspath(log_file))
            self._logger.setLevel(level)
        elif not any(isinstance(h, logging.NullHandler) for h in self._logger.handlers):
            self._logger.addHandler(logging.NullHandler())

        for level_name in ['debug', 'info', 'warning', 'error']:
            setattr(self, level_name, partial(self._log, level_name))

    def _add_file_handler(self, log_file: str) -> None:
        for handler in self._logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_file:
                return
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self._logger.addHandler(handler)

    def close(self) -> None:
        """Detach and close the file handlers of the underlying logger."""
        for handler in list(self._logger.handlers):
            if isinstance(handler, logging.FileHandler):
                self._logger.removeHandler(handler)
                handler.close()

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
