import logging
import sys
import traceback
from contextlib import suppress
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, TextIO


class ColoredFormatter(logging.Formatter):
    """Brackets-format formatter, optionally colored by level for terminals"""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[94m',    # Blue
        'INFO': '\033[92m',     # Green
        'WARNING': '\033[93m',  # Yellow
        'ERROR': '\033[91m',    # Red
        'CRITICAL': '\033[95m', # Magenta
        'RESET': '\033[0m'
    }

    def __init__(self, use_colors: bool = False):
        self.use_colors = use_colors
        # Format: [time] [level] [class] message
        super().__init__('[%(asctime)s] [%(levelname)s] [%(class_name)s] %(message)s')

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'class_name'):
            record.class_name = 'Main'

        formatted = super().format(record)
        if self.use_colors:
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            formatted = f"{color}{formatted}{self.COLORS['RESET']}"
        return formatted


class ClassLogger:
    """Per-class logger wrapper with its own level threshold"""

    def __init__(self, main_logger: logging.Logger, class_name: str, level: int):
        self.main_logger = main_logger
        self.class_name = class_name
        self.level = level

    def _log(self, level: int, message: str, exc_info=None) -> None:
        if level < self.level:
            return
        record = self.main_logger.makeRecord(
            self.main_logger.name, level, "", 0, message, (), exc_info
        )
        record.class_name = self.class_name
        self.main_logger.handle(record)

    def debug(self, message: str) -> None:
        self._log(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._log(logging.WARNING, message)

    def error(self, message: str, exception: Optional[BaseException] = None) -> None:
        """Log error message, appending type and origin of exception if given"""
        if exception is None:
            self._log(logging.ERROR, message)
            return
        tb = traceback.extract_tb(exception.__traceback__)
        filename, lineno = (tb[-1].filename, tb[-1].lineno) if tb else ("unknown", 0)
        enhanced_message = (f"{message} | Type: {type(exception).__name__} "
                            f"| File: {filename} | Line: {lineno}")
        self._log(logging.ERROR, enhanced_message,
                  exc_info=(type(exception), exception, exception.__traceback__))

    def critical(self, message: str) -> None:
        self._log(logging.CRITICAL, message)


class HybridLogger:
    """Logger factory: colored console output plus an optional timestamped log file

    Args:
        name: Logger name, also the log file prefix
        log_dir: Directory for the log file; None logs to the console only
        stream: Console stream (default stdout)
    """

    def __init__(self, name: str = "pixels", log_dir: Optional[str] = "logs",
                 stream: Optional[TextIO] = None):
        self.name = name
        self.log_dir = log_dir
        self.log_file: Optional[Path] = None
        self.main_logger: Optional[logging.Logger] = None
        self.class_loggers: Dict[str, ClassLogger] = {}
        self._setup_main_logger(stream if stream is not None else sys.stdout)

    def _setup_main_logger(self, stream: TextIO) -> None:
        self.main_logger = logging.getLogger(self.name)
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False
        self.main_logger.handlers.clear()

        console_handler = logging.StreamHandler(stream)
        console_handler.setFormatter(ColoredFormatter(use_colors=stream.isatty()))
        self.main_logger.addHandler(console_handler)

        if self.log_dir is not None:
            Path(self.log_dir).mkdir(parents=True, exist_ok=True)
            self.log_file = Path(self.log_dir) / f"{self.name}_{datetime.now().strftime('%Y-%m-%d_%H-%M-%S')}.log"
            file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
            file_handler.setFormatter(ColoredFormatter(use_colors=False))
            self.main_logger.addHandler(file_handler)

    def get_class_logger(self, class_name: str, level: int = logging.INFO) -> ClassLogger:
        """
        Get (or create) the logger for a specific class

        Args:
            class_name: Name shown in the [class] column
            level: Minimum log level for this class

        Returns:
            ClassLogger: Logger instance for the specified class
        """
        if class_name not in self.class_loggers:
            self.class_loggers[class_name] = ClassLogger(self.main_logger, class_name, level)
        return self.class_loggers[class_name]

    def get_main_logger(self, level: int = logging.INFO) -> ClassLogger:
        return self.get_class_logger("Main", level)

    def cleanup(self) -> None:
        """Flush and close all handlers"""
        if self.main_logger:
            for handler in self.main_logger.handlers:
                with suppress(OSError, ValueError):
                    handler.flush()
                    handler.close()
            self.main_logger.handlers.clear()
