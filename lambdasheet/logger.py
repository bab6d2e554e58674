# Imports

import threading
import sys
import logging
from typing import Optional

_lock = threading.Lock()
_loggerhandlers = {}

DEFAULT_NAME = "LambdaSheet"


class LogFormatter(logging.Formatter):
    """
    Adds color_on / color_off fields to every record so the line template can wrap the
    logger name in the level's ANSI color. color may be True, False or "auto"; "auto"
    colors only when stream is a terminal.
    """

    LEVEL_COLORS = {
        logging.CRITICAL: "\033[38;5;196m",
        logging.ERROR:    "\033[38;5;9m",
        logging.WARNING:  "\033[38;5;11m",
        logging.INFO:     "\033[38;5;111m",
        logging.DEBUG:    "\033[1;30m"
    }
    RESET_CODE = "\033[0m"

    def __init__(self, color, *args, stream=None, **kwargs):
        super(LogFormatter, self).__init__(*args, **kwargs)
        if color == "auto":
            isatty = getattr(stream, "isatty", None)
            color = bool(isatty and isatty())
        self.color = bool(color)

    def colors_for(self, levelno):
        if not self.color or levelno not in self.LEVEL_COLORS:
            return "", ""
        return self.LEVEL_COLORS[levelno], self.RESET_CODE

    def format(self, record, *args, **kwargs):
        record.color_on, record.color_off = self.colors_for(record.levelno)
        return super(LogFormatter, self).format(record, *args, **kwargs)


class SheetLogger:
    def __init__(self, config):
        self.config = config
        self.logger = self.setup_logging()

    def setup_logging(self):
        logger = logging.getLogger(self.config['name'])
        logger.setLevel(self.config["console_log_level"].upper())

        # demonstrations own stdout, so records default to stderr
        if self.config["console_log_output"] == "stdout":
            console_log_output = sys.stdout
        else:
            console_log_output = sys.stderr

        console_handler = logging.StreamHandler(console_log_output)
        console_handler.setLevel(logging.DEBUG)
        console_formatter = LogFormatter(
            self.config["console_log_color"],
            fmt=self.config["log_line_template"],
            stream=console_log_output,
        )
        console_handler.setFormatter(console_formatter)
        if (logger.hasHandlers()):
            logger.handlers.clear()
        logger.addHandler(console_handler)
        logger.propagate = False
        return logger

    def __call__(self, msg):
        if isinstance(msg, list):
            msg = '\n'.join(str(m) for m in msg)
        elif isinstance(msg, dict):
            _msg, x = '', 0
            for k, v in msg.items():
                _msg += f' {k}: {v} |'
                x += 1
                if x % 3 == 0:
                    _msg += '\n'
            msg = _msg
        elif not isinstance(msg, str):
            msg = str(msg)
        self.logger.info(msg)

    def set_level(self, level):
        if isinstance(level, str):
            level = level.upper()
        self.logger.setLevel(level)

    def info(self, *args, **kwargs):
        return self.logger.info(*args, **kwargs)

    def warn(self, *args, **kwargs):
        return self.logger.warning(*args, **kwargs)

    def err(self, *args, **kwargs):
        return self.logger.error(*args, **kwargs)

    def d(self, *args, **kwargs):
        return self.logger.debug(*args, **kwargs)

    def log(self, *args, **kwargs):
        return self.info(*args, **kwargs)

    def get_logger(self):
        return self.logger


def _setup_library_root_logger(name, level="info"):
    logger_config = {
        'name': name,
        'console_log_output': "stderr",
        'console_log_level': level,
        'console_log_color': "auto",
        'log_line_template': f"%(color_on)s[{name}] %(funcName)-5s%(color_off)s: %(message)s"
    }
    return SheetLogger(logger_config)


def _configure_library_root_logger(name=DEFAULT_NAME, level="info") -> None:
    global _loggerhandlers
    with _lock:
        if name in _loggerhandlers:
            return
        _loggerhandlers[name] = _setup_library_root_logger(name, level)


def get_logger(name: Optional[str] = DEFAULT_NAME, level: Optional[str] = None) -> SheetLogger:
    if name is None:
        name = DEFAULT_NAME
    _configure_library_root_logger(name, level or "info")
    logger = _loggerhandlers[name]
    if level is not None:
        logger.set_level(level)
    return logger
