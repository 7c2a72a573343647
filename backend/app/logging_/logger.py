import logging
import os
import sys
from datetime import datetime
from typing import Any

import pytz
import requests
from loguru import logger
from loguru._logger import Logger

from app.core.config import settings

TIMEZONE = pytz.timezone("Europe/Madrid")


def dynamic_formatter(record: Any) -> str:
    base = "[{time:HH:mm:ss}] [{level}] {name}:{function}:{line} - {message}"

    extras = record.get("extra", {})
    if extras:
        base += " ("
        base += ", ".join(f"{key}={value}" for key, value in extras.items())
        base += ")\n"
    else:
        base += "\n"

    if record["exception"]:
        base += "{exception}"

    return base


def dynamic_console_formatter(record: Any) -> str:
    base = "[<green>{time:HH:mm:ss}</green>] <level>[{level}]</level> {name}:{function}:<blue>{line}</blue> - {message}\n"

    if record["exception"]:
        base += "{exception}"

    return base


def notify_on_error(message: Any) -> None:
    record = message.record
    text = f"Error in {record['name']}:{record['function']} at line {record['line']}\n\n{record['message']}"

    requests.post(
        f"https://api.telegram.org/bot{settings.TELEGRAM_BOT_TOKEN}/sendMessage",
        data={
            "chat_id": settings.TELEGRAM_USER_ID,
            "text": text,
        },
        timeout=10,
    )


class InterceptHandler(logging.Handler):
    """
    Forward records emitted through the standard logging module to loguru.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller outside of the logging module
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logger(name: str, log_dir: str | None = None) -> Logger:
    logger.remove()  # Remove default handler

    if settings.ENVIRONMENT != "testing":
        today = datetime.now(TIMEZONE).strftime("%Y-%m-%d")
        log_path = os.path.join(log_dir or settings.LOG_DIR, today, name)
        os.makedirs(log_path, exist_ok=True)

        log_file_debug = os.path.join(log_path, "debug.log")
        log_file_errors = os.path.join(log_path, "error.log")
        log_file_info = os.path.join(log_path, "info.log")

        if settings.DEBUG:
            logger.add(
                log_file_debug,
                format=dynamic_formatter,
                level="DEBUG",
                rotation="00:00",  # Rotate daily at midnight
                compression="zip",
                enqueue=True,
                backtrace=True,
                diagnose=True,
                retention="7 days",
            )

        logger.add(
            log_file_errors,
            format=dynamic_formatter,
            level="ERROR",
            rotation="00:00",
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=True,
            retention="30 days",
        )

        logger.add(
            log_file_info,
            format=dynamic_formatter,
            level="INFO",
            rotation="00:00",
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=False,
        )

    logger.add(
        sys.stderr,
        format=dynamic_console_formatter,
        level="DEBUG" if settings.DEBUG else "INFO",
        backtrace=True,
        diagnose=settings.DEBUG,
        colorize=True,
    )

    if settings.ENABLE_TELEGRAM:
        logger.add(notify_on_error, level="ERROR")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    return logger  # type: ignore
