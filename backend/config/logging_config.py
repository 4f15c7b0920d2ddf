"""
Logging configuration.
Console logging always; rotating file logs when file logging is enabled.
"""
import logging
import logging.config
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict


def get_log_directory() -> str:
    """Get the logs directory path."""
    project_root = Path(__file__).parent.parent.parent
    log_dir = project_root / "logs"
    log_dir.mkdir(exist_ok=True)
    return str(log_dir)


def get_logging_config(log_file: bool = True) -> Dict[str, Any]:
    """Get logging configuration dictionary."""
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
            "stream": sys.stdout
        }
    }
    root_handlers = ["console"]
    api_handlers = ["console"]
    error_handlers = ["console"]

    if log_file:
        log_dir = get_log_directory()
        timestamp = datetime.now().strftime("%Y%m%d")
        handlers.update({
            "file_all": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "DEBUG",
                "formatter": "detailed",
                "filename": os.path.join(log_dir, f"app_{timestamp}.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
                "encoding": "utf8"
            },
            "file_error": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "WARNING",
                "formatter": "detailed",
                "filename": os.path.join(log_dir, f"error_{timestamp}.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 10,
                "encoding": "utf8"
            }
        })
        root_handlers += ["file_all", "file_error"]
        api_handlers += ["file_all"]
        error_handlers += ["file_all", "file_error"]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
            "simple": {
                "format": "%(asctime)s | %(levelname)-8s | %(message)s",
                "datefmt": "%H:%M:%S"
            }
        },
        "handlers": handlers,
        "loggers": {
            "": {  # Root logger
                "level": "INFO",
                "handlers": root_handlers
            },
            "api": {
                "level": "INFO",
                "handlers": api_handlers,
                "propagate": False
            },
            "errors": {
                "level": "INFO",
                "handlers": error_handlers,
                "propagate": False
            },
            "factories": {
                "level": "INFO",
                "handlers": root_handlers,
                "propagate": False
            },
            "uvicorn": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False
            }
        }
    }


def setup_logging(log_level: str = "INFO", log_file: bool = True) -> None:
    """Setup logging configuration for the application."""
    config = get_logging_config(log_file)

    level = log_level.upper()
    if level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        config["loggers"][""]["level"] = level
        config["loggers"]["api"]["level"] = level
        config["loggers"]["errors"]["level"] = level

    logging.config.dictConfig(config)

    logger = logging.getLogger("app")
    logger.info("=" * 60)
    logger.info("🚀 Unified Result API - Logging Initialized")
    logger.info(f"📝 Log Level: {level}")
    if log_file:
        logger.info(f"📁 Log Directory: {get_log_directory()}")
    logger.info("=" * 60)


def get_api_logger() -> logging.Logger:
    """Get logger specifically for API operations."""
    return logging.getLogger("api")


def get_error_logger() -> logging.Logger:
    """Get logger for failures caught at the error boundary."""
    return logging.getLogger("errors")


def get_factory_logger() -> logging.Logger:
    """Get logger specifically for factory operations."""
    return logging.getLogger("factories")


__all__ = [
    "setup_logging",
    "get_api_logger",
    "get_error_logger",
    "get_factory_logger"
]
