"""
Centralized logging module for EV Range Studio
Provides easy on/off switching and consistent logging across all modules
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional, Dict, Any

from config.logging_config import (
    LOG_DIR,
    get_logging_config,
    is_module_logging_enabled,
)

ROOT_LOGGER_NAME = 'range_studio'


class ModuleSwitchFilter(logging.Filter):
    """Drops records while the module is switched off in MODULE_LOGGING"""

    def __init__(self, module: str):
        super().__init__()
        self.module = module

    def filter(self, record: logging.LogRecord) -> bool:
        return is_module_logging_enabled(self.module)


class RangeStudioLogger:
    """
    Centralized logger for EV Range Studio
    Provides easy switching between different logging levels and outputs
    """

    def __init__(self,
                 log_level: str = "INFO",
                 enable_console: bool = True,
                 enable_file: bool = False,
                 log_dir: str = LOG_DIR,
                 detailed_logging: bool = False,
                 log_format: str = "detailed"):
        """
        Initialize the logger

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            enable_console: Whether to log to console
            enable_file: Whether to log to files
            log_dir: Directory for log files
            detailed_logging: Enable detailed logging for debugging
            log_format: Log format style ("simple", "detailed", "minimal")
        """
        self.log_level = getattr(logging, log_level.upper())
        self.enable_console = enable_console
        self.enable_file = enable_file
        self.log_dir = log_dir
        self.detailed_logging = detailed_logging
        self.log_format = log_format

        if self.enable_file:
            os.makedirs(self.log_dir, exist_ok=True)

        self._setup_loggers()

    @classmethod
    def from_mode(cls, mode: str = None) -> "RangeStudioLogger":
        """Build a logger from one of the named modes in config.logging_config"""
        return cls(**get_logging_config(mode))

    def _setup_loggers(self):
        """Setup the root project logger with proper configuration"""

        self.logger = logging.getLogger(ROOT_LOGGER_NAME)
        self.logger.setLevel(self.log_level)
        self.logger.propagate = False

        # Clear any existing handlers
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

        if self.log_format == "detailed":
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
            )
        elif self.log_format == "simple":
            formatter = logging.Formatter('%(levelname)s - %(message)s')
        else:  # minimal
            formatter = logging.Formatter('%(message)s')

        if self.enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(self.log_level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if self.enable_file:
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            log_file = os.path.join(self.log_dir, f'range_studio_{timestamp}.log')

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(self.log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

            self.log_file = log_file
        else:
            self.log_file = None

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def get_logger(self, name: str = None) -> logging.Logger:
        """Get a logger instance for a specific module"""
        if not name:
            return self.logger
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
        if not any(isinstance(f, ModuleSwitchFilter) for f in logger.filters):
            logger.addFilter(ModuleSwitchFilter(name))
        return logger

    def debug(self, message: str, module: str = None):
        self.get_logger(module).debug(message)

    def info(self, message: str, module: str = None):
        self.get_logger(module).info(message)

    def warning(self, message: str, module: str = None):
        self.get_logger(module).warning(message)

    def error(self, message: str, module: str = None):
        self.get_logger(module).error(message)

    def print_summary(self, title: str, data: Dict[str, Any]):
        """Print a formatted summary"""
        if not self.enable_console:
            return

        print(f"\n{'='*50}")
        print(title)
        print(f"{'='*50}")

        for key, value in data.items():
            if isinstance(value, (int, float)) and value >= 1000:
                print(f"  {key}: {value:,}")
            else:
                print(f"  {key}: {value}")

        print(f"{'='*50}")

    def update_config(self, **kwargs):
        """Update logger configuration"""
        for key, value in kwargs.items():
            if key == 'log_level':
                value = getattr(logging, str(value).upper())
            if hasattr(self, key):
                setattr(self, key, value)

        if self.enable_file:
            os.makedirs(self.log_dir, exist_ok=True)
        self._setup_loggers()

    def get_status(self) -> Dict[str, Any]:
        """Get current logger status"""
        return {
            'log_level': logging.getLevelName(self.log_level),
            'enable_console': self.enable_console,
            'enable_file': self.enable_file,
            'log_dir': self.log_dir,
            'detailed_logging': self.detailed_logging,
            'log_format': self.log_format,
            'log_file': self.log_file,
        }


# Global logger instance
_global_logger: Optional[RangeStudioLogger] = None

def get_global_logger() -> RangeStudioLogger:
    """Get the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = RangeStudioLogger.from_mode()
    return _global_logger

def get_logger(name: str = None) -> logging.Logger:
    """Get a module logger from the global instance"""
    return get_global_logger().get_logger(name)

def setup_logger(mode: str = None, **kwargs) -> RangeStudioLogger:
    """Setup the global logger from a named mode, with optional overrides"""
    global _global_logger
    settings = dict(get_logging_config(mode))
    settings.update(kwargs)
    _global_logger = RangeStudioLogger(**settings)
    return _global_logger

# Convenience functions
def debug(message: str, module: str = None):
    get_global_logger().debug(message, module)

def info(message: str, module: str = None):
    get_global_logger().info(message, module)

def warning(message: str, module: str = None):
    get_global_logger().warning(message, module)

def error(message: str, module: str = None):
    get_global_logger().error(message, module)

def print_summary(title: str, data: Dict[str, Any]):
    get_global_logger().print_summary(title, data)
