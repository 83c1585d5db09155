from .logger import AppLogger, configure_logging, get_logger

__all__ = ["AppLogger", "configure_logging", "get_logger"]
