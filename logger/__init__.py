from .logger import (
    LogManager,
    MongoDBHandler,
    log_debug,
    log_info,
    log_warn,
    log_error,
    log_with_context
)

__all__ = [
    "LogManager",
    "MongoDBHandler",
    "log_debug",
    "log_info",
    "log_warn",
    "log_error",
    "log_with_context"
]
