import os
import logging
import structlog
from logging.handlers import RotatingFileHandler
from typing import Optional

from iter_tools.config.defaults import LogDestination
from iter_tools.config.schemas import LoggingConfig

LIBRARY_LOGGER_NAME = "iter_tools"

_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]

_CALLSITE_PARAMETERS = {
    structlog.processors.CallsiteParameter.MODULE: "module",
    structlog.processors.CallsiteParameter.FUNC_NAME: "funcName",
    structlog.processors.CallsiteParameter.LINENO: "lineno",
}


class DetailedFormatter(structlog.stdlib.ProcessorFormatter):
    """Renders structlog events and adds ``module.function:line`` caller info.

    structlog events carry their call site in the event dict (added by
    ``CallsiteParameterAdder``); foreign records use the record's own fields.
    """

    def format(self, record):
        event = record.msg if isinstance(record.msg, dict) else {}
        module, func_name, lineno = (
            event.get(parameter.value, getattr(record, attribute))
            for parameter, attribute in _CALLSITE_PARAMETERS.items()
        )
        record.caller_info = f"{module}.{func_name}:{lineno}"
        return super().format(record)


def _drop_callsite(logger, method_name, event_dict):
    for parameter in _CALLSITE_PARAMETERS:
        event_dict.pop(parameter.value, None)
    return event_dict


def _configure_structlog(cache_logger_on_first_use: bool) -> None:
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.processors.CallsiteParameterAdder(set(_CALLSITE_PARAMETERS)),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache_logger_on_first_use,
    )


def get_logger(name: str):
    """
    Get a structlog logger routed through stdlib logging.

    The global structlog configuration is never touched here: events run
    through whatever processors the application configured (see
    ``setup_logging``) and end in the stdlib logger of the same name, so they
    stay silent until that logger is enabled and has handlers.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        Lazy structlog logger proxy
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the library using structlog.

    Args:
        config: Logging configuration. If None, uses the ConfigurationManager defaults.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from iter_tools.config.manager import ConfigurationManager
        config = ConfigurationManager().get_logging_config()

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(getattr(logging, config.level.value))

    formatter = DetailedFormatter(
        fmt=config.format,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _drop_callsite,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        foreign_pre_chain=_SHARED_PROCESSORS[1:],
    )

    handlers = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_file = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in (LogDestination.STDOUT, LogDestination.BOTH):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in library_logger.handlers[:]:
        library_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        library_logger.addHandler(handler)

    _configure_structlog(cache_logger_on_first_use=False)

    logger = get_logger(LIBRARY_LOGGER_NAME)

    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
        log_file=config.file.path
    )

    return logger
