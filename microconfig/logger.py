import logging
from typing import Any

import structlog
from structlog.types import Processor

_configured = False


def setup_logging(json_logs: bool = False, log_level: str = "INFO", force: bool = False):
    """Configure structlog for the microconfig package"""
    global _configured

    if _configured and not force:
        return

    # Leave an application's own structlog setup alone
    root_logger = logging.getLogger()
    if not force:
        for handler in root_logger.handlers:
            if (isinstance(handler, logging.StreamHandler) and
                    isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
                _configured = True
                return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())
    _configured = True


class MicroConfigStructLogger:
    """
    Structured logger for the microconfig package.

    Values passed to `bind` are attached to every message emitted through the
    returned logger. The underlying structlog logger is created per call so
    loggers built at import time pick up a later `setup_logging`.
    """

    def __init__(self, log_name: str = "microconfig", context: dict | None = None):
        self.name = log_name
        self.context = dict(context or {})

    @property
    def logger(self):
        if structlog.is_configured():
            return structlog.stdlib.get_logger(self.name, **self.context)
        # Unconfigured: route through stdlib logging so the host's levels apply
        return structlog.wrap_logger(
            logging.getLogger(self.name),
            wrapper_class=structlog.stdlib.BoundLogger,
            **self.context
        )

    def bind(self, **new_values: Any) -> "MicroConfigStructLogger":
        """Return a new logger carrying `new_values` in its context."""
        return MicroConfigStructLogger(self.name, {**self.context, **new_values})

    @staticmethod
    def bind_contextvars(**new_values: Any):
        """Bind values to the context shared by every logger in this thread."""
        structlog.contextvars.bind_contextvars(**new_values)

    @staticmethod
    def unbind_contextvars(*keys: str):
        """Unbind keys from the shared logger context"""
        structlog.contextvars.unbind_contextvars(*keys)

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


def get_microconfig_logger(name: str = "microconfig") -> MicroConfigStructLogger:
    """Return a package logger. Does not configure logging."""
    return MicroConfigStructLogger(name)


def init_logger(config=None):
    """
    Initialize the structured logger for the microconfig package.

    Args:
        config: LoggingConfig instance; read from the environment when omitted

    Returns:
        MicroConfigStructLogger: Configured structured logger instance
    """
    from microconfig.logging_config import LoggingConfig

    if config is None:
        config = LoggingConfig.from_env()

    setup_logging(json_logs=config.json_logs, log_level=config.level)
    for component, level in config.component_levels.items():
        logging.getLogger(component).setLevel(level.upper())

    return MicroConfigStructLogger("microconfig")
