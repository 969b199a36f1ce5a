"""
Tests for logging settings and the package logger.
"""

import logging

import pytest
import structlog

from microconfig import LoggingConfig, get_microconfig_logger, init_logger, setup_logging
from microconfig import logger as logger_module

pytestmark = pytest.mark.unit


@pytest.fixture
def clean_logging():
    """Remove the structlog handler and restore structlog config after the test."""
    root = logging.getLogger()
    level = root.level
    configured = logger_module._configured
    logger_module._configured = False
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    logger_module._configured = configured
    structlog.reset_defaults()


class TestLoggingConfig:

    def test_defaults(self):
        config = LoggingConfig()

        assert config.level == 'INFO'
        assert config.json_logs is False
        assert config.to_dict() == {'level': 'INFO', 'json_logs': False, 'component_levels': {}}

    def test_level_is_normalized(self):
        assert LoggingConfig(level='debug').level == 'DEBUG'

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            LoggingConfig(level='verbose')

    def test_invalid_component_level(self):
        with pytest.raises(ValueError):
            LoggingConfig(component_levels={'microconfig.loader': 'loud'})

    def test_from_env(self):
        config = LoggingConfig.from_env({'MICROCONFIG_LOG_LEVEL': 'warning', 'MICROCONFIG_JSON_LOGS': 'yes'})

        assert config.level == 'WARNING'
        assert config.json_logs is True

    def test_from_env_defaults(self):
        config = LoggingConfig.from_env({})

        assert config.level == 'INFO'
        assert config.json_logs is False


class TestLogger:

    def test_bind_returns_new_logger(self):
        base = get_microconfig_logger()
        bound = base.bind(component='Test')

        assert bound is not base
        assert bound.context == {'component': 'Test'}
        assert base.context == {}
        assert bound.bind(domain='db').context == {'component': 'Test', 'domain': 'db'}

    def test_setup_logging_installs_handler(self, clean_logging):
        setup_logging(json_logs=True, log_level='debug')

        handlers = clean_logging.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert clean_logging.level == logging.DEBUG

    def test_setup_logging_runs_once(self, clean_logging):
        setup_logging(log_level='info')
        setup_logging(log_level='error')

        assert clean_logging.level == logging.INFO

    def test_init_logger(self, clean_logging):
        log = init_logger(LoggingConfig(level='warning', component_levels={'microconfig.test': 'error'}))

        assert log.name == 'microconfig'
        assert clean_logging.level == logging.WARNING
        assert logging.getLogger('microconfig.test').level == logging.ERROR

    def test_setup_logging_uses_structlog_processors_only(self, clean_logging):
        setup_logging(log_level='info')

        processors = structlog.get_config()['processors']
        modules = [getattr(p, '__module__', None) or type(p).__module__ for p in processors]
        assert all(module.startswith('structlog') for module in modules)
