"""
Tests for the logging setup
"""
import logging

import pytest

from config import logging_config
from src.range_estimation import driving_mix
from src.range_estimation.driving_mix import normalize_mix
from src.utils import logger as logger_module
from src.utils.logger import RangeStudioLogger, get_logger, setup_logger


@pytest.fixture(autouse=True)
def restore_testing_logger():
    yield
    setup_logger('TESTING')


def test_unknown_mode_falls_back_to_development():
    assert logging_config.get_logging_config('nope') == logging_config.DEVELOPMENT_LOGGING


def test_silent_mode():
    status = setup_logger('SILENT').get_status()
    assert status['log_level'] == 'CRITICAL'
    assert not status['enable_console']
    assert status['log_file'] is None


def test_module_loggers_are_children():
    assert get_logger('range_estimator').name == 'range_studio.range_estimator'


def test_module_logging_switch_applies_to_existing_loggers():
    """Loggers fetched at import time follow later switch changes"""
    records = []

    class _Collect(logging.Handler):
        def emit(self, record):
            records.append(record.getMessage())

    handler = _Collect()
    driving_mix.logger.addHandler(handler)
    try:
        logging_config.disable_module_logging('driving_mix')
        normalize_mix(0, 0, 0)
        assert records == []

        logging_config.enable_module_logging('driving_mix')
        normalize_mix(0, 0, 0)
        assert any("Empty driving mix" in message for message in records)
    finally:
        logging_config.enable_module_logging('driving_mix')
        driving_mix.logger.removeHandler(handler)


def test_file_logging(tmp_path):
    instance = setup_logger('DEBUG', enable_console=False, log_dir=str(tmp_path))
    get_logger('catalog_service').info("catalog ready")
    for handler in logging.getLogger('range_studio').handlers:
        handler.flush()
    assert instance.log_file is not None
    with open(instance.log_file, encoding='utf-8') as f:
        assert "catalog ready" in f.read()


def test_update_config():
    instance = RangeStudioLogger.from_mode('TESTING')
    instance.update_config(log_level='warning', log_format='simple')
    assert instance.get_status()['log_level'] == 'WARNING'
    assert logger_module.get_global_logger() is not None


def test_print_summary(capsys):
    setup_logger('DEVELOPMENT').print_summary("Catalog", {'vehicles': 10, 'total_km': 3500})
    out = capsys.readouterr().out
    assert "Catalog" in out
    assert "3,500" in out
