import logging

import pytest

from pybaro.calculator import DATASHEET_SAMPLE
import pybaro.logger
import pybaro.storage


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch):
    """Remove handlers added by the command line programs."""
    root_logger = logging.getLogger('')
    level = root_logger.level
    added = []
    setup_handler = pybaro.logger.setup_handler

    def _setup_handler(*args, **kwds):
        handler = setup_handler(*args, **kwds)
        added.append(handler)
        return handler

    monkeypatch.setattr(pybaro.logger, 'setup_handler', _setup_handler)
    yield
    for handler in added:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def data_dir(tmp_path):
    """A data directory with the data sheet coefficients stored."""
    params = pybaro.storage.ParamStore(str(tmp_path), 'barometer.ini')
    pybaro.storage.write_calibration(params, DATASHEET_SAMPLE)
    params.flush()
    return tmp_path
