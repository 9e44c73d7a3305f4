import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """Keep log files out of the home directory and drop handlers after each test."""
    monkeypatch.setenv("ROOMAESTRO_LOG_DIR", str(tmp_path / "logs"))
    yield
    logger = logging.getLogger("rooMaestro")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
