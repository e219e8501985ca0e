import io
import logging

from yapgeom.logging_config import reset_logging, setup_logging
from yapgeom.vector import Vector3d


def test_package_logger_is_silent_by_default():
    reset_logging()
    logger = logging.getLogger("yapgeom")
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_setup_logging_replaces_its_own_handlers(tmp_path):
    log_file = tmp_path / "yapgeom.log"
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.DEBUG, str(log_file))
    try:
        assert logger.name == "yapgeom"
        assert logger.level == logging.DEBUG
        installed = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
        assert len(installed) == 2
        assert any(isinstance(h, logging.FileHandler) for h in installed)
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
    finally:
        reset_logging()
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)
    assert logger.level == logging.NOTSET


def test_setup_logging_writes_to_stream():
    out = io.StringIO()
    setup_logging(logging.DEBUG, stream=out, fmt='%(levelname)s %(message)s')
    try:
        assert Vector3d.zero().direction() is None
    finally:
        reset_logging()
    assert "DEBUG zero vector has no direction" in out.getvalue()


def test_degenerate_results_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="yapgeom"):
        assert Vector3d.zero().direction() is None
    assert "zero vector has no direction" in caplog.text
