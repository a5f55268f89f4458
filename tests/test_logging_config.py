import logging

from skinnorm.logging_config import setup_logging


def flush(logger):
    for handler in logger.handlers:
        handler.flush()


def test_file_appends_across_runs(tmp_path):
    log_file = tmp_path / "batch.log"
    logger = logging.getLogger("skinnorm.test")

    setup_logging(logging.INFO, str(log_file))
    logger.info("first run")
    setup_logging(logging.INFO, str(log_file))
    logger.info("second run")
    flush(logging.getLogger("skinnorm"))

    text = log_file.read_text(encoding="utf-8")
    assert "first run" in text
    assert "second run" in text


def test_file_level_independent_of_console(tmp_path, capsys):
    log_file = tmp_path / "debug.log"
    logger = logging.getLogger("skinnorm.test")

    setup_logging(logging.WARNING, str(log_file))
    logger.debug("detail only in the file")
    logger.warning("shown everywhere")
    flush(logging.getLogger("skinnorm"))

    out = capsys.readouterr().out
    assert "shown everywhere" in out
    assert "detail only in the file" not in out
    text = log_file.read_text(encoding="utf-8")
    assert "detail only in the file" in text
    assert "shown everywhere" in text


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging(logging.INFO)
    setup_logging(logging.INFO)
    assert len(logging.getLogger("skinnorm").handlers) == 1
