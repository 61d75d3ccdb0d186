import logging

from wherekey import logger


def test_get_logger():
    test_logger = logger.get_logger("wherekey.test")

    assert test_logger.name == "wherekey.test"
    assert test_logger.level == logger.log_level


def test_rotate_existing_log(tmp_path):
    log_file = tmp_path / "wherekey.log"
    log_file.write_text("first run")

    rotated = logger.rotate_existing_log(log_file)

    assert rotated == tmp_path / "000.wherekey.log"
    assert rotated.read_text() == "first run"
    assert not log_file.exists()

    # the next rotation doesn't overwrite the previous one
    log_file.write_text("second run")
    rotated = logger.rotate_existing_log(log_file)

    assert rotated == tmp_path / "001.wherekey.log"
    assert rotated.read_text() == "second run"
    assert (tmp_path / "000.wherekey.log").read_text() == "first run"


def test_log_level_default():
    # LOG_LEVEL is not set in .env.example
    assert logger.log_level in logging.getLevelNamesMapping().values()
