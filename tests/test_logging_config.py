import logging

import pytest

import logging_config


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(logging_config._installed):
        root.removeHandler(handler)
        handler.close()
    logging_config._installed.clear()
    root.setLevel(level)


def test_repeated_init_does_not_stack_handlers(restore_root):
    logging_config.init_logging("DEBUG", "")
    logging_config.init_logging("DEBUG", "")

    ours = [h for h in restore_root.handlers if h in logging_config._installed]
    assert len(ours) == 1
    assert restore_root.level == logging.DEBUG


def test_file_handler_writes_formatted_lines(restore_root, tmp_path):
    log_file = tmp_path / "logs" / "atlas.log"
    logging_config.init_logging("INFO", str(log_file))
    logging.getLogger("atlas.test").warning("disk nearly full")
    for handler in logging_config._installed:
        handler.flush()

    text = log_file.read_text()
    assert "WARNING in test_logging_config: disk nearly full" in text
    assert len([h for h in restore_root.handlers if h in logging_config._installed]) == 2
