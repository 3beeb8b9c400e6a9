import sys

import pytest
from loguru import logger

from fitplan.core.logger import setup_logger


@pytest.fixture(autouse=True)
def restore_default_sink():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_file_sink_respects_level(tmp_path):
    log_file = tmp_path / "logs" / "fitplan.log"

    setup_logger(level="warning", log_file=log_file)
    logger.info("not written")
    logger.warning("Week has issues", remaining_issues=2)
    logger.complete()

    content = log_file.read_text(encoding="utf-8")
    assert "Week has issues" in content
    assert "remaining_issues" in content
    assert "not written" not in content


def test_json_console_sink(capsys):
    setup_logger(level="INFO", json_logs=True)
    logger.info("Training program created", program_id="abc")

    captured = capsys.readouterr()
    assert '"program_id": "abc"' in captured.err
