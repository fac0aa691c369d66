from __future__ import annotations

from pathlib import Path

from Logger import Logger


def test_log_file_has_no_colors(tmp_path: Path) -> None:
    log_path = tmp_path / "Logs" / "main.log"
    logger = Logger(str(log_path), clean=True)

    logger.write("\033[92mLogged in as \033[96madmin\033[0m\n")
    logger.close()

    assert log_path.read_text(encoding="utf-8") == "Logged in as admin\n"


def test_append_mode_keeps_previous_runs(tmp_path: Path) -> None:
    log_path = tmp_path / "run.log"
    log_path.write_text("first\n", encoding="utf-8")

    logger = Logger(str(log_path))
    logger.write("second\n")
    logger.close()

    assert log_path.read_text(encoding="utf-8") == "first\nsecond\n"
