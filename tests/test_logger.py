"""
Tests for abstrie.utils.logger.

Covers:
  - File sink receives component and merge records
  - Import-time setup filters DEBUG records from stderr
  - Setup driven by LoggingConfig honours its level and log file
"""

import importlib
import io
import sys

from abstrie import Config, GeneralizationTrie, LoggingConfig
from abstrie.strategies import MaskingStrategy
from abstrie.utils import logger as logger_module
from abstrie.utils.logger import get_logger, setup_logger, setup_logger_from_config


def test_file_sink_receives_messages(tmp_path):
    log_file = tmp_path / "logs" / "abstrie.log"
    setup_logger(log_level="DEBUG", log_file=str(log_file))
    try:
        get_logger("test").info("hello trie")
        trie = GeneralizationTrie.from_sequences([["took", "1"], ["took", "2"]])
        trie.merge_with_strategy(MaskingStrategy())

        content = log_file.read_text()
    finally:
        setup_logger()

    assert "hello trie" in content
    assert "Merged 1 groups" in content
    assert "Merged [1, 2] into <NUM>" in content


def test_import_time_setup_hides_debug_records(monkeypatch):
    buffer = io.StringIO()
    monkeypatch.setattr(sys, "stderr", buffer)
    try:
        importlib.reload(logger_module)
        trie = GeneralizationTrie.from_sequences([["took", "1"], ["took", "2"]])
        trie.merge_with_strategy(MaskingStrategy())
    finally:
        monkeypatch.undo()
        setup_logger()

    output = buffer.getvalue()
    assert "Merged 1 groups" in output
    assert "DEBUG" not in output
    assert "GeneralizationTrie initialized" not in output


def test_setup_from_logging_config(tmp_path):
    log_file = tmp_path / "warn.log"
    config = Config(logging=LoggingConfig(level="warning", log_file=str(log_file)))

    setup_logger_from_config(config.logging)
    try:
        get_logger("test").info("routine detail")
        get_logger("test").warning("disk almost full")
        content = log_file.read_text()
    finally:
        setup_logger()

    assert "disk almost full" in content
    assert "routine detail" not in content
