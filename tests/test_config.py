#!/usr/bin/env python3
"""
Unit tests for settings and logging setup.
"""

import logging

import pytest
import torch

from stablesum import config


def test_defaults():
    settings = config.get_settings()

    assert settings.tensor_dtype == torch.float64
    assert settings.log_level == "WARNING"


def test_settings_are_cached():
    assert config.get_settings() is config.get_settings()


@pytest.mark.parametrize("name, dtype", [
    ("float32", torch.float32),
    ("FLOAT64", torch.float64),
    (" double ", torch.float64),
])
def test_tensor_dtype_from_env(monkeypatch, name, dtype):
    monkeypatch.setenv("STABLESUM_TENSOR_DTYPE", name)

    assert config.reload_settings().tensor_dtype == dtype


def test_unknown_dtype(monkeypatch):
    monkeypatch.setenv("STABLESUM_TENSOR_DTYPE", "float16")

    with pytest.raises(ValueError):
        config.reload_settings()


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("STABLESUM_LOG_LEVEL", "debug")

    assert config.reload_settings().log_level == "DEBUG"


def test_unknown_log_level(monkeypatch):
    monkeypatch.setenv("STABLESUM_LOG_LEVEL", "chatty")

    with pytest.raises(ValueError):
        config.reload_settings()


def test_configure_logging():
    logger = logging.getLogger("stablesum")
    saved_level, saved_handlers = logger.level, list(logger.handlers)

    try:
        result = config.configure_logging("INFO")
        config.configure_logging("INFO")

        assert result is logger
        assert logger.level == logging.INFO
        stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        assert len(stream_handlers) == 1
    finally:
        logger.setLevel(saved_level)
        logger.handlers[:] = saved_handlers


def test_configure_logging_alongside_file_handler(tmp_path):
    """A caller's FileHandler does not stop the console handler being added."""
    logger = logging.getLogger("stablesum")
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    file_handler = logging.FileHandler(tmp_path / "stablesum.log")

    try:
        logger.addHandler(file_handler)
        config.configure_logging("DEBUG")

        stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        assert len(stream_handlers) == 1
    finally:
        file_handler.close()
        logger.setLevel(saved_level)
        logger.handlers[:] = saved_handlers
