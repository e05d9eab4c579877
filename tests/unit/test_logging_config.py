"""Tests for side-tagged logging."""

from __future__ import annotations

import logging

import pytest

from kicad_stencil.logging_config import create_logger, get_side, setup_logging, side_ctx


class TestSideLogging:
    def test_side_added_to_records(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = create_logger("kicad_stencil.test")
        token = side_ctx.set("top")
        try:
            with caplog.at_level(logging.INFO):
                logger.info("cutting")
        finally:
            side_ctx.reset(token)
        assert caplog.records[-1].side == "top"

    def test_no_side_outside_run(self, caplog: pytest.LogCaptureFixture) -> None:
        assert get_side() is None
        logger = create_logger("kicad_stencil.test")
        with caplog.at_level(logging.INFO):
            logger.info("idle")
        assert not hasattr(caplog.records[-1], "side")

    def test_setup_logging_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOGGING_LEVEL", "DEBUG")
        root = setup_logging()
        try:
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
        finally:
            root.handlers.clear()
            root.setLevel(logging.WARNING)
