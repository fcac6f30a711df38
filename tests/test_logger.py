# test_logger.py

import logging

from antsy import Logger, StyleMode, set_style_mode


class TestLogger:
    def test_disabled_logger_has_null_handler(self):
        logger = Logger("antsy.tests.quiet")
        handlers = logging.getLogger("antsy.tests.quiet").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
        logger.debug("nothing to see")

    def test_level_methods_forward(self, caplog):
        logger = Logger("antsy.tests.levels")
        with caplog.at_level(logging.DEBUG, logger="antsy.tests.levels"):
            logger.info("hello")
            logger.error("bad")
        assert [r.levelname for r in caplog.records] == ["INFO", "ERROR"]

    def test_mode_resolution_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="antsy.enable"):
            set_style_mode(StyleMode.NEVER)
        assert "resolved to off" in caplog.text
