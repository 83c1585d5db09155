import logging
import unittest
from unittest.mock import patch

from apps.common import logger as logger_module
from apps.common.logger import AppLogger, configure_logging, get_logger


class AppLoggerTests(unittest.TestCase):
    def test_bind_merges_context_without_touching_parent(self):
        base = get_logger("apps.tests.bind").bind(component="carts")
        child = base.bind(layer="service")
        with self.assertLogs("apps.tests.bind", level=logging.INFO) as logs:
            base.info("parent")
            child.info("child")
        self.assertEqual(
            [r.getMessage() for r in logs.records],
            ["parent | component=carts", "child | component=carts layer=service"],
        )

    def test_format_appends_context(self):
        log = get_logger("apps.tests.format").bind(component="carts")
        with self.assertLogs("apps.tests.format", level=logging.DEBUG) as logs:
            log.info("Added", item_id=1, fields={"name": "A"})
        self.assertEqual(
            logs.records[0].getMessage(),
            "Added | component=carts item_id=1 fields={'name': 'A'}",
        )

    def test_message_without_context(self):
        with self.assertLogs("apps.tests.plain", level=logging.INFO) as logs:
            get_logger("apps.tests.plain").warning("plain")
        self.assertEqual(logs.records[0].getMessage(), "plain")
        self.assertEqual(logs.records[0].levelno, logging.WARNING)

    def test_disabled_level_skips_formatting(self):
        std = logging.getLogger("apps.tests.quiet")
        std.setLevel(logging.WARNING)
        log = AppLogger("apps.tests.quiet")
        with patch.object(AppLogger, "_format") as fmt:
            log.debug("hidden", item_id=1)
        fmt.assert_not_called()

    def test_exception_attaches_exc_info(self):
        log = get_logger("apps.tests.exc")
        with self.assertLogs("apps.tests.exc", level=logging.ERROR) as logs:
            try:
                raise ValueError("boom")
            except ValueError:
                log.exception("Failed", item_id=2)
        record = logs.records[0]
        self.assertEqual(record.levelno, logging.ERROR)
        self.assertIsNotNone(record.exc_info)
        self.assertIn("item_id=2", record.getMessage())


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self):
        patcher = patch.object(logger_module, "_configured", False)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_applies_once_unless_forced(self):
        config = {"version": 1, "disable_existing_loggers": False}
        with patch("apps.common.logger.logging.config.dictConfig") as dict_config:
            self.assertTrue(configure_logging(config))
            self.assertFalse(configure_logging(config))
            self.assertTrue(configure_logging(config, force=True))
        self.assertEqual(dict_config.call_count, 2)
        dict_config.assert_called_with(config)

    def test_defaults_to_project_settings(self):
        from cartstate import settings

        with patch("apps.common.logger.logging.config.dictConfig") as dict_config:
            configure_logging()
        dict_config.assert_called_once_with(settings.LOGGING)


if __name__ == "__main__":
    unittest.main()
