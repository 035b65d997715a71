import importlib
import os
import unittest
from unittest import mock

from prio.queue.settings import DEFAULTS, Settings

settings_module = importlib.import_module("prio.queue.settings")


class SettingsTest(unittest.TestCase):
    def test_defaults(self):
        cfg = Settings(DEFAULTS, {})
        self.assertEqual(16, cfg.initial_capacity)
        self.assertEqual(16, cfg["initial_capacity"])
        self.assertEqual({"initial_capacity"}, set(cfg))

    def test_overrides(self):
        cfg = Settings({"a": 1, "b": 2}, {"b": 3, "c": 4})
        self.assertEqual(1, cfg.a)
        self.assertEqual(3, cfg.b)
        self.assertEqual(4, cfg.c)
        self.assertEqual({"a", "b", "c"}, cfg.keys())

    def test_missing(self):
        cfg = Settings(DEFAULTS, {})
        self.assertRaises(AttributeError, getattr, cfg, "nonexistent")

    def test_from_environment(self):
        cfg = Settings.from_environment(
            environ={"PRIO_QUEUE_INITIAL_CAPACITY": "128"})
        self.assertEqual(128, cfg.initial_capacity)
        cfg = Settings.from_environment(environ={})
        self.assertEqual(16, cfg.initial_capacity)

    def test_from_environment_invalid(self):
        self.assertRaises(ValueError, Settings.from_environment,
                          environ={"PRIO_QUEUE_INITIAL_CAPACITY": "many"})

    def test_from_environment_negative(self):
        with self.assertRaises(ValueError) as ctx:
            Settings.from_environment(
                environ={"PRIO_QUEUE_INITIAL_CAPACITY": "-4"})
        self.assertIn("PRIO_QUEUE_INITIAL_CAPACITY", str(ctx.exception))

    def test_import_ignores_environment(self):
        try:
            with mock.patch.dict(
                    os.environ, {"PRIO_QUEUE_INITIAL_CAPACITY": "lots"}):
                module = importlib.reload(settings_module)
                self.assertEqual(16, module.settings.initial_capacity)
        finally:
            importlib.reload(settings_module)


if __name__ == "__main__":
    unittest.main()
