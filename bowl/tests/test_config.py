import unittest
from unittest.mock import patch

from bowl.utilities import config


class TestConfig(unittest.TestCase):

    def test_debug_forces_debug_logging(self):
        with patch.object(config, 'DEBUG', True), patch.object(config, 'LOG_LEVEL', 'WARNING'):
            self.assertEqual(config.effective_log_level(), 'DEBUG')

    def test_log_level_used_without_debug(self):
        with patch.object(config, 'DEBUG', False), patch.object(config, 'LOG_LEVEL', 'WARNING'):
            self.assertEqual(config.effective_log_level(), 'WARNING')
