#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Unit tests for the core package: exception hook, logging setup and .env loading.
"""

import logging
import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from wonde_roster.core import config, error_handler, logger as logger_module


class TestErrorHandler(unittest.TestCase):
    """Test cases for the global exception hook"""

    @patch.object(sys, '__excepthook__')
    def test_keyboard_interrupt_goes_to_default_hook(self, mock_hook):
        with patch.object(error_handler, 'logger') as mock_logger:
            error_handler.handle_exception(KeyboardInterrupt, KeyboardInterrupt(), None)

        mock_hook.assert_called_once()
        self.assertIs(mock_hook.call_args[0][0], KeyboardInterrupt)
        mock_logger.error.assert_not_called()

    @patch.object(sys, '__excepthook__')
    def test_unhandled_exception_is_logged(self, mock_hook):
        exc = ValueError('boom')

        with self.assertLogs('wonde_roster', level='ERROR') as logs:
            error_handler.handle_exception(ValueError, exc, None)

        self.assertIn('Unhandled exception', logs.output[0])
        self.assertIs(logs.records[0].exc_info[1], exc)
        mock_hook.assert_called_once_with(ValueError, exc, None)

    def test_setup_installs_hook(self):
        with patch.object(sys, 'excepthook'):
            error_handler.setup_global_exception_handler()
            self.assertIs(sys.excepthook, error_handler.handle_exception)


class TestSetupLogging(unittest.TestCase):
    """Test cases for logger configuration"""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp(prefix='wonde_roster_log_')
        patcher = patch.object(logger_module, 'LOGGER_NAME', 'wonde_roster_test_logger')
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        test_logger = logging.getLogger('wonde_roster_test_logger')
        for handler in list(test_logger.handlers):
            handler.close()
            test_logger.removeHandler(handler)
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_second_call_returns_configured_logger(self):
        log_file = os.path.join(self.test_dir, 'roster.log')

        first = logger_module.setup_logging(logging.INFO, log_file)
        second = logger_module.setup_logging(logging.DEBUG, '')

        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 2)
        self.assertEqual(second.level, logging.INFO)

    def test_empty_log_file_disables_file_handler(self):
        test_logger = logger_module.setup_logging(logging.WARNING, '')

        self.assertEqual(len(test_logger.handlers), 1)
        self.assertIsInstance(test_logger.handlers[0], logging.StreamHandler)
        self.assertIs(test_logger.handlers[0].stream, sys.stderr)

    def test_file_handler_writes_log(self):
        log_file = os.path.join(self.test_dir, 'roster.log')
        test_logger = logger_module.setup_logging(logging.INFO, log_file)

        test_logger.info('class skipped')
        for handler in test_logger.handlers:
            handler.flush()

        with open(log_file, encoding='utf-8') as f:
            self.assertIn('class skipped', f.read())


class TestLoadEnvironment(unittest.TestCase):
    """Test cases for .env discovery"""

    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp(prefix='wonde_roster_env_'))
        self.package_dir = self.test_dir / 'wonde_roster'
        self.package_dir.mkdir()
        patcher = patch.object(config, 'BASE_DIR', self.package_dir)
        patcher.start()
        self.addCleanup(patcher.stop)
        patcher = patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop('WONDE_ENV_TEST_VALUE', None)

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_loads_project_root_env(self):
        (self.test_dir / '.env').write_text('WONDE_ENV_TEST_VALUE=from-root\n', encoding='utf-8')

        config.load_environment()

        self.assertEqual(os.environ['WONDE_ENV_TEST_VALUE'], 'from-root')

    def test_package_env_wins_over_project_root(self):
        (self.package_dir / '.env').write_text('WONDE_ENV_TEST_VALUE=from-package\n', encoding='utf-8')
        (self.test_dir / '.env').write_text('WONDE_ENV_TEST_VALUE=from-root\n', encoding='utf-8')

        config.load_environment()

        self.assertEqual(os.environ['WONDE_ENV_TEST_VALUE'], 'from-package')

    def test_existing_environment_is_not_overridden(self):
        os.environ['WONDE_ENV_TEST_VALUE'] = 'from-shell'
        (self.test_dir / '.env').write_text('WONDE_ENV_TEST_VALUE=from-root\n', encoding='utf-8')

        config.load_environment()

        self.assertEqual(os.environ['WONDE_ENV_TEST_VALUE'], 'from-shell')


if __name__ == '__main__':
    unittest.main()
