#!/usr/bin/env python3

"""
Unit tests for reader configuration.

Tests the configuration loading, validation, and environment
variable handling functionality.
"""

import unittest
import tempfile
import os
import json
import sys

import yaml

# Add the parent directory to the path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from bed_record.core.config import ReaderConfig, load_config
from bed_record.core.exceptions import ConfigurationError

ENV_VARS = [
    'BED_RECORD_COMMENT_PREFIXES',
    'BED_RECORD_SKIP_BLANK_LINES',
    'BED_RECORD_ON_ERROR',
    'BED_RECORD_MAX_ERRORS',
    'BED_RECORD_LOG_PROGRESS_EVERY',
]


class EnvTestCase(unittest.TestCase):
    """Clears reader environment variables around each test."""

    def setUp(self):
        self._saved_env = {key: os.environ.pop(key, None) for key in ENV_VARS}

    def tearDown(self):
        for key, value in self._saved_env.items():
            os.environ.pop(key, None)
            if value is not None:
                os.environ[key] = value

    def write_temp(self, suffix, content):
        with tempfile.NamedTemporaryFile(mode='w', suffix=suffix, delete=False) as f:
            f.write(content)
            path = f.name
        self.addCleanup(os.unlink, path)
        return path


class TestReaderConfig(EnvTestCase):
    """Test ReaderConfig class."""

    def test_default_config(self):
        config = ReaderConfig()

        self.assertEqual(config.comment_prefixes, ('#', 'track', 'browser'))
        self.assertTrue(config.skip_blank_lines)
        self.assertEqual(config.on_error, 'raise')
        self.assertEqual(config.max_errors, 0)
        self.assertEqual(config.log_progress_every, 0)

    def test_config_validation(self):
        ReaderConfig().validate()  # Should not raise

        with self.assertRaises(ConfigurationError):
            ReaderConfig(on_error='ignore')

        with self.assertRaises(ConfigurationError):
            ReaderConfig(max_errors=-1)

        with self.assertRaises(ConfigurationError):
            ReaderConfig(log_progress_every=-5)

        with self.assertRaises(ConfigurationError):
            ReaderConfig(comment_prefixes='#')

        with self.assertRaises(ConfigurationError):
            ReaderConfig(comment_prefixes=('#', ''))

    def test_prefixes_normalised_to_tuple(self):
        config = ReaderConfig(comment_prefixes=['#', '@'])
        self.assertEqual(config.comment_prefixes, ('#', '@'))

    def test_config_from_dict(self):
        config = ReaderConfig.from_dict({
            "on_error": "skip",
            "max_errors": 10,
            "unknown_key": "ignored"
        })

        self.assertEqual(config.on_error, 'skip')
        self.assertEqual(config.max_errors, 10)
        self.assertTrue(config.skip_blank_lines)

    def test_config_from_dict_bad_type(self):
        with self.assertRaises(ConfigurationError):
            ReaderConfig.from_dict({"max_errors": "many"})

    def test_config_to_dict(self):
        config_dict = ReaderConfig(on_error='skip').to_dict()

        self.assertIsInstance(config_dict, dict)
        self.assertEqual(config_dict["on_error"], 'skip')
        self.assertEqual(config_dict["comment_prefixes"], ['#', 'track', 'browser'])

    def test_config_from_json_file(self):
        path = self.write_temp('.json', json.dumps({"on_error": "skip", "comment_prefixes": ["@"]}))

        config = ReaderConfig.from_file(path)

        self.assertEqual(config.on_error, 'skip')
        self.assertEqual(config.comment_prefixes, ('@',))

    def test_config_from_yaml_file(self):
        path = self.write_temp('.yaml', yaml.safe_dump({"max_errors": 3, "skip_blank_lines": False}))

        config = ReaderConfig.from_file(path)

        self.assertEqual(config.max_errors, 3)
        self.assertFalse(config.skip_blank_lines)

    def test_config_from_nonexistent_file(self):
        with self.assertRaises(ConfigurationError):
            ReaderConfig.from_file("/nonexistent/config.json")

    def test_config_from_invalid_json(self):
        path = self.write_temp('.json', "{ invalid json }")
        with self.assertRaises(ConfigurationError):
            ReaderConfig.from_file(path)

    def test_config_from_invalid_yaml(self):
        path = self.write_temp('.yml', "on_error: [unclosed\n")
        with self.assertRaises(ConfigurationError):
            ReaderConfig.from_file(path)

    def test_config_file_not_a_mapping(self):
        path = self.write_temp('.json', "[1, 2]")
        with self.assertRaises(ConfigurationError):
            ReaderConfig.from_file(path)

    def test_config_save_to_file(self):
        for suffix in ('.json', '.yaml'):
            with self.subTest(suffix=suffix):
                path = self.write_temp(suffix, "")
                ReaderConfig(on_error='skip', comment_prefixes=('@',)).save_to_file(path)

                loaded = ReaderConfig.from_file(path)
                self.assertEqual(loaded.on_error, 'skip')
                self.assertEqual(loaded.comment_prefixes, ('@',))

    def test_config_from_env(self):
        os.environ['BED_RECORD_COMMENT_PREFIXES'] = '#,@'
        os.environ['BED_RECORD_SKIP_BLANK_LINES'] = 'false'
        os.environ['BED_RECORD_ON_ERROR'] = 'skip'
        os.environ['BED_RECORD_MAX_ERRORS'] = '4'

        config = ReaderConfig.from_env()

        self.assertEqual(config.comment_prefixes, ('#', '@'))
        self.assertFalse(config.skip_blank_lines)
        self.assertEqual(config.on_error, 'skip')
        self.assertEqual(config.max_errors, 4)
        self.assertEqual(config.log_progress_every, 0)

    def test_config_from_env_invalid_values(self):
        os.environ['BED_RECORD_MAX_ERRORS'] = 'invalid'
        with self.assertRaises(ConfigurationError):
            ReaderConfig.from_env()

        os.environ['BED_RECORD_MAX_ERRORS'] = '1'
        os.environ['BED_RECORD_ON_ERROR'] = 'retry'
        with self.assertRaises(ConfigurationError):
            ReaderConfig.from_env()


class TestLoadConfig(EnvTestCase):
    """Test the load_config function."""

    def test_load_default_config(self):
        config = load_config()
        self.assertEqual(config.on_error, 'raise')

    def test_load_config_from_env(self):
        os.environ['BED_RECORD_ON_ERROR'] = 'skip'
        config = load_config()
        self.assertEqual(config.on_error, 'skip')

    def test_load_config_priority(self):
        """Test configuration loading priority: file > env > defaults."""
        os.environ['BED_RECORD_MAX_ERRORS'] = '7'
        path = self.write_temp('.json', json.dumps({"max_errors": 2}))

        config = load_config(config_path=path, use_env=True)

        self.assertEqual(config.max_errors, 2)

    def test_load_config_layers_per_key(self):
        """Test that file keys override env keys and unset keys keep env values."""
        os.environ['BED_RECORD_ON_ERROR'] = 'skip'
        os.environ['BED_RECORD_MAX_ERRORS'] = '7'
        path = self.write_temp('.json', json.dumps({"max_errors": 2}))

        config = load_config(config_path=path)

        self.assertEqual(config.on_error, 'skip')
        self.assertEqual(config.max_errors, 2)

    def test_from_dict_onto_base(self):
        base = ReaderConfig(on_error='skip')
        config = ReaderConfig.from_dict({"max_errors": 5}, base=base)

        self.assertEqual(config.on_error, 'skip')
        self.assertEqual(config.max_errors, 5)
        self.assertEqual(base.max_errors, 0)

    def test_load_config_no_env(self):
        os.environ['BED_RECORD_MAX_ERRORS'] = '7'

        config = load_config(use_env=False)

        self.assertEqual(config.max_errors, 0)


if __name__ == '__main__':
    unittest.main()
