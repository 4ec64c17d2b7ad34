import json
import logging
import os
import tempfile
import unittest

from exprtype import my_logging
from exprtype.my_logging.log_context import log_context
from exprtype.utils.helpers import read_file


class TestLogger(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.default_log_file = my_logging.get_log_file(label='TestLogger', parent_dir=self.tmpdir.name)

    def tearDown(self):
        my_logging.shutdown()
        self.tmpdir.cleanup()

    def test_logger(self):
        # log something
        log_file = self.default_log_file + '_basic_test'
        my_logging.prepare_logger(log_file)
        my_logging.info("ABCD")
        my_logging.debug("EFGH")
        my_logging.shutdown()

        self.assertIn('ABCD', read_file(log_file + '_info.log'))
        self.assertNotIn('EFGH', read_file(log_file + '_info.log'))
        self.assertIn('EFGH', read_file(log_file + '_debug.log'))

    def test_data(self):
        log_file = self.default_log_file + '_data_test'
        my_logging.prepare_logger(log_file)
        with log_context('outer'):
            my_logging.data('key', 2)
        my_logging.info('ABCD')
        my_logging.shutdown()

        # check
        content = read_file(log_file + '_data.log')
        d = json.loads(content)
        self.assertEqual(d['key'], 'key')
        self.assertEqual(d['value'], 2)
        self.assertEqual(d['context'], ['outer'])
        self.assertTrue('ABCD' not in content)

    def test_shutdown_closes_handlers(self):
        root = logging.getLogger()
        my_logging.prepare_logger(self.default_log_file + '_shutdown_test')
        my_logging.info('ABCD')
        handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        self.assertEqual(len(handlers), 3)

        my_logging.shutdown()
        self.assertEqual(root.handlers, [])
        self.assertEqual(root.level, logging.WARNING)
        for h in handlers:
            self.assertIsNone(h.stream)

    def test_get_log_file(self):
        log_file = my_logging.get_log_file(label=None, parent_dir=self.tmpdir.name, filename='check',
                                           include_timestamp=False)
        self.assertEqual(log_file, os.path.join(self.tmpdir.name, 'check'))
        self.assertTrue(os.path.isdir(os.path.dirname(self.default_log_file)))
        self.assertTrue(os.path.basename(self.default_log_file).startswith('log_'))

    def test_log_context_is_popped(self):
        from exprtype.my_logging.log_context import full_log_context
        with log_context('a'):
            with log_context('b'):
                self.assertEqual(full_log_context, ['a', 'b'])
            self.assertEqual(full_log_context, ['a'])
        self.assertEqual(full_log_context, [])
