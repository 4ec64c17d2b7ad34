import io
import json
import logging
import os
import tempfile
from contextlib import redirect_stdout
from unittest import mock

from exprtype.__main__ import main, parse_arguments
from exprtype.config import cfg
from exprtype.examples.examples import Example, all_examples, type_error_examples
from exprtype.expr_ast.ast import ResultType, One
from exprtype.tests.exprtype_unit_test import ExprTypeTestCase


class TestMain(ExprTypeTestCase):

    def setUp(self) -> None:
        super().setUp()
        self.old_values = {k: getattr(cfg, k) for k in ('output_format', 'color_output', 'verbosity')}
        self.tmpdir = tempfile.TemporaryDirectory()
        self.config_file = os.path.join(self.tmpdir.name, 'config.json')

    def tearDown(self) -> None:
        cfg.override_defaults(self.old_values)
        self.tmpdir.cleanup()
        super().tearDown()

    def run_main(self, *args):
        out = io.StringIO()
        code = 0
        with redirect_stdout(out):
            try:
                main(['--config-file', self.config_file, *args])
            except SystemExit as e:
                code = e.code
        return code, out.getvalue()

    def test_parse_arguments(self):
        a = parse_arguments(['check', '--output-format', 'json', '--no-color-output', 'true'])
        self.assertEqual(a.cmd, 'check')
        self.assertEqual(a.names, ['true'])
        self.assertEqual(a.output_format, 'json')
        self.assertFalse(a.color_output)
        self.assertIsNone(a.verbosity)

    def test_list(self):
        code, out = self.run_main('list', '--no-color-output')
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), len(all_examples) + len(type_error_examples))
        self.assertIn('plus_one_true: (1 + true) (ill-typed)', lines)
        self.assertIn('or_true_false: (true || false) (BoolType)', lines)

    def test_check_success(self):
        code, out = self.run_main('check', '--no-color-output', 'or_true_false')
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "Successfully checked '(true || false)': BoolType")

    def test_check_type_error(self):
        code, out = self.run_main('check', '--no-color-output', 'plus_one_true')
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(),
                         "Type Error when checking '(1 + true)': + expression expects IntType for operand 2 but got BoolType")

    def test_check_all(self):
        code, out = self.run_main('check', '--no-color-output')
        self.assertEqual(code, 0)
        self.assertEqual(len(out.splitlines()), len(all_examples) + len(type_error_examples))

    def test_check_json(self):
        code, out = self.run_main('check', '--no-color-output', '--output-format', 'json', 'or_one_true')
        self.assertEqual(code, 0)
        d = json.loads(out)
        self.assertEqual(d['name'], 'or_one_true')
        self.assertEqual(d['expression'], '(1 || true)')
        self.assertFalse(d['ok'])
        self.assertIsNone(d['type'])
        self.assertEqual(d['error'], '|| expression expects BoolType for operand 1 but got IntType')
        self.assertTrue(d['matches'])

    def test_verbose(self):
        code, out = self.run_main('check', '--no-color-output', '--verbosity', '2', 'one')
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["Successfully checked '1': IntType", '  expected: IntType'])

    def test_silent(self):
        code, out = self.run_main('check', '--no-color-output', '--verbosity', '0')
        self.assertEqual(code, 0)
        self.assertEqual(out, '')

    def test_log(self):
        log_dir = os.path.join(self.tmpdir.name, 'logs')
        with cfg.overridden(log_dir=log_dir):
            code, _ = self.run_main('check', '--no-color-output', '--log', 'one')
        self.assertEqual(code, 0)
        with open(os.path.join(log_dir, 'check_data.log')) as f:
            d = json.loads(f.read())
        self.assertEqual(d['key'], 'result')
        self.assertEqual(d['context'], ['one'])
        self.assertEqual(d['value']['result'], 'IntType')
        self.assertFalse(any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers))

    def test_no_log_files_without_flag(self):
        log_dir = os.path.join(self.tmpdir.name, 'logs')
        with cfg.overridden(log_dir=log_dir):
            code, _ = self.run_main('check', '--no-color-output')
        self.assertEqual(code, 0)
        self.assertEqual(os.listdir(log_dir), [])

    def test_unknown_example(self):
        code, out = self.run_main('check', '--no-color-output', 'no_such_example')
        self.assertEqual(code, 1)
        self.assertIn('no_such_example', out)

    def test_unexpected_result(self):
        wrong = Example('wrong', One(), ResultType.BoolType)
        with mock.patch('exprtype.examples.examples.get_example', return_value=wrong):
            code, _ = self.run_main('check', '--no-color-output', 'wrong')
        self.assertEqual(code, 3)

    def test_config_file(self):
        with open(self.config_file, 'w') as f:
            json.dump({'output_format': 'json', 'color_output': False}, f)
        code, out = self.run_main('check', 'one')
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)['type'], 'IntType')

    def test_invalid_config_file(self):
        with open(self.config_file, 'w') as f:
            json.dump({'output_format': 'xml'}, f)
        code, _ = self.run_main('check', '--no-color-output', 'one')
        self.assertEqual(code, 42)

    def test_version(self):
        code, out = self.run_main('--version')
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), f'exprtype {cfg.version}')
