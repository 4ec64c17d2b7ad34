#!/usr/bin/env python3
# PYTHON_ARGCOMPLETE_OK
import argparse
import sys

import argcomplete
from argcomplete.completers import FilesCompleter, ChoicesCompleter

from exprtype.config_user import UserConfig


def parse_config_doc():
    import textwrap
    from typing import get_type_hints
    __ucfg = UserConfig()

    docs = {}
    for name, prop in vars(UserConfig).items():
        if name.startswith('_') or not isinstance(prop, property):
            continue
        t = get_type_hints(prop.fget)['return']
        doc = prop.__doc__
        choices = None
        if hasattr(__ucfg, f'_{name}_values'):
            choices = getattr(__ucfg, f'_{name}_values')
        default_val = getattr(__ucfg, name)
        docs[name] = (
            f"type: {t}\n\n"
            f"{textwrap.dedent(doc).strip()}\n\n"
            f"Default value: {default_val}", t, default_val, choices)
    return docs


def parse_arguments(args=None):
    class ShowSuppressedInHelpFormatter(argparse.RawTextHelpFormatter):
        def add_usage(self, usage, actions, groups, prefix=None):
            if usage is not argparse.SUPPRESS:
                actions = [action for action in actions if action.metavar != '<cfg_val>']
                args = usage, actions, groups, prefix
                self._add_item(self._format_usage, args)

    from exprtype.config import cfg
    from exprtype.examples.examples import catalogue
    example_names = [e.name for e in catalogue()]

    main_parser = argparse.ArgumentParser(prog='exprtype')
    main_parser.add_argument('--version', action='version', version=f'%(prog)s {cfg.version}')
    config_files = ('json', )

    msg = 'Path to local configuration file (defaults to "config.json" in cwd). ' \
          'This file (if it exists), overrides settings defined in the global configuration.'
    main_parser.add_argument('--config-file', default='config.json', metavar='<config_file>', help=msg).completer = FilesCompleter(config_files)

    # Shared 'config' parser
    config_parser = argparse.ArgumentParser(add_help=False)
    msg = 'These parameters can be used to override settings defined (and documented) in config_user.py'
    cfg_group = config_parser.add_argument_group(title='Configuration Options', description=msg)

    # Expose config_user.py options via command line arguments, they are supported in all parsers
    cfg_docs = parse_config_doc()

    def add_config_args(parser, arg_names):
        for name in arg_names:
            doc, t, defval, choices = cfg_docs[name]

            if t is bool:
                if defval:
                    parser.add_argument(f'--no-{name.replace("_", "-")}', dest=name, help=doc, action='store_false', default=None)
                else:
                    parser.add_argument(f'--{name.replace("_", "-")}', dest=name, help=doc, action='store_true', default=None)
            elif t is int:
                parser.add_argument(f'--{name.replace("_", "-")}', type=int, dest=name, metavar='<cfg_val>', help=doc)
            else:
                parser.add_argument(f'--{name.replace("_", "-")}', dest=name, metavar='<cfg_val>', help=doc,
                                    choices=choices)
    add_config_args(cfg_group, cfg_docs.keys())

    subparsers = main_parser.add_subparsers(title='actions', dest='cmd', required=True)

    # 'list' parser
    subparsers.add_parser('list', parents=[config_parser], help='List the example expressions.',
                          formatter_class=ShowSuppressedInHelpFormatter)

    # 'check' parser
    msg = 'Names of the examples to type-check. Default: all examples'
    check_parser = subparsers.add_parser('check', parents=[config_parser], help='Type-check example expressions.',
                                         formatter_class=ShowSuppressedInHelpFormatter)
    check_parser.add_argument('names', nargs='*', help=msg, metavar='<example>').completer = ChoicesCompleter(example_names)
    check_parser.add_argument('--log', action='store_true', help='enable logging')

    # parse
    argcomplete.autocomplete(main_parser, always_complete_options=False)
    a = main_parser.parse_args(args)
    return a


def main(args=None):
    # parse arguments
    a = parse_arguments(args)

    import json

    from exprtype import my_logging
    from exprtype.config import cfg, tc_print
    from exprtype.errors.exceptions import TypeCheckException, ConfigurationError
    from exprtype.examples.examples import catalogue, get_example
    from exprtype.my_logging.log_context import log_context
    from exprtype.utils.progress_printer import fail_print, success_print, warn_print

    # Load configuration files
    try:
        cfg.load_configuration_from_disk(a.config_file)
    except ConfigurationError as e:
        with fail_print():
            print(f"ERROR: Failed to load configuration files\n{e}")
        sys.exit(42)

    # Support for overriding any user config setting via command line
    # The evaluation order for configuration loading is:
    # Default values in config_user.py -> Site config.json -> user config.json -> local config.json -> cmdline arguments
    # Settings defined at a later stage override setting values defined at an earlier stage
    override_dict = {}
    for name in vars(UserConfig):
        if name[0] != '_' and hasattr(a, name):
            val = getattr(a, name)
            if val is not None:
                override_dict[name] = val
    cfg.override_defaults(override_dict)

    if a.cmd == 'list':
        for example in catalogue():
            expected = 'ill-typed' if example.expected is None else str(example.expected)
            print(f'{example.name}: {example.code()} ({expected})')
    elif a.cmd == 'check':
        try:
            examples = [get_example(name) for name in a.names] if a.names else catalogue()
        except KeyError as e:
            with fail_print():
                print(f'Error: {e.args[0]}')
            sys.exit(1)

        # Enable logging
        if a.log:
            log_file = my_logging.get_log_file(filename='check', include_timestamp=False, label=None)
            my_logging.prepare_logger(log_file)

        tc_print(f'Type checking {len(examples)} example(s):')

        failed = []
        for example in examples:
            with log_context(example.name):
                result = example.check()
                my_logging.data('result', {'expression': example.code(), 'ok': result.is_ok, 'result': str(result)})
                try:
                    example.assert_expected(result)
                    matches = True
                except TypeCheckException as e:
                    my_logging.info(f'{e}')
                    failed.append(example.name)
                    matches = False

            if cfg.verbosity == 0:
                continue

            if cfg.output_format == 'json':
                print(json.dumps({
                    'name': example.name,
                    'expression': example.code(),
                    'ok': result.is_ok,
                    'type': None if result.result_type is None else str(result.result_type),
                    'error': None if result.error is None else result.error.msg,
                    'expected': None if example.expected is None else str(example.expected),
                    'matches': matches,
                }))
            elif result.is_ok:
                with success_print():
                    print(f"Successfully checked '{example.code()}': {result.result_type}")
            else:
                with fail_print():
                    print(f"Type Error when checking '{example.code()}': {result.error.msg}")

            if cfg.verbosity >= 2 and cfg.output_format == 'text':
                expected = 'ill-typed' if example.expected is None else str(example.expected)
                print(f'  expected: {expected}')

        if a.log:
            my_logging.shutdown()

        if failed:
            with warn_print():
                tc_print(f'Unexpected results for: {", ".join(failed)}')
            sys.exit(3)
    else:
        raise NotImplementedError(a.cmd)

    with success_print():
        tc_print("Finished successfully")


if __name__ == '__main__':
    main()
