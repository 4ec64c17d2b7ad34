import json
import os
from contextlib import contextmanager
from typing import Dict, Any, ContextManager

from exprtype.config_user import UserConfig
from exprtype.config_version import Versions
from exprtype.errors.exceptions import ConfigurationError


def tc_print(*args, verbosity_level=1, **kwargs):
    if (verbosity_level <= cfg.verbosity) and not cfg.is_unit_test:
        print(*args, **kwargs)


class Config(UserConfig):
    def __init__(self):
        super().__init__()

        # Internal values
        self._is_unit_test = False

    def _load_cfg_file_if_exists(self, filename):
        if os.path.exists(filename):
            with open(filename) as conf:
                try:
                    self.override_defaults(json.load(conf))
                except ValueError as e:
                    raise ConfigurationError(f'{e} (in file "{filename}")')

    def load_configuration_from_disk(self, local_cfg_file: str):
        # Load global configuration file
        global_config_dir = self._appdirs.site_config_dir
        global_cfg_file = os.path.join(global_config_dir, 'config.json')
        self._load_cfg_file_if_exists(global_cfg_file)

        # Load user configuration file
        user_config_dir = self._appdirs.user_config_dir
        user_cfg_file = os.path.join(user_config_dir, 'config.json')
        self._load_cfg_file_if_exists(user_cfg_file)

        # Load local configuration file
        self._load_cfg_file_if_exists(local_cfg_file)

    def override_defaults(self, overrides: Dict[str, Any]):
        for arg, val in overrides.items():
            if arg.startswith('_') or not hasattr(self, arg):
                raise ValueError(f'Tried to override non-existing config value {arg}')
            try:
                setattr(self, arg, val)
            except ValueError as e:
                raise ValueError(f'{e} (for entry "{arg}")')

    @contextmanager
    def overridden(self, **overrides) -> ContextManager:
        """Temporarily override config values, restoring the previous values on exit."""
        old = {k: getattr(self, k) for k in overrides}
        self.override_defaults(overrides)
        try:
            yield
        finally:
            self.override_defaults(old)

    @property
    def version(self) -> str:
        """exprtype version number"""
        return str(Versions.parsed_version())

    @property
    def is_unit_test(self) -> bool:
        return self._is_unit_test

    @is_unit_test.setter
    def is_unit_test(self, val: bool):
        self._is_unit_test = val


cfg = Config()
