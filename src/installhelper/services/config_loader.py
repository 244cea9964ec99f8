"""Configuration loader for InstallHelper."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from installhelper.errors import HelperError


class ConfigLoader:
    """Loads YAML configuration files for CLI defaults."""

    TEXT_KEYS = {
        "repo_url",
        "language",
        "model",
        "api_url",
        "api_key_env",
        "install_script_file",
        "instructions_file",
        "log_file",
    }
    FLAG_KEYS = {"allow_insecure_http", "no_open", "verbose"}
    NUMBER_KEYS = {"request_timeout"}
    SUPPORTED_KEYS = TEXT_KEYS | FLAG_KEYS | NUMBER_KEYS

    def load(self, config_path: Optional[str]) -> Dict[str, Any]:
        if not config_path:
            return {}

        path = Path(config_path)
        if not path.is_file():
            raise HelperError(f"Config file not found: {config_path}")

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as exc:
            raise HelperError(f"Invalid config file '{config_path}': {exc}") from exc

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise HelperError("Config file must contain a YAML mapping at the root.")

        unknown = sorted(str(key) for key in set(parsed) - self.SUPPORTED_KEYS)
        if unknown:
            raise HelperError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key, value in parsed.items():
            self._check_value(key, value)
        return parsed

    def _check_value(self, key: str, value: Any):
        if value is None:
            return
        if key in self.FLAG_KEYS and not isinstance(value, bool):
            raise HelperError(f"Config key '{key}' must be true or false, got {value!r}.")
        # YAML reads `true` as bool, which is also an int
        if key in self.NUMBER_KEYS and (isinstance(value, bool) or not isinstance(value, (int, float))):
            raise HelperError(f"Config key '{key}' must be a number of seconds, got {value!r}.")
        if key in self.TEXT_KEYS and isinstance(value, (dict, list)):
            raise HelperError(f"Config key '{key}' must be a single value, got {value!r}.")
