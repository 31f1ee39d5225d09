import logging
import os
import os.path
import sys
from dataclasses import dataclass, field, fields, replace
from importlib.util import find_spec
from typing import Any, Dict, List, Optional

import toml

from .bigint import MAX_DIGITS

logger = logging.getLogger(__name__)

APP_NAME = "bigfact"


@dataclass(frozen=True)
class Config:
    capacity: int = MAX_DIGITS
    values: List[int] = field(default_factory=lambda: [25, 24])
    precision: int = 6

    def merge(self, **overrides: Any) -> "Config":
        """Returns a copy with all overrides applied which are not None."""

        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def read_toml(path: str) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as fr:
        return toml.load(fr)


def get_config_dir() -> str:
    """Returns the per-user configuration directory of the application."""

    if sys.platform == "win32":
        base = os.environ.get("APPDATA") or os.path.expanduser(os.path.join("~", "AppData", "Roaming"))
    else:
        base = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser(os.path.join("~", ".config"))

    return os.path.join(base, APP_NAME)


def find_config_file(name: str = APP_NAME) -> Optional[str]:
    """Looks for `{name}.toml` in the user config directory, the module directory
    and the current working directory, in this order.
    """

    configfilename = name + ".toml"
    candidates = [os.path.join(get_config_dir(), configfilename)]

    spec = find_spec(name)
    if spec is not None and spec.submodule_search_locations:
        candidates.append(os.path.join(list(spec.submodule_search_locations)[0], configfilename))

    candidates.append(configfilename)

    for path in candidates:
        if os.path.isfile(path):
            return path

    return None


def _check_int(key: str, value: Any, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Config key `{key}` must be an integer, not {type(value).__name__}")
    if value < minimum:
        raise ValueError(f"Config key `{key}` must be >= {minimum}, but was {value}")
    return value


def parse_config(data: Dict[str, Any]) -> Config:
    known = {f.name for f in fields(Config)}
    for key in data.keys() - known:
        logger.warning("Ignoring unknown config key `%s`", key)

    kwargs: Dict[str, Any] = {}

    if "capacity" in data:
        kwargs["capacity"] = _check_int("capacity", data["capacity"], 1)

    if "precision" in data:
        kwargs["precision"] = _check_int("precision", data["precision"], 0)

    if "values" in data:
        values = data["values"]
        if not isinstance(values, list):
            raise ValueError(f"Config key `values` must be a list, not {type(values).__name__}")
        kwargs["values"] = [_check_int("values", v, 0) for v in values]

    return Config(**kwargs)


def load_config(path: Optional[str] = None) -> Config:
    """Loads the configuration from `path`, or from the first config file found.
    Returns the defaults if no file is given and none can be found.
    """

    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No config file found, using defaults")
            return Config()

    logger.info("Reading config from %s", path)
    return parse_config(read_toml(path))
