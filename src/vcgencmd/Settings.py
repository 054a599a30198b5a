import copy
from pathlib import Path
import tomllib
import tomli_w


class Settings:
    DEFAULTS = {
        "vcgencmd": {
            "binary": "vcgencmd",
            "sudo": False,
            "sudo_binary": "sudo",
            # Seconds, 0 waits until vcgencmd exits
            "timeout": 0,
        },
        "log_level": "ERROR",
    }

    def __init__(self, path: str):
        self.path = Path(path)
        self.settings = {}
        self.load()

    def load(self):
        if self.path.exists():
            with self.path.open("rb") as file:
                loaded = tomllib.load(file)
                self.settings = self._merge(copy.deepcopy(self.DEFAULTS), loaded)
        else:
            self.settings = copy.deepcopy(self.DEFAULTS)

        self._validate()

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("wb") as f:
            f.write(tomli_w.dumps(self.settings).encode("utf-8"))

    def get(self, key, default=None):
        return self.settings.get(key, default)

    def set(self, key, value):
        self.settings[key] = value

    def delete(self, key):
        if key in self.settings:
            del self.settings[key]

    def _merge(self, base, override):
        for key, value in override.items():
            if (
                key in base
                and isinstance(base[key], dict)
                and isinstance(value, dict)
            ):
                base[key] = self._merge(base[key], value)
            else:
                base[key] = value
        return base

    def _validate(self):
        config = self.settings.get("vcgencmd")
        if not isinstance(config, dict):
            raise ValueError("Invalid config: [vcgencmd] must be a table")

        for key in ("binary", "sudo_binary"):
            if not isinstance(config.get(key), str) or not config[key]:
                raise ValueError(f"Invalid config: vcgencmd.{key} must be a non empty string")

        if not isinstance(config.get("sudo"), bool):
            raise ValueError("Invalid config: vcgencmd.sudo must be a boolean")

        timeout = config.get("timeout")
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0:
            raise ValueError(f"Invalid config: vcgencmd.timeout must be >= 0, got {timeout!r}")
