import json
import logging
import os

from romhan import keys
from romhan.user_dict import UserDict

logger = logging.getLogger(__name__)

CONFIG_DIR = os.path.expanduser("~/.config/romhan")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")
USER_DICT_FILE = os.path.join(CONFIG_DIR, "user_dict.json")
LOG_FILE = os.path.join(CONFIG_DIR, "romhan.log")

DEFAULT_CONFIG = {
    "toggle_key": {"key": "Space", "shift": True, "ctrl": False, "alt": False},
    "languages": {"japanese": True, "korean": False},
    "user_dict_path": None,
}

# IBus engine name registered for each language.
ENGINE_NAMES = {
    "japanese": "romhan-ja",
    "korean": "romhan-ko",
}
FALLBACK_ENGINE = "romhan-ko"


class ConfigError(ValueError):
    pass


class ToggleKey:
    def __init__(self, key="Space", shift=True, ctrl=False, alt=False):
        keyval = keys.key_name_to_keyval(key)
        if keyval is None:
            raise ConfigError(f"unsupported toggle key name: {key!r}")
        self.key = key
        self.keyval = keyval
        self.shift = shift
        self.ctrl = ctrl
        self.alt = alt

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ConfigError("toggle_key must be an object")
        missing = [field for field in ("key", "shift", "ctrl", "alt") if field not in data]
        if missing:
            raise ConfigError(f"toggle_key is missing {', '.join(missing)}")
        if not isinstance(data["key"], str):
            raise ConfigError("toggle_key.key must be a string")
        for field in ("shift", "ctrl", "alt"):
            if not isinstance(data[field], bool):
                raise ConfigError(f"toggle_key.{field} must be true or false")
        return cls(data["key"], data["shift"], data["ctrl"], data["alt"])

    def to_dict(self):
        return {"key": self.key, "shift": self.shift, "ctrl": self.ctrl, "alt": self.alt}

    def matches(self, event):
        return (keys.normalize_keyval(event.keyval) == self.keyval
                and event.shift == self.shift
                and event.ctrl == self.ctrl
                and event.alt == self.alt)

    def label(self):
        mods = []
        if self.shift:
            mods.append("Shift")
        if self.ctrl:
            mods.append("Control")
        if self.alt:
            mods.append("Alt")
        return "+".join(mods + [self.key])


class Config:
    def __init__(self, toggle_key=None, languages=None, user_dict_path=None):
        self.toggle_key = toggle_key or ToggleKey()
        self.languages = dict(DEFAULT_CONFIG["languages"])
        if languages:
            self.languages.update(languages)
        self.user_dict_path = user_dict_path

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ConfigError("configuration must be an object")
        if "toggle_key" not in data:
            raise ConfigError("toggle_key is required")

        languages = data.get("languages") or {}
        if not isinstance(languages, dict):
            raise ConfigError("languages must be an object")

        path = data.get("user_dict_path")
        if path is not None and not isinstance(path, str):
            raise ConfigError("user_dict_path must be a string")

        for name in ENGINE_NAMES:
            if name in languages and not isinstance(languages[name], bool):
                raise ConfigError(f"languages.{name} must be true or false")

        return cls(
            toggle_key=ToggleKey.from_dict(data["toggle_key"]),
            languages={name: languages[name] for name in ENGINE_NAMES if name in languages},
            user_dict_path=path or None,
        )

    def to_dict(self):
        return {
            "toggle_key": self.toggle_key.to_dict(),
            "languages": dict(self.languages),
            "user_dict_path": self.user_dict_path,
        }

    def engine_names(self):
        names = [ENGINE_NAMES[lang] for lang in ENGINE_NAMES if self.languages.get(lang)]
        return names or [FALLBACK_ENGINE]

    def user_dict_file(self):
        if self.user_dict_path:
            return os.path.expanduser(self.user_dict_path)
        if os.path.exists(USER_DICT_FILE):
            return USER_DICT_FILE
        return None


def load_config(path=CONFIG_FILE):
    """Read the configuration, falling back to defaults on any problem.

    A missing file is created with the default settings.
    """
    if not os.path.exists(path):
        try:
            save_config(Config(), path)
            logger.info("Created default configuration at %s", path)
        except OSError as e:
            logger.warning("Could not create %s: %s", path, e)
        return Config()

    try:
        with open(path, "r", encoding="utf-8") as f:
            return Config.from_dict(json.load(f))
    except (OSError, ValueError, RecursionError) as e:
        logger.warning("Invalid configuration %s, using defaults: %s", path, e)
        return Config()


def save_config(config, path=CONFIG_FILE):
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, ensure_ascii=False, indent=2)
        f.write("\n")


def load_user_dict(config):
    path = config.user_dict_file()
    if path is None:
        return UserDict.empty()
    return UserDict.load(path)
