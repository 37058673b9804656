"""
User dictionary: exact romanized strings mapped to literal replacements.

The file is JSON::

    {
      "entries": {
        "addr": "서울시 강남구",
        "name": "김철수"
      }
    }

It is consulted before the converter with the whole composition buffer as
the key. Keys are lower-cased on load, as the buffer always is. A file
that cannot be read or parsed gives an empty dictionary.
"""
import json
import logging
import os

logger = logging.getLogger(__name__)

TEMPLATE_ENTRIES = {
    "addr": "서울시 강남구",
    "name": "홍길동",
}


class UserDict:
    def __init__(self, entries=None):
        self._entries = dict(entries or {})

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def load(cls, path):
        try:
            entries = read_entries(path)
        except (OSError, ValueError, RecursionError) as e:
            logger.warning("User dictionary %s not loaded: %s", path, e)
            return cls.empty()
        logger.info("Loaded %d user dictionary entries from %s", len(entries), path)
        return cls(entries)

    def lookup(self, key):
        return self._entries.get(key)

    def __contains__(self, key):
        return key in self._entries

    def __len__(self):
        return len(self._entries)


def read_entries(path):
    """Read the ``entries`` mapping of a dictionary file.

    Keys are lower-cased to match the composition buffer. Raises OSError
    when the file cannot be read and ValueError when it is not a valid
    dictionary (RecursionError for pathologically nested JSON).
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict) or not isinstance(data.get("entries"), dict):
        raise ValueError("missing 'entries' object")

    entries = {}
    for key, value in data["entries"].items():
        if not isinstance(value, str):
            raise ValueError(f"entry {key!r} is not a string")
        entries[key.lower()] = value
    return entries


def write_entries(path, entries):
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"entries": entries}, f, ensure_ascii=False, indent=2)
        f.write("\n")


def write_template(path):
    """Create a sample dictionary at ``path`` unless one exists."""
    if os.path.exists(path):
        return False
    write_entries(path, TEMPLATE_ENTRIES)
    return True
