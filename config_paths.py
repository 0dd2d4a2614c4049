import json
import os

from commit_source import DEFAULT_SHORT_ID_LENGTH
from fixup_action import DEFAULT_FIXUP_COMMAND

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "git-fixup-menu")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
PAGE_SIZE_DEFAULT = None  # list height
INITIAL_FETCH_DEFAULT = None  # twice the terminal height
FIXUP_COMMAND_DEFAULT = list(DEFAULT_FIXUP_COMMAND)
SHORT_ID_LENGTH_DEFAULT = DEFAULT_SHORT_ID_LENGTH


def _positive_int(value):
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 1 else None


def load_config():
    cfg = {
        "PAGE_SIZE": PAGE_SIZE_DEFAULT,
        "INITIAL_FETCH": INITIAL_FETCH_DEFAULT,
        "FIXUP_COMMAND": list(FIXUP_COMMAND_DEFAULT),
        "SHORT_ID_LENGTH": SHORT_ID_LENGTH_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    page_size = _positive_int(data.get("page_size"))
    if page_size is not None:
        cfg["PAGE_SIZE"] = page_size

    initial = _positive_int(data.get("initial_fetch"))
    if initial is not None:
        cfg["INITIAL_FETCH"] = initial

    cmd = data.get("fixup_command")
    if isinstance(cmd, list) and cmd and all(isinstance(item, str) for item in cmd):
        cfg["FIXUP_COMMAND"] = cmd

    id_len = _positive_int(data.get("short_id_length"))
    if id_len is not None and 4 <= id_len <= 40:
        cfg["SHORT_ID_LENGTH"] = id_len

    return cfg
