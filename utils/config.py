import json
import os
import time
from typing import Any


DEFAULT_CONFIG: dict[str, Any] = {
    "token": "",
    "webhook": "",
    "api_version": 10,
    "timeout": 15,
    "max_retries": 0,
    "log_requests": True,
    "log_level": "INFO",
    "log_file": "",
    "proxy": "",
}


def load_config(path: str = "config.json") -> dict[str, Any]:
    """Load and validate the project configuration from a JSON file.

    Behavior:
        - If the config file does not exist, it is created with defaults and the
          program exits to force the user to fill it in.
        - If neither "token" nor "webhook" is set, the program prints a notice
          and exits: at least one client must be usable.
        - Keys missing from the file fall back to :data:`DEFAULT_CONFIG`.

    Args:
        path: Path to the JSON config file.

    Returns:
        Parsed configuration dictionary.

    Raises:
        json.JSONDecodeError: If the file exists but contains invalid JSON.
        OSError: If the file cannot be read/written.
    """
    if not os.path.isfile(path):
        save_config(DEFAULT_CONFIG, path)

        print(f"[!] Config file '{path}' was created. Please fill it in and restart the program.")
        time.sleep(5)
        raise SystemExit(1)

    with open(path, "r", encoding="utf-8") as f:
        config: dict[str, Any] = {**DEFAULT_CONFIG, **json.load(f)}

    if not config.get("token") and not config.get("webhook"):
        print("[!] Neither 'token' nor 'webhook' is set in config.json.")
        print("[!] Please complete the file and restart the program.")
        time.sleep(5)
        raise SystemExit(1)

    return config


def save_config(config: dict[str, Any], path: str = "config.json") -> None:
    """Write the client settings (token, webhook, transport, logging) to ``path``.

    Also used by :func:`load_config` to seed a fresh file with :data:`DEFAULT_CONFIG`.
    """
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
        f.write("\n")
