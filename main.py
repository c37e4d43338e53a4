"""Project entry-point (interactive console).

This module:
- Loads configuration and sets up logging
- Displays the interactive menu and dispatches user actions to the
  webhook and bot clients
"""

import time
from pathlib import Path
from typing import Any

import utils.config
import utils.log
import utils.menu
import utils.title
from discord_rest import DiscordError, build_bot_client, build_webhook_client

CURRENT_VERSION = "v1.0"


def _send_webhook_message(config: dict[str, Any]) -> None:
    message = input("\nMessage: ")
    with build_webhook_client(config) as client:
        client.send_message(message)


def _send_webhook_file(config: dict[str, Any]) -> None:
    file_path = input("\nFile path: ").strip()
    message = input("Message: ")
    with build_webhook_client(config) as client:
        client.send_file(message, file_path)


def _webhook_info(config: dict[str, Any]) -> None:
    with build_webhook_client(config) as client:
        data = client.info()

    print("======================================")
    for key in ("id", "name", "guild_id", "channel_id"):
        print(f" {key}: {data.get(key)}")
    print("======================================")


def _dm_user(config: dict[str, Any]) -> None:
    user_id = input("\nUser ID: ").strip()
    message = input("Message: ")
    with build_bot_client(config) as bot:
        bot.dm(user_id, message)


def _bot_info(config: dict[str, Any]) -> None:
    with build_bot_client(config) as bot:
        me = bot.info()
    print(f"\nLogged in as {me.get('username')} ({me.get('id')})")


def _download_image(config: dict[str, Any]) -> None:
    url = input("\nImage URL: ").strip()
    with build_bot_client(config) as bot:
        data = bot.download_image(url)

    target = Path(url.split("?", 1)[0].rsplit("/", 1)[-1] or "download.bin")
    target.write_bytes(data)
    print(f"Saved {len(data)} bytes to {target}")


ACTIONS = {
    1: _send_webhook_message,
    2: _send_webhook_file,
    3: _webhook_info,
    4: _dm_user,
    5: _bot_info,
    6: _download_image,
}


def run_action(choice: int, config: dict[str, Any]) -> bool:
    """Run one menu action.

    Args:
        choice: Menu number picked by the user.
        config: Loaded configuration.

    Returns:
        False when the user asked to exit, True otherwise.
    """
    action = ACTIONS.get(choice)
    if action is None:
        return False

    try:
        action(config)
    except ValueError as exc:
        # Missing token / webhook in config.json.
        print(f"[!] {exc}")
    except FileNotFoundError as exc:
        print(f"[!] File not found: {exc.filename}")
    except DiscordError as exc:
        print(f"[!] Discord request failed: {exc}")
    return True


def run_cli(config_path: str = "config.json") -> None:
    """Run the main interactive CLI loop until the user selects "Exit"."""
    config = utils.config.load_config(config_path)
    utils.log.setup_logging(config.get("log_level", "INFO"), config.get("log_file") or None)

    # Clear terminal once before entering the menu loop.
    print("\033[H\033[J", end="")

    while True:
        utils.title.print_title(CURRENT_VERSION)
        utils.menu.print_menu(config)

        choice = utils.menu.get_selection(len(ACTIONS) + 1)
        if not run_action(choice, config):
            print("\033[H\033[J", end="")
            print("Bye!")
            raise SystemExit(0)

        input("\nPress Enter to return to the menu...")
        time.sleep(0.2)


if __name__ == "__main__":
    run_cli()
