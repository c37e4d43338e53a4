from typing import Any


def print_menu(config: dict[str, Any]) -> None:
    """Print the main CLI menu with a summary of the configured credentials."""
    webhook_label = "set" if config.get("webhook") else "not set"
    token_label = "set" if config.get("token") else "not set"

    print("")
    print(f"Discord REST console, webhook {webhook_label}, bot token {token_label}.")

    print("")
    print(" (1) Send webhook message")
    print(" (2) Send webhook file")
    print(" (3) Webhook info")
    print(" (4) DM a user")
    print(" (5) Bot info")
    print(" (6) Download image")
    print(" (7) Exit")


def get_selection(options: int) -> int:
    """Ask for a menu number between 1 and ``options``, re-prompting until one is given."""
    print("")
    while True:
        choice = input("Please select an option: ").strip()
        if choice.isdigit() and 1 <= int(choice) <= options:
            return int(choice)
        print(f"Please enter a number between 1 and {options}.")
