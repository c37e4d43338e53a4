TITLE = (
    " ___  _                       _   ___        _   \n"
    "|   \\(_)___ __ ___ _ _ __ _| | | _ \\___ __| |_ \n"
    "| |) | (_-</ _/ _ \\ '_/ _` |_| |   / -_|_-<  _|\n"
    "|___/|_/__/\\__\\___/_| \\__,_(_) |_|_\\___/__/\\__|"
)


def print_title(version: str = "v1.0") -> None:
    """Clear the terminal and print the ASCII banner.

    Args:
        version: Version label appended to the title output.
    """
    # ANSI escape sequence: move cursor home + clear screen.
    print("\033[H\033[J", end="")
    print(f"{TITLE}    {version}")
