"""Small helpers for interactive console programs."""

from __future__ import annotations

import os
from collections.abc import Sequence


def _get_integer(prompt: str) -> int:
    while True:
        text = input(prompt).strip()
        try:
            return int(text)
        except ValueError:
            print("Illegal integer format. Try again.")


def make_selection_from(title: str, options: Sequence[str]) -> int:
    """Show numbered options and return the index the user picks.

    Raises ValueError if there are no options to pick from.
    """
    if not options:
        raise ValueError(
            "Internal error: Requesting the user to pick an item from an empty list."
        )

    print(title)
    for index, option in enumerate(options):
        print(f"{index} {option}")

    while True:
        choice = _get_integer("Your choice: ")
        if 0 <= choice < len(options):
            return choice
        print(f"Please enter a number between 0 and {len(options) - 1}")


def make_file_selection(suffix: str, directory: str = "res/") -> str:
    """Ask the user to pick a file with the given suffix from a directory."""
    listing = os.listdir(directory or ".")
    options = sorted(name for name in listing if name.endswith(suffix))

    effective = directory or "."
    if not effective.endswith("/"):
        effective += "/"

    index = make_selection_from("Please choose a demo file from this list:", options)
    return effective + options[index]


def get_yes_or_no(prompt: str) -> bool:
    """Ask until the answer starts with Y or N, and return whether it was yes."""
    while True:
        answer = input(prompt).strip()
        if answer[:1].lower() == "y":
            return True
        if answer[:1].lower() == "n":
            return False
        print("Please type a word that starts with 'Y' or 'N'.")