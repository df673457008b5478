# cli/menu_helpers.py

"""
Helper functions for the roster shell.

This module provides utilities for:
- Displaying result lists and standard system messages
- Prompting for user input and confirmation
- Displaying error feedback from failed `Response` objects

These functions are shared by the one-shot and interactive modes of `cli.main`.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from core.response import Response

# === display methods ===


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_titled_results(
    title: str,
    results: list[Any],
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    print(f"\n=== {title} ===")

    if not results:
        print("(none)")
        return

    display_results(results, show_index=True, formatter=formatter)


def display_banner(title: str) -> None:
    print(f"\n{formatters.format_banner_text(title)}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")


# === input methods ===


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def confirm_unsaved_changes() -> bool:
    return confirm_action(
        "There are unsaved changes to the roster. Do you want to save now?"
    )


def prompt_user_input(prompt: str) -> str:
    return input(prompt).strip()
