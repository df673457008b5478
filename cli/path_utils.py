# cli/path_utils.py

import os

DEFAULT_DATA_FILE = "students.json"
DATA_FILE_ENV_VAR = "ROSTER_DATA_FILE"


def get_default_data_file() -> str:
    """
    Resolves the default save file for the roster.

    Returns:
        The value of the `ROSTER_DATA_FILE` environment variable if set and non-blank,
        otherwise `students.json` in the current working directory.
    """
    env_value = os.environ.get(DATA_FILE_ENV_VAR, "").strip()

    return env_value or DEFAULT_DATA_FILE


def resolve_data_file(user_input: str | None) -> str:
    """
    Produces an absolute path for reading or writing the roster.

    Args:
        user_input (str | None): An optional user-specified file path. If None or blank, the default path is used.

    Returns:
        A resolved path string with `~` expanded.

    Notes:
        - Does not create the file or its parent directories; `core.persistence.save_to_file()` handles that.
    """
    if user_input is not None and user_input.strip():
        path = user_input.strip()
    else:
        path = get_default_data_file()

    return os.path.abspath(os.path.expanduser(path))
