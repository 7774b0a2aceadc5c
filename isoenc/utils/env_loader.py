"""
isoenc Environment Loader

Loads ISOENC_* environment variables from a .env file.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def find_env_file(start: Optional[Path] = None) -> Optional[Path]:
    """
    Look for a .env file in ``start`` and its parents.

    Args:
        start: Directory to start from, the current directory if None

    Returns:
        Path of the first .env file found, or None
    """
    current = Path(start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        env_candidate = parent / '.env'
        if env_candidate.is_file():
            return env_candidate
    return None


def load_environment_variables(env_file_path: Optional[Path] = None) -> bool:
    """
    Load environment variables from a .env file.

    Variables already set in the environment are not overridden.

    Args:
        env_file_path: Optional path to .env file. If None, searches upwards
            from the current directory.

    Returns:
        True if a .env file was loaded, False otherwise.
    """
    if env_file_path is None:
        env_file_path = find_env_file()

    if env_file_path is None or not Path(env_file_path).is_file():
        return False

    load_dotenv(env_file_path, override=False)
    return True
