import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from scavenger_hunt.utils.constants import (
    DEFAULT_STORE_BACKEND,
    PROGRESS_KEY,
    STORE_BACKENDS,
)
from scavenger_hunt.utils.helper import parse_bool


def _find_project_root(start: Optional[Path] = None) -> Path:
    start = start or Path(__file__).resolve()
    current = start if start.is_dir() else start.parent
    markers = {'pyproject.toml', '.git'}
    while True:
        if any((current / m).exists() for m in markers):
            return current
        if current.parent == current:
            return start if start.is_dir() else start.parent
        current = current.parent


def _resolve_env_filename() -> str:
    env_file = os.getenv('ENV_FILE')
    if env_file:
        return env_file

    env = (os.getenv('ENV') or os.getenv('PYTHON_ENV') or 'local').lower()
    if env in {'prod', 'production'}:
        return '.env.prod'
    return '.env.local'


def load_env(override: bool = False) -> Path:
    '''Load the env file for the current ENV into os.environ.'''
    root = _find_project_root()
    env_path = Path(_resolve_env_filename())
    if not env_path.is_absolute():
        env_path = root / env_path

    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=override)
    else:
        fallback = root / '.env'
        if fallback.exists():
            load_dotenv(dotenv_path=fallback, override=override)

    return env_path


def store_backend() -> str:
    backend = (os.getenv('SCAVENGER_STORE') or DEFAULT_STORE_BACKEND).lower()
    if backend not in STORE_BACKENDS:
        raise ValueError(
            f'SCAVENGER_STORE must be one of {", ".join(STORE_BACKENDS)}, '
            f'got "{backend}"'
        )
    return backend


def progress_key() -> str:
    return os.getenv('SCAVENGER_PROGRESS_KEY') or PROGRESS_KEY


def strict_mode() -> bool:
    return parse_bool(os.getenv('SCAVENGER_STRICT'))
