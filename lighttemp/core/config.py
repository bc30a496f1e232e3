"""Settings for lighttemp, from the environment and an optional .env file.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  LIGHTTEMP_MAX_SAMPLES  pixels averaged per sample, 0 = all (default 0)
  LIGHTTEMP_FORMAT       'text' or 'json' report output (default text)
  LIGHTTEMP_PRECISION    decimals for Kelvin values (default 1)
"""

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = 'LIGHTTEMP_'
FORMATS = ('text', 'json')


@dataclass(frozen=True)
class Settings:
    max_samples: int = 0
    output_format: str = 'text'
    precision: int = 1


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.removeprefix('export ').strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value
    return path


def _non_negative_int(name: str, default: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'{ENV_PREFIX}{name} must be an integer, got {raw!r}') from None
    if value < 0:
        raise ValueError(f'{ENV_PREFIX}{name} must be >= 0, got {value}')
    return value


def load_settings() -> Settings:
    """Build Settings from os.environ (call load_env first to apply .env)."""
    output_format = os.environ.get(ENV_PREFIX + 'FORMAT', 'text').strip().lower() or 'text'
    if output_format not in FORMATS:
        raise ValueError(f'{ENV_PREFIX}FORMAT must be one of {", ".join(FORMATS)}, got {output_format!r}')
    return Settings(
        max_samples=_non_negative_int('MAX_SAMPLES', 0),
        output_format=output_format,
        precision=_non_negative_int('PRECISION', 1),
    )
