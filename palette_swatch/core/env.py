"""Environment and settings loading for palette-swatch.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings read from the environment:
  PALETTE_SWATCH_HOST            bind address        (default: localhost)
  PALETTE_SWATCH_PORT            bind port           (default: 8080)
  PALETTE_SWATCH_STATIC_DIR      static files root   (default: ./public)
  PALETTE_SWATCH_MAX_BLOCK_SIZE  largest bs accepted over HTTP (default: 256)
"""

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = 'PALETTE_SWATCH_'


@dataclass(frozen=True)
class Settings:
    host: str = 'localhost'
    port: int = 8080
    static_dir: str = './public'
    max_block_size: int = 256


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value, KEY="value" and `export KEY=value`."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip().removeprefix('export ').strip()
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


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'{ENV_PREFIX}{name} must be an integer, got {raw!r}') from None
    if value < 1:
        raise ValueError(f'{ENV_PREFIX}{name} must be positive, got {value}')
    return value


def load_settings() -> Settings:
    """Build Settings from os.environ. Call load_env() first to pick up .env."""
    defaults = Settings()
    return Settings(
        host=os.environ.get(ENV_PREFIX + 'HOST') or defaults.host,
        port=_env_int('PORT', defaults.port),
        static_dir=os.environ.get(ENV_PREFIX + 'STATIC_DIR') or defaults.static_dir,
        max_block_size=_env_int('MAX_BLOCK_SIZE', defaults.max_block_size),
    )
