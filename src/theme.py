"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disabled automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides via environment or project .env file.
- The entry point may force colour on/off at runtime with set_enabled().
"""
from __future__ import annotations
import logging
import os, sys
from pathlib import Path

logger = logging.getLogger(__name__)

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    return f"\033[{part}m"

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    return f"\033[38;5;{16 + 36 * r6 + 6 * g6 + b6}m"

def _from_hex(hex_code: str) -> str:
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)

def _valid_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

RESET = _code('0')
BOLD = _code('1')

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_PENDING_DEFAULT = '#F6FF99'
HEX_COMPLETED_DEFAULT = '#A7E399'

_KEYS = ('TODO_PRIMARY_COLOR', 'TODO_PENDING_COLOR', 'TODO_COMPLETED_COLOR')

# Load overrides from optional .env file at the project root
_ENV_OVERRIDES: dict[str, str] = {}
_env_path = Path(__file__).resolve().parent.parent / '.env'
if _env_path.exists():
    try:
        lines = _env_path.read_text().splitlines()
    except OSError as exc:
        logger.warning("Could not read %s: %s", _env_path, exc)
        lines = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = (part.strip() for part in line.split('=', 1))
        if k in _KEYS and _valid_hex(v):
            _ENV_OVERRIDES[k] = '#' + v.lstrip('#')

def _resolve(key: str, default: str) -> str:
    """Priority: real env var > .env override > default. Invalid hex falls back."""
    value = os.environ.get(key) or _ENV_OVERRIDES.get(key, default)
    if not _valid_hex(value):
        logger.warning("Ignoring invalid colour %s=%r", key, value)
        return default
    return value

HEX_PRIMARY = _resolve('TODO_PRIMARY_COLOR', HEX_PRIMARY_DEFAULT)
HEX_PENDING = _resolve('TODO_PENDING_COLOR', HEX_PENDING_DEFAULT)
HEX_COMPLETED = _resolve('TODO_COMPLETED_COLOR', HEX_COMPLETED_DEFAULT)

PRIMARY = _from_hex(HEX_PRIMARY)
STATUS_COLOR = {
    'completed': _from_hex(HEX_COMPLETED),
    'pending': _from_hex(HEX_PENDING),
}
HEADER_COLOR = PRIMARY
ID_COLOR = PRIMARY + BOLD

def set_enabled(flag: bool) -> None:
    global _ENABLE
    _ENABLE = flag

def is_enabled() -> bool:
    return _ENABLE

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color','set_enabled','is_enabled','RESET','BOLD','STATUS_COLOR','HEADER_COLOR','ID_COLOR',
    'HEX_PRIMARY','HEX_PENDING','HEX_COMPLETED',
]
