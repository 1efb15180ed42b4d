"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1, so piped
  output is plain text.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or project .env file.
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
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

PALETTE_KEYS = frozenset({'TODO_PRIMARY', 'TODO_PENDING', 'TODO_DONE'})

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    """Convert a hex color code to an ANSI escape sequence."""
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

def parse_env_file(text: str) -> dict[str, str]:
    """Extract palette overrides from .env text; other keys and bad hex are skipped."""
    overrides: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip()
        if k in PALETTE_KEYS and _is_hex(v):
            overrides[k] = '#' + v.lstrip('#')
    return overrides

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_PENDING_DEFAULT = '#48B3AF'
HEX_DONE_DEFAULT = '#A7E399'

_ENV_OVERRIDES: dict[str, str] = {}
_env_path = Path(__file__).resolve().parent.parent / '.env'
if _env_path.exists():
    try:
        _ENV_OVERRIDES = parse_env_file(_env_path.read_text())
    except OSError:
        logger.debug("Could not read %s; using default palette", _env_path, exc_info=True)

def _resolve(key: str, default: str) -> str:
    # priority: real env var > .env override > default
    value = os.environ.get(key)
    if value and _is_hex(value):
        return '#' + value.lstrip('#')
    return _ENV_OVERRIDES.get(key, default)

HEX_PRIMARY = _resolve('TODO_PRIMARY', HEX_PRIMARY_DEFAULT)
HEX_PENDING = _resolve('TODO_PENDING', HEX_PENDING_DEFAULT)
HEX_DONE = _resolve('TODO_DONE', HEX_DONE_DEFAULT)

PRIMARY = _from_hex(HEX_PRIMARY)
C_PENDING = _from_hex(HEX_PENDING)
C_DONE = _from_hex(HEX_DONE)

ID_COLOR = PRIMARY + BOLD
EMPTY_COLOR = DIM + PRIMARY

def status_color(done: bool) -> str:
    return C_DONE if done else C_PENDING

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color','status_color','parse_env_file','RESET','BOLD','DIM','ID_COLOR','EMPTY_COLOR',
    'HEX_PRIMARY','HEX_PENDING','HEX_DONE','_ENABLE','_USE_TRUECOLOR','_FORCE'
]
