import re
from datetime import datetime, timezone
from typing import Optional

from .constants import ELLIPSIS

_RFC3339_RE = re.compile(
    r'^(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$'
)


def first_nonempty(*candidates, default=""):
    """Retorna o primeiro candidato não vazio, na ordem de precedência recebida."""
    for c in candidates:
        if c:
            return c
    return default


def truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def parse_rfc3339(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    match = _RFC3339_RE.match(value.strip())
    if not match:
        return None
    date_part, time_part, fraction, offset = match.groups()
    # fromisoformat exige exatamente 6 dígitos de fração
    fraction = "." + (fraction[1:] + "000000")[:6] if fraction else ""
    if offset in ("Z", "z"):
        offset = "+00:00"
    try:
        return datetime.fromisoformat(f"{date_part}T{time_part}{fraction}{offset}")
    except ValueError:
        return None


def format_rfc3339(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    formatted = value.replace(microsecond=0).isoformat()
    if formatted.endswith("+00:00"):
        formatted = formatted[:-6] + "Z"
    return formatted


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
