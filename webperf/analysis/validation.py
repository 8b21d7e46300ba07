"""URL presence/format checks and scheme normalization."""

from __future__ import annotations

from pydantic import AnyHttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from webperf.analysis.errors import ValidationError

URL_REQUIRED = "URL is required"
INVALID_URL = "Invalid URL format"

_url_adapter = TypeAdapter(AnyHttpUrl)


def normalize_url(raw: str) -> str:
    """Prepend ``https://`` to input that does not already start with ``http``."""
    url = raw.strip()
    return url if url.startswith("http") else f"https://{url}"


def validate_url(raw: str | None) -> str:
    """Return the normalized URL or raise :class:`ValidationError`.

    The check is purely syntactic; nothing is resolved or fetched here.
    """
    if raw is None or not raw.strip():
        raise ValidationError(URL_REQUIRED)

    url = normalize_url(raw)
    try:
        _url_adapter.validate_python(url)
    except PydanticValidationError as exc:
        raise ValidationError(INVALID_URL) from exc
    return url
