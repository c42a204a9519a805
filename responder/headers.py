"""Request header access shared by the negotiation components."""

from typing import Any, Mapping, Optional

from starlette.datastructures import Headers


class PlainHeaders(dict):
    """
    Case-insensitive view of a plain header mapping.

    Values are kept as given, so text outside latin-1 is looked up as-is
    rather than encoded for the wire.
    """

    def __init__(self, headers: Optional[Mapping[str, str]] = None):
        super().__init__(
            {str(name).lower(): str(value) for name, value in (headers or {}).items()}
        )

    def __getitem__(self, name: str) -> str:
        return super().__getitem__(name.lower())

    def __contains__(self, name) -> bool:
        return super().__contains__(str(name).lower())

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return super().get(name.lower(), default)


def request_headers(request: Optional[Any]) -> Mapping[str, str]:
    """
    Return the case-insensitive headers of a request.

    Accepts a Starlette request (or anything with a ``headers`` mapping), a
    plain header mapping, or None for "no request".
    """
    if request is None:
        return PlainHeaders()

    headers = getattr(request, "headers", request)
    if isinstance(headers, Headers):
        return headers
    return PlainHeaders(headers)
