from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urlsplit

from cross_origin_guard.protection.exceptions import InvalidConfiguration

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443}


@dataclass(frozen=True, slots=True)
class Origin:
    scheme: str
    host: str
    port: Optional[int] = None

    @classmethod
    def parse(cls, value: Any) -> Origin:
        """From a string, a SplitResult or a starlette URL."""
        if isinstance(value, str):
            try:
                uri = urlsplit(value)
            except ValueError as exc:
                raise InvalidConfiguration(f"Invalid origin {value}: {exc}") from None
        else:
            uri = value

        scheme = (uri.scheme or "").lower()
        if not scheme:
            raise InvalidConfiguration(f"Invalid origin {value}: scheme is required")

        host = (uri.hostname or "").lower()
        if not host:
            raise InvalidConfiguration(f"Invalid origin {value}: host is required")

        if uri.path or uri.query or uri.fragment:
            raise InvalidConfiguration(
                f"Invalid origin {value}: path, query, and fragment are not allowed"
            )

        try:
            port = uri.port
        except ValueError:
            raise InvalidConfiguration(f"Invalid origin {value}: port is not valid") from None

        if port is not None and DEFAULT_PORTS.get(scheme) == port:
            port = None
        return cls(scheme=scheme, host=host, port=port)

    def __str__(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port is None:
            return f"{self.scheme}://{host}"
        return f"{self.scheme}://{host}:{self.port}"


def origin_host(header_value: str) -> str:
    # attacker-controlled header: unparseable means no host
    try:
        return (urlsplit(header_value).hostname or "").lower()
    except ValueError:
        return ""
