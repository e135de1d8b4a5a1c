from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Union

from starlette.requests import Request

HeaderItems = Union[Mapping[str, str], Iterable[tuple[str, str]], None]


def _combine(headers: HeaderItems) -> dict[str, str]:
    if headers is None:
        headers = ()
    elif isinstance(headers, Mapping):
        headers = headers.items()
    combined: dict[str, list[str]] = {}
    for name, value in headers:
        combined.setdefault(name.lower(), []).append(value)
    return {name: ", ".join(values) for name, values in combined.items()}


@dataclass(frozen=True, slots=True)
class CheckRequest:
    """Method, target host, path and headers of a request.

    Header names are folded to lower case and repeated ones joined with ", ",
    however the instance is built.
    """
    method: str
    host: str
    path: str = "/"
    headers: HeaderItems = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "host", self.host.lower())
        object.__setattr__(self, "headers", _combine(self.headers))

    @classmethod
    def create(
        cls,
        method: str,
        host: str,
        path: str = "/",
        headers: HeaderItems = None,
    ) -> CheckRequest:
        return cls(method=method, host=host, path=path, headers=headers)

    @classmethod
    def from_starlette(cls, request: Request) -> CheckRequest:
        return cls(
            method=request.method,
            host=request.url.hostname or "",
            path=request.url.path,
            headers=request.headers.items(),
        )

    def header(self, name: str) -> str:
        """Combined header line, or "" when the header is absent."""
        return self.headers.get(name.lower(), "")
