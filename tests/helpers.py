"""Request builders shared by the test modules."""
from __future__ import annotations

from cross_origin_guard.protection.request import CheckRequest


def make_request(
    method: str = "POST",
    host: str = "example.com",
    path: str = "/submit",
    **headers: str,
) -> CheckRequest:
    """Build a CheckRequest; keyword headers use underscores for dashes."""
    return CheckRequest.create(
        method=method,
        host=host,
        path=path,
        headers={name.replace("_", "-"): value for name, value in headers.items()},
    )
