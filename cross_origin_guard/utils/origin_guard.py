from fastapi import Request

from cross_origin_guard.protection.checker import CrossOriginProtection
from cross_origin_guard.protection.request import CheckRequest
from cross_origin_guard.utils.errors import CrossOriginRequestException

def get_protection(request: Request) -> CrossOriginProtection:
    return request.app.state.cross_origin_protection

async def enforce_origin(request: Request):
    """Route-level guard: `dependencies=[Depends(enforce_origin)]`."""
    verdict = get_protection(request).check(CheckRequest.from_starlette(request))
    if not verdict.allowed:
        raise CrossOriginRequestException(verdict.error)
