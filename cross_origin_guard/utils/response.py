from fastapi.responses import JSONResponse
from typing import Any

def success(data: Any = None, message: str = "ok", status_code: int = 200):
    return JSONResponse(status_code=status_code, content={"ok": True, "message": message, "data": data})

def forbidden(message: str, reason: str | None = None):
    body = {"ok": False, "error": message}
    if reason is not None:
        body["reason"] = reason
    return JSONResponse(status_code=403, content=body)
