# FILE: admission_reports/api/response.py
"""
JSON envelope shared by every non-document response.

    {"ok": true,  "data": ..., "meta": {...}}
    {"ok": false, "error": {"msg": "...", "code": "...", "details": ...}}

Rendered reports (HTML, PDF) go out as-is; only listings and failures
are wrapped.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

UNKNOWN_REPORT = "UNKNOWN_REPORT"
NO_RECORDS = "NO_RECORDS"
PDF_FAILED = "PDF_FAILED"
VALIDATION_ERROR = "VALIDATION_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"


def _json(payload: Dict[str, Any], status_code: int) -> JSONResponse:
    # jsonable_encoder handles datetimes and pydantic models in data/details
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload))


def ok(data: Any = None, *, meta: Optional[Dict[str, Any]] = None, status_code: int = 200) -> JSONResponse:
    payload: Dict[str, Any] = {"ok": True, "data": data}
    if meta is not None:
        payload["meta"] = meta
    return _json(payload, status_code)


def err(
    msg: str = "Something went wrong",
    *,
    status_code: int = 400,
    code: Optional[str] = None,
    details: Any = None,
) -> JSONResponse:
    return _json({"ok": False, "error": {"msg": msg, "code": code, "details": details}}, status_code)


def report_error(status_code: int, msg: str, code: str, details: Any = None) -> HTTPException:
    """HTTPException whose detail the exception handlers unpack into err()."""
    detail: Dict[str, Any] = {"msg": msg, "code": code}
    if details is not None:
        detail["details"] = details
    return HTTPException(status_code, detail=detail)


def err_from_http(exc: Any) -> JSONResponse:
    """err() for an HTTPException; detail may be a str, a report_error() dict or anything else."""
    detail = getattr(exc, "detail", None)
    status_code = getattr(exc, "status_code", 500)
    if isinstance(detail, dict):
        return err(
            msg=detail.get("msg") or "Request failed",
            code=detail.get("code"),
            details=detail.get("details"),
            status_code=status_code,
        )
    return err(msg=detail if isinstance(detail, str) else "Request failed", status_code=status_code)
