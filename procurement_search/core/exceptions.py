"""Application-level exceptions and FastAPI exception handlers."""


from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class InvalidLimitError(AppException):
    """Page size outside the accepted range; raised before the store is queried."""

    def __init__(self, limit: int, max_limit: int):
        self.limit = limit
        super().__init__(
            f"Limit must be between 1 and {max_limit}.",
            status_code=400,
            code="INVALID_LIMIT",
        )

class MissingBuyerError(AppException):
    """A record references a buyer the batched buyer lookup did not return."""

    def __init__(self, buyer_id: str, record_id: str):
        self.buyer_id = buyer_id
        self.record_id = record_id
        super().__init__(
            f"Buyer '{buyer_id}' was not pre-fetched when loading record '{record_id}'",
            status_code=500,
            code="MISSING_BUYER",
        )

class MalformedRowError(AppException):
    """A raw store row could not be mapped to its domain entity."""

    def __init__(self, table: str, detail: str):
        super().__init__(
            f"Malformed row in '{table}': {detail}",
            status_code=500,
            code="MALFORMED_ROW",
        )

class StoreUnavailableError(AppException):
    """The database could not be reached. Not retried here."""

    def __init__(self, message: str = "Record store is unavailable"):
        super().__init__(message, status_code=503, code="STORE_UNAVAILABLE")

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}

def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body("VALIDATION_ERROR", _describe_validation_errors(exc)),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body("NOT_FOUND", "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
