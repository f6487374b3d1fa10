from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from brewtuner.core.errors import BrewTunerStoreError, NoDataReturned, RemoteReadError, RemoteWriteError, UpdateNotFound


def _error_response(request: Request, status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "request_id": getattr(request.state, "request_id", None)},
    )


def _store_error_response(request: Request, exc: BrewTunerStoreError, status_code: int, detail: str) -> JSONResponse:
    # Picked up by the request log line.
    request.state.store_operation = exc.operation
    request.state.store_error = type(exc).__name__
    return _error_response(request, status_code, detail)


async def _remote_write_error(request: Request, exc: RemoteWriteError) -> JSONResponse:
    if isinstance(exc.cause, IntegrityError):
        return _store_error_response(request, exc, status.HTTP_409_CONFLICT, "Write conflicts with existing data")
    return _store_error_response(request, exc, status.HTTP_503_SERVICE_UNAVAILABLE, "Backing store unavailable")


async def _remote_read_error(request: Request, exc: RemoteReadError) -> JSONResponse:
    return _store_error_response(request, exc, status.HTTP_503_SERVICE_UNAVAILABLE, "Backing store unavailable")


async def _update_not_found(request: Request, exc: UpdateNotFound) -> JSONResponse:
    return _store_error_response(request, exc, status.HTTP_404_NOT_FOUND, "Grind log not found")


async def _no_data_returned(request: Request, exc: NoDataReturned) -> JSONResponse:
    return _store_error_response(request, exc, status.HTTP_500_INTERNAL_SERVER_ERROR, "Store returned no data")


async def _value_error(request: Request, exc: ValueError) -> JSONResponse:
    return _error_response(request, status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RemoteWriteError, _remote_write_error)  # type: ignore[arg-type]
    app.add_exception_handler(RemoteReadError, _remote_read_error)  # type: ignore[arg-type]
    app.add_exception_handler(UpdateNotFound, _update_not_found)  # type: ignore[arg-type]
    app.add_exception_handler(NoDataReturned, _no_data_returned)  # type: ignore[arg-type]
    # Input validation only; store misconfiguration raises non-ValueError kinds.
    app.add_exception_handler(ValueError, _value_error)  # type: ignore[arg-type]
