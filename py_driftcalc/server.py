"""HTTP adapter over the drift ballistics engine.

Routes:
    POST /api/calculate: JSON input record -> JSON array of table rows
    GET  /health: liveness probe

Malformed JSON, schema violations and rejected inputs are answered with
HTTP 400 and `{"error": "<message>"}`. Every response carries the security headers
in SECURITY_HEADERS.

Run with `pydc serve` or `pydc-server` (port from the PORT environment variable,
default 8080). The module-level `app` uses the `.pydc.toml` found from the
working directory.
"""
import argparse
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing_extensions import Dict, List, Optional

from py_driftcalc.config import BaseEngineConfigDict, load_config
from py_driftcalc.exceptions import InvalidInputError, SolverRuntimeError
from py_driftcalc.interface import Calculator
from py_driftcalc.logger import logger
from py_driftcalc.schemas import CalculateRequest, ErrorModel, TrajectorySampleModel

__all__ = ('create_app', 'app', 'main', 'SECURITY_HEADERS', 'DEFAULT_PORT')

SECURITY_HEADERS: Dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

DEFAULT_PORT = 8080


def _describe_validation_error(exc: RequestValidationError) -> str:
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else str(err.get('msg')))
    return "; ".join(messages) or "Invalid request"


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


def create_app(config: Optional[BaseEngineConfigDict] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Engine configuration overrides used for every request.
    """
    app = FastAPI(title="Drift Ballistics Calculator")
    calculator = Calculator(config=config)

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers[name] = value
        return response

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.info(f"Rejected {request.url.path}: {message}")
        return _error_response(message)

    @app.exception_handler(InvalidInputError)
    async def invalid_input_error(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.info(f"Rejected {request.url.path}: {exc}")
        return _error_response(str(exc))

    @app.exception_handler(SolverRuntimeError)
    async def solver_error(request: Request, exc: SolverRuntimeError) -> JSONResponse:
        logger.info(f"Trajectory not computed for {request.url.path}: {exc}")
        return _error_response(str(exc))

    @app.post("/api/calculate",
              responses={200: {"model": List[TrajectorySampleModel]}, 400: {"model": ErrorModel}})
    def calculate(payload: CalculateRequest) -> JSONResponse:
        result = calculator.fire(payload.to_input())
        return JSONResponse(content=result.to_list(), headers={"Cache-Control": "no-store"})

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app(load_config(suppress_warnings=True))


def main(argv: Optional[List[str]] = None) -> None:
    """Serve the API with uvicorn."""
    parser = argparse.ArgumentParser(prog='pydc-server', description="Drift ballistics HTTP API")
    parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT") or DEFAULT_PORT),
                        help="Port, defaults to $PORT or 8080")
    parser.add_argument("-c", "--config", default=None, help="Path to a pydc TOML config file")
    args = parser.parse_args(argv)
    serve(args.host, args.port, args.config)


def serve(host: str, port: int, config_path: Optional[str] = None) -> None:
    """Run the API in the foreground."""
    import uvicorn  # pylint: disable=import-outside-toplevel

    logger.info(f"Drift Ballistics Calculator running at http://{host}:{port}")
    uvicorn.run(create_app(load_config(config_path)), host=host, port=port)


if __name__ == '__main__':
    main()
