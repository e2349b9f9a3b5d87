"""Middlewares — CORS for the browser form client.

Invariants:
    - Origins come from settings; methods GET, POST, OPTIONS; header Content-Type
    - Every OPTIONS request is answered with 204, preflight or not
    - add_default_middlewares runs after register_error_handlers so CORS is outermost
"""

from fastapi import FastAPI
from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response

from profile_service.config import Settings

_BODY_HEADERS = ("content-length", "content-type")


class FormCORSMiddleware(CORSMiddleware):
    """CORSMiddleware whose successful preflight is 204 No Content instead of 200 "OK"."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response
        headers = {
            key: value for key, value in response.headers.items()
            if key not in _BODY_HEADERS
        }
        return Response(status_code=204, headers=headers)


def add_default_middlewares(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(
        FormCORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
