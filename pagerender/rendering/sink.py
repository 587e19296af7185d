"""Response sinks that receive rendered output."""

from __future__ import annotations

from typing import Protocol

from fastapi import status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response


class ResponseSink(Protocol):
    """Anything that accepts a streamed body and an out-of-band failure."""

    def write(self, chunk: str) -> None: ...

    def error(self, message: str, status_code: int) -> None: ...


class BufferedResponseSink:
    """Collects rendered output and converts it to a FastAPI response."""

    def __init__(self) -> None:
        self.status_code = status.HTTP_200_OK
        self.error_message: str | None = None
        self._chunks: list[str] = []

    def write(self, chunk: str) -> None:
        self._chunks.append(chunk)

    def error(self, message: str, status_code: int) -> None:
        # Mirrors http.Error: status is replaced, message goes to the body.
        self.status_code = status_code
        self.error_message = message
        self._chunks.append(f"{message}\n")

    @property
    def failed(self) -> bool:
        return self.error_message is not None

    @property
    def body(self) -> str:
        return "".join(self._chunks)

    def to_response(self) -> Response:
        if self.failed:
            return PlainTextResponse(f"{self.error_message}\n", status_code=self.status_code)
        return HTMLResponse(self.body, status_code=self.status_code)
