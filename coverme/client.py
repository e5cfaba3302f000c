"""HTTP client for the todo API."""

from __future__ import annotations

from typing import Any, List, Optional

import httpx

from coverme.models.todo import AddRequest, Todo


class ClientError(Exception):
    """Request to the todo API failed or returned an unexpected status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TodoClient:
    """Thin JSON-over-HTTP wrapper around the todo endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> "TodoClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def add(self, request: AddRequest) -> Todo:
        response = self._request("POST", "/todo/create", expected=201, json=request.model_dump())
        return self._decode(response, Todo.model_validate)

    def get(self, todo_id: int) -> Todo:
        response = self._request("GET", f"/todo/{todo_id}", expected=200)
        return self._decode(response, Todo.model_validate)

    def list(self) -> List[Todo]:
        response = self._request("GET", "/todo", expected=200)
        return self._decode(response, lambda data: [Todo.model_validate(item) for item in data])

    def finish(self, todo_id: int) -> None:
        self._request("POST", f"/todo/{todo_id}/finish", expected=200)

    def status(self) -> str:
        response = self._request("GET", "/status", expected=200)
        return self._decode(response, str)

    def _request(self, method: str, url: str, *, expected: int, **kwargs: Any) -> httpx.Response:
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise ClientError(f"{method} {url} failed: {exc}") from exc
        if response.status_code != expected:
            raise ClientError(
                f"{method} {url} returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _decode(response: httpx.Response, parse):
        try:
            return parse(response.json())
        except ValueError as exc:
            raise ClientError(
                f"unexpected response body: {response.text}",
                status_code=response.status_code,
            ) from exc
