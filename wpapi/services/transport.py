from typing import Any, Mapping, Optional, Protocol, runtime_checkable


class TransportResponse(Protocol):
    """The slice of ``httpx.Response`` the client reads."""

    status_code: int
    headers: Mapping[str, str]
    text: str

    def json(self) -> Any: ...


@runtime_checkable
class Transport(Protocol):
    """Anything that can issue a GET; ``httpx.Client`` in production."""

    def get(
        self, url: str, *, headers: Optional[Mapping[str, str]] = None
    ) -> TransportResponse: ...
