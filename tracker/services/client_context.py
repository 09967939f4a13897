"""Request metadata handed explicitly to the ingestion service."""

from dataclasses import dataclass, field

from starlette.requests import Request


@dataclass(frozen=True)
class ClientContext:
    user_agent: str | None = None
    client_ip: str | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_request(cls, request: Request) -> "ClientContext":
        """Capture what visitor classification needs from an incoming request.

        Prefers X-Forwarded-For (first value) when behind a proxy, falls back
        to request.client.host.
        """
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            client_ip = forwarded.split(",")[0].strip() or None
        elif request.client:
            client_ip = request.client.host
        else:
            client_ip = None

        return cls(
            user_agent=request.headers.get("user-agent"),
            client_ip=client_ip,
            headers={k.lower(): v for k, v in request.headers.items()},
        )
