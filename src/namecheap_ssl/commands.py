"""Command identifiers and the request value passed to the transport."""

from __future__ import annotations

from dataclasses import dataclass, field

SSL_ACTIVATE = "namecheap.ssl.activate"
SSL_CREATE = "namecheap.ssl.create"
SSL_GET_LIST = "namecheap.ssl.getList"
SSL_REISSUE = "namecheap.ssl.reissue"
SSL_GET_INFO = "namecheap.ssl.getInfo"


@dataclass
class ApiRequest:
    command: str
    method: str = "POST"
    params: dict[str, str] = field(default_factory=dict)

    def set(self, key: str, value: str) -> None:
        self.params[key] = value
