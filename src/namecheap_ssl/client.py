"""Typed SDK client for the namecheap.ssl.* commands."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from namecheap_ssl.commands import ApiRequest
from namecheap_ssl.envelope import (
    ResponseEnvelope,
    decode_response,
    project_activate,
    project_create,
    project_get_info,
    project_get_list,
    project_reissue,
)
from namecheap_ssl.errors import ApiError, ApiRequestError, ApiUnavailableError
from namecheap_ssl.models import (
    ActivateResult,
    CertificateSummary,
    CreateResult,
    InfoResult,
    ReissueResult,
)
from namecheap_ssl.params import ActivateParams, GetInfoParams, ReissueParams
from namecheap_ssl.requests import (
    build_activate_request,
    build_create_request,
    build_get_info_request,
    build_get_list_request,
    build_reissue_request,
)

API_KEY_ENV_VAR = "NAMECHEAP_API_KEY"
PRODUCTION_URL = "https://api.namecheap.com/xml.response"
SANDBOX_URL = "https://api.sandbox.namecheap.com/xml.response"

logger = logging.getLogger(__name__)


@dataclass
class SSLClient:
    api_user: str
    client_ip: str
    api_key: str | None = None
    username: str | None = None
    sandbox: bool = False
    base_url: str | None = None
    timeout: float = 30.0

    def __post_init__(self) -> None:
        try:
            import requests
        except Exception as exc:  # pragma: no cover
            raise ApiUnavailableError(f"requests stack unavailable: {exc}") from exc

        self._session = requests.Session()
        if self.api_key is None:
            env_api_key = os.getenv(API_KEY_ENV_VAR)
            self.api_key = env_api_key.strip() or None if env_api_key else None
        if not self.username:
            self.username = self.api_user
        if not self.base_url:
            self.base_url = SANDBOX_URL if self.sandbox else PRODUCTION_URL

    def _global_params(self, command: str) -> dict[str, str]:
        return {
            "ApiUser": self.api_user,
            "ApiKey": self.api_key or "",
            "UserName": self.username or self.api_user,
            "ClientIp": self.client_ip,
            "Command": command,
        }

    def do(self, request: ApiRequest) -> ResponseEnvelope:
        payload = self._global_params(request.command)
        payload.update(request.params)
        logger.debug("sending %s with %d parameter(s)", request.command, len(request.params))
        try:
            response = self._session.request(
                request.method,
                self.base_url,
                data=payload,
                timeout=self.timeout,
            )
        except Exception as exc:
            raise ApiUnavailableError(str(exc)) from exc

        if response.status_code >= 400:
            raise ApiRequestError(
                f"{request.command} failed: HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        envelope = decode_response(response.content)
        logger.debug("%s returned status %s", request.command, envelope.status)
        if envelope.is_error:
            raise ApiError(envelope.command or request.command, envelope.errors)
        return envelope

    def ssl_get_list(self) -> list[CertificateSummary]:
        """Get the SSL certificates of the account."""
        return project_get_list(self.do(build_get_list_request()))

    def ssl_create(self, product_type: str, years: int) -> CreateResult | None:
        """Purchase a certificate using the account funds."""
        return project_create(self.do(build_create_request(product_type, years)))

    def ssl_activate(self, params: ActivateParams) -> ActivateResult | None:
        """Activate a purchased, not yet activated certificate."""
        return project_activate(self.do(build_activate_request(params)))

    def ssl_reissue(self, params: ReissueParams) -> ReissueResult | None:
        return project_reissue(self.do(build_reissue_request(params)))

    def ssl_get_info(self, params: GetInfoParams) -> InfoResult | None:
        return project_get_info(self.do(build_get_info_request(params)))


__all__ = ["SSLClient", "API_KEY_ENV_VAR", "PRODUCTION_URL", "SANDBOX_URL"]
