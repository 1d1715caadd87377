"""Typed inputs for the namecheap.ssl.* commands."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _DomainValidationParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    certificate_id: int
    csr: str
    admin_email_address: str
    web_server_type: str
    approver_email: str = ""
    http_dc_validation: bool = False
    dns_dc_validation: bool = False


class ActivateParams(_DomainValidationParams):
    pass


class ReissueParams(_DomainValidationParams):
    pass


class GetInfoParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    certificate_id: int
    return_certificate: bool = False
    return_type: str = Field("", description="Individual or PKCS7; ignored unless return_certificate")
