"""Typed results for the namecheap.ssl.* commands.

Field aliases are the exact (case-sensitive) attribute and element names used
by the API. Models are validated from the dictionaries produced by
``namecheap_ssl.envelope``: attributes and leaf elements become string
values, nested elements become dictionaries and repeated elements become
lists.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


def _as_list(value: Any) -> Any:
    if value is None or value == "":
        return []
    if isinstance(value, dict):
        return [value]
    return value


def _empty_element(value: Any) -> Any:
    # <Provider/> is present but empty; keep it distinguishable from absent.
    if value == "":
        return {}
    return value


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CertificateSummary(ResponseModel):
    """One row of namecheap.ssl.getList."""

    certificate_id: int = Field(0, alias="CertificateID")
    host_name: str = Field("", alias="HostName")
    ssl_type: str = Field("", alias="SSLType")
    purchase_date: str = Field("", alias="PurchaseDate")
    expire_date: str = Field("", alias="ExpireDate")
    activation_expire_date: str = Field("", alias="ActivationExpireDate")
    is_expired: bool = Field(False, alias="IsExpiredYN")
    status: str = Field("", alias="Status")


class CertificateRecord(ResponseModel):
    certificate_id: int = Field(0, alias="CertificateID")
    ssl_type: str = Field("", alias="SSLType")
    created: str = Field("", alias="Created")
    years: int = Field(0, alias="Years")
    status: str = Field("", alias="Status")


class CreateResult(ResponseModel):
    is_success: bool = Field(False, alias="IsSuccess")
    order_id: int = Field(0, alias="OrderId")
    transaction_id: int = Field(0, alias="TransactionId")
    charged_amount: Decimal = Field(Decimal("0"), alias="ChargedAmount")
    certificates: List[CertificateRecord] = Field(default_factory=list, alias="SSLCertificate")

    @field_validator("certificates", mode="before")
    @classmethod
    def wrap_certificates(cls, value: Any) -> Any:
        return _as_list(value)


class DnsChallenge(ResponseModel):
    """Domain control validation values.

    HTTP validation fills ``file_name``/``file_content``; DNS (CNAME)
    validation fills ``host_name``/``target``. A child element that is
    absent stays ``None``; one that is present but empty (``<FileName/>``)
    is ``""``.
    """

    domain: str = Field("", alias="domain")
    file_name: Optional[str] = Field(None, alias="FileName")
    file_content: Optional[str] = Field(None, alias="FileContent")
    host_name: Optional[str] = Field(None, alias="HostName")
    target: Optional[str] = Field(None, alias="Target")


class DomainValidation(ResponseModel):
    value_available: bool = Field(False, alias="ValueAvailable")
    dns: Optional[DnsChallenge] = Field(None, alias="DNS")

    @field_validator("dns", mode="before")
    @classmethod
    def empty_dns(cls, value: Any) -> Any:
        return _empty_element(value)


class ActivateResult(ResponseModel):
    id: int = Field(0, alias="ID")
    is_success: bool = Field(False, alias="IsSuccess")
    http_dc_validation: Optional[DomainValidation] = Field(None, alias="HttpDCValidation")
    dns_dc_validation: Optional[DomainValidation] = Field(None, alias="DNSDCValidation")

    @field_validator("http_dc_validation", "dns_dc_validation", mode="before")
    @classmethod
    def empty_validations(cls, value: Any) -> Any:
        return _empty_element(value)


class ReissueResult(ActivateResult):
    pass


class ChainCertificate(ResponseModel):
    type: str = Field("", alias="Type")
    certificate: str = Field("", alias="Certificate")


class CertificateBundle(ResponseModel):
    certificate_returned: Optional[bool] = Field(
        None,
        validation_alias=AliasChoices("CertificateReturned", "CertificatedReturned"),
    )
    return_type: str = Field("", alias="ReturnType")
    certificate: Optional[str] = Field(None, alias="Certificate")
    ca_certificates: List[ChainCertificate] = Field(default_factory=list, alias="CaCertificates")

    @field_validator("ca_certificates", mode="before")
    @classmethod
    def unwrap_chain(cls, value: Any) -> Any:
        if isinstance(value, dict):
            value = value.get("Certificate")
        return _as_list(value)

    @model_validator(mode="after")
    def drop_unreturned_certificate(self) -> "CertificateBundle":
        if self.certificate_returned is False:
            self.certificate = None
        return self


class CertificateDetails(ResponseModel):
    csr: str = Field("", alias="CSR")
    approver_email: str = Field("", alias="ApproverEmail")
    common_domain: str = Field("", alias="CommonDomain")
    administrator_name: str = Field("", alias="AdministratorName")
    administrator_email: str = Field("", alias="AdministratorEmail")
    certificates: Optional[CertificateBundle] = Field(None, alias="Certificates")

    @field_validator("certificates", mode="before")
    @classmethod
    def empty_certificates(cls, value: Any) -> Any:
        return _empty_element(value)


class ProviderInfo(ResponseModel):
    order_id: str = Field("", alias="OrderID")
    name: str = Field("", alias="Name")


class InfoResult(ResponseModel):
    """namecheap.ssl.getInfo result.

    Dates, order ids and the SAN count are kept as the strings the API sends.
    """

    status: str = Field("", alias="Status")
    status_description: str = Field("", alias="StatusDescription")
    type: str = Field("", alias="Type")
    issued_on: str = Field("", alias="IssuedOn")
    expires: str = Field("", alias="Expires")
    activation_expire_date: str = Field("", alias="ActivationExpireDate")
    order_id: str = Field("", alias="OrderId")
    replaced_by: str = Field("", alias="ReplacedBy")
    sans_count: str = Field("", alias="SANSCount")
    certificate_details: Optional[CertificateDetails] = Field(None, alias="CertificateDetails")
    provider: Optional[ProviderInfo] = Field(None, alias="Provider")

    @field_validator("certificate_details", "provider", mode="before")
    @classmethod
    def empty_children(cls, value: Any) -> Any:
        return _empty_element(value)
