"""Request builders for the namecheap.ssl.* commands."""

from __future__ import annotations

from namecheap_ssl.commands import (
    SSL_ACTIVATE,
    SSL_CREATE,
    SSL_GET_INFO,
    SSL_GET_LIST,
    SSL_REISSUE,
    ApiRequest,
)
from namecheap_ssl.params import ActivateParams, GetInfoParams, ReissueParams
from namecheap_ssl.return_type import parse_return_type


def build_get_list_request() -> ApiRequest:
    return ApiRequest(command=SSL_GET_LIST)


def build_create_request(product_type: str, years: int) -> ApiRequest:
    request = ApiRequest(command=SSL_CREATE)
    request.set("Type", product_type)
    request.set("Years", str(int(years)))
    return request


def _build_domain_validation_request(
    command: str, params: ActivateParams | ReissueParams
) -> ApiRequest:
    request = ApiRequest(command=command)
    request.set("CertificateID", str(params.certificate_id))
    request.set("CSR", params.csr)
    request.set("AdminEmailAddress", params.admin_email_address)
    request.set("WebServerType", params.web_server_type)

    # The API reads a present flag as a request; "false" is never sent.
    if params.http_dc_validation:
        request.set("HTTPDCValidation", "true")
    if params.dns_dc_validation:
        request.set("DNSDCValidation", "true")

    if params.approver_email:
        request.set("ApproverEmail", params.approver_email)
    return request


def build_activate_request(params: ActivateParams) -> ApiRequest:
    return _build_domain_validation_request(SSL_ACTIVATE, params)


def build_reissue_request(params: ReissueParams) -> ApiRequest:
    return _build_domain_validation_request(SSL_REISSUE, params)


def build_get_info_request(params: GetInfoParams) -> ApiRequest:
    request = ApiRequest(command=SSL_GET_INFO)
    request.set("CertificateID", str(params.certificate_id))

    if params.return_certificate:
        parse_return_type(params.return_type)
        request.set("returncertificate", "true")
        request.set("returntype", params.return_type)
    return request
