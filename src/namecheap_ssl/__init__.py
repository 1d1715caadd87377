"""namecheap-ssl public surface."""

from namecheap_ssl.client import SSLClient
from namecheap_ssl.commands import (
    SSL_ACTIVATE,
    SSL_CREATE,
    SSL_GET_INFO,
    SSL_GET_LIST,
    SSL_REISSUE,
    ApiRequest,
)
from namecheap_ssl.config import ClientConfig, ConfigError, build_client, load_client_config
from namecheap_ssl.envelope import (
    ResponseEnvelope,
    decode_response,
    project_activate,
    project_create,
    project_get_info,
    project_get_list,
    project_reissue,
)
from namecheap_ssl.errors import (
    ApiError,
    ApiErrorDetail,
    ApiRequestError,
    ApiUnavailableError,
    InvalidReturnTypeError,
    NamecheapSDKError,
    ResponseDecodeError,
    SSLValidationError,
)
from namecheap_ssl.models import (
    ActivateResult,
    CertificateBundle,
    CertificateDetails,
    CertificateRecord,
    CertificateSummary,
    ChainCertificate,
    CreateResult,
    DnsChallenge,
    DomainValidation,
    InfoResult,
    ProviderInfo,
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
from namecheap_ssl.return_type import ALLOWED_RETURN_TYPES, ReturnType, parse_return_type

__all__ = [
    "NamecheapSDKError",
    "SSLValidationError",
    "InvalidReturnTypeError",
    "ApiUnavailableError",
    "ApiRequestError",
    "ApiError",
    "ApiErrorDetail",
    "ResponseDecodeError",
    "SSLClient",
    "ClientConfig",
    "ConfigError",
    "load_client_config",
    "build_client",
    "ApiRequest",
    "SSL_ACTIVATE",
    "SSL_CREATE",
    "SSL_GET_LIST",
    "SSL_REISSUE",
    "SSL_GET_INFO",
    "ActivateParams",
    "ReissueParams",
    "GetInfoParams",
    "ReturnType",
    "ALLOWED_RETURN_TYPES",
    "parse_return_type",
    "build_get_list_request",
    "build_create_request",
    "build_activate_request",
    "build_reissue_request",
    "build_get_info_request",
    "ResponseEnvelope",
    "decode_response",
    "project_get_list",
    "project_create",
    "project_activate",
    "project_reissue",
    "project_get_info",
    "CertificateSummary",
    "CreateResult",
    "CertificateRecord",
    "ActivateResult",
    "ReissueResult",
    "DomainValidation",
    "DnsChallenge",
    "InfoResult",
    "CertificateDetails",
    "CertificateBundle",
    "ChainCertificate",
    "ProviderInfo",
]
