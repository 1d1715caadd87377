from __future__ import annotations

import pytest

NAMESPACE = "http://api.namecheap.com/xml.response"


def api_response(command: str, result: str, *, status: str = "OK", errors: str = "") -> str:
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        f'<ApiResponse Status="{status}" xmlns="{NAMESPACE}">'
        f"<Errors>{errors}</Errors>"
        "<Warnings />"
        f"<RequestedCommand>{command.lower()}</RequestedCommand>"
        f'<CommandResponse Type="{command}">{result}</CommandResponse>'
        "<Server>PHX01APIEXT01</Server>"
        "<GMTTimeDifference>--5:00</GMTTimeDifference>"
        "<ExecutionTime>0.025</ExecutionTime>"
        "</ApiResponse>"
    )


ACTIVATE_RESULT = (
    '<SSLActivateResult ID="52556" IsSuccess="true">'
    '<HttpDCValidation ValueAvailable="true">'
    '<DNS domain="example.com">'
    "<FileName>0A1B2C3D.txt</FileName>"
    "<FileContent>abc123 comodoca.com 5f2e</FileContent>"
    "</DNS>"
    "</HttpDCValidation>"
    '<DNSDCValidation ValueAvailable="true">'
    '<DNS domain="example.com">'
    "<HostName>_0a1b2c3d.example.com</HostName>"
    "<Target>abc123.5f2e.comodoca.com</Target>"
    "</DNS>"
    "</DNSDCValidation>"
    "</SSLActivateResult>"
)

GET_INFO_RESULT = (
    '<SSLGetInfoResult Status="active" StatusDescription="Certificate is active" '
    'Type="PositiveSSL" IssuedOn="03/15/2025" Expires="03/15/2026" '
    'ActivationExpireDate="" OrderId="101" ReplacedBy="0" SANSCount="0">'
    "<CertificateDetails>"
    "<CSR>-----BEGIN CERTIFICATE REQUEST-----</CSR>"
    "<ApproverEmail>admin@example.com</ApproverEmail>"
    "<CommonDomain>example.com</CommonDomain>"
    "<AdministratorName>Jane Doe</AdministratorName>"
    "<AdministratorEmail>jane@example.com</AdministratorEmail>"
    '<Certificates CertificateReturned="true" ReturnType="INDIVIDUAL">'
    "<Certificate>-----BEGIN CERTIFICATE-----\nLEAF\n-----END CERTIFICATE-----</Certificate>"
    "<CaCertificates>"
    '<Certificate Type="INTERMEDIATE"><Certificate>INTERMEDIATE-PEM</Certificate></Certificate>'
    '<Certificate Type="ROOT"><Certificate>ROOT-PEM</Certificate></Certificate>'
    "</CaCertificates>"
    "</Certificates>"
    "</CertificateDetails>"
    "<Provider><OrderID>98765</OrderID><Name>COMODO</Name></Provider>"
    "</SSLGetInfoResult>"
)


@pytest.fixture
def activate_body() -> str:
    return api_response("namecheap.ssl.activate", ACTIVATE_RESULT)


@pytest.fixture
def get_info_body() -> str:
    return api_response("namecheap.ssl.getInfo", GET_INFO_RESULT)
