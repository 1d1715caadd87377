"""Decoding of the API's XML envelope and per-command projection.

The API answers every command with the same outer document::

    <ApiResponse Status="OK" xmlns="http://api.namecheap.com/xml.response">
      <Errors />
      <Warnings />
      <RequestedCommand>namecheap.ssl.getlist</RequestedCommand>
      <CommandResponse Type="namecheap.ssl.getList">
        <SSLListResult>
          <SSL CertificateID="52556" HostName="example.com" ... />
        </SSLListResult>
      </CommandResponse>
      <ExecutionTime>0.025</ExecutionTime>
    </ApiResponse>

Only the result element matching the command is populated; every other
result field of the envelope stays ``None``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, ValidationError, field_validator

from namecheap_ssl.errors import ApiErrorDetail, ResponseDecodeError
from namecheap_ssl.models import (
    ActivateResult,
    CertificateSummary,
    CreateResult,
    InfoResult,
    ReissueResult,
    ResponseModel,
)

STATUS_ERROR = "ERROR"

_RESULT_ELEMENTS: Dict[str, str] = {
    "SSLCreateResult": "ssl_create",
    "SSLActivateResult": "ssl_activate",
    "SSLReissueResult": "ssl_reissue",
    "SSLGetInfoResult": "ssl_certificate_details",
}


class ResponseEnvelope(ResponseModel):
    status: str = ""
    command: Optional[str] = None
    errors: List[ApiErrorDetail] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    execution_time: Optional[str] = None

    ssl_certificates: Optional[List[CertificateSummary]] = None
    ssl_create: Optional[CreateResult] = None
    ssl_activate: Optional[ActivateResult] = None
    ssl_reissue: Optional[ReissueResult] = None
    ssl_certificate_details: Optional[InfoResult] = None

    @field_validator(
        "ssl_create", "ssl_activate", "ssl_reissue", "ssl_certificate_details", mode="before"
    )
    @classmethod
    def empty_result(cls, value: Any) -> Any:
        if value == "":
            return {}
        return value

    @property
    def is_error(self) -> bool:
        return self.status.upper() == STATUS_ERROR


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _children(element: Optional[ET.Element], name: str) -> List[ET.Element]:
    if element is None:
        return []
    return [child for child in element if _local_name(child.tag) == name]


def _text(element: Optional[ET.Element]) -> str:
    if element is None or element.text is None:
        return ""
    return element.text.strip()


def _leaf_text(element: ET.Element) -> str:
    # Leaf values are opaque (PEM blobs keep their trailing newline).
    text = element.text or ""
    if not text.strip():
        return ""
    return text


def element_to_value(element: ET.Element) -> Union[str, Dict[str, Any]]:
    """Convert an element to the plain structure the result models validate.

    A bare element (no attributes, no children) becomes its text, unchanged
    unless it is only whitespace. Otherwise
    attributes and child elements become dictionary keys; a child tag seen
    more than once becomes a list in document order.
    """

    children = list(element)
    if not element.attrib and not children:
        return _leaf_text(element)

    value: Dict[str, Any] = {_local_name(key): item for key, item in element.attrib.items()}
    repeated: set[str] = set()
    seen: set[str] = set()
    for child in children:
        name = _local_name(child.tag)
        item = element_to_value(child)
        if name not in seen:
            seen.add(name)
            value[name] = item
        elif name in repeated:
            value[name].append(item)
        else:
            repeated.add(name)
            value[name] = [value[name], item]
    return value


def decode_response(body: Union[str, bytes]) -> ResponseEnvelope:
    try:
        root = ET.fromstring(body)
    except ET.ParseError as exc:
        raise ResponseDecodeError(f"malformed response body: {exc}") from exc

    if _local_name(root.tag) != "ApiResponse":
        raise ResponseDecodeError(f"unexpected root element: {_local_name(root.tag)}")

    fields: Dict[str, Any] = {
        "status": root.get("Status", ""),
        "errors": [
            ApiErrorDetail(number=error.get("Number", ""), message=_text(error))
            for error in _children(_child(root, "Errors"), "Error")
        ],
        "warnings": [_text(warning) for warning in _children(_child(root, "Warnings"), "Warning")],
    }
    execution_time = _child(root, "ExecutionTime")
    if execution_time is not None:
        fields["execution_time"] = _text(execution_time)

    command_response = _child(root, "CommandResponse")
    if command_response is not None:
        fields["command"] = command_response.get("Type")
        for result in command_response:
            name = _local_name(result.tag)
            if name == "SSLListResult":
                fields["ssl_certificates"] = [
                    element_to_value(row) or {} for row in _children(result, "SSL")
                ]
            elif name in _RESULT_ELEMENTS:
                fields[_RESULT_ELEMENTS[name]] = element_to_value(result)

    try:
        return ResponseEnvelope.model_validate(fields)
    except ValidationError as exc:
        raise ResponseDecodeError(f"unexpected response content: {exc}") from exc


def project_get_list(envelope: ResponseEnvelope) -> List[CertificateSummary]:
    return list(envelope.ssl_certificates or [])


def project_create(envelope: ResponseEnvelope) -> Optional[CreateResult]:
    return envelope.ssl_create


def project_activate(envelope: ResponseEnvelope) -> Optional[ActivateResult]:
    return envelope.ssl_activate


def project_reissue(envelope: ResponseEnvelope) -> Optional[ReissueResult]:
    return envelope.ssl_reissue


def project_get_info(envelope: ResponseEnvelope) -> Optional[InfoResult]:
    return envelope.ssl_certificate_details
