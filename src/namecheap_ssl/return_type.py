"""Certificate return formats accepted by namecheap.ssl.getInfo."""

from __future__ import annotations

from enum import Enum

from namecheap_ssl.errors import InvalidReturnTypeError


class ReturnType(str, Enum):
    INDIVIDUAL = "Individual"
    PKCS7 = "PKCS7"


ALLOWED_RETURN_TYPES: tuple[str, ...] = (ReturnType.INDIVIDUAL.value, ReturnType.PKCS7.value)


def parse_return_type(value: str) -> ReturnType:
    # Individual is case-insensitive on the vendor side, PKCS7 is not.
    if value.lower() == ReturnType.INDIVIDUAL.value.lower():
        return ReturnType.INDIVIDUAL
    if value == ReturnType.PKCS7.value:
        return ReturnType.PKCS7
    raise InvalidReturnTypeError(value, ALLOWED_RETURN_TYPES)


def is_valid_return_type(value: str) -> bool:
    try:
        parse_return_type(value)
    except InvalidReturnTypeError:
        return False
    return True
