"""Command-line interface for namecheap-ssl."""

from __future__ import annotations

import argparse
import dataclasses
import json
import re
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError

from namecheap_ssl.client import SSLClient
from namecheap_ssl.config import ConfigError, build_client, load_client_config
from namecheap_ssl.errors import (
    ApiError,
    ApiUnavailableError,
    ResponseDecodeError,
    SSLValidationError,
)
from namecheap_ssl.params import ActivateParams, GetInfoParams, ReissueParams

EXIT_SUCCESS = 0
EXIT_VALIDATION_ERROR = 1
EXIT_API_ERROR = 2

_SENSITIVE_FIELDS = (
    "ApiKey",
    "api_key",
)


def _sdk_version() -> str:
    try:
        return pkg_version("namecheap-ssl")
    except PackageNotFoundError:
        return "0.0.0+local"


def _add_domain_validation_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--certificate-id", type=int, required=True)
    parser.add_argument("--csr-file", required=True, help="Path to the PEM encoded CSR")
    parser.add_argument("--admin-email", required=True, help="Administrator email address")
    parser.add_argument("--web-server-type", required=True, help="e.g. apacheopenssl, nginx")
    parser.add_argument("--approver-email", default="", help="Approver email for email validation")
    parser.add_argument(
        "--http-validation",
        action="store_true",
        help="Request HTTP based domain control validation",
    )
    parser.add_argument(
        "--dns-validation",
        action="store_true",
        help="Request DNS (CNAME) based domain control validation",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="namecheap-ssl")
    parser.add_argument(
        "--version",
        action="version",
        version=f"namecheap-ssl {_sdk_version()}",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to client config TOML (default: ~/.namecheap_ssl/config.toml)",
    )
    parser.add_argument(
        "--sandbox",
        action="store_true",
        help="Send commands to the sandbox API endpoint",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List SSL certificates of the account")

    create = sub.add_parser("create", help="Purchase a new SSL certificate")
    create.add_argument("--type", dest="product_type", required=True, help="e.g. PositiveSSL")
    create.add_argument("--years", type=int, default=1)

    activate = sub.add_parser("activate", help="Activate a purchased SSL certificate")
    _add_domain_validation_arguments(activate)

    reissue = sub.add_parser("reissue", help="Reissue an active SSL certificate")
    _add_domain_validation_arguments(reissue)

    info = sub.add_parser("info", help="Show details of an SSL certificate")
    info.add_argument("--certificate-id", type=int, required=True)
    info.add_argument(
        "--return-certificate",
        action="store_true",
        help="Include the issued certificate and CA chain",
    )
    info.add_argument(
        "--return-type",
        default="Individual",
        help="Individual (X.509) or PKCS7",
    )
    return parser


def _sanitize_error_text(value: str) -> str:
    redacted = value
    for field in _SENSITIVE_FIELDS:
        redacted = re.sub(
            rf"(?i)({field}\s*[=:]\s*)([^,&\s]+)",
            r"\1[REDACTED]",
            redacted,
        )
    return redacted


def _print_error(stderr, prefix: str, message: str, *, code: int) -> int:
    print(f"{prefix}: {_sanitize_error_text(message)}", file=stderr)
    return code


def _print_json(stdout, payload: Any) -> int:
    print(json.dumps(payload, sort_keys=True, indent=2), file=stdout)
    return EXIT_SUCCESS


def _dump(result) -> Any:
    if result is None:
        return None
    if isinstance(result, list):
        return [item.model_dump(mode="json") for item in result]
    return result.model_dump(mode="json")


def _read_csr(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read CSR file {path}: {exc}") from exc


def _domain_validation_fields(args) -> dict[str, Any]:
    return {
        "certificate_id": args.certificate_id,
        "csr": _read_csr(args.csr_file),
        "admin_email_address": args.admin_email,
        "web_server_type": args.web_server_type,
        "approver_email": args.approver_email,
        "http_dc_validation": args.http_validation,
        "dns_dc_validation": args.dns_validation,
    }


def _run(client: SSLClient, args) -> Any:
    if args.command == "list":
        return client.ssl_get_list()
    if args.command == "create":
        return client.ssl_create(args.product_type, args.years)
    if args.command == "activate":
        return client.ssl_activate(ActivateParams(**_domain_validation_fields(args)))
    if args.command == "reissue":
        return client.ssl_reissue(ReissueParams(**_domain_validation_fields(args)))
    if args.command == "info":
        return client.ssl_get_info(
            GetInfoParams(
                certificate_id=args.certificate_id,
                return_certificate=args.return_certificate,
                return_type=args.return_type,
            )
        )
    raise ConfigError(f"unknown command: {args.command}")


def main(argv: Sequence[str] | None = None, *, stdout=sys.stdout, stderr=sys.stderr) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_client_config(args.config)
        if args.sandbox:
            config = dataclasses.replace(config, sandbox=True)
        client = build_client(config)
    except ConfigError as exc:
        return _print_error(stderr, "config error", str(exc), code=EXIT_VALIDATION_ERROR)

    try:
        result = _run(client, args)
    except ConfigError as exc:
        return _print_error(stderr, "config error", str(exc), code=EXIT_VALIDATION_ERROR)
    except (SSLValidationError, ValidationError) as exc:
        return _print_error(stderr, "validation error", str(exc), code=EXIT_VALIDATION_ERROR)
    except ApiError as exc:
        return _print_error(stderr, "api error", str(exc), code=EXIT_API_ERROR)
    except (ApiUnavailableError, ResponseDecodeError) as exc:
        return _print_error(stderr, "network error", str(exc), code=EXIT_API_ERROR)

    return _print_json(stdout, _dump(result))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
