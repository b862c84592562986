"""Assemble the launch request for a job template."""
import base64
import json
from typing import Any, Dict, NamedTuple, Optional

import requests

from tower_launcher.client import TowerClient, build_session
from tower_launcher.config import Settings
from tower_launcher.errors import ParseError

CERTIFICATE_VAR = "var_applicationGatewayFrontEndSslCertData"
CERTIFICATE_MASK = "*************"


class RequestContext(NamedTuple):
    """Everything the launch, poll and output steps of one run share. Read only."""

    client: TowerClient
    template_id: str
    extra_vars: Dict[str, Any]
    certificate_supplied: bool = False


def parse_additional_vars(raw: str) -> Dict[str, Any]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(f"additional vars are not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise ParseError(f"additional vars must be a JSON object, got {type(parsed).__name__}")
    return parsed


def encode_certificate(path: str) -> str:
    with open(path, "rb") as f:
        return base64.b64encode(f.read()).decode("ascii")


def compose_extra_vars(scm_branch: str, additional_vars: Dict[str, Any],
                       certificate: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the launch body.

    The certificate goes in first so that a caller supplied key of the same
    name replaces it.
    """
    inner: Dict[str, Any] = {}
    if certificate:
        inner[CERTIFICATE_VAR] = certificate
    inner.update(additional_vars)
    return {"scm_branch": scm_branch or "", "extra_vars": inner}


def masked_extra_vars(ctx: RequestContext) -> Dict[str, Any]:
    """Copy of the inner extra vars that is safe to print."""
    printable = dict(ctx.extra_vars["extra_vars"])
    if ctx.certificate_supplied:
        printable[CERTIFICATE_VAR] = CERTIFICATE_MASK
    return printable


def build_request(settings: Settings, session: Optional[requests.Session] = None) -> RequestContext:
    # Parse before anything else: bad JSON must fail without any HTTP call
    additional_vars = parse_additional_vars(settings.additional_vars)

    print(f"Run configured to use Tower/AWX baseurl: {settings.url}")

    certificate = None
    if settings.certificate_path:
        certificate = encode_certificate(settings.certificate_path)

    if session is None:
        session = build_session(settings.username, settings.password)

    ctx = RequestContext(
        client=TowerClient(session, settings.url),
        template_id=settings.template_id,
        extra_vars=compose_extra_vars(settings.scm_branch, additional_vars, certificate),
        certificate_supplied=bool(certificate),
    )

    print("extra-vars: ")
    print(json.dumps(masked_extra_vars(ctx), indent=2))
    return ctx
