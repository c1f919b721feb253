from __future__ import annotations

import logging
from typing import Callable

from checkparams.checks.common import to_post_params
from checkparams.checks.dns_check import dns_put_params, validate_dns
from checkparams.checks.http_check import http_put_params, validate_http
from checkparams.checks.ping_check import ping_put_params, validate_ping
from checkparams.checks.results import ValidationResult
from checkparams.checks.tcp_check import tcp_put_params, validate_tcp
from checkparams.models import Check, DnsCheck, HttpCheck, PingCheck, TcpCheck

logger = logging.getLogger(__name__)

_HANDLERS: dict[type, tuple[Callable[..., dict[str, str]], Callable[..., ValidationResult]]] = {
    HttpCheck: (http_put_params, validate_http),
    PingCheck: (ping_put_params, validate_ping),
    TcpCheck: (tcp_put_params, validate_tcp),
    DnsCheck: (dns_put_params, validate_dns),
}


def _handlers_for(check: Check):
    try:
        return _HANDLERS[type(check)]
    except KeyError:
        raise TypeError(f"Unsupported check type: {type(check).__name__}") from None


def validate(check: Check) -> ValidationResult:
    _, validator = _handlers_for(check)
    res = validator(check)
    if not res.ok:
        logger.warning("Check %r (%s) failed validation: %s", check.name, check.type, res.error)
    return res


def put_params(check: Check) -> dict[str, str]:
    """Full parameter set for an update; empty values clear fields remotely."""
    encoder, _ = _handlers_for(check)
    params = encoder(check)
    logger.debug("Encoded %s check %r for update: %s", check.type, check.name, sorted(params))
    return params


def post_params(check: Check) -> dict[str, str]:
    """Parameter set for creation: update params without empty values, plus `type`."""
    params = to_post_params(put_params(check), check.type)
    logger.debug("Encoded %s check %r for create: %s", check.type, check.name, sorted(params))
    return params
