from __future__ import annotations

from checkparams.checks.common import base_put_params, valid_common_parameters
from checkparams.checks.results import VALID, ValidationResult
from checkparams.models import DnsCheck


def dns_put_params(ck: DnsCheck) -> dict[str, str]:
    m = base_put_params(ck)
    m["expectedip"] = ck.expected_ip
    m["nameserver"] = ck.name_server
    m["tags"] = ck.tags
    return m


def validate_dns(ck: DnsCheck) -> ValidationResult:
    res = valid_common_parameters(ck.name, ck.hostname, ck.resolution)
    if not res.ok:
        return res

    if ck.expected_ip == "":
        return ValidationResult.failure(
            "invalid value for `ExpectedIP`, must contain non-empty string"
        )

    if ck.name_server == "":
        return ValidationResult.failure(
            "invalid value for `NameServer`, must contain non-empty string"
        )

    return VALID
