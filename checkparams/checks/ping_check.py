from __future__ import annotations

from checkparams.checks.common import base_put_params, valid_common_parameters
from checkparams.checks.results import ValidationResult
from checkparams.models import PingCheck


def ping_put_params(ck: PingCheck) -> dict[str, str]:
    # tags are not part of the ping update call
    m = base_put_params(ck)
    if ck.response_time_threshold != 0:
        m["responsetime_threshold"] = str(ck.response_time_threshold)
    return m


def validate_ping(ck: PingCheck) -> ValidationResult:
    return valid_common_parameters(ck.name, ck.hostname, ck.resolution)
