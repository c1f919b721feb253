from __future__ import annotations

from checkparams.checks.common import base_put_params, valid_common_parameters
from checkparams.checks.results import VALID, ValidationResult
from checkparams.models import TcpCheck

MIN_PORT = 1
MAX_PORT = 65535


def tcp_put_params(ck: TcpCheck) -> dict[str, str]:
    m = base_put_params(ck)
    m["tags"] = ck.tags
    # Port is mandatory for TCP, so 0 is sent rather than dropped.
    m["port"] = str(ck.port)

    if ck.string_to_send != "":
        m["stringtosend"] = ck.string_to_send

    if ck.string_to_expect != "":
        m["stringtoexpect"] = ck.string_to_expect

    return m


def validate_tcp(ck: TcpCheck) -> ValidationResult:
    res = valid_common_parameters(ck.name, ck.hostname, ck.resolution)
    if not res.ok:
        return res

    if ck.port < MIN_PORT or ck.port > MAX_PORT:
        return ValidationResult.failure(
            f"Invalid value for `Port`.  Must contain an integer >= {MIN_PORT} and <= {MAX_PORT}"
        )

    return VALID
