from __future__ import annotations

from checkparams.checks.common import (
    base_put_params,
    format_bool,
    valid_common_parameters,
)
from checkparams.checks.results import VALID, ValidationResult
from checkparams.models import HttpCheck


def http_put_params(ck: HttpCheck) -> dict[str, str]:
    m = base_put_params(ck)
    m.update(
        {
            "url": ck.url,
            "encryption": format_bool(ck.encryption),
            "postdata": ck.post_data,
            "tags": ck.tags,
        }
    )

    # Ignore zero values
    if ck.port != 0:
        m["port"] = str(ck.port)

    if ck.response_time_threshold != 0:
        m["responsetime_threshold"] = str(ck.response_time_threshold)

    if ck.verify_certificate is not None:
        m["verify_certificate"] = format_bool(ck.verify_certificate)

    if ck.ssl_down_days_before is not None:
        m["ssl_down_days_before"] = str(ck.ssl_down_days_before)

    # Mutually exclusive, but one is always sent so an update can clear it.
    if ck.should_contain != "":
        m["shouldcontain"] = ck.should_contain
    else:
        m["shouldnotcontain"] = ck.should_not_contain

    if ck.username != "":
        m["auth"] = f"{ck.username}:{ck.password}"

    for i, key in enumerate(sorted(ck.request_headers)):
        m[f"requestheader{i}"] = f"{key}:{ck.request_headers[key]}"

    return m


def validate_http(ck: HttpCheck) -> ValidationResult:
    res = valid_common_parameters(ck.name, ck.hostname, ck.resolution)
    if not res.ok:
        return res

    if ck.should_contain != "" and ck.should_not_contain != "":
        return ValidationResult.failure(
            "`ShouldContain` and `ShouldNotContain` must not be declared at the same time"
        )

    return VALID
