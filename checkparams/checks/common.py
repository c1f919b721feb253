from __future__ import annotations

from checkparams.checks.results import VALID, ValidationResult
from checkparams.models import RESOLUTIONS, BaseCheck


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def int_list_to_cd_string(integers: list[int]) -> str:
    """Comma-join integers in their given order; [] gives ""."""
    return ",".join(str(i) for i in integers)


def valid_common_parameters(name: str, hostname: str, resolution: int) -> ValidationResult:
    if name == "":
        return ValidationResult.failure(
            "invalid value for `Name`, must contain non-empty string"
        )

    if hostname == "":
        return ValidationResult.failure(
            "invalid value for `Hostname`, must contain non-empty string"
        )

    # 0 means the remote default (5 minutes)
    if resolution != 0 and resolution not in RESOLUTIONS:
        return ValidationResult.failure(
            f"invalid value {resolution} for `Resolution`, allowed values are [1,5,15,30,60]"
        )

    return VALID


def base_put_params(ck: BaseCheck) -> dict[str, str]:
    """Keys every check type sends on update."""
    m = {
        "name": ck.name,
        "host": ck.hostname,
        "paused": format_bool(ck.paused),
        "notifyagainevery": str(ck.notify_again_every),
        "notifywhenbackup": format_bool(ck.notify_when_backup),
        "integrationids": int_list_to_cd_string(ck.integration_ids),
        "probe_filters": ck.probe_filters,
        "userids": int_list_to_cd_string(ck.user_ids),
        "teamids": int_list_to_cd_string(ck.team_ids),
    }

    if ck.resolution != 0:
        m["resolution"] = str(ck.resolution)

    if ck.send_notification_when_down != 0:
        m["sendnotificationwhendown"] = str(ck.send_notification_when_down)

    return m


def to_post_params(put_params: dict[str, str], check_type: str) -> dict[str, str]:
    # Creation rejects empty strings; "false" and "0" are real values and stay.
    params = {k: v for k, v in put_params.items() if v != ""}
    params["type"] = check_type
    return params
