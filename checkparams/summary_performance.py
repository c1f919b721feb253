from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from checkparams.checks.results import BAD_RESOLUTION, MISSING_ID, VALID, ValidationResult

SUMMARY_RESOLUTIONS = ("hour", "day", "week")


class SummaryPerformanceRequest(BaseModel):
    id: int = 0
    from_: int = Field(default=0, alias="from")
    to: int = 0
    resolution: str = ""
    include_uptime: bool = False
    probes: str = ""
    order: str = ""

    model_config = ConfigDict(populate_by_name=True)

    def validate_request(self) -> ValidationResult:
        if self.id == 0:
            return MISSING_ID

        if self.resolution != "" and self.resolution not in SUMMARY_RESOLUTIONS:
            return BAD_RESOLUTION

        return VALID

    def get_params(self) -> dict[str, str]:
        # from/to/probes/order are not sent; the remote defaults apply.
        params: dict[str, str] = {}

        if self.resolution != "":
            params["resolution"] = self.resolution

        if self.include_uptime:
            params["includeuptime"] = "true"

        return params
