from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

CheckType = Literal["http", "ping", "tcp", "dns"]

RESOLUTIONS = (1, 5, 15, 30, 60)


class Defaults(BaseModel):
    # 0 leaves the remote default in place
    resolution: int = 0


class BaseCheck(BaseModel):
    type: CheckType
    name: str = ""
    hostname: str = ""
    resolution: int = 0
    paused: bool = False
    send_notification_when_down: int = 0
    notify_again_every: int = 0
    notify_when_backup: bool = False
    integration_ids: List[int] = Field(default_factory=list)
    tags: str = ""
    probe_filters: str = ""
    user_ids: List[int] = Field(default_factory=list)
    team_ids: List[int] = Field(default_factory=list)


class HttpCheck(BaseCheck):
    type: Literal["http"] = "http"
    url: str = ""
    encryption: bool = False
    port: int = 0
    username: str = ""
    password: str = ""
    should_contain: str = ""
    should_not_contain: str = ""
    post_data: str = ""
    request_headers: Dict[str, str] = Field(default_factory=dict)
    response_time_threshold: int = 0
    # None means "not specified"; False/0 are sent as-is
    verify_certificate: Optional[bool] = None
    ssl_down_days_before: Optional[int] = None


class PingCheck(BaseCheck):
    type: Literal["ping"] = "ping"
    response_time_threshold: int = 0


class TcpCheck(BaseCheck):
    type: Literal["tcp"] = "tcp"
    port: int = 0
    string_to_send: str = ""
    string_to_expect: str = ""


class DnsCheck(BaseCheck):
    type: Literal["dns"] = "dns"
    expected_ip: str = ""
    name_server: str = ""


Check = HttpCheck | PingCheck | TcpCheck | DnsCheck
CheckEntry = Annotated[Check, Field(discriminator="type")]


class Registry(BaseModel):
    defaults: Defaults = Defaults()
    checks: List[CheckEntry] = Field(default_factory=list)
