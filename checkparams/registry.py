from __future__ import annotations

import logging
from pathlib import Path

import yaml

from checkparams.config import settings
from checkparams.encoding import post_params, put_params, validate
from checkparams.models import Check, Registry

logger = logging.getLogger(__name__)


def load_registry(path: Path | str | None = None) -> Registry:
    path = Path(path or settings.CHECKPARAMS_REGISTRY_PATH)
    if not path.exists():
        raise FileNotFoundError(f"Missing check registry at {path}")

    data = yaml.safe_load(path.read_text()) or {}
    reg = Registry.model_validate(data)

    # Names identify checks in the built request maps
    seen = set()
    for c in reg.checks:
        if c.name in seen:
            raise ValueError(f"Duplicate check name: {c.name}")
        seen.add(c.name)

    logger.info("Loaded %d checks from %s", len(reg.checks), path)
    return reg


def apply_defaults(reg: Registry) -> list[Check]:
    """
    Return copies of the registry's checks with the default resolution applied
    where a check leaves it unset. The registry itself is not modified.
    """
    resolution = reg.defaults.resolution or settings.CHECKPARAMS_DEFAULT_RESOLUTION
    out: list[Check] = []

    for c in reg.checks:
        if c.resolution == 0 and resolution:
            c = c.model_copy(update={"resolution": resolution})
        out.append(c)

    return out


def _build(reg: Registry, encode) -> dict[str, dict[str, str]]:
    out: dict[str, dict[str, str]] = {}
    for c in apply_defaults(reg):
        validate(c).raise_for_error(context=f"check {c.name!r}")
        out[c.name] = encode(c)
    return out


def build_create_requests(reg: Registry) -> dict[str, dict[str, str]]:
    return _build(reg, post_params)


def build_update_requests(reg: Registry) -> dict[str, dict[str, str]]:
    return _build(reg, put_params)
