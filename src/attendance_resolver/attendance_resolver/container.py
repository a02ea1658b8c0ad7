from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from .common.datetime_utils import civil_timezone
from .core.constants import CIVIL_UTC_OFFSET_MINUTES, MAX_RANGE_DAYS, MINIMUM_WORKING_HOURS
from .core.enums import SaturdayPolicy
from .resolution.factory import ResolutionRuleFactory
from .resolution.service import StatusResolver
from .workcalendar.weekly_off import sanitize_policy


@dataclass(frozen=True)
class Container:
    civil_tz: tzinfo
    default_saturday_policy: str
    status_resolver: StatusResolver
    max_range_days: int = MAX_RANGE_DAYS


def build_container(*, settings: dict | None = None) -> Container:
    settings = settings or {}
    tz = civil_timezone(int(settings.get("CIVIL_UTC_OFFSET_MINUTES", CIVIL_UTC_OFFSET_MINUTES)))
    policy, _ = sanitize_policy(settings.get("DEFAULT_SATURDAY_POLICY", SaturdayPolicy.ALL_WORKING.value))

    status_resolver = StatusResolver(
        rule_factory=ResolutionRuleFactory(),
        tz=tz,
        minimum_hours=float(settings.get("MINIMUM_WORKING_HOURS", MINIMUM_WORKING_HOURS)),
    )

    return Container(
        civil_tz=tz,
        default_saturday_policy=policy.value,
        status_resolver=status_resolver,
        max_range_days=int(settings.get("MAX_RANGE_DAYS", MAX_RANGE_DAYS)),
    )
