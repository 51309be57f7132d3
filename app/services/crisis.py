from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping


class Severity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


class InterventionType(str, Enum):
    ALERT_SHOWN = "alert_shown"
    EXPERT_CONTACTED = "expert_contacted"
    RESOURCES_ACCESSED = "resources_accessed"


CRISIS_RESOURCES: dict[str, str] = {
    "crisisHotline": "988",
    "emergency": "911",
    "textLine": "741741",
    "maternalHotline": "1-833-9-HELP4MOMS",
    "localResources": "https://www.postpartum.net/get-help/locations/",
}

CRISIS_SUPPORT_MESSAGE = (
    "We noticed you might be going through a difficult time. "
    "Please know that help is available and you are not alone."
)


@dataclass(slots=True, frozen=True)
class SeverityAssessment:
    has_critical: bool
    has_high: bool
    intervention_type: InterventionType

    @property
    def overall_severity(self) -> Severity:
        """Highest tier present, for log lines. Low and moderate both read as moderate."""
        if self.has_critical:
            return Severity.CRITICAL
        if self.has_high:
            return Severity.HIGH
        return Severity.MODERATE


def _severity_of(thought: Any) -> str | None:
    if isinstance(thought, Mapping):
        value = thought.get("severity")
    else:
        value = getattr(thought, "severity", None)
    return value.value if isinstance(value, Enum) else value


def severity_levels(thoughts: Iterable[Any]) -> list[str]:
    """
    Severity labels in submission order.
    Accepts dicts or objects with a `severity` attribute.
    """
    return [_severity_of(t) for t in thoughts]


def classify(thoughts: Iterable[Any]) -> SeverityAssessment:
    """
    Map selected concerning thoughts to an intervention tier.
    - any critical -> resources_accessed
    - else any high -> expert_contacted
    - else          -> alert_shown
    Callers only invoke this with a non-empty list when an intervention is
    being considered, but it is total over empty input as well.
    """
    levels = severity_levels(thoughts)
    has_critical = Severity.CRITICAL.value in levels
    has_high = Severity.HIGH.value in levels

    if has_critical:
        kind = InterventionType.RESOURCES_ACCESSED
    elif has_high:
        kind = InterventionType.EXPERT_CONTACTED
    else:
        kind = InterventionType.ALERT_SHOWN

    return SeverityAssessment(has_critical=has_critical, has_high=has_high, intervention_type=kind)
