"""Per-listing outcomes reported by the application workflow"""

from dataclasses import dataclass
from enum import Enum


class OutcomeKind(Enum):
    APPLIED = "applied"
    VIEWED_ONLY = "viewed_only"
    SKIPPED_STALE = "skipped_stale"
    SKIPPED_NO_APPLY_BUTTON = "skipped_no_apply_button"
    SKIPPED_MULTI_STEP = "skipped_multi_step"
    ERROR = "error"


@dataclass(frozen=True)
class Outcome:
    """What happened to one listing. detail is only set for ERROR."""

    kind: OutcomeKind
    title: str = ""
    detail: str = ""

    @property
    def applied(self):
        return self.kind is OutcomeKind.APPLIED

    @classmethod
    def error(cls, detail):
        return cls(OutcomeKind.ERROR, detail=detail)
