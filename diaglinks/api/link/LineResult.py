"""Outcome of running the pipeline on one line."""

from dataclasses import dataclass
from typing import Any

from .LinkRecord import LinkRecord
from .RawLine import RawLine
from .ScanStage import ScanStage


@dataclass(frozen=True)
class LineResult:
    """Either a link record or the stage that rejected the line.

    Exactly one of ``record`` and ``failed_stage`` is set.
    """

    line: RawLine
    record: LinkRecord | None = None
    failed_stage: ScanStage | None = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.record is not None

    @classmethod
    def linked(cls, line: RawLine, record: LinkRecord) -> "LineResult":
        return cls(line=line, record=record)

    @classmethod
    def dropped(cls, line: RawLine, stage: ScanStage, reason: str) -> "LineResult":
        return cls(line=line, failed_stage=stage, reason=reason)

    def to_dict(self) -> dict[str, Any]:
        return {
            "line_index": self.line.index,
            "text": self.line.text,
            "linked": self.ok,
            "stage": self.failed_stage.value if self.failed_stage else None,
            "reason": self.reason,
            "target": self.record.to_dict()["target"] if self.record else None,
        }
