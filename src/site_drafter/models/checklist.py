from __future__ import annotations

from enum import Enum
from typing import Sequence

from pydantic import BaseModel, Field, computed_field


class CheckStatus(str, Enum):
    passed = "pass"
    warn = "warn"
    failed = "fail"


class CheckResult(BaseModel):
    id: str
    label: str
    passed: bool
    hint: str = ""
    must: bool = Field(default=True, description="Hard-blocking rules gate export; advisory ones only warn")

    class Config:
        frozen = True

    @computed_field  # type: ignore[misc]
    @property
    def status(self) -> CheckStatus:
        if self.passed:
            return CheckStatus.passed
        return CheckStatus.failed if self.must else CheckStatus.warn


class Checklist(BaseModel):
    checks: Sequence[CheckResult]
    completeness: int = Field(ge=0, le=100)
    export_blocked: bool
    decision_log: str = ""

    class Config:
        frozen = True

    def get(self, check_id: str) -> CheckResult:
        for check in self.checks:
            if check.id == check_id:
                return check
        raise KeyError(check_id)

    @property
    def blocking_failures(self) -> list[CheckResult]:
        return [check for check in self.checks if check.must and not check.passed]

    @property
    def warnings(self) -> list[CheckResult]:
        return [check for check in self.checks if not check.must and not check.passed]


__all__ = ["CheckResult", "CheckStatus", "Checklist"]
