"""Envelopes returned by every pattern's demo and self-test."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PatternCheck(BaseModel):
    """Individual self-test check result."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Check name")
    passed: bool = Field(..., alias="pass", description="Whether the check passed")
    details: str = Field(..., description="Human readable outcome")


class PatternDemoResponse(BaseModel):
    """Response for pattern demo endpoints."""

    pattern: str
    description: str
    result: Any = None
    metadata: Optional[Dict[str, Any]] = None


class PatternTestResponse(BaseModel):
    """Response for pattern test endpoints."""

    pattern: str
    status: str = Field(..., description="PASS or FAIL")
    checks: List[PatternCheck]

    @classmethod
    def from_checks(cls, pattern: str, checks: List[PatternCheck]) -> "PatternTestResponse":
        """PASS only when every check passed."""
        status = "PASS" if all(check.passed for check in checks) else "FAIL"
        return cls(pattern=pattern, status=status, checks=checks)


def check(name: str, passed: bool, details: str) -> PatternCheck:
    return PatternCheck(name=name, passed=passed, details=details)
