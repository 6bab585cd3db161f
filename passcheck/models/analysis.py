from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    DANGER = "danger"
    WARN = "warn"
    INFO = "info"


class FlagKind(str, Enum):
    COMMON_PASSWORD = "common_password"
    SEQUENTIAL = "sequential"
    REPEATED = "repeated"
    KEYBOARD = "keyboard"
    YEAR = "year"
    EMAIL_OR_USERNAME = "email_or_username"
    BREACHED = "breached"


class BreachStatus(str, Enum):
    UNKNOWN = "unknown"
    PENDING = "pending"
    NOT_FOUND = "not_found"
    FOUND = "found"
    CHECK_FAILED = "check_failed"


class Flag(BaseModel):
    kind: FlagKind
    severity: Severity
    title: str
    message: str


class CharsetProfile(BaseModel):
    lowercase: bool = False
    uppercase: bool = False
    digit: bool = False
    symbol: bool = False
    alphabet_size: int = 0


class AnalysisResult(BaseModel):
    digest: Optional[str] = None
    length: int = 0
    entropy_bits: float = 0.0
    entropy_display: float = 0.0
    charset: CharsetProfile = Field(default_factory=CharsetProfile)

    base_score: int = Field(0, ge=0, le=5)
    adjusted_score: int = Field(0, ge=0, le=5)
    label: str = "Very Weak"

    flags: List[Flag] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)

    breach_status: BreachStatus = BreachStatus.UNKNOWN
    breach_count: Optional[int] = None

    @property
    def digest_prefix(self) -> Optional[str]:
        return self.digest[:5] if self.digest else None

    def has_flag(self, kind: FlagKind) -> bool:
        return any(flag.kind == kind for flag in self.flags)


class AnalyzeRequest(BaseModel):
    password: str = ""
