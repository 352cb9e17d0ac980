"""Configuration models for the converters."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_FALLBACK_SENDER = "unknown@example.com"
DEFAULT_FALLBACK_DATE = "Mon Jan 01 00:00:00 2024"


class EnvelopeConfig(BaseModel):
    """Placeholders used when an envelope line cannot be derived from headers."""

    fallback_sender: str = DEFAULT_FALLBACK_SENDER
    fallback_date: str = DEFAULT_FALLBACK_DATE

    @field_validator("fallback_sender", "fallback_date")
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Envelope placeholders must not be blank")
        if any(ch in v for ch in "\r\n"):
            raise ValueError("Envelope placeholders must fit on a single line")
        return v


class NamingConfig(BaseModel):
    """Output file naming for extracted eml files."""

    index_width: int = 4
    max_subject_bytes: int = 200

    @field_validator("index_width")
    def validate_index_width(cls, v: int) -> int:
        if not 1 <= v <= 9:
            raise ValueError("index_width must be between 1 and 9")
        return v

    @field_validator("max_subject_bytes")
    def validate_max_subject_bytes(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_subject_bytes must be positive")
        return v


class ProgressConfig(BaseModel):
    """Progress bar settings."""

    enabled: bool = True


class StorageConfig(BaseModel):
    """Storage configuration."""

    audit_log_path: Optional[str] = None

    def get_audit_log_path(self) -> Optional[Path]:
        """Get expanded audit log path, or None when auditing is disabled."""
        if not self.audit_log_path:
            return None
        return Path(self.audit_log_path).expanduser()


class AppConfig(BaseModel):
    """Main application configuration."""

    schema_version: str = "1.0"
    envelope: EnvelopeConfig = Field(default_factory=EnvelopeConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
    progress: ProgressConfig = Field(default_factory=ProgressConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    @field_validator("schema_version")
    def validate_schema_version(cls, v: str) -> str:
        if not v:
            raise ValueError("schema_version is required")
        return v
