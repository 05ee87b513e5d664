"""Configuration management for License Scanner."""

import os
from dataclasses import dataclass, field
from typing import Optional

# Best-effort guesses must never look as trustworthy as a structured decode
MAX_BEST_EFFORT_CONFIDENCE = 0.80


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # DynamoDB Configuration
    table_name: str = field(
        default_factory=lambda: os.environ.get("SCAN_SESSIONS_TABLE", "license-scan-sessions")
    )

    # Decoder Configuration
    structured_confidence: float = field(
        default_factory=lambda: float(os.environ.get("STRUCTURED_CONFIDENCE", "0.95"))
    )
    best_effort_confidence: float = field(
        default_factory=lambda: float(os.environ.get("BEST_EFFORT_CONFIDENCE", "0.60"))
    )

    # Feature Flags
    enable_best_effort: bool = field(
        default_factory=lambda: os.environ.get("ENABLE_BEST_EFFORT", "true").lower() == "true"
    )
    enable_audit_trail: bool = field(
        default_factory=lambda: os.environ.get("ENABLE_AUDIT_TRAIL", "false").lower() == "true"
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings instance from environment variables."""
        return cls()

    def validate(self) -> None:
        """Validate settings are present and consistent."""
        if self.enable_audit_trail and not self.table_name:
            raise ValueError("SCAN_SESSIONS_TABLE environment variable is required when auditing")

        for name in ("structured_confidence", "best_effort_confidence"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")

        if self.best_effort_confidence > MAX_BEST_EFFORT_CONFIDENCE:
            raise ValueError(
                f"best_effort_confidence must not exceed {MAX_BEST_EFFORT_CONFIDENCE}"
            )
        if self.best_effort_confidence > self.structured_confidence:
            raise ValueError("best_effort_confidence must not exceed structured_confidence")


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Raises:
        ValueError: If the environment holds inconsistent settings
    """
    global _settings
    if _settings is None:
        settings = Settings.from_env()
        settings.validate()
        _settings = settings
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
