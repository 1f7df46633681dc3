"""Main library configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field

from .logging_schema import LoggingConfig


class IterToolsConfig(BaseModel):
    """Library configuration."""

    version: str = Field("1.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IterToolsConfig":
        """Create configuration from a plain dictionary."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a plain dictionary."""
        return self.model_dump(mode="json")
