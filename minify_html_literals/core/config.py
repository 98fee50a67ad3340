"""Process-wide configuration using Pydantic v2 Settings.

Settings load from environment variables prefixed with
``MINIFY_HTML_LITERALS_`` or a ``.env`` file, and supply the defaults used
whenever a per-call option is left unset.
"""

import logging
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    All settings have defaults matching the library's documented behavior
    and can be overridden via environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MINIFY_HTML_LITERALS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Pipeline defaults
    validate_templates: bool = Field(
        default=True,
        description="Check placeholders and part counts unless a call overrides it.",
    )
    generate_source_map: bool = Field(
        default=True,
        description="Emit a source map unless a call overrides it.",
    )
    source_map_hires: bool = Field(
        default=True,
        description="Map every character instead of only line starts.",
    )
    include_source_content: bool = Field(
        default=False,
        description="Embed the original source in sourcesContent.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Renderer for structured log events: 'console' or 'json'.",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file that receives a copy of every log record.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure structlog on top of the stdlib logging handlers."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        renderer = (
            structlog.processors.JSONRenderer()
            if self.log_format == "json"
            else structlog.dev.ConsoleRenderer(colors=False)
        )

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                renderer,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
