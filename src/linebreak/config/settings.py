"""Configuration settings for Linebreak."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from linebreak.domain.box import Direction


class Algorithm(str, Enum):
    """Available line-breaking algorithms."""

    GREEDY = "greedy"
    KNUTH_PLASS = "knuth_plass"


class Options(BaseModel):
    """Options passed to the line-breaking algorithms for one paragraph.

    Glue is the stretchable space between two boxes. Each glue has a nominal
    width and may shrink or expand within the given limits. A shrink larger
    than the nominal width is accepted and yields a negative minimum glue.
    """

    model_config = ConfigDict(frozen=True)

    text_width: float = Field(
        default=40.0,
        gt=0.0,
        description="Extent of a line of text",
    )
    text_direction: Direction = Field(
        default=Direction.LEFT_TO_RIGHT,
        description="Dominant writing direction of the paragraph",
    )
    glue_width: float = Field(
        default=1.0,
        ge=0.0,
        description="Nominal extent of the glues between boxes",
    )
    glue_shrink: float = Field(
        default=0.0,
        ge=0.0,
        description="Extent a glue can shrink below its nominal width",
    )
    glue_expand: float = Field(
        default=1.0,
        ge=0.0,
        description="Extent a glue can expand above its nominal width",
    )

    @classmethod
    def unchecked(cls, **values: object) -> "Options":
        """Build options without validating the field constraints.

        Missing fields take their defaults. Useful for callers that want
        the raw arithmetic of degenerate configurations.
        """
        return cls.model_construct(**values)

    @property
    def min_glue_width(self) -> float:
        """Width of a fully shrunk glue."""
        return self.glue_width - self.glue_shrink

    @property
    def max_glue_width(self) -> float:
        """Width of a fully expanded glue."""
        return self.glue_width + self.glue_expand


class BreakerConfig(BaseModel):
    """Configuration for the line breaker."""

    algorithm: Algorithm = Field(
        default=Algorithm.KNUTH_PLASS,
        description="Default line-breaking algorithm",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class LineBreakSettings(BaseModel):
    """Main application settings."""

    options: Options = Field(default_factory=Options)
    breaker: BreakerConfig = Field(default_factory=BreakerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> LineBreakSettings:
    """Get default application settings."""
    return LineBreakSettings()
