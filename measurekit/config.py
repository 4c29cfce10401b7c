"""Environment-driven settings."""

from dataclasses import dataclass

from environs import Env

from measurekit.domain.constants import (
    DEFAULT_FORMAT_PRECISION,
    DEFAULT_UNIT_STYLE,
    UNIT_STYLES,
)


@dataclass(frozen=True, slots=True)
class FormatterSettings:
    """Options for rendering measurements as text."""

    precision: int = DEFAULT_FORMAT_PRECISION
    unit_style: str = DEFAULT_UNIT_STYLE
    render_non_finite: bool = True

    def __post_init__(self):
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")
        if self.unit_style not in UNIT_STYLES:
            raise ValueError(
                f"Unknown unit style: {self.unit_style!r} (expected one of {UNIT_STYLES})"
            )

    @classmethod
    def from_env(cls, env: Env) -> "FormatterSettings":
        """
        Read settings from the environment.

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> settings = FormatterSettings.from_env(env)
        """
        return cls(
            precision=env.int("MEASUREMENT_FORMAT_PRECISION", DEFAULT_FORMAT_PRECISION),
            unit_style=env.str("MEASUREMENT_UNIT_STYLE", DEFAULT_UNIT_STYLE).lower(),
            render_non_finite=env.bool("MEASUREMENT_RENDER_NON_FINITE", default=True),
        )
