"""Pipeline configuration for pytwrn."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pytwrn._constants import COLOR_PREFIX, DEFAULT_BREAKPOINTS
from pytwrn.exceptions import ConfigurationError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


class Breakpoint(BaseModel):
    """A responsive tier: classes tagged with *prefix* apply from *min_width* up.

    Parameters
    ----------
    prefix : str
        Tag prepended to a class name, including the colon (e.g. ``"md:"``).
    min_width : int
        Smallest window width (in px) at which the tier is active.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    prefix: str = Field(min_length=2)
    min_width: int = Field(gt=0)

    @field_validator("prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if not value.endswith(":"):
            raise ValueError(f"breakpoint prefix must end with ':', got {value!r}")
        if any(ch.isspace() for ch in value):
            raise ValueError(f"breakpoint prefix must not contain whitespace, got {value!r}")
        return value


DEFAULT_BREAKPOINT_TIERS: tuple[Breakpoint, ...] = tuple(
    Breakpoint(prefix=prefix, min_width=min_width) for prefix, min_width in DEFAULT_BREAKPOINTS
)


def parse_breakpoints(value: str) -> tuple[Breakpoint, ...]:
    """Parse ``"sm:640,md:768"`` into breakpoint tiers.

    Raises :class:`ConfigurationError` for malformed entries.
    """
    tiers: list[Breakpoint] = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name, sep, width = entry.rpartition(":")
        if not sep or not name:
            raise ConfigurationError(f"Invalid breakpoint entry {entry!r}, expected '<name>:<min width>'")
        try:
            tiers.append(Breakpoint(prefix=f"{name}:", min_width=int(width)))
        except (ValueError, ValidationError) as exc:
            raise ConfigurationError(f"Invalid breakpoint entry {entry!r}: {exc}") from exc
    return tuple(tiers)


@dataclasses.dataclass(frozen=True)
class TwrnConfig:
    """Pipeline configuration.

    Parameters
    ----------
    breakpoints : tuple of Breakpoint
        Responsive tiers, strictly ascending by ``min_width``. Defaults to
        ``sm:`` 640, ``md:`` 768, ``lg:`` 1024 and ``xl:`` 1280.
    color_prefix : str
        Prefix turning a color name into a utility class for
        :meth:`StylePipeline.get_color`.
    warn_unsupported : bool
        Log a warning for every class missing from the lookup table.
    styles_path : Path or None
        Lookup table used by the default pipeline. ``None`` uses the
        table bundled with the package.
    """

    breakpoints: tuple[Breakpoint, ...] = DEFAULT_BREAKPOINT_TIERS
    color_prefix: str = COLOR_PREFIX
    warn_unsupported: bool = True
    styles_path: Path | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.breakpoints, tuple):
            object.__setattr__(self, "breakpoints", tuple(self.breakpoints))
        prefixes = [bp.prefix for bp in self.breakpoints]
        if len(set(prefixes)) != len(prefixes):
            raise ConfigurationError(f"Duplicate breakpoint prefixes: {prefixes}")
        widths = [bp.min_width for bp in self.breakpoints]
        if any(lower >= upper for lower, upper in zip(widths, widths[1:])):
            raise ConfigurationError(f"Breakpoints must be strictly ascending by min_width, got {widths}")
        if not self.color_prefix:
            raise ConfigurationError("color_prefix must not be empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> TwrnConfig:
        """Create configuration from environment variables.

        Reads ``TWRN_BREAKPOINTS``, ``TWRN_COLOR_PREFIX``,
        ``TWRN_WARN_UNSUPPORTED`` and ``TWRN_STYLES_PATH``. Explicit
        keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        TwrnConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        breakpoints_env = env.get("TWRN_BREAKPOINTS")
        if breakpoints_env is not None and "breakpoints" not in overrides:
            config_kwargs["breakpoints"] = parse_breakpoints(breakpoints_env)

        color_prefix_env = env.get("TWRN_COLOR_PREFIX")
        if color_prefix_env is not None:
            config_kwargs["color_prefix"] = color_prefix_env

        if "warn_unsupported" not in overrides:
            config_kwargs["warn_unsupported"] = _env_bool(env.get("TWRN_WARN_UNSUPPORTED"), True)

        styles_env = env.get("TWRN_STYLES_PATH")
        if styles_env:
            config_kwargs["styles_path"] = Path(styles_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
