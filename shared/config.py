"""
valpass Configuration Management
=================================

Centralized settings for the valpass toolkit using Python dataclasses and
TOML-based persistence.

The settings tree only carries *tool* settings (logging, output, default
thresholds). The per-call validation thresholds live in
:class:`valpass.core.models.Configuration`, which can be built from the
``[validator]`` section loaded here.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the valpass root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "valpass.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class ValidatorConfig:
    """Default thresholds for the passphrase validator.

    A threshold of zero disables the corresponding check. The defaults
    equal :meth:`Configuration.defaults` (mean check off).
    """

    compression_min_percent: int = 10
    distribution_min_percent: float = 10.0
    entropy_min_bits_per_symbol: float = 3.0
    mean_allowed_deviation: float = 0.0
    alphabet_mode: str = "ascii_printable"

    # Word list (newline separated). Empty path disables the dictionary check.
    wordlist_path: str = ""
    wordlist_submatch: bool = False


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, log destinations, output format."""

    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    console_logging: bool = False
    output_format: str = "console"
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class ValpassSettings:
    """Master settings aggregating the global and validator sections.

    Usage:
        >>> settings = ValpassSettings.load()                # from default path
        >>> settings = ValpassSettings.load("valpass.toml")  # from custom path
        >>> settings.validator.entropy_min_bits_per_symbol
        3.0
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    validator: ValidatorConfig = field(default_factory=ValidatorConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> ValpassSettings:
        """Load settings from a TOML file.

        If *path* is ``None`` the loader looks for ``valpass.toml`` in the
        project root. Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML settings file.

        Returns:
            A fully-populated :class:`ValpassSettings` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            validator=cls._build_section(ValidatorConfig, raw.get("validator", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire settings tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)
