"""Configuration loading and management for graphprint.

Configuration sources are merged in priority order:
    1. Defaults (defined in FingerprintConfig)
    2. Global config (~/.graphprint.toml)
    3. Project config (./graphprint.toml)
    4. Explicit config file
    5. Environment variables (GRAPHPRINT_* prefix)
    6. Keyword overrides

Example:
    >>> config = load_config(signature_length=9)
    >>> config.signature_length
    9
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

# Padding for signatures shorter than signature_length. Only its role as a
# fixed, deterministic filler matters; the value itself is tunable.
PHI = 1.618033988749895

# Scale factor for the peak frequency bin reported as resonance.
BASE_FREQUENCY = 432.0


@dataclass(frozen=True)
class ResonanceWeights:
    """Weights of the cross-registry resonance check (must sum to 1.0).

    Attributes:
        eigen: Weight of eigenvalue similarity
        topology: Weight of topology similarity
        coherence: Weight of the "coherence within tolerance" signal
    """

    eigen: float = 0.5
    topology: float = 0.3
    coherence: float = 0.2

    def __post_init__(self) -> None:
        for name in ("eigen", "topology", "coherence"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidConfigError(f"weights.{name}", value, "must be between 0.0 and 1.0")

        weight_sum = self.eigen + self.topology + self.coherence
        if not 0.99 <= weight_sum <= 1.01:
            raise InvalidConfigError(
                "weights", f"{weight_sum:.3f}", "resonance weights must sum to 1.0"
            )


@dataclass(frozen=True)
class FingerprintConfig:
    """Configuration for fingerprinting and comparison.

    Attributes:
        Spectral engine:
            signature_length: Number of eigenvalues kept in a signature (K)
            padding_value: Filler for signatures of graphs with fewer than K nodes
            base_frequency: Scale factor for the resonance peak bin

        Comparison:
            equivalence_threshold: similarity above this = equivalent
            registry_threshold: resonance check at or above this = same entry
            coherence_tolerance: coherence delta counted as "in tune"
            weights: Cross-registry resonance weights

        Resource bounds:
            max_nodes: Largest graph accepted (None = unbounded)
            workers: Threads for batch fingerprinting (None = auto-detect)

        Output control:
            verbosity: Logging verbosity level
    """

    # Spectral engine
    signature_length: int = 7
    padding_value: float = PHI
    base_frequency: float = BASE_FREQUENCY

    # Comparison
    equivalence_threshold: float = 0.95
    registry_threshold: float = 0.85
    coherence_tolerance: float = 0.1
    weights: ResonanceWeights = field(default_factory=ResonanceWeights)

    # Resource bounds
    max_nodes: Optional[int] = 5000
    workers: Optional[int] = None

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.signature_length < 1:
            raise InvalidConfigError("signature_length", self.signature_length, "must be at least 1")
        if self.base_frequency <= 0:
            raise InvalidConfigError("base_frequency", self.base_frequency, "must be positive")

        for name in ("equivalence_threshold", "registry_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidConfigError(name, value, "must be between 0.0 and 1.0")

        if self.coherence_tolerance < 0:
            raise InvalidConfigError(
                "coherence_tolerance", self.coherence_tolerance, "must be non-negative"
            )
        if self.max_nodes is not None and self.max_nodes < 1:
            raise InvalidConfigError("max_nodes", self.max_nodes, "must be at least 1")
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "must be quiet, normal or verbose")


DEFAULT_CONFIG = FingerprintConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> FingerprintConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (highest priority)

    Returns:
        Validated FingerprintConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".graphprint.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "graphprint.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    # [weights] section from TOML
    weights = merged.pop("weights", None)
    if weights is not None:
        if isinstance(weights, dict):
            try:
                merged["weights"] = ResonanceWeights(**weights)
            except TypeError as e:
                raise ConfigurationError(f"Invalid [weights] config: {e}")
        elif isinstance(weights, ResonanceWeights):
            merged["weights"] = weights

    try:
        return FingerprintConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from GRAPHPRINT_* environment variables.

    Supported environment variables:
        GRAPHPRINT_SIGNATURE_LENGTH: int
        GRAPHPRINT_PADDING_VALUE: float
        GRAPHPRINT_BASE_FREQUENCY: float
        GRAPHPRINT_EQUIVALENCE_THRESHOLD: float
        GRAPHPRINT_REGISTRY_THRESHOLD: float
        GRAPHPRINT_COHERENCE_TOLERANCE: float
        GRAPHPRINT_MAX_NODES: int
        GRAPHPRINT_WORKERS: int
        GRAPHPRINT_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any GRAPHPRINT_* vars found.
    """
    type_hints = get_type_hints(FingerprintConfig)

    result: dict[str, Any] = {}

    for field_name in FingerprintConfig.__dataclass_fields__:
        env_key = f"GRAPHPRINT_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the field's type.

    Returns:
        Parsed value or None if the type is not settable from the environment

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
        origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
