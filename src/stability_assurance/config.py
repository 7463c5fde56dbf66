"""Configuration loading and management for Stability Assurance.

Configuration sources are merged in priority order:
    1. Defaults (defined in Configuration)
    2. Project config (./stability-assurance.toml)
    3. Explicit config file (--config)
    4. Environment variables (SAT_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(output="json", enabled_metrics=["WMC", "RFC"])
    >>> config.output
    <OutputTarget.JSON: 'json'>
    >>> config.evaluated_metrics
    (<MetricKind.WMC: 'WMC'>, <MetricKind.RFC: 'RFC'>)

A TOML file looks like::

    output = "console"
    enabled_metrics = ["WMC", "RFC", "NOC", "LOCM"]
    max_allowed_warnings = 10

    [metrics.RFC.thresholds]
    good = 40
    accepted = 80

    [metrics.RFC.severity]
    poor = "error"
    accepted = "note"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from .evaluation.severity import DEFAULT_SEVERITY, SeverityConfig
from .evaluation.thresholds import Thresholds
from .exceptions import ConfigFileError, InvalidConfigError
from .metrics.wmc import WMCMode
from .models import MetricKind, Severity

PROJECT_CONFIG_NAME = "stability-assurance.toml"
ENV_PREFIX = "SAT_"


class OutputTarget(Enum):
    """Where and how the report is rendered."""

    CONSOLE = "console"
    HTML = "html"
    JSON = "json"
    FILE = "file"


@dataclass(frozen=True)
class MetricConfig:
    """Per-metric overrides: thresholds and severities."""

    thresholds: Optional[Thresholds] = None
    severity: SeverityConfig = DEFAULT_SEVERITY


DEFAULT_METRIC_CONFIG = MetricConfig()


@dataclass(frozen=True)
class Configuration:
    """Configuration for one evaluation run.

    Attributes:
        output: Report output target
        output_file: File the report is written to (required for FILE output)
        enabled_metrics: Metrics to evaluate; empty means all four
        metrics: Per-metric thresholds and severities
        max_allowed_warnings: Warning budget, None for unlimited
        wmc_mode: How WMC weights methods
    """

    output: OutputTarget = OutputTarget.CONSOLE
    output_file: Optional[Path] = None
    enabled_metrics: frozenset = field(default_factory=frozenset)
    metrics: Mapping[MetricKind, MetricConfig] = field(default_factory=dict)
    max_allowed_warnings: Optional[int] = None
    wmc_mode: WMCMode = WMCMode.CUSTOM

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for kind in self.enabled_metrics:
            if not isinstance(kind, MetricKind):
                raise InvalidConfigError("enabled_metrics", kind, "unknown metric")
        for kind in self.metrics:
            if not isinstance(kind, MetricKind):
                raise InvalidConfigError("metrics", kind, "unknown metric")
        if self.max_allowed_warnings is not None and self.max_allowed_warnings < 1:
            raise InvalidConfigError(
                "max_allowed_warnings", self.max_allowed_warnings, "must be at least 1"
            )
        if self.output is OutputTarget.FILE and self.output_file is None:
            raise InvalidConfigError("output_file", None, "required when output is 'file'")

    @property
    def evaluated_metrics(self) -> Tuple[MetricKind, ...]:
        """Enabled metrics in canonical order (all of them when none is selected)."""
        if not self.enabled_metrics:
            return tuple(MetricKind)
        return tuple(kind for kind in MetricKind if kind in self.enabled_metrics)

    def metric_config(self, kind: MetricKind) -> MetricConfig:
        return self.metrics.get(kind, DEFAULT_METRIC_CONFIG)

    def severity_for(self, kind: MetricKind) -> SeverityConfig:
        return self.metric_config(kind).severity

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Configuration":
        """Build a validated configuration from plain (TOML-shaped) data.

        Raises:
            InvalidConfigError: If a key is unknown or a value is invalid
        """
        known = {"output", "output_file", "enabled_metrics", "metrics",
                 "max_allowed_warnings", "wmc_mode"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfigError(unknown[0], data[unknown[0]], "unknown configuration key")

        kwargs: Dict[str, Any] = {}
        if data.get("output") is not None:
            kwargs["output"] = _parse_enum(OutputTarget, data["output"], "output")
        if data.get("output_file") is not None:
            kwargs["output_file"] = Path(data["output_file"])
        if data.get("enabled_metrics") is not None:
            kwargs["enabled_metrics"] = _parse_metric_names(data["enabled_metrics"])
        if data.get("metrics") is not None:
            kwargs["metrics"] = _parse_metrics_section(data["metrics"])
        if data.get("max_allowed_warnings") is not None:
            kwargs["max_allowed_warnings"] = _parse_int(
                data["max_allowed_warnings"], "max_allowed_warnings"
            )
        if data.get("wmc_mode") is not None:
            kwargs["wmc_mode"] = _parse_enum(WMCMode, data["wmc_mode"], "wmc_mode")
        return cls(**kwargs)


DEFAULT_CONFIGURATION = Configuration()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> Configuration:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); None values are ignored

    Returns:
        Validated Configuration instance

    Raises:
        ConfigFileError: If a config file is missing or not valid TOML
        InvalidConfigError: If a configuration value is invalid
    """
    merged: Dict[str, Any] = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        _merge(merged, _load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigFileError(config_file, "file not found")
        _merge(merged, _load_toml_file(config_file))

    _merge(merged, _load_env_vars())
    _merge(merged, {key: value for key, value in overrides.items() if value is not None})

    return Configuration.from_dict(merged)


def _merge(target: Dict[str, Any], source: Mapping[str, Any]) -> None:
    """Merge ``source`` into ``target``; the ``metrics`` table merges per metric."""
    for key, value in source.items():
        if key == "metrics" and isinstance(value, dict) and isinstance(target.get(key), dict):
            metrics = dict(target[key])
            for name, section in value.items():
                if isinstance(section, dict) and isinstance(metrics.get(name), dict):
                    metrics[name] = {**metrics[name], **section}
                else:
                    metrics[name] = section
            target[key] = metrics
        else:
            target[key] = value


def _load_env_vars() -> Dict[str, Any]:
    """Load configuration from SAT_* environment variables.

    Supported environment variables:
        SAT_OUTPUT: console/html/json/file
        SAT_OUTPUT_FILE: path
        SAT_ENABLED_METRICS: comma separated metric names
        SAT_MAX_ALLOWED_WARNINGS: int
        SAT_WMC_MODE: custom/unity
    """
    result: Dict[str, Any] = {}
    for key in ("output", "output_file", "wmc_mode", "max_allowed_warnings"):
        value = os.environ.get(f"{ENV_PREFIX}{key.upper()}")
        if value:
            result[key] = value

    metrics = os.environ.get(f"{ENV_PREFIX}ENABLED_METRICS")
    if metrics:
        result["enabled_metrics"] = [name for name in metrics.split(",") if name.strip()]
    return result


def _load_toml_file(path: Path) -> Dict[str, Any]:
    """Load a TOML file and return the parsed dict."""
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigFileError(path, f"cannot read file: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(path, f"invalid TOML: {e}") from e


def _parse_enum(enum_cls, value: Any, key: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise InvalidConfigError(key, value, f"expected one of: {choices}") from None


def _parse_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise InvalidConfigError(key, value, "expected an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidConfigError(key, value, "expected an integer") from None


def _parse_metric(name: Any, key: str) -> MetricKind:
    if isinstance(name, MetricKind):
        return name
    try:
        return MetricKind.parse(str(name))
    except ValueError as e:
        raise InvalidConfigError(key, name, str(e)) from None


def _parse_metric_names(names: Any) -> frozenset:
    if isinstance(names, str):
        names = [names]
    return frozenset(_parse_metric(name, "enabled_metrics") for name in names)


def _parse_metrics_section(section: Any) -> Dict[MetricKind, MetricConfig]:
    if isinstance(section, Mapping) and all(isinstance(v, MetricConfig) for v in section.values()):
        return {_parse_metric(k, "metrics"): v for k, v in section.items()}
    if not isinstance(section, Mapping):
        raise InvalidConfigError("metrics", section, "expected a table of metric settings")

    result: Dict[MetricKind, MetricConfig] = {}
    for name, settings in section.items():
        kind = _parse_metric(name, "metrics")
        if not isinstance(settings, Mapping):
            raise InvalidConfigError(f"metrics.{kind.value}", settings, "expected a table")
        result[kind] = MetricConfig(
            thresholds=_parse_thresholds(kind, settings.get("thresholds")),
            severity=_parse_severity(kind, settings.get("severity")),
        )
    return result


def _parse_thresholds(kind: MetricKind, data: Any) -> Optional[Thresholds]:
    if data is None:
        return None
    key = f"metrics.{kind.value}.thresholds"
    if not isinstance(data, Mapping) or "good" not in data or "accepted" not in data:
        raise InvalidConfigError(key, data, "expected a table with 'good' and 'accepted'")
    try:
        good, accepted = float(data["good"]), float(data["accepted"])
    except (TypeError, ValueError):
        raise InvalidConfigError(key, data, "threshold values must be numbers") from None
    if good > accepted:
        raise InvalidConfigError(key, data, "good threshold must not exceed accepted threshold")
    return Thresholds(good=good, accepted=accepted)


def _parse_severity(kind: MetricKind, data: Any) -> SeverityConfig:
    if data is None:
        return DEFAULT_SEVERITY
    key = f"metrics.{kind.value}.severity"
    if not isinstance(data, Mapping):
        raise InvalidConfigError(key, data, "expected a table with 'poor' and 'accepted'")
    accepted = data.get("accepted", data.get("acceptable", Severity.WARNING.value))
    return SeverityConfig(
        poor=_parse_enum(Severity, data.get("poor", Severity.WARNING.value), f"{key}.poor"),
        accepted=_parse_enum(Severity, accepted, f"{key}.accepted"),
    )
