"""
Configuration loading and validation for the tradefinder application.

Configuration objects are plain frozen dataclasses, filled from a YAML file
and checked by explicit validation functions before construction.
"""

import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Type, cast

__all__ = ["load_config", "default_config", "Config"]


# §1. Nested Configuration Dataclasses
# --------------------------------------------------------------------------------------


@dataclass(frozen=True)
class BenchmarkConfig:
    size: int
    min_size: int
    max_price: int
    seed: Optional[int]
    dataset_path: Path
    preview: int


@dataclass(frozen=True)
class ReportingConfig:
    time_precision: int


# §2. Top-Level Configuration
# --------------------------------------------------------------------------------------


@dataclass(frozen=True)
class Config:
    """The root configuration object, composing all nested sections."""
    benchmark: BenchmarkConfig
    reporting: ReportingConfig


DEFAULT_CONFIG_DICT: Dict[str, Any] = {
    "benchmark": {
        "size": 10000,
        "min_size": 1000,
        "max_price": 1000,
        "seed": None,
        "dataset_path": "large_dataset.txt",
        "preview": 20,
    },
    "reporting": {"time_precision": 4},
}


# §3. Validation and Loading
# --------------------------------------------------------------------------------------


def _from_dict(data_class: Type[Any], data: Any) -> Any:
    """Recursively creates nested dataclasses from a dictionary."""
    if isinstance(data, dict) and hasattr(data_class, "__dataclass_fields__"):
        field_types = {f.name: f.type for f in data_class.__dataclass_fields__.values()}

        kwargs = {}
        for k, v in data.items():
            field_type = field_types.get(k)
            # Unknown keys are passed through; the dataclass constructor
            # rejects them with a TypeError, which the caller reports.
            kwargs[k] = _from_dict(field_type, v) if field_type else v
        return data_class(**kwargs)

    if isinstance(data, str) and data_class is Path:
        return Path(data)
    return data


def _require_int(value: Any, name: str, minimum: int) -> None:
    # bool is an int subclass; "true" in YAML is not a size.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")


def _validate_config(cfg: Dict[str, Any]) -> None:
    """
    Performs simple, explicit validation checks on the raw config dictionary.
    Fail fast on any logical inconsistencies.
    """
    if not isinstance(cfg, dict):
        raise ValueError("Configuration must be a YAML object.")

    for section in ("benchmark", "reporting"):
        if not isinstance(cfg.get(section), dict):
            raise ValueError(f"Missing configuration section: {section}")

    bench = cfg["benchmark"]
    _require_int(bench.get("size"), "benchmark.size", 2)
    _require_int(bench.get("min_size"), "benchmark.min_size", 2)
    _require_int(bench.get("max_price"), "benchmark.max_price", 1)
    _require_int(bench.get("preview"), "benchmark.preview", 0)

    if bench.get("seed") is not None:
        _require_int(bench["seed"], "benchmark.seed", 0)

    if not bench.get("dataset_path"):
        raise ValueError("benchmark.dataset_path must be a non-empty path")

    _require_int(cfg["reporting"].get("time_precision"), "reporting.time_precision", 0)


def _build(raw_config: Dict[str, Any]) -> Config:
    _validate_config(raw_config)
    try:
        # _from_dict is too dynamic for mypy; validation above vouches for the shape.
        return cast(Config, _from_dict(Config, raw_config))
    except (TypeError, KeyError) as e:
        raise ValueError(f"Configuration validation failed: missing or invalid key. Details: {e}") from e


def default_config() -> Config:
    """Returns the built-in configuration used when no file is given."""
    return _build(
        {section: dict(values) for section, values in DEFAULT_CONFIG_DICT.items()}
    )


# impure
def load_config(config_path: Path) -> Config:
    """
    Loads and validates a YAML configuration file into a Config object.
    #impure: Reads from the filesystem.
    """
    if not config_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in {config_path}: {e}") from e

    return _build(raw_config)
