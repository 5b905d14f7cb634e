"""Analysis configuration.

Thresholds and limits used by the profiler, scorer and recommendation
generator. Defaults reproduce the standard report; a YAML file can override
any of them.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class AnalysisConfig(BaseModel):
    """Tunable limits for a data quality analysis."""

    null_threshold: float = Field(
        default=20.0,
        ge=0.0,
        le=100.0,
        description="Null percentage above which a column is flagged (strict >)",
    )
    overall_quality_threshold: float = Field(
        default=70.0,
        ge=0.0,
        le=100.0,
        description="Overall quality below which an overall recommendation is added",
    )
    max_recommendations: int = Field(
        default=10, ge=0, description="Maximum recommendations per report"
    )
    preview_rows: int = Field(
        default=100, ge=0, description="Number of records kept as report preview"
    )
    sample_size: int = Field(
        default=5, ge=0, description="Sample values kept per column"
    )
    outlier_multiplier: float = Field(
        default=1.5, gt=0.0, description="IQR multiplier for outlier bounds"
    )
    min_outlier_values: int = Field(
        default=4,
        ge=1,
        description="Minimum numeric values before outlier detection runs",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


DEFAULT_CONFIG = AnalysisConfig()


def load_config_from_yaml(yaml_path: str | Path) -> AnalysisConfig:
    """Load and validate analysis configuration from a YAML file.

    Args:
        yaml_path: Path to the configuration YAML file

    Returns:
        Validated AnalysisConfig; an empty file yields the defaults

    Raises:
        ValidationError: If a value is out of range or a key is unknown
        FileNotFoundError: If file doesn't exist

    """
    import yaml

    yaml_file = Path(yaml_path)
    if not yaml_file.exists():
        msg = f"Config file not found: {yaml_file}"
        raise FileNotFoundError(msg)

    with yaml_file.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return AnalysisConfig(**data)


def save_config_to_yaml(config: AnalysisConfig, yaml_path: str | Path) -> None:
    """Save analysis configuration to a YAML file.

    Args:
        config: Configuration to save
        yaml_path: Output YAML file path

    """
    import yaml

    yaml_file = Path(yaml_path)
    yaml_file.parent.mkdir(parents=True, exist_ok=True)

    with yaml_file.open("w", encoding="utf-8") as f:
        yaml.dump(
            config.model_dump(),
            f,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
