"""
Configuration management for abstrie.
Centralized config loading and validation.
"""
import os
import re
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from loguru import logger


class VisualizationConfig(BaseSettings):
    """Tree rendering configuration."""

    token_separator: str = "-"
    sequence_ender: str = "."
    compress_paths: bool = True
    show_counts: bool = False

    model_config = SettingsConfigDict(env_prefix="VIS_")


class MergingConfig(BaseSettings):
    """Merge engine configuration."""

    enable_auto_merge: bool = True
    max_passes: int = Field(default=1, ge=1)

    model_config = SettingsConfigDict(env_prefix="MERGE_")


class MaskingRule(BaseModel):
    """A named token class recognised by a regular expression."""

    name: str = Field(..., min_length=1)
    pattern: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator('pattern')
    @classmethod
    def pattern_compiles(cls, v):
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid regular expression {v!r}: {e}")
        return v


def default_masking_rules() -> List[MaskingRule]:
    """Token classes used when no rules are configured. Order matters."""
    return [
        MaskingRule(name="IP", pattern=r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}"),
        MaskingRule(
            name="UUID",
            pattern=r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
        ),
        MaskingRule(name="HEX", pattern=r"0x[0-9a-fA-F]+"),
        MaskingRule(name="DATE", pattern=r"\d{4}-\d{2}-\d{2}"),
        MaskingRule(name="NUM", pattern=r"[-+]?\d+(?:\.\d+)?"),
    ]


class MaskingConfig(BaseSettings):
    """Configuration for the regex token-class strategy. Immutable once built."""

    rules: List[MaskingRule] = Field(default_factory=default_masking_rules)
    mask_prefix: str = "<"
    mask_suffix: str = ">"
    separator: str = " "

    model_config = SettingsConfigDict(env_prefix="MASK_", frozen=True)

    @field_validator('rules')
    @classmethod
    def rule_names_unique(cls, v):
        names = [rule.name for rule in v]
        if len(names) != len(set(names)):
            raise ValueError("Masking rule names must be unique")
        return v


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    level: str = "INFO"
    log_file: Optional[str] = None
    rotation: str = "100 MB"
    retention: str = "10 days"

    model_config = SettingsConfigDict(env_prefix="LOG_")

    @field_validator('level')
    @classmethod
    def level_known(cls, v):
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Config(BaseModel):
    """Main configuration class."""

    visualization: VisualizationConfig = Field(default_factory=VisualizationConfig)
    merging: MergingConfig = Field(default_factory=MergingConfig)
    masking: MaskingConfig = Field(default_factory=MaskingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, config_path: str) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Config object
        """
        # Load environment variables first
        load_dotenv()

        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r') as f:
            config_dict = yaml.safe_load(f) or {}

        config_dict = cls._replace_env_vars(config_dict)
        return cls.from_dict(config_dict)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Config":
        """Load configuration from dictionary."""
        return cls(
            visualization=VisualizationConfig(**config_dict.get('visualization', {})),
            merging=MergingConfig(**config_dict.get('merging', {})),
            masking=MaskingConfig(**config_dict.get('masking', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @staticmethod
    def _replace_env_vars(config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """Replace ${VAR} patterns with environment variables."""

        def replace_value(value):
            if isinstance(value, str):
                # Pattern: ${VAR_NAME} or ${VAR_NAME:default_value}
                pattern = r'\$\{([^:}]+)(?::([^}]+))?\}'

                def replacer(match):
                    var_name = match.group(1)
                    default_value = match.group(2)
                    env_value = os.getenv(var_name)

                    if env_value is not None:
                        return env_value
                    elif default_value is not None:
                        return default_value
                    else:
                        return match.group(0)  # Keep original if no env var

                return re.sub(pattern, replacer, value)
            elif isinstance(value, dict):
                return {k: replace_value(v) for k, v in value.items()}
            elif isinstance(value, list):
                return [replace_value(item) for item in value]
            return value

        return replace_value(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'visualization': self.visualization.model_dump(),
            'merging': self.merging.model_dump(),
            'masking': self.masking.model_dump(),
            'logging': self.logging.model_dump()
        }

    def save_to_yaml(self, output_path: str):
        """Save configuration to YAML file."""
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, indent=2)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from file or environment variables.

    Priority:
    1. Provided config_path
    2. Default locations (./config/abstrie.yaml, ./abstrie.yaml)
    3. Defaults overridden by environment variables

    Args:
        config_path: Optional path to YAML configuration file

    Returns:
        Config object

    Example:
        >>> config = load_config("config/abstrie.yaml")
        >>> config = load_config()  # Auto-detect
    """
    load_dotenv()

    if config_path:
        config_file = Path(config_path)
        if config_file.exists():
            return Config.from_yaml(str(config_file))
        else:
            raise FileNotFoundError(f"Config file not found: {config_path}")

    default_paths = [
        Path("config/abstrie.yaml"),
        Path("abstrie.yaml"),
    ]

    for path in default_paths:
        if path.exists():
            logger.debug(f"Loading configuration from {path}")
            return Config.from_yaml(str(path))

    return Config()


def create_default_config(output_path: str = "config/abstrie.yaml") -> Config:
    """
    Create a default configuration file.

    Args:
        output_path: Where to save the config file
    """
    config = Config()
    config.save_to_yaml(output_path)
    logger.info(f"Default configuration created at: {output_path}")
    return config
