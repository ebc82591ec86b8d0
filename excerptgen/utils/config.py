"""
Configuration System for excerptgen.

This module provides a single configuration object covering logging,
rendering behaviour and the optional capabilities reported to excerpts,
loaded from a JSON or YAML file with environment variable overrides.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass

import yaml

from .logging import get_logger, setup_logging

logger = get_logger(__name__)

DEFAULT_GENERATED_ANNOTATION = "javax.annotation.Generated"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "excerptgen.log"


@dataclass
class GenerationConfig:
    """Rendering pass configuration."""

    check_duplicate_static_excerpts: bool = True
    line_separator: str = "\n"


@dataclass
class FeatureConfig:
    """Optional capabilities available in the target environment."""

    # Marker type for the generated annotation, None when unsupported
    generated_annotation: Optional[str] = DEFAULT_GENERATED_ANNOTATION


class ExcerptgenConfig:
    """
    Unified configuration manager for excerptgen.

    Options are read from a single JSON or YAML file. Missing sections
    fall back to the dataclass defaults.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.logging = self._create_logging_config()
        self.generation = self._create_generation_config()
        self.features = self._create_feature_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        # Default location: try YAML first, then JSON
        config_dir = Path(__file__).parent
        yaml_config = config_dir / "excerptgen_config.yaml"
        json_config = config_dir / "excerptgen_config.json"

        if yaml_config.exists():
            return yaml_config
        return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.debug(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r") as f:
                if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return {}

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data or {}

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging") or {}

        return LoggingConfig(
            level=log_data.get("level", "INFO"),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", "excerptgen.log"),
        )

    def _create_generation_config(self) -> GenerationConfig:
        """Create generation configuration from loaded data."""
        gen_data = self._config_data.get("generation") or {}

        # Check environment variable override
        env_disabled = os.getenv("EXCERPTGEN_DISABLE_DUPLICATE_CHECK", "").lower() in ("1", "true", "yes")
        check_duplicates = not env_disabled and gen_data.get("check_duplicate_static_excerpts", True)

        return GenerationConfig(
            check_duplicate_static_excerpts=check_duplicates,
            line_separator=gen_data.get("line_separator", "\n"),
        )

    def _create_feature_config(self) -> FeatureConfig:
        """Create feature configuration from loaded data."""
        feature_data = self._config_data.get("features") or {}
        generated = feature_data.get("generated_annotation", DEFAULT_GENERATED_ANNOTATION)

        # An empty variable disables the annotation
        env_generated = os.getenv("EXCERPTGEN_GENERATED_ANNOTATION")
        if env_generated is not None:
            generated = env_generated or None

        return FeatureConfig(generated_annotation=generated)

    def apply_logging(self) -> None:
        """Reconfigure package logging from the logging section."""
        log_file = self.logging.log_file if self.logging.enable_file_logging else None
        setup_logging(level=self.logging.level, log_file=log_file)

    def is_duplicate_check_enabled(self) -> bool:
        """Check if colliding static excerpts are rejected."""
        return self.generation.check_duplicate_static_excerpts

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a serializable dictionary."""
        return {
            "version": "1.0",
            "description": "excerptgen configuration",
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
            "generation": {
                "check_duplicate_static_excerpts": self.generation.check_duplicate_static_excerpts,
                "line_separator": self.generation.line_separator,
            },
            "features": {
                "generated_annotation": self.features.generated_annotation,
            },
        }

    def save_config(self) -> None:
        """Save current configuration to file."""
        with open(self.config_file, "w") as f:
            if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                yaml.safe_dump(self.to_dict(), f, sort_keys=False)
            else:
                json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Configuration saved to {self.config_file}")


# Global configuration instance
_global_config: Optional[ExcerptgenConfig] = None


def get_config() -> ExcerptgenConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = ExcerptgenConfig()
    return _global_config


def set_config(config: Optional[ExcerptgenConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> ExcerptgenConfig:
    """Load configuration from a specific file."""
    return ExcerptgenConfig(config_file)
