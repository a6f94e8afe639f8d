"""
Central configuration for rules, engine tunables and logging.
Pydantic models give type-safe settings loaded from env vars or JSON files.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class RulesSettings(BaseModel):
    """Match-level rule settings."""

    first_to_move: str = Field(default="white", description="Color that opens the match (white or red)")
    allow_draw_offers: bool = Field(default=True, description="Allow players to offer and accept draws")

    @field_validator('first_to_move', mode='before')
    @classmethod
    def validate_first_to_move(cls, v):
        v_lower = str(v).strip().lower()
        if v_lower not in ('white', 'red'):
            raise ValueError("first_to_move must be 'white' or 'red'")
        return v_lower


class EngineSettings(BaseModel):
    """Move generation settings."""

    memoize_captures: bool = Field(default=True, description="Memoize (board, piece) capture sub-searches within a query")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="damas.log", description="Log file path")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class DamasConfig(BaseModel):
    """Main configuration model for the draughts engine."""

    rules: RulesSettings = Field(default_factory=RulesSettings)
    engine: EngineSettings = Field(default_factory=EngineSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Metadata
    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'DamasConfig':
        """Create configuration from environment variables."""
        return cls(
            rules=RulesSettings(
                first_to_move=os.getenv('DAMAS_FIRST_TO_MOVE', 'white'),
                allow_draw_offers=os.getenv('DAMAS_DRAW_OFFERS', 'true').lower() == 'true',
            ),
            engine=EngineSettings(
                memoize_captures=os.getenv('DAMAS_MEMOIZE', 'true').lower() == 'true',
            ),
            logging=LoggingSettings(
                log_level=os.getenv('DAMAS_LOG_LEVEL', 'INFO'),
                log_to_file=os.getenv('DAMAS_LOG_FILE', 'false').lower() == 'true',
            )
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'rules': self.rules.model_dump(),
            'engine': self.engine.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'DamasConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            rules=RulesSettings(**data.get('rules', {})),
            engine=EngineSettings(**data.get('engine', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: Dict[str, Any]) -> None:
        """Update configuration from dictionary."""
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                for key, value in settings.items():
                    if hasattr(section_model, key):
                        setattr(section_model, key, value)


# Global configuration instance
_config: Optional[DamasConfig] = None


def get_config() -> DamasConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = DamasConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> DamasConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = DamasConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


def get_rules_settings() -> RulesSettings:
    return get_config().rules


def get_engine_settings() -> EngineSettings:
    return get_config().engine


def get_logging_settings() -> LoggingSettings:
    return get_config().logging


def setup_logging() -> None:
    """Configure root logging once from the logging settings."""
    if getattr(setup_logging, "_configured", False):
        return
    settings = get_logging_settings()
    level: int = getattr(logging, settings.log_level, logging.INFO)
    handlers: list = [logging.StreamHandler()]
    if settings.log_to_file:
        handlers.append(logging.FileHandler(settings.log_file_path))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
