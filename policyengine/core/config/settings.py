# (c) Copyright Datacraft, 2026
"""Policy engine settings."""
import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	log_config: Path | None = None

	# Level used when a context value fails conversion and the
	# owning condition is treated as unmet
	conversion_log_level: str = "WARNING"
	log_policy_verdicts: bool = True

	@field_validator("conversion_log_level")
	@classmethod
	def known_level(cls, value: str) -> str:
		level = value.upper()
		if not isinstance(logging.getLevelName(level), int):
			raise ValueError(f"Unknown log level: {value}")
		return level

	model_config = SettingsConfigDict(
		env_prefix='pe_',
		env_file='.env',
		env_file_encoding='utf-8',
		extra='ignore',
	)


_settings: Settings | None = None


def get_settings() -> Settings:
	global _settings
	if _settings is None:
		_settings = Settings()
	return _settings


def reset_settings() -> None:
	global _settings
	_settings = None
