# (c) Copyright Datacraft, 2026
"""Apply a YAML logging configuration."""
import logging
import os
from logging.config import dictConfig
from pathlib import Path

import yaml

from policyengine.core.config import get_settings

logger = logging.getLogger(__name__)

LOGGING_CFG_ENV = "POLICYENGINE_LOGGING_CFG"


def _resolve_path(path: Path | None) -> Path | None:
	if path is not None:
		return Path(path)
	configured = get_settings().log_config
	if configured is not None:
		return configured
	env_path = os.environ.get(LOGGING_CFG_ENV)
	return Path(env_path) if env_path else None


def configure_logging(path: Path | None = None) -> bool:
	"""
	Load a logging dictConfig from a YAML file.

	The file is taken from ``path``, then ``Settings.log_config``, then the
	POLICYENGINE_LOGGING_CFG environment variable. Returns False when no
	file is found.
	"""
	logging_config_path = _resolve_path(path)
	if logging_config_path is None:
		return False

	if not (logging_config_path.exists() and logging_config_path.is_file()):
		logger.debug(f"Logging config {logging_config_path} not found, skipping")
		return False

	with open(logging_config_path, "r") as stream:
		config = yaml.load(stream, Loader=yaml.FullLoader)

	dictConfig(config)
	logger.debug(f"Logging configured from {logging_config_path}")
	return True
