"""Configuration loading utilities."""

import os
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from archor.utils.logging import get_logger

if TYPE_CHECKING:
    from archor.models.config import ArchorConfig

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

CONFIG_ENV_VAR = "ARCHOR_CONFIG"


def load_yaml_config(file_path: Path | str, model_class: type[T]) -> T:
    """
    Load and validate YAML configuration file.

    Args:
        file_path: Path to YAML configuration file
        model_class: Pydantic model class to validate against

    Returns:
        Validated configuration instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
        yaml.YAMLError: If YAML is malformed

    Examples:
        >>> from archor.models.config import ArchorConfig
        >>> config = load_yaml_config("config/archor.yaml", ArchorConfig)
    """
    path = Path(file_path)

    if not path.exists():
        logger.error("Configuration file not found", path=str(path))
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("r") as f:
            raw_config = yaml.safe_load(f)

        # An empty file means "all defaults"
        config = model_class.model_validate(raw_config or {})
        logger.info("Configuration loaded", path=str(path), model=model_class.__name__)
        return config

    except yaml.YAMLError as e:
        logger.error("Invalid YAML syntax", path=str(path), error=str(e))
        raise

    except ValidationError as e:
        logger.error("Configuration validation failed", path=str(path), error=str(e))
        raise


def load_archor_config(file_path: Path | str | None = None) -> "ArchorConfig":
    """
    Load archor configuration.

    When no path is given the ARCHOR_CONFIG environment variable (also read
    from a .env file) is used; without it every setting keeps its default.

    Args:
        file_path: Path to archor.yaml file

    Returns:
        ArchorConfig instance
    """
    from archor.models.config import ArchorConfig

    if file_path is None:
        load_dotenv()
        file_path = os.getenv(CONFIG_ENV_VAR)

    if file_path is None:
        logger.debug("No configuration file, using defaults")
        return ArchorConfig()

    return load_yaml_config(file_path, ArchorConfig)
