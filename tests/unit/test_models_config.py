"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from archor.models.config import ArchorConfig, LoggingConfig, ValidationConfig


class TestLoggingConfig:
    """Test LoggingConfig model."""

    def test_defaults(self) -> None:
        """Test console-only logging by default."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.file_path is None
        assert config.colorize is True

    def test_invalid_level(self) -> None:
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")  # type: ignore[arg-type]


class TestArchorConfig:
    """Test ArchorConfig model."""

    def test_defaults(self) -> None:
        """Test every section has defaults."""
        config = ArchorConfig()
        assert config.validation == ValidationConfig(fail_fast=False)
        assert config.logging == LoggingConfig()

    def test_partial(self) -> None:
        """Test a partial mapping fills in the rest."""
        config = ArchorConfig.model_validate({"validation": {"fail_fast": True}})
        assert config.validation.fail_fast is True
        assert config.logging.level == "INFO"
