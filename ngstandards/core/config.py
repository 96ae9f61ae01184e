"""ngstandards runtime configuration and settings."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

TRUTHY = ("1", "true", "yes", "on")


@dataclass
class NgStandardsConfig:
    """Runtime configuration for project generation.

    Attributes:
        strict_placeholders: Fail on placeholders without a value instead of
            rendering them as empty strings (default: False)
        templates_dir: Directory holding template files (default: bundled templates)
        mock: Log external commands instead of running them (default: False)
        npx: Executable used to launch the Angular CLI (default: npx)
        log_file: Log file used when file logging is enabled
    """

    strict_placeholders: bool = False
    templates_dir: Optional[Path] = None
    mock: bool = False
    npx: str = "npx"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "NgStandardsConfig":
        """Create config from environment variables.

        Environment variables:
            NGSTD_STRICT_PLACEHOLDERS: Enable strict placeholder substitution
            NGSTD_TEMPLATES_DIR: Override the template directory
            NGSTD_MOCK: Set to 1 to skip running external commands
            NGSTD_NPX: Executable used for `npx @angular/cli new`
            NGSTD_LOG_FILE: Log file path

        Returns:
            NgStandardsConfig instance with values from environment or defaults
        """
        templates_dir = os.getenv("NGSTD_TEMPLATES_DIR")
        return cls(
            strict_placeholders=os.getenv("NGSTD_STRICT_PLACEHOLDERS", "").lower() in TRUTHY,
            templates_dir=Path(templates_dir) if templates_dir else None,
            mock=os.getenv("NGSTD_MOCK") == "1",
            npx=os.getenv("NGSTD_NPX", cls.npx),
            log_file=os.getenv("NGSTD_LOG_FILE") or None,
        )


# Global config instance (can be overridden)
_config: Optional[NgStandardsConfig] = None


def get_config() -> NgStandardsConfig:
    """Get the global configuration.

    Returns:
        NgStandardsConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = NgStandardsConfig.from_env()
    return _config


def set_config(config: Optional[NgStandardsConfig]):
    """Set the global configuration.

    Args:
        config: NgStandardsConfig instance to use globally, or None to
            re-read the environment on next access
    """
    global _config
    _config = config
