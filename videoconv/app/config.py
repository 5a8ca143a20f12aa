"""
Application Configuration
=========================
Immutable configuration injected into the request controller.
"""

from dataclasses import dataclass, field
from pathlib import Path

from videoconv.app.catalog import FormatCatalog


DEFAULT_SERVICE_URL = "https://server-qm7m.onrender.com/convert"


@dataclass(frozen=True)
class AppConfig:
    """
    Application configuration.

    Attributes:
        catalog: Supported container formats (source and target)
        service_url: Endpoint of the remote conversion service
        request_timeout: Seconds to wait for the service response
        progress_interval: Seconds between simulated progress ticks
        progress_max_step: Largest random increment per tick
        progress_ceiling: Estimates stay strictly below this while waiting
        reset_delay: Seconds a terminal state stays visible before auto-reset
        output_dir: Directory converted files are saved into
    """

    catalog: FormatCatalog = field(default_factory=FormatCatalog)

    # Remote service
    service_url: str = DEFAULT_SERVICE_URL
    request_timeout: float = 300.0

    # Progress estimation
    progress_interval: float = 0.2
    progress_max_step: float = 10.0
    progress_ceiling: float = 90.0

    # Lifecycle
    reset_delay: float = 3.0

    # Delivery
    output_dir: Path = field(default_factory=lambda: Path.home() / "Downloads")

    def __post_init__(self):
        """Validate timing constants."""
        if self.progress_interval <= 0:
            raise ValueError(f"progress_interval must be positive, got {self.progress_interval}")
        if self.progress_max_step <= 0:
            raise ValueError(f"progress_max_step must be positive, got {self.progress_max_step}")
        if not 0 < self.progress_ceiling < 100:
            raise ValueError(f"progress_ceiling must be in (0, 100), got {self.progress_ceiling}")
        if self.reset_delay < 0:
            raise ValueError(f"reset_delay cannot be negative, got {self.reset_delay}")
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "AppConfig":
        """
        Create config from dictionary.

        Args:
            config_dict: Configuration dictionary

        Returns:
            AppConfig instance
        """
        processed = {}

        for key, value in config_dict.items():
            if key == "output_dir" and value is not None:
                processed[key] = Path(value).expanduser()
            elif key == "catalog" and not isinstance(value, FormatCatalog):
                processed[key] = FormatCatalog(tuple(value))
            else:
                processed[key] = value

        return cls(**processed)

    def to_dict(self) -> dict:
        """
        Convert config to dictionary.

        Returns:
            Configuration dictionary
        """
        return {
            "catalog": list(self.catalog.formats),
            "service_url": self.service_url,
            "request_timeout": self.request_timeout,
            "progress_interval": self.progress_interval,
            "progress_max_step": self.progress_max_step,
            "progress_ceiling": self.progress_ceiling,
            "reset_delay": self.reset_delay,
            "output_dir": str(self.output_dir),
        }
