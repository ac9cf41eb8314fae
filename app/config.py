"""
Chromalens Configuration
Manages environment variables and defaults for the color inspection service.
"""
import os
from typing import List


class Config:
    """Configuration class for Chromalens services."""

    # Service identity
    SERVICE_NAME: str = "chromalens"
    VERSION: str = os.environ.get("CHROMALENS_VERSION", "1.0.0")

    # Server
    HOST: str = os.environ.get("CHROMALENS_HOST", "127.0.0.1")
    PORT: int = int(os.environ.get("CHROMALENS_PORT", "8000"))

    # Logging
    LOG_LEVEL: str = os.environ.get("CHROMALENS_LOG_LEVEL", "INFO")

    # Palette generation defaults
    DEFAULT_PALETTE_COUNT: int = int(os.environ.get("CHROMALENS_DEFAULT_PALETTE_COUNT", "5"))
    MAX_PALETTE_COUNT: int = int(os.environ.get("CHROMALENS_MAX_PALETTE_COUNT", "64"))
    DEFAULT_GRADIENT_STEPS: int = int(os.environ.get("CHROMALENS_DEFAULT_GRADIENT_STEPS", "5"))
    DEFAULT_TARGET_CONTRAST: float = float(os.environ.get("CHROMALENS_DEFAULT_TARGET_CONTRAST", "4.5"))

    # Swatch rendering
    SWATCH_SVG_SIZE: int = int(os.environ.get("CHROMALENS_SWATCH_SVG_SIZE", "200"))
    SWATCH_CHIP_SIZE: int = int(os.environ.get("CHROMALENS_SWATCH_CHIP_SIZE", "40"))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get(
        "CHROMALENS_ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173"
    )

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("CHROMALENS_METRICS_ENABLED", "1")))

    # Supported palette export formats
    EXPORT_FORMATS = ["json", "css", "scss", "tailwind", "adobe", "text"]

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """Split configured CORS origins into a list."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def validate_export_format(cls, export_format: str) -> bool:
        """Validate palette export format."""
        return export_format in cls.EXPORT_FORMATS

    @classmethod
    def validate_target_contrast(cls, target: float) -> bool:
        """Validate target contrast ratio (WCAG ratios live in [1, 21])."""
        return 1.0 <= target <= 21.0


# Global config instance
config = Config()
