"""fish-i18n configuration settings."""

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOCALE_DIR = Path(__file__).resolve().parents[1] / "locales"

CATALOG_FORMATS = ("yaml", "gettext")


class I18nSettings(BaseSettings):
    """Translation catalog settings.

    Environment Variables:
        FISH_I18N_ENABLED: Build with translation support (default: True)
        FISH_I18N_LOCALE_DIR: Directory holding the catalogs (default: bundled locales)
        FISH_I18N_CATALOG_FORMAT: Catalog format, "yaml" or "gettext" (default: yaml)
    """

    ENABLED: bool = Field(default=True, alias="FISH_I18N_ENABLED")
    LOCALE_DIR: str = Field(
        default=str(DEFAULT_LOCALE_DIR), alias="FISH_I18N_LOCALE_DIR"
    )
    CATALOG_FORMAT: str = Field(default="yaml", alias="FISH_I18N_CATALOG_FORMAT")

    @field_validator("CATALOG_FORMAT", mode="before")
    @classmethod
    def _validate_catalog_format(cls, v: str) -> str:
        value = str(v).strip().lower()
        if value not in CATALOG_FORMATS:
            raise ValueError(
                f"Unsupported catalog format: {v} (expected one of {', '.join(CATALOG_FORMATS)})"
            )
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class Settings(BaseSettings):
    """fish-i18n configuration settings."""

    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "console"

    i18n: I18nSettings

    @property
    def json_logs(self) -> bool:
        """Check if logs should be rendered as JSON."""
        return self.LOG_FORMAT.lower() == "json"

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


def load_settings() -> Settings:
    """Build the settings from the environment.

    An invalid translation setting (e.g. FISH_I18N_CATALOG_FORMAT=xliff or
    FISH_I18N_ENABLED=maybe) yields settings without translation support,
    so messages still resolve to themselves instead of failing at import.
    """
    try:
        return Settings()
    except ValidationError:
        return Settings(i18n=I18nSettings.model_construct(ENABLED=False))


# Create the settings instance
settings = load_settings()
