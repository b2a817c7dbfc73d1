from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "TintThat"
    debug: bool = False

    # Application-private directory holding collection files and the session pointer
    data_dir: Path = Path("data")

    default_palette_title: str = "My Palette"
    added_palette_title: str = "Added"


settings = Settings()


# =============================================================================
# STORAGE LAYOUT
# =============================================================================

COLLECTIONS_DIRNAME = "collections"
COLLECTION_FILE_SUFFIX = ".json"
SESSION_FILENAME = "session.json"
