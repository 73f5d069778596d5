from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Codec settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="DECKCODE_", env_file=".env")

    # Reject tokens whose format nibble is not the known discriminator.
    # Default: False (historical tokens decode regardless of format nibble)
    strict_format: bool = False


settings = Settings()
