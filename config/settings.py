from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    APP_NAME: str = "ArtVault"
    DEBUG: bool = False

    # Catalog
    PLACEHOLDER_IMAGE_URL: str = (
        "https://images.unsplash.com/photo-1460661419201-fd4cecdf8a8b?w=800&h=600&fit=crop"
    )
    # Seed prices are whole dollars drawn from [MIN, MAX]
    SEED_PRICE_MIN_DOLLARS: int = 1000
    SEED_PRICE_MAX_DOLLARS: int = 5000
    SEED_RANDOM_SEED: int | None = None  # None = fresh prices every session

    # Auction
    BID_INCREMENT_HINT_CENTS: int = 10_000  # placeholder hint only, not enforced
    SELF_BIDDER_LABEL: str = "You"


settings = Settings()
