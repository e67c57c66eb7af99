from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "recipe-costing"
    env: str = "local"
    log_level: str = "INFO"

    database_dsn: str = "sqlite:///./recipe_costing.db"

    # Nutrient facts are re-expressed per this many base units (e.g. per 100 g).
    nutrient_basis_amount: float = 100.0

    # Grams per millilitre used for the one cross-kind table entry.
    millilitre_to_gram_ratio: float = 1.0

    comparison_tolerance: float = 1e-6

    class Config:
        env_file = ".env"


settings = Settings()
