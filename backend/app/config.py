from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "HSN Code Validator"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Catalog source (empty path = bundled sample catalog)
    HSN_CATALOG_PATH: str = ""
    HSN_CATALOG_CODE_COLUMN: str = "HSN Code"
    HSN_CATALOG_DESCRIPTION_COLUMN: str = "Description"
    HSN_CATALOG_ENCODING: str = "utf-8-sig"

    # Validation
    HSN_CODE_DELIMITER: str = Field(default=",", min_length=1)
    HSN_HIERARCHY_CHECK: bool = False
    HSN_HIERARCHY_SCOPE: Literal["tariff_item", "all_levels"] = "tariff_item"

    # API settings
    HSN_MAX_BATCH_CODES: int = 500

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
