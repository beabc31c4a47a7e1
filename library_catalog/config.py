import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Catalog settings
    loan_days: int = int(os.getenv("LIBRARY_LOAN_DAYS", "14"))
    first_book_id: int = int(os.getenv("LIBRARY_FIRST_BOOK_ID", "1001"))
    seed_sample_books: bool = _env_flag("LIBRARY_SEED_SAMPLE_BOOKS", "True")

    # Logging settings
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Management System")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "False")


settings = Settings()
