import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_CAPACITY = 1024
DEFAULT_PREFIXES = ("CS", "MATH")
ALL_COURSES = "*"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


class Settings(BaseModel):
    catalog_path: Optional[str] = None
    initial_capacity: int = DEFAULT_CAPACITY
    display_prefixes: List[str] = Field(default_factory=lambda: list(DEFAULT_PREFIXES))
    clear_screen: bool = True


def parse_bool(name, raw):
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got: {raw}")


def get_settings(env_file=None):
    """Load catalog settings from the environment and a .env file, if present.

    Args:
        env_file: explicit .env path; by default python-dotenv searches for one

    Raises:
        ValueError: if a variable is set to something that cannot be parsed
    """
    load_dotenv(env_file)

    settings = Settings()

    catalog_path = os.getenv("CATALOG_PATH")
    if catalog_path:
        settings.catalog_path = catalog_path.strip()

    raw_capacity = os.getenv("CATALOG_INITIAL_CAPACITY")
    if raw_capacity:
        try:
            settings.initial_capacity = int(raw_capacity)
        except ValueError:
            raise ValueError(
                f"CATALOG_INITIAL_CAPACITY must be an integer, got: {raw_capacity}"
            )
        if settings.initial_capacity <= 0:
            raise ValueError("CATALOG_INITIAL_CAPACITY must be a positive integer")

    raw_prefixes = os.getenv("CATALOG_DISPLAY_PREFIXES")
    if raw_prefixes and raw_prefixes.strip() == ALL_COURSES:
        settings.display_prefixes = []
    elif raw_prefixes:
        prefixes = [p.strip().upper() for p in raw_prefixes.split(",") if p.strip()]
        if not prefixes:
            raise ValueError(
                "CATALOG_DISPLAY_PREFIXES must name at least one prefix, or * for all courses"
            )
        settings.display_prefixes = prefixes

    raw_clear = os.getenv("CATALOG_CLEAR_SCREEN")
    if raw_clear:
        settings.clear_screen = parse_bool("CATALOG_CLEAR_SCREEN", raw_clear)

    return settings
