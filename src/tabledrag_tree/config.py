# src/tabledrag_tree/config.py
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    app_name: str = "TableDrag Tree API"
    debug: bool = False

    database_url: str = "sqlite:///./tabledrag.db"

    # Only rows with id < item_id_limit are shown in the tree. None shows everything.
    item_id_limit: Optional[int] = None

    indent_unit: str = "    "

    log_level: str = "INFO"
    log_dir: Optional[str] = None


# ✅ Create a single `Settings` instance
settings = Settings()
