import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env once, globally
load_dotenv()

# Project root (independent of current working directory).
PROJECT_ROOT = Path(__file__).resolve().parents[3]

def resolve_dir(env_key: str, default: str) -> Path:
    """
    Resolve a directory path from ENV.
    Relative paths are resolved against PROJECT_ROOT.
    """
    path = Path(os.getenv(env_key, default))
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


TABLES_DIR     = resolve_dir("REGEXP_TABLE_TABLES_DIR", "tables")
TABLE_ENCODING = os.getenv("REGEXP_TABLE_ENCODING", "utf-8")
TABLE_SUFFIX   = os.getenv("REGEXP_TABLE_SUFFIX", ".regexp")
LOG_LEVEL      = os.getenv("REGEXP_TABLE_LOG_LEVEL", "WARNING")
