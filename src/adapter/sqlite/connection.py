import logging
import os
import sys
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from adapter.sqlite import DATABASE_FILE_NAME, DEFAULT_POOL_SIZE

logger = logging.getLogger(__name__)

APP_DIR_NAME = 'wordbook'


def resolve_data_dir() -> Path:
    """Resolve the per-user data directory.

    WORDBOOK_DATA_DIR wins when set. Otherwise the platform's usual
    application data location is used.
    """
    override = os.getenv('WORDBOOK_DATA_DIR')
    if override:
        return Path(override).expanduser()

    if sys.platform == 'win32':
        base = Path(os.getenv('APPDATA') or Path.home() / 'AppData' / 'Roaming')
    elif sys.platform == 'darwin':
        base = Path.home() / 'Library' / 'Application Support'
    else:
        base = Path(os.getenv('XDG_DATA_HOME') or Path.home() / '.local' / 'share')
    return base / APP_DIR_NAME


def ensure_data_dir(data_dir: Path) -> Path:
    """Create the data directory if it does not exist yet."""
    if data_dir.exists():
        logger.info("[SQLITE] Data directory already exists", extra={"data_dir": str(data_dir)})
    else:
        logger.info("[SQLITE] Creating data directory", extra={"data_dir": str(data_dir)})
        data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_pool_size() -> int:
    """Pool size from WORDBOOK_DB_POOL_SIZE, DEFAULT_POOL_SIZE if unset or invalid."""
    raw = os.getenv('WORDBOOK_DB_POOL_SIZE')
    if not raw:
        return DEFAULT_POOL_SIZE
    try:
        size = int(raw)
    except ValueError:
        size = 0
    if size < 1:
        # QueuePool reads 0 as unbounded
        logger.warning(
            "[SQLITE] Invalid WORDBOOK_DB_POOL_SIZE, using default",
            extra={"value": raw, "default": DEFAULT_POOL_SIZE},
        )
        return DEFAULT_POOL_SIZE
    return size


def create_sqlite_engine(db_path: Path, pool_size: int | None = None) -> Engine:
    """Create an engine over a bounded connection pool.

    Concurrent writers queue for one of pool_size connections and then
    serialize inside SQLite; overflow connections are not allowed.

    Raises:
        ValueError: If pool_size is given and below 1.
    """
    size = get_pool_size() if pool_size is None else pool_size
    if size < 1:
        raise ValueError(f"pool_size must be at least 1, got {size}")
    engine = create_engine(
        f"sqlite:///{db_path}",
        poolclass=QueuePool,
        pool_size=size,
        max_overflow=0,
        connect_args={"check_same_thread": False},  # pooled connections cross threads
    )
    logger.info("[SQLITE] Engine created", extra={"db_path": str(db_path), "pool_size": size})
    return engine


def open_default_engine() -> Engine:
    """Engine for the database file inside the resolved data directory."""
    data_dir = ensure_data_dir(resolve_data_dir())
    return create_sqlite_engine(data_dir / DATABASE_FILE_NAME)
