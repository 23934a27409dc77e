"""
Base database connection management.

Every record store is backed by one table in a single SQLite file.
Optimized for SQLite concurrency with WAL mode and busy_timeout.

Database instantiation should go through the DI layer
(core.dependencies.get_database) so tests can substitute their own.
"""
import logging
import re
import sqlite3
from pathlib import Path
from typing import Optional

from core.config import DATABASE_PATH, DATABASE_BUSY_TIMEOUT

logger = logging.getLogger(__name__)

_TABLE_NAME_RE = re.compile(r"^[a-z_][a-z0-9_]*$")


class Database:
    """
    SQLite database connection manager.

    Features:
    - WAL mode for concurrent readers alongside the writer
    - Busy timeout to wait out lock contention instead of failing
    - Record tables created on demand by the stores that own them

    Usage:
        from core.dependencies import get_database
        db = get_database()

        # Direct instantiation (for testing):
        db = Database(db_path="/tmp/test.db")
    """

    def __init__(self, db_path: Optional[str] = None, busy_timeout: Optional[int] = None):
        """
        Args:
            db_path: Path to SQLite database file. Defaults to config DATABASE_PATH.
            busy_timeout: SQLite busy timeout in milliseconds. Defaults to config value.
        """
        self.db_path = db_path or DATABASE_PATH
        self.busy_timeout = busy_timeout if busy_timeout is not None else DATABASE_BUSY_TIMEOUT

        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _configure_connection(self, conn: sqlite3.Connection) -> None:
        conn.execute(f"PRAGMA busy_timeout = {int(self.busy_timeout)}")

    def _init_db(self) -> None:
        """Enable WAL mode. The setting persists in the database file."""
        conn = sqlite3.connect(self.db_path)
        try:
            self._configure_connection(conn)
            result = conn.execute("PRAGMA journal_mode = WAL").fetchone()
            if result and result[0].lower() == "wal":
                logger.info(f"SQLite WAL mode enabled for {self.db_path}")
            else:
                logger.warning(f"Failed to enable WAL mode, current mode: {result}")
        finally:
            conn.close()

        logger.info(
            f"Database initialized: {self.db_path} "
            f"(busy_timeout={self.busy_timeout}ms)"
        )

    def ensure_record_table(self, table: str) -> None:
        """
        Create a record table if it does not exist yet.

        Rows keep insertion order through the `seq` column; `id` is the
        record key and may never repeat.

        Args:
            table: Table name (lowercase identifier).

        Raises:
            ValueError: If the table name is not a plain identifier.
        """
        if not _TABLE_NAME_RE.match(table):
            raise ValueError(f"Invalid table name: {table!r}")

        conn = self.get_connection()
        try:
            conn.execute(f"""
                CREATE TABLE IF NOT EXISTS {table} (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    id TEXT UNIQUE NOT NULL,
                    data TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def get_connection(self) -> sqlite3.Connection:
        """
        Get a new database connection with the busy timeout applied.

        Returns:
            sqlite3.Connection: A new connection; callers close it.
        """
        conn = sqlite3.connect(self.db_path)
        self._configure_connection(conn)
        return conn
