"""
FlairDb - Read-only queries against the flair table.
"""

import logging
from typing import Optional, Protocol, Set

import mysql.connector
from mysql.connector import pooling
from retrying import retry

from .flair_config import FlairConfig

# flair_type value for image flair (as opposed to font icons)
FLAIR_TYPE_IMAGE = 1


class UsageRepository(Protocol):
    """What the catalog needs from the persistence layer."""

    def count_where(self, flair_type: int, image: str) -> int: ...

    def distinct_images(self, flair_type: int) -> Set[str]: ...


class FlairDb:
    """
    Counts and lists flair records that reference image files.

    The connection pool is created on first use.
    """

    def __init__(self, config: FlairConfig, logger: Optional[logging.Logger] = None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.connection_pool = None

    @property
    def flair_table(self) -> str:
        return f"{self.config.table_prefix}flair"

    def initialize_pool(self):
        """
        Initialize the connection pool lazily if it hasn't been created yet.
        """
        if not self.connection_pool:
            self.logger.debug("Initializing connection pool...")
            try:
                self.connection_pool = pooling.MySQLConnectionPool(
                    pool_name="flair_db_pool",
                    pool_size=self.config.pool_size,
                    user=self.config.db_user,
                    password=self.config.db_password,
                    host=self.config.db_host,
                    port=self.config.db_port,
                    database=self.config.db_name,
                )
            except mysql.connector.Error as err:
                self.logger.error(f"Failed to initialize connection pool: {err}")
                raise

    @retry(retry_on_exception=lambda e: isinstance(e, mysql.connector.Error), stop_max_attempt_number=3, wait_exponential_multiplier=1000)
    def get_cursor(self):
        """
        Get a connection from the pool and create a cursor.
        """
        try:
            self.initialize_pool()
            connection = self.connection_pool.get_connection()
            return connection.cursor(buffered=True), connection
        except mysql.connector.Error as e:
            self.logger.warning(f"Error getting cursor: {e}")
            raise

    def close_connection(self, connection):
        """
        Return a connection to the pool.
        """
        if connection:
            try:
                connection.close()
            except mysql.connector.Error as e:
                self.logger.warning(f"Error closing connection: {e}")

    def count_where(self, flair_type: int, image: str) -> int:
        """Count flair of the given type whose image is exactly image."""
        cursor, connection = None, None
        try:
            query = (f"SELECT COUNT(flair_id) FROM {self.flair_table} "
                     "WHERE flair_type = %s AND flair_img = %s")
            self.logger.debug(f"SQL: {query} ({flair_type}, {image!r})")

            cursor, connection = self.get_cursor()
            cursor.execute(query, (flair_type, image))
            row = cursor.fetchone()
            return int(row[0]) if row else 0
        except mysql.connector.Error as e:
            self.logger.error(f"Error counting image references: {e}")
            raise
        finally:
            if cursor:
                cursor.close()
            if connection:
                self.close_connection(connection)

    def distinct_images(self, flair_type: int) -> Set[str]:
        """Distinct image names referenced by flair of the given type."""
        cursor, connection = None, None
        try:
            query = f"SELECT DISTINCT flair_img FROM {self.flair_table} WHERE flair_type = %s"
            self.logger.debug(f"SQL: {query} ({flair_type})")

            cursor, connection = self.get_cursor()
            cursor.execute(query, (flair_type,))
            return {row[0] for row in cursor.fetchall() if row[0]}
        except mysql.connector.Error as e:
            self.logger.error(f"Error listing used images: {e}")
            raise
        finally:
            if cursor:
                cursor.close()
            if connection:
                self.close_connection(connection)
