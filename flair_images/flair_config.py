"""
FlairConfig - Configuration for the image store and flair database.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class FlairConfig:
    """
    Configuration for flair image management.

    Attributes:
        image_path: Directory holding the image variants
        db_host: MySQL host
        db_port: MySQL port
        db_user: MySQL user
        db_password: MySQL password
        db_name: Database name
        table_prefix: Prefix of the flair table (e.g. 'phpbb_')
        pool_size: Connection pool size
    """
    image_path: str = 'images/flair'
    db_host: Optional[str] = None
    db_port: int = 3306
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_name: Optional[str] = None
    table_prefix: str = 'phpbb_'
    pool_size: int = 4

    @classmethod
    def from_env(cls) -> 'FlairConfig':
        """Create configuration from FLAIR_* environment variables."""
        return cls(
            image_path=os.environ.get('FLAIR_IMAGE_PATH', 'images/flair'),
            db_host=os.environ.get('FLAIR_DB_HOST'),
            db_port=int(os.environ.get('FLAIR_DB_PORT', '3306')),
            db_user=os.environ.get('FLAIR_DB_USER'),
            db_password=os.environ.get('FLAIR_DB_PASSWORD'),
            db_name=os.environ.get('FLAIR_DB_NAME'),
            table_prefix=os.environ.get('FLAIR_TABLE_PREFIX', 'phpbb_'),
            pool_size=int(os.environ.get('FLAIR_DB_POOL_SIZE', '4')),
        )

    @property
    def has_database(self) -> bool:
        return bool(self.db_host and self.db_user and self.db_name)

    def validate(self, require_db: bool = False) -> List[str]:
        """
        Validate configuration.

        Args:
            require_db: Also require database settings

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        if not self.image_path:
            errors.append("FLAIR_IMAGE_PATH is required")
        if self.pool_size < 1:
            errors.append("FLAIR_DB_POOL_SIZE must be at least 1")
        if require_db:
            if not self.db_host:
                errors.append("FLAIR_DB_HOST is required")
            if not self.db_user:
                errors.append("FLAIR_DB_USER is required")
            if not self.db_name:
                errors.append("FLAIR_DB_NAME is required")
        return errors
