"""
Command Line Interface for flair image management.
"""

import argparse
import logging
import os
from typing import List, Optional

from .asset_name import AssetName
from .backends import detect
from .catalog import AssetCatalog
from .exceptions import FlairImageError
from .flair_config import FlairConfig
from .flair_db import FlairDb
from .lifecycle import AssetLifecycleManager
from .reporter import Reporter
from .store import StoreProvisioner


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('mysql.connector').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)

    return logging.getLogger('flair_images')


def get_config(args: argparse.Namespace) -> FlairConfig:
    """Get configuration from environment and CLI overrides."""
    config = FlairConfig.from_env()

    if getattr(args, 'image_path', None):
        config.image_path = args.image_path
    if getattr(args, 'db_host', None):
        config.db_host = args.db_host
    if getattr(args, 'db_port', None):
        config.db_port = args.db_port
    if getattr(args, 'db_user', None):
        config.db_user = args.db_user
    if getattr(args, 'db_password', None):
        config.db_password = args.db_password
    if getattr(args, 'db_name', None):
        config.db_name = args.db_name
    if getattr(args, 'table_prefix', None):
        config.table_prefix = args.table_prefix

    return config


def load_config(args: argparse.Namespace, logger: logging.Logger, require_db: bool = False) -> Optional[FlairConfig]:
    """Build and validate configuration, logging any errors."""
    config = get_config(args)
    errors = config.validate(require_db=require_db)
    if errors:
        for error in errors:
            logger.error(error)
        return None
    return config


def build_catalog(config: FlairConfig, logger: logging.Logger) -> AssetCatalog:
    return AssetCatalog(config.image_path, FlairDb(config, logger), logger=logger)


def cmd_check(args: argparse.Namespace) -> int:
    """Execute check command."""
    logger = setup_logging(args.verbose)
    config = load_config(args, logger)
    if config is None:
        return 1

    status = 0
    if StoreProvisioner(logger=logger).ensure_writable(config.image_path):
        logger.info(f"Store writable: {config.image_path}")
    else:
        logger.error(f"Store not writable: {config.image_path}")
        status = 1

    kind = detect()
    if kind is None:
        logger.error("No image backend available")
        status = 1
    else:
        logger.info(f"Image backend: {kind.value}")

    return status


def cmd_add(args: argparse.Namespace) -> int:
    """Execute add command."""
    logger = setup_logging(args.verbose)
    config = load_config(args, logger)
    if config is None:
        return 1

    if not os.path.isfile(args.file):
        logger.error(f"File not found: {args.file}")
        return 1

    if not StoreProvisioner(logger=logger).ensure_writable(config.image_path):
        logger.error(f"Store not writable: {config.image_path}")
        return 1

    name = args.name or os.path.basename(args.file)
    try:
        manager = AssetLifecycleManager(config.image_path, logger=logger)
        asset = manager.add(name, args.file)
    except FlairImageError as e:
        logger.error(f"Could not add {name}: {e}")
        return 1

    print(asset)
    return 0


def cmd_delete(args: argparse.Namespace) -> int:
    """Execute delete command."""
    logger = setup_logging(args.verbose)
    config = load_config(args, logger, require_db=not args.force)
    if config is None:
        return 1

    try:
        asset = AssetName.parse(args.name, strict=False)
    except FlairImageError as e:
        logger.error(str(e))
        return 1

    if not args.force:
        count = build_catalog(config, logger).count_references(str(asset))
        if count > 0:
            logger.error(f"{asset} is used by {count} flair; use --force to delete anyway")
            return 1

    manager = AssetLifecycleManager(config.image_path, logger=logger)
    removed = manager.delete(str(asset))
    for path in removed:
        print(path)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Execute list command."""
    logger = setup_logging(args.verbose)
    needs_db = args.type != 'available'
    config = load_config(args, logger, require_db=needs_db)
    if config is None:
        return 1

    catalog = build_catalog(config, logger)
    reporter = Reporter()

    available = catalog.list_available()
    if args.type == 'available':
        reporter.report_list("Available images", available)
        return 0

    used = catalog.list_used()
    if args.type == 'used':
        reporter.report_list("Used images", used)
    elif args.type == 'orphaned':
        reporter.report_list("Orphaned images", reporter.orphaned(available, used))
    elif args.type == 'missing':
        reporter.report_list("Missing images", reporter.missing(available, used))
    else:
        reporter.report_summary(available, used)
    return 0


def cmd_usage(args: argparse.Namespace) -> int:
    """Execute usage command."""
    logger = setup_logging(args.verbose)
    config = load_config(args, logger, require_db=True)
    if config is None:
        return 1

    count = build_catalog(config, logger).count_references(args.name)
    print(f"{args.name}: {count}")
    return 0


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Add store and database arguments to a parser."""
    store_group = parser.add_argument_group('Store')
    store_group.add_argument('--image-path', metavar='PATH', help='Override FLAIR_IMAGE_PATH')

    db_group = parser.add_argument_group('Database')
    db_group.add_argument('--db-host', help='Override FLAIR_DB_HOST')
    db_group.add_argument('--db-port', type=int, help='Override FLAIR_DB_PORT')
    db_group.add_argument('--db-user', help='Override FLAIR_DB_USER')
    db_group.add_argument('--db-password', help='Override FLAIR_DB_PASSWORD')
    db_group.add_argument('--db-name', help='Override FLAIR_DB_NAME')
    db_group.add_argument('--table-prefix', help='Override FLAIR_TABLE_PREFIX')


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='flair-images',
        description='Manage profile flair images',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  flair-images check
  flair-images add /tmp/upload.tmp --name logo.png
  flair-images list --type orphaned
  flair-images delete logo.png
"""
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    check_parser = subparsers.add_parser('check', help='Prepare the store and report the image backend')
    check_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    add_config_arguments(check_parser)

    add_parser = subparsers.add_parser('add', help='Generate variants for an image')
    add_parser.add_argument('file', help='Source image file')
    add_parser.add_argument('--name', help='Image name to store as (default: source filename)')
    add_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    add_config_arguments(add_parser)

    delete_parser = subparsers.add_parser('delete', help='Delete the variants of an image')
    delete_parser.add_argument('name', help='Image name, e.g. logo.png')
    delete_parser.add_argument('-f', '--force', action='store_true',
                               help='Delete even if flair still uses the image')
    delete_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    add_config_arguments(delete_parser)

    list_parser = subparsers.add_parser('list', help='List images')
    list_parser.add_argument('-t', '--type',
                             choices=['available', 'used', 'orphaned', 'missing', 'summary'],
                             default='available', help='Listing type')
    list_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    add_config_arguments(list_parser)

    usage_parser = subparsers.add_parser('usage', help='Count flair using an image')
    usage_parser.add_argument('name', help='Image name, e.g. logo.png')
    usage_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    add_config_arguments(usage_parser)

    return parser


COMMANDS = {
    'check': cmd_check,
    'add': cmd_add,
    'delete': cmd_delete,
    'list': cmd_list,
    'usage': cmd_usage,
}


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    return COMMANDS[parsed_args.command](parsed_args)
