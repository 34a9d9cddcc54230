#!/usr/bin/env python3
"""
CLI entry point for cloudops-utils.

Exposes the utility library's workflows (random strings, version comparison,
JSON queries, KMS, RDS snapshots, ENI cleanup, Cognito domains and CloudFront
invalidations) as subcommands for use from shell scripts.
"""

import argparse
import json
import sys
from typing import NoReturn, Optional

from botocore.exceptions import BotoCoreError, ClientError

from cloudops_utils.application.network_interface_service import NetworkInterfaceService
from cloudops_utils.application.snapshot_service import SnapshotService
from cloudops_utils.application.user_pool_domain_service import (
    ACTION_CREATE,
    ACTION_DELETE,
    UserPoolDomainService,
)
from cloudops_utils.domain.errors import EXIT_FAILURE, EXIT_MANDATORY, CloudOpsError
from cloudops_utils.domain.semver import semver_compare
from cloudops_utils.domain.strings import generate_complex_string, generate_simple_string
from cloudops_utils.infrastructure.cloudfront_repository import CloudFrontRepository
from cloudops_utils.infrastructure.cognito_repository import CognitoRepository
from cloudops_utils.infrastructure.config import UtilityConfig
from cloudops_utils.infrastructure.ec2_repository import EC2Repository
from cloudops_utils.infrastructure.json_query import get_json_value, load_cli_input, merge_json
from cloudops_utils.infrastructure.kms_repository import KMSRepository
from cloudops_utils.infrastructure.logger import setup_logger
from cloudops_utils.infrastructure.rds_repository import RDSRepository

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "cli",
        "description": "Command-line interface for cloudops-utils",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="cloudops-utils",
        description="Shell utilities for AWS deployment scripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--region",
        help="AWS region (default: from AWS_REGION or the AWS config)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug output",
    )

    parser.add_argument(
        "--log-level",
        help="Minimum severity to log (Debug, Trace, Info, Warning, Error, Fatal)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # random-string command
    random_parser = subparsers.add_parser(
        "random-string",
        help="Generate a random string",
    )
    random_parser.add_argument(
        "--length",
        type=int,
        default=16,
        help="Length of the string (default: 16)",
    )
    random_parser.add_argument(
        "--complex",
        action="store_true",
        help="Include punctuation (excluding @ \" / +)",
    )

    # semver-compare command
    semver_parser = subparsers.add_parser(
        "semver-compare",
        help="Compare two semantic versions, printing -1, 0 or 1",
    )
    semver_parser.add_argument("first", help="First version")
    semver_parser.add_argument("second", help="Second version")

    # json-merge command
    merge_parser = subparsers.add_parser(
        "json-merge",
        help="Deep-merge JSON files, later files winning",
    )
    merge_parser.add_argument("files", nargs="+", help="JSON files to merge")

    # json-get command
    get_parser = subparsers.add_parser(
        "json-get",
        help="Print the first non-null JMESPath result from a JSON file",
    )
    get_parser.add_argument("file", help="JSON file")
    get_parser.add_argument("expressions", nargs="+", help="JMESPath expressions, tried in order")

    # kms-encrypt command
    encrypt_parser = subparsers.add_parser(
        "kms-encrypt",
        help="Encrypt a string with KMS, printing base64 ciphertext",
    )
    encrypt_parser.add_argument("--key-id", required=True, help="KMS key ID, ARN or alias")
    encrypt_parser.add_argument("--value", required=True, help="Plaintext to encrypt")

    # kms-decrypt command
    decrypt_parser = subparsers.add_parser(
        "kms-decrypt",
        help="Decrypt base64 ciphertext with KMS",
    )
    decrypt_parser.add_argument("--ciphertext", required=True, help="Base64 ciphertext")
    decrypt_parser.add_argument("--key-id", help="KMS key to pin decryption to (optional)")

    # snapshot-create command
    snapshot_create_parser = subparsers.add_parser(
        "snapshot-create",
        help="Snapshot an RDS instance and wait until it is available",
    )
    snapshot_create_parser.add_argument("--db-instance", required=True, help="DB instance identifier")
    snapshot_create_parser.add_argument("--snapshot", required=True, help="Snapshot identifier")

    # snapshot-encrypt command
    snapshot_encrypt_parser = subparsers.add_parser(
        "snapshot-encrypt",
        help="Replace a plaintext RDS snapshot with an encrypted one",
    )
    snapshot_encrypt_parser.add_argument("--snapshot", required=True, help="Snapshot identifier")
    snapshot_encrypt_parser.add_argument("--kms-key-id", required=True, help="KMS key for encryption")

    # snapshot-check-username command
    username_parser = subparsers.add_parser(
        "snapshot-check-username",
        help="Check a snapshot's master username (exit 128 on mismatch)",
    )
    username_parser.add_argument("--snapshot", required=True, help="Snapshot identifier or ARN")
    username_parser.add_argument("--username", required=True, help="Expected master username")

    # release-enis command
    eni_parser = subparsers.add_parser(
        "release-enis",
        help="Detach and delete network interfaces created by a requester",
    )
    eni_parser.add_argument("--requester-id", required=True, help="Requester ID suffix")

    # cognito-domain command
    domain_parser = subparsers.add_parser(
        "cognito-domain",
        help="Attach or detach a Cognito user pool domain",
    )
    domain_parser.add_argument("--user-pool-id", required=True, help="User pool ID")
    domain_parser.add_argument(
        "--config",
        required=True,
        help="CreateUserPoolDomain request JSON file",
    )
    domain_parser.add_argument(
        "--action",
        choices=[ACTION_CREATE, ACTION_DELETE],
        default=ACTION_CREATE,
        help="Action to take (default: create)",
    )

    # invalidate command
    invalidate_parser = subparsers.add_parser(
        "invalidate",
        help="Invalidate paths in a CloudFront distribution",
    )
    invalidate_parser.add_argument("--distribution-id", required=True, help="Distribution ID")
    invalidate_parser.add_argument(
        "--paths",
        nargs="+",
        default=["/*"],
        help="Paths to invalidate (default: /*)",
    )

    return parser


def cmd_random_string(args: argparse.Namespace, config: UtilityConfig) -> int:
    """Execute random-string command.

    Args:
        args: Parsed command-line arguments
        config: Runtime settings

    Returns:
        Exit code (0 for success)
    """
    generate = generate_complex_string if args.complex else generate_simple_string
    print(generate(args.length))
    return 0


def cmd_semver_compare(args: argparse.Namespace, config: UtilityConfig) -> int:
    print(semver_compare(args.first, args.second))
    return 0


def cmd_json_merge(args: argparse.Namespace, config: UtilityConfig) -> int:
    print(json.dumps(merge_json(*args.files), indent=2))
    return 0


def cmd_json_get(args: argparse.Namespace, config: UtilityConfig) -> int:
    value = get_json_value(args.file, *args.expressions)
    print(value if isinstance(value, str) else json.dumps(value))
    return 0


def cmd_kms_encrypt(args: argparse.Namespace, config: UtilityConfig) -> int:
    print(KMSRepository(config.region).encrypt_string(args.value, args.key_id))
    return 0


def cmd_kms_decrypt(args: argparse.Namespace, config: UtilityConfig) -> int:
    print(KMSRepository(config.region).decrypt_string(args.ciphertext, args.key_id))
    return 0


def _snapshot_service(config: UtilityConfig) -> SnapshotService:
    return SnapshotService(
        RDSRepository(config.region, waiter_delay=config.poll_interval,
                      waiter_max_attempts=config.max_poll_attempts),
        settle_delay=config.settle_delay,
        poll_interval=config.poll_interval,
        max_poll_attempts=config.max_poll_attempts,
    )


def cmd_snapshot_create(args: argparse.Namespace, config: UtilityConfig) -> int:
    """Execute snapshot-create command.

    Args:
        args: Parsed command-line arguments
        config: Runtime settings

    Returns:
        Exit code (0 for success)
    """
    snapshot = _snapshot_service(config).create_snapshot(args.db_instance, args.snapshot)
    print(snapshot.identifier)
    return 0


def cmd_snapshot_encrypt(args: argparse.Namespace, config: UtilityConfig) -> int:
    snapshot = _snapshot_service(config).encrypt_snapshot(args.snapshot, args.kms_key_id)
    print(snapshot.identifier)
    return 0


def cmd_snapshot_check_username(args: argparse.Namespace, config: UtilityConfig) -> int:
    _snapshot_service(config).check_snapshot_username(args.snapshot, args.username)
    return 0


def cmd_release_enis(args: argparse.Namespace, config: UtilityConfig) -> int:
    service = NetworkInterfaceService(
        EC2Repository(config.region, waiter_max_attempts=config.max_poll_attempts)
    )
    for interface_id in service.release_enis(args.requester_id):
        print(interface_id)
    return 0


def cmd_cognito_domain(args: argparse.Namespace, config: UtilityConfig) -> int:
    service = UserPoolDomainService(CognitoRepository(config.region))
    print(service.manage_domain(args.user_pool_id, load_cli_input(args.config), args.action))
    return 0


def cmd_invalidate(args: argparse.Namespace, config: UtilityConfig) -> int:
    invalidation_id = CloudFrontRepository(config.region).invalidate_distribution(
        args.distribution_id, args.paths
    )
    print(invalidation_id)
    return 0


COMMANDS = {
    "random-string": cmd_random_string,
    "semver-compare": cmd_semver_compare,
    "json-merge": cmd_json_merge,
    "json-get": cmd_json_get,
    "kms-encrypt": cmd_kms_encrypt,
    "kms-decrypt": cmd_kms_decrypt,
    "snapshot-create": cmd_snapshot_create,
    "snapshot-encrypt": cmd_snapshot_encrypt,
    "snapshot-check-username": cmd_snapshot_check_username,
    "release-enis": cmd_release_enis,
    "cognito-domain": cmd_cognito_domain,
    "invalidate": cmd_invalidate,
}


def run(argv: Optional[list[str]] = None) -> int:
    """Parse arguments, dispatch to a command handler and map errors to exit codes.

    Args:
        argv: Arguments (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_MANDATORY

    try:
        config = UtilityConfig.from_env()
    except ValueError as e:
        setup_logger().critical(str(e))
        return EXIT_FAILURE

    if args.region:
        config.region = args.region

    logger = setup_logger(
        verbose=args.verbose or config.debug,
        threshold=args.log_level or config.log_level,
    )

    try:
        return COMMANDS[args.command](args, config)
    except CloudOpsError as e:
        logger.error(str(e))
        return e.exit_code
    except (ClientError, BotoCoreError) as e:
        logger.error(f"AWS error during {args.command}: {e}")
        return EXIT_FAILURE
    except (ValueError, OSError) as e:
        logger.error(f"Error during {args.command}: {e}")
        return EXIT_FAILURE


def main() -> NoReturn:
    """Main entry point for the CLI."""
    sys.exit(run())


if __name__ == "__main__":
    main()
