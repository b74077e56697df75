import argparse
import json
import logging
from importlib.metadata import version

from rich.console import Console
from rich.table import Table

from . import probe
from .clients import FirebaseClient
from .exceptions import FirebucketError
from .logger import logger
from .schemas.bucket import default_bucket_id
from .schemas.config import ProviderConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="firebucket: inspect a Firebase project's default Storage bucket",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a project using Application Default Credentials
  firebucket --project-id demo-proj

  # Use a service account key and print JSON
  firebucket --project-id demo-proj --credentials key.json --json
""",
    )
    try:
        ver = version("firebucket")
    except Exception:
        ver = "unknown"
    parser.add_argument("--version", action="version", version=f"firebucket v{ver}")

    parser.add_argument("--project-id", required=True, help="Firebase project ID")
    parser.add_argument(
        "--credentials",
        help="Service account key file or JSON (default: FIREBASE_CREDENTIALS, then ADC)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request deadline in seconds (default: none)",
    )
    parser.add_argument("--json", action="store_true", help="Output result as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def run(args: argparse.Namespace, out_console: Console) -> None:
    if args.credentials:
        config = ProviderConfig(credentials=args.credentials)
    else:
        config = ProviderConfig.load()

    client = FirebaseClient.from_credentials(config.credentials)
    result = probe.probe(client, args.project_id, timeout=args.timeout)

    data = {
        "project": args.project_id,
        "id": default_bucket_id(args.project_id) if result.exists else "",
        "exists": result.exists,
        "bucket_name": result.remote_name,
    }

    if args.json:
        print(json.dumps(data, indent=2))
        return

    table = Table(title=f"Default bucket: {args.project_id}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, str(value))
    out_console.print(table)


def main() -> None:
    args = build_parser().parse_args()

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    out_console = Console()

    try:
        run(args, out_console)
    except FirebucketError as e:
        logger.error(f"Probe failed: {e}")
        exit(1)
    except KeyboardInterrupt:
        console = Console(stderr=True)
        console.print("\n[bold red]Operation cancelled by user.[/bold red]")
        exit(130)


if __name__ == "__main__":
    main()
