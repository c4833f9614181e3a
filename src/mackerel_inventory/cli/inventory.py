"""
Inventory CLI entrypoint for mackerel-inventory.

Usage:
    mackerel-inventory --version
    mackerel-inventory --help
    mackerel-inventory --list
    mackerel-inventory --host <hostname>
"""

import argparse
import platform
import sys
import traceback
from typing import Optional

from mackerel_inventory import __version__
from mackerel_inventory.config import InventoryConfig, resolve_config
from mackerel_inventory.display import Display
from mackerel_inventory.engine.errors import ExitCode, MackerelInventoryError
from mackerel_inventory.engine.inventory import Inventory
from mackerel_inventory.engine.output import render
from mackerel_inventory.sources.base import HostSource
from mackerel_inventory.sources.mackerel import MackerelHostSource


def get_version_string() -> str:
    """Generate a detailed version string."""
    python_version = platform.python_version()
    os_info = f"{platform.system()} {platform.release()}"
    return (
        f"mackerel-inventory {__version__}\n"
        f"  python: {python_version}\n"
        f"  platform: {os_info}"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for mackerel-inventory."""
    parser = argparse.ArgumentParser(
        prog="mackerel-inventory",
        description="Ansible dynamic inventory built from Mackerel hosts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  MACKEREL_API_KEY=... mackerel-inventory --list
  mackerel-inventory --mackerel-api-key KEY --host web1
  ansible-playbook -i mackerel-inventory site.yml
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=get_version_string(),
    )

    parser.add_argument(
        "--list",
        action="store_true",
        dest="list_hosts",
        help="List hosts (JSON)",
    )

    parser.add_argument(
        "--host",
        dest="host",
        metavar="HOST_NAME",
        default=None,
        help="Get all the variables about a specific HOST_NAME (JSON)",
    )

    parser.add_argument(
        "--mackerel-api-key",
        dest="api_key",
        metavar="API_KEY",
        default=None,
        help="API_KEY for mackerel.io [$MACKEREL_API_KEY]",
    )

    parser.add_argument(
        "--api-base",
        dest="api_base",
        metavar="URL",
        default=None,
        help="Mackerel API base URL [$MACKEREL_APIBASE]",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds (default: 30)",
    )

    parser.add_argument(
        "-c", "--config",
        dest="config",
        metavar="FILE",
        default=None,
        help="YAML config file (default: ~/.mackerel-inventory.yml)",
    )

    parser.add_argument(
        "-y", "--yaml",
        action="store_true",
        help="Output in YAML format",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv, -vvv)",
    )

    return parser


def build_source(config: InventoryConfig, display: Display) -> HostSource:
    """Create the host source for a resolved configuration."""
    return MackerelHostSource(
        api_key=config.api_key,
        api_base=config.api_base,
        timeout=config.timeout,
        display=display,
    )


def main(args: Optional[list[str]] = None, source: Optional[HostSource] = None) -> int:
    """Main entrypoint for mackerel-inventory CLI."""
    parser = create_parser()
    parsed = parser.parse_args(args)
    display = Display(verbosity=parsed.verbose)

    # If no action specified, show help
    if not parsed.list_hosts and not parsed.host:
        parser.print_help()
        return ExitCode.SUCCESS

    try:
        config = resolve_config(
            api_key=parsed.api_key,
            api_base=parsed.api_base,
            timeout=parsed.timeout,
            config_path=parsed.config,
            verbosity=parsed.verbose,
        )
        display.debug(f"Using {config!r}", level=3)

        inventory = Inventory(source or build_source(config, display), display=display)

        if parsed.list_hosts:
            document = inventory.list_document()
        else:
            document = inventory.host_document(parsed.host)

        print(render(document, yaml_output=parsed.yaml))
        return ExitCode.SUCCESS

    except MackerelInventoryError as e:
        display.error(str(e))
        return e.exit_code
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return ExitCode.KEYBOARD_INTERRUPT
    except Exception as e:
        display.error(f"Unexpected error: {e}")
        if parsed.verbose >= 2:
            traceback.print_exc()
        return ExitCode.GENERIC_ERROR


if __name__ == "__main__":
    sys.exit(main())
