#!/usr/bin/env python3
"""
Command-line interface for the image URL builder.

Usage:
    imgix-url build <path> [-p NAME=VALUE ...] [--domain D ...] [--https] [--sign-key KEY]
    imgix-url sign <path> [-p NAME=VALUE ...] --sign-key KEY [--ixlib]
    imgix-url shard <path> [--domain D ...]
"""

import argparse
import json
import sys
from typing import Dict, List, Optional, Sequence

from pydantic import ValidationError

from .builder import UrlBuilder
from .common.logging_config import setup_logging
from .common.url_builder import normalize_path
from .config import Config, load_config
from .encoding import encode_query
from .errors import ConfigurationError
from .sharding import ShardStrategy, crc_index
from .signing import sign


def print_error(message: str) -> int:
    """Print a JSON error on stderr and return the failure exit code."""
    print(json.dumps({
        "success": False,
        "error": message
    }, indent=2), file=sys.stderr)
    return 1


def parse_params(pairs: Optional[Sequence[str]]) -> Dict[str, str]:
    """Parse ``NAME=VALUE`` arguments, keeping their order.

    Raises:
        ValueError: If an argument has no ``=``
    """
    params: Dict[str, str] = {}
    for pair in pairs or []:
        name, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"Parameter '{pair}' must be NAME=VALUE")
        params[name] = value
    return params


class UrlBuilderCLI:
    """Command-line interface for the URL builder."""

    def __init__(self, config: Config, verbose: bool = False):
        """Initialize CLI."""
        self.config = config
        self.logger = setup_logging(
            level="DEBUG" if verbose else config.log_level,
            log_file=config.log_file,
            json_format=config.log_json,
            stream=sys.stderr,
        )

    def _domains(self, domains: Optional[List[str]]) -> List[str]:
        return domains or self.config.domain_list()

    def build(
        self,
        path: str,
        params: Dict[str, str],
        domains: Optional[List[str]] = None,
        use_https: Optional[bool] = None,
        sign_key: Optional[str] = None,
        shard: Optional[str] = None,
        ixlib: Optional[bool] = None,
    ) -> int:
        """Build a URL."""
        try:
            builder = UrlBuilder(
                self._domains(domains),
                use_https=self.config.use_https if use_https is None else use_https,
                sign_key=sign_key or self.config.sign_key,
                shard_strategy=self.config.shard_strategy if shard is None else shard,
                include_library_param=self.config.include_library_param if ixlib is None else ixlib,
                logger=self.logger,
            )
        except ConfigurationError as e:
            return print_error(f"Invalid configuration: {e}")

        print(json.dumps({
            "success": True,
            "url": builder.build_url(path, params),
        }, indent=2))
        return 0

    def sign(
        self,
        path: str,
        params: Dict[str, str],
        sign_key: Optional[str] = None,
        ixlib: Optional[bool] = None,
    ) -> int:
        """Print the signature a built URL would carry for a path and parameters."""
        key = sign_key or self.config.sign_key
        if not key:
            return print_error("A sign key is required (--sign-key or IMGIX_SIGN_KEY)")

        include_library_param = self.config.include_library_param if ixlib is None else ixlib
        query = encode_query(params, include_library_param)
        signature = sign(key, normalize_path(path), query)
        print(json.dumps({
            "success": True,
            "path": normalize_path(path),
            "query": query,
            "signature": signature,
        }, indent=2))
        return 0

    def shard(self, path: str, domains: Optional[List[str]] = None) -> int:
        """Print which hostname the CRC strategy maps a path to."""
        domains = self._domains(domains)
        if not domains:
            return print_error("At least one domain is required")

        index = crc_index(path, len(domains))
        print(json.dumps({
            "success": True,
            "path": path,
            "index": index,
            "domain": domains[index],
        }, indent=2))
        return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="imgix-url",
        description="Image CDN URL builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build a URL
  %(prog)s build gaiman.jpg -p w=500 -p blur=100 --domain domain.imgix.net

  # Build a signed https URL
  %(prog)s build gaiman.jpg --domain domain.imgix.net --https --sign-key SECRET

  # Show the host a path is sharded to
  %(prog)s shard test1.png --domain a.imgix.net --domain b.imgix.net
        """
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    build_parser_ = subparsers.add_parser("build", help="Build a URL")
    build_parser_.add_argument("path", help="Source path, e.g. gaiman.jpg")
    build_parser_.add_argument("-p", "--param", action="append", default=[], help="NAME=VALUE parameter (repeatable)")
    build_parser_.add_argument("--domain", action="append", help="Hostname (repeatable, default: IMGIX_DOMAINS)")
    build_parser_.add_argument("--https", dest="use_https", action="store_true", default=None, help="Use https")
    build_parser_.add_argument("--sign-key", help="Signing secret (default: IMGIX_SIGN_KEY)")
    build_parser_.add_argument(
        "--shard",
        choices=[s.value for s in ShardStrategy] + ["none"],
        help="Sharding strategy (default: IMGIX_SHARD_STRATEGY)"
    )
    build_parser_.add_argument("--ixlib", action="store_true", default=None, help="Append the ixlib parameter")

    sign_parser = subparsers.add_parser("sign", help="Compute a signature")
    sign_parser.add_argument("path", help="Source path")
    sign_parser.add_argument("-p", "--param", action="append", default=[], help="NAME=VALUE parameter (repeatable)")
    sign_parser.add_argument("--sign-key", help="Signing secret (default: IMGIX_SIGN_KEY)")
    sign_parser.add_argument("--ixlib", action="store_true", default=None, help="Include the ixlib parameter")

    shard_parser = subparsers.add_parser("shard", help="Show the CRC shard for a path")
    shard_parser.add_argument("path", help="Source path")
    shard_parser.add_argument("--domain", action="append", help="Hostname (repeatable, default: IMGIX_DOMAINS)")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config()
    except ValidationError as e:
        return print_error(f"Invalid configuration: {e}")

    try:
        params = parse_params(getattr(args, "param", None))
    except ValueError as e:
        return print_error(str(e))

    cli = UrlBuilderCLI(config, verbose=args.verbose)

    if args.command == "build":
        return cli.build(
            args.path,
            params,
            domains=args.domain,
            use_https=args.use_https,
            sign_key=args.sign_key,
            shard=args.shard,
            ixlib=args.ixlib,
        )
    if args.command == "sign":
        return cli.sign(args.path, params, sign_key=args.sign_key, ixlib=args.ixlib)
    if args.command == "shard":
        return cli.shard(args.path, domains=args.domain)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
