#!/usr/bin/env python3
"""
SkyDNS Key Path Tool

Command line access to the keyspace mapping, handy when inspecting or
seeding the key-value store by hand:

    keypath.py encode service.staging.skydns.local.
    keypath.py decode /skydns/local/skydns/staging/service
    keypath.py wildcard 'service.*.skydns.local.'
    keypath.py subdomain sub1.a1.lb.example.com. --boundary 4
    keypath.py match /skydns/local/skydns/east/service 'service.*.skydns.local.'

The namespace defaults to $SKYDNS_PREFIX, or 'skydns' when unset.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from skypath.codec import decode, encode, encode_with_wildcard, matches_wildcard
from skypath.config import load_config
from skypath.errors import SkyPathError
from skypath.subdomain import subdomain_paths


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Map domain names to SkyDNS key-value store paths'
    )
    parser.add_argument(
        '--prefix', '-p',
        default=None,
        help='Key namespace (default: $SKYDNS_PREFIX or skydns)'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging (alias for --log-level DEBUG)'
    )

    commands = parser.add_subparsers(dest='command', required=True)

    encode_cmd = commands.add_parser('encode', help='Domain name to key path')
    encode_cmd.add_argument('name')

    decode_cmd = commands.add_parser('decode', help='Key path to domain name')
    decode_cmd.add_argument('path')
    decode_cmd.add_argument(
        '--namespace', '-n',
        default=None,
        help='Namespace to strip, e.g. skydns/_sub-domain (default: first segment)'
    )

    wildcard_cmd = commands.add_parser('wildcard', help='Range-scan prefix for a wildcard name')
    wildcard_cmd.add_argument('name')

    subdomain_cmd = commands.add_parser('subdomain', help='Delegated sub-domain paths')
    subdomain_cmd.add_argument('name')
    subdomain_cmd.add_argument(
        '--boundary', '-b',
        type=int,
        required=True,
        help='Number of trailing labels that belong to the owner zone'
    )

    match_cmd = commands.add_parser('match', help='Check a scanned key against a wildcard name')
    match_cmd.add_argument('key')
    match_cmd.add_argument('name')

    return parser.parse_args(argv)


def configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name),
        format='[%(levelname)s] %(message)s',
        stream=sys.stderr,
    )


def run(args: argparse.Namespace) -> int:
    prefix = args.prefix if args.prefix is not None else load_config().prefix

    if args.command == 'encode':
        print(encode(args.name, prefix))
    elif args.command == 'decode':
        print(decode(args.path, args.namespace))
    elif args.command == 'wildcard':
        path, matched = encode_with_wildcard(args.name, prefix)
        print(path)
        if matched:
            logging.info("Wildcard found; filter scanned keys with: %s", encode(args.name, prefix))
    elif args.command == 'subdomain':
        paths = subdomain_paths(args.name, args.boundary, prefix)
        print(f"root: {paths.root}")
        print(f"path: {paths.path}")
    elif args.command == 'match':
        matched = matches_wildcard(args.key, encode(args.name, prefix))
        print('match' if matched else 'no match')
        return 0 if matched else 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging('DEBUG' if args.debug else args.log_level)

    try:
        return run(args)
    except SkyPathError as e:
        logging.error("%s", e)
        return 2


if __name__ == '__main__':
    sys.exit(main())
