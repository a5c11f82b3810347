"""ulidtool - generate and inspect ULIDs from the command line."""

import argparse
import sys

from config import GeneratorConfig, load_config
from core.errors import UlidError
from core.ulid import Ulid
from generation.generator import GeneratorMode, create_generator
from internal.logging import configure_logging


def _cmd_generate(args, config):
    mode = GeneratorMode.MONOTONIC if args.monotonic else config.generator.mode
    generator = create_generator(GeneratorConfig(mode=mode))
    for _ in range(args.count):
        print(generator.next())
    return 0


def _cmd_inspect(args, config):
    result = Ulid.parse(args.ulid)
    if isinstance(result, UlidError):
        print(result.message, file=sys.stderr)
        return 1

    print(f"ulid:       {result}")
    print(f"timestamp:  {result.timestamp}")
    print(f"time:       {result.isoformat()}")
    print(f"randomness: {result.randomness.hex()}")
    print(f"bytes:      {result.to_bytes().hex()}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog="ulidtool", description="Generate and inspect ULIDs")
    parser.add_argument("--config", default=None, help="Path to a JSON config file")
    sub = parser.add_subparsers(dest="command", required=True)

    generate = sub.add_parser("generate", help="Print new ULIDs")
    generate.add_argument("-n", "--count", type=int, default=1)
    generate.add_argument("--monotonic", action="store_true", help="Strictly increasing within a millisecond")
    generate.set_defaults(func=_cmd_generate)

    inspect = sub.add_parser("inspect", help="Decode a ULID")
    inspect.add_argument("ulid")
    inspect.set_defaults(func=_cmd_inspect)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logger = configure_logging(config.logging)
    logger.info("ulidtool start", command=args.command, mode=config.generator.mode)
    return int(args.func(args, config))


if __name__ == "__main__":
    sys.exit(main())
