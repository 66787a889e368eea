"""
Print the selected network profile as JSON

    python -m mdoge [-testnet] [--log-level LEVEL]
"""
import argparse
import sys

from mdoge.core.logging import set_log_level
from mdoge.params import get_registry, parse_testnet_flag


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    parser = argparse.ArgumentParser(prog="mdoge", description="Show MasterDoge network parameters")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    args, _ = parser.parse_known_args(argv)
    set_log_level(args.log_level)

    registry = get_registry()
    profile = registry.select_from_environment(parse_testnet_flag(argv))
    print(profile.to_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
