"""
The holder of the active network profile.

Subsystems that are handed a NetworkProfile at construction should keep using it. The registry serves call sites
that need the process-wide profile: it is selected during startup and read afterwards.
"""
import argparse
import sys
import threading
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from mdoge.core import UnknownNetworkError
from mdoge.core.logging import get_logger
from mdoge.params.network import NetworkID
from mdoge.params.profile import MAIN_DEFINITION, TEST_DEFINITION, NetworkProfile, build_profile

logger = get_logger(__name__)

__all__ = ["ProfileRegistry", "get_registry", "params", "select_params", "select_params_from_command_line",
           "parse_testnet_flag"]

_TRUE_VALUES = ("", "true", "yes", "on")
_FALSE_VALUES = ("false", "no", "off")
_FLAG_NAMES = ("-testnet", "--testnet")
_VALUE_OPTION = "--testnet-value"


def _bool_arg(value: str) -> bool:
    """Interpret a -testnet=V value; numbers are true when non-zero and anything else unrecognised is false"""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    try:
        return int(lowered) != 0
    except ValueError:
        return False


class _PresenceFlag(argparse.Action):
    """Sets the flag without taking the following argument as its value"""

    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, True)


def _route_flag_values(argv: Sequence[str]) -> list[str]:
    # -testnet=V goes to a separate option so the bare flag never consumes the next word
    routed = []
    for arg in argv:
        name, sep, value = arg.partition("=")
        routed.append(f"{_VALUE_OPTION}={value}" if sep and name in _FLAG_NAMES else arg)
    return routed


def parse_testnet_flag(argv: Optional[Sequence[str]] = None) -> bool:
    """
    Read the testnet flag from the command line. Accepts -testnet, --testnet and -testnet=V, the last occurrence
    winning. Other arguments, including a word right after the flag, are left for their own parsers.
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    parser.add_argument(*_FLAG_NAMES, dest="testnet", action=_PresenceFlag, default=False)
    parser.add_argument(_VALUE_OPTION, dest="testnet", type=_bool_arg, help=argparse.SUPPRESS)
    args, _ = parser.parse_known_args(_route_flag_values(argv))
    return bool(args.testnet)


class ProfileRegistry:
    """
    Owns one profile per network and the reference to the active one.

    The reference swap is lock guarded, and current() returns the whole profile so readers take a consistent
    snapshot rather than reading fields across a swap.
    """

    def __init__(self, profiles: Mapping[NetworkID, NetworkProfile], default: NetworkID = NetworkID.MAIN):
        self._profiles = MappingProxyType(dict(profiles))
        self._lock = threading.Lock()
        self._current = self.get(default)

    @staticmethod
    def _resolve(network: NetworkID | str) -> NetworkID:
        if isinstance(network, NetworkID):
            return network
        try:
            return NetworkID(network)
        except ValueError as e:
            raise UnknownNetworkError(f"Unimplemented network: {network!r}") from e

    @property
    def networks(self) -> tuple[NetworkID, ...]:
        return tuple(self._profiles)

    def get(self, network: NetworkID | str) -> NetworkProfile:
        """Return the profile for the given network without selecting it"""
        network_id = self._resolve(network)
        try:
            return self._profiles[network_id]
        except KeyError as e:
            raise UnknownNetworkError(f"Unimplemented network: {network_id.value}") from e

    def select(self, network: NetworkID | str) -> NetworkProfile:
        profile = self.get(network)
        with self._lock:
            self._current = profile
        logger.info(f"Selected {profile.network_id.value} network parameters")
        return profile

    def current(self) -> NetworkProfile:
        with self._lock:
            return self._current

    def select_from_environment(self, use_testnet: bool) -> NetworkProfile:
        return self.select(NetworkID.TESTNET if use_testnet else NetworkID.MAIN)

    def select_from_command_line(self, argv: Optional[Sequence[str]] = None) -> bool:
        self.select_from_environment(parse_testnet_flag(argv))
        return True


# --- PROCESS-WIDE REGISTRY --- #

_registry: Optional[ProfileRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> ProfileRegistry:
    """
    Return the process registry, building the main and testnet profiles on first use with main active
    """
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = ProfileRegistry({
                NetworkID.MAIN: build_profile(MAIN_DEFINITION),
                NetworkID.TESTNET: build_profile(TEST_DEFINITION),
            })
        return _registry


def params() -> NetworkProfile:
    """The active network profile"""
    return get_registry().current()


def select_params(network: NetworkID | str) -> NetworkProfile:
    return get_registry().select(network)


def select_params_from_command_line(argv: Optional[Sequence[str]] = None) -> bool:
    return get_registry().select_from_command_line(argv)
