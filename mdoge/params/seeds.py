"""
The compiled seed tables and their conversion into timestamped peer addresses.

Seed nodes get a random "last seen" time between one and two weeks ago. A new node only needs to reach one or two of
them, after which it learns addresses with newer timestamps and the seeds drop down the list.
"""
import time
from dataclasses import dataclass
from secrets import randbelow
from typing import Callable, Iterable, Optional

from mdoge.core import NET, SeedTableError
from mdoge.core.logging import get_logger
from mdoge.data import NetAddr

logger = get_logger(__name__)

__all__ = ["SeedSpec", "load_seed_table", "convert_seed6", "MAIN_SEEDS", "TEST_SEEDS"]


@dataclass(frozen=True)
class SeedSpec:
    """
    A raw seed entry: 16-byte IPv6 address (IPv4 is v6-mapped) and port
    """
    address: bytes
    port: int

    def __post_init__(self):
        if len(self.address) != NET.IP:
            raise SeedTableError(f"Seed address must be {NET.IP} bytes. Received {len(self.address)} bytes")
        if not 0 <= self.port <= 0xffff:
            raise SeedTableError(f"Seed port out of range: {self.port}")


def load_seed_table(rows: Iterable[tuple[str, int]]) -> tuple[SeedSpec, ...]:
    """
    Validate (hex address, port) rows into SeedSpec entries
    """
    table = []
    for address_hex, port in rows:
        try:
            address = bytes.fromhex(address_hex)
        except ValueError as e:
            raise SeedTableError(f"Seed address is not hex: {address_hex!r}") from e
        table.append(SeedSpec(address, port))
    return tuple(table)


def convert_seed6(seeds: Iterable[SeedSpec], now: Optional[int] = None,
                  rand: Optional[Callable[[int], int]] = None) -> tuple[NetAddr, ...]:
    """
    Turn seed entries into NetAddr records with last-seen times in [now - 2 weeks, now - 1 week].

    Args:
        seeds: The compiled seed entries
        now: Current unix time. Read from the clock once when not given
        rand: Uniform random integer in [0, n). Defaults to secrets.randbelow

    Returns:
        A tuple of NetAddr records in table order
    """
    if now is None:
        now = int(time.time())
    if rand is None:
        rand = randbelow

    addresses = tuple(
        NetAddr(now - rand(NET.ONE_WEEK) - NET.ONE_WEEK, NET.NODE_NETWORK, seed.address, seed.port)
        for seed in seeds
    )
    logger.debug(f"Converted {len(addresses)} fixed seeds")
    return addresses


# --- SEED TABLES --- #
# Entries are 16-byte addresses in network byte order; IPv4 seeds use the ::ffff:0:0/96 mapping

# Placeholder: holds only the published seed host until the compiled main seed list is available
MAIN_SEED_ROWS = (
    ("00000000000000000000ffff68ee9863", 2589),  # 104.238.152.99
)

TEST_SEED_ROWS = ()

MAIN_SEEDS = load_seed_table(MAIN_SEED_ROWS)
TEST_SEEDS = load_seed_table(TEST_SEED_ROWS)
