"""
The network profiles: every constant a node reads at startup, the verified genesis block and the fixed seeds.

Each network is described by a NetworkDefinition of raw inputs. The testnet definition is the main definition with
the fields in TEST_OVERRIDES replaced, so the full difference between the two networks is the override mapping.
build_profile turns a definition into an immutable NetworkProfile.
"""
import json
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from mdoge.chain import Block
from mdoge.core import COIN, MAX_HEIGHT, ChainParamsError
from mdoge.core.logging import get_logger
from mdoge.data import NetAddr, pow_limit, target_to_bits
from mdoge.params.genesis import GenesisParams, build_genesis
from mdoge.params.network import Base58Type, NetworkID
from mdoge.params.seeds import MAIN_SEEDS, TEST_SEEDS, SeedSpec, convert_seed6

logger = get_logger(__name__)

__all__ = ["NetworkDefinition", "NetworkProfile", "build_profile", "MAIN_DEFINITION", "TEST_DEFINITION",
           "TEST_OVERRIDES"]

MESSAGE_START_BYTES = 4


@dataclass(frozen=True)
class NetworkDefinition:
    """
    The raw inputs of a network. Amounts are in base units (COIN = 10^8), times and intervals in seconds.
    """
    network_id: NetworkID
    message_start: bytes
    alert_pubkey: bytes
    default_port: int
    rpc_port: int
    pow_limit_shift: int
    genesis: GenesisParams
    base58_prefixes: Mapping[Base58Type, bytes]
    seed_table: tuple[SeedSpec, ...]
    dns_seeds: tuple[tuple[str, str], ...]
    target_spacing: int
    last_pow_block: int
    premine_amount: int
    premine_block: int
    regular_pow_reward: int
    first_pos_block: int
    coinbase_maturity: int
    launch_time: int
    stake_min_age: int
    modifier_interval: int
    pos_coin_reward: int  # percent
    advisable_pos_txout: int
    masternode_fix_reward: int
    masternode_proportional_reward: int  # percent
    masternode_value: int
    data_dir: str = ""


@dataclass(frozen=True)
class NetworkProfile:
    """
    The fully built parameters of one network. Instances are read-only once constructed.
    """
    network_id: NetworkID
    message_start: bytes
    alert_pubkey: bytes
    default_port: int
    rpc_port: int
    proof_of_work_limit: int
    genesis_block: Block = field(repr=False)
    hash_genesis_block: bytes
    base58_prefixes: Mapping[Base58Type, bytes] = field(repr=False)
    fixed_seeds: tuple[NetAddr, ...] = field(repr=False)
    dns_seeds: tuple[tuple[str, str], ...]
    target_spacing: int
    last_pow_block: int
    premine_amount: int
    premine_block: int
    regular_pow_reward: int
    first_pos_block: int
    coinbase_maturity: int
    launch_time: int
    stake_min_age: int
    modifier_interval: int
    pos_coin_reward: int
    advisable_pos_txout: int
    masternode_fix_reward: int
    masternode_proportional_reward: int
    masternode_value: int
    data_dir: str

    @property
    def proof_of_work_limit_bits(self) -> bytes:
        """The proof-of-work limit in compact form"""
        return target_to_bits(self.proof_of_work_limit)

    def base58_prefix(self, kind: Base58Type) -> bytes:
        return self.base58_prefixes[kind]

    def to_dict(self) -> dict:
        return {
            "network": self.network_id.value,
            "message_start": self.message_start.hex(),
            "alert_pubkey": self.alert_pubkey.hex(),
            "default_port": self.default_port,
            "rpc_port": self.rpc_port,
            "proof_of_work_limit": self.proof_of_work_limit_bits.hex(),
            "genesis": {
                "hash": self.hash_genesis_block[::-1].hex(),
                "merkle_root": self.genesis_block.merkle_root[::-1].hex(),
                "time": self.genesis_block.timestamp,
                "bits": self.genesis_block.bits.hex(),
                "nonce": self.genesis_block.nonce
            },
            "base58_prefixes": {kind.value: prefix.hex() for kind, prefix in self.base58_prefixes.items()},
            "fixed_seeds": [addr.to_dict() for addr in self.fixed_seeds],
            "dns_seeds": [list(seed) for seed in self.dns_seeds],
            "target_spacing": self.target_spacing,
            "last_pow_block": self.last_pow_block,
            "premine_amount": self.premine_amount,
            "premine_block": self.premine_block,
            "regular_pow_reward": self.regular_pow_reward,
            "first_pos_block": self.first_pos_block,
            "coinbase_maturity": self.coinbase_maturity,
            "launch_time": self.launch_time,
            "stake_min_age": self.stake_min_age,
            "modifier_interval": self.modifier_interval,
            "pos_coin_reward": self.pos_coin_reward,
            "advisable_pos_txout": self.advisable_pos_txout,
            "masternode_fix_reward": self.masternode_fix_reward,
            "masternode_proportional_reward": self.masternode_proportional_reward,
            "masternode_value": self.masternode_value,
            "data_dir": self.data_dir
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def _check_definition(definition: NetworkDefinition):
    if len(definition.message_start) != MESSAGE_START_BYTES:
        raise ChainParamsError(f"Message start must be {MESSAGE_START_BYTES} bytes")

    for port in (definition.default_port, definition.rpc_port):
        if not 0 < port <= 0xffff:
            raise ChainParamsError(f"Port out of range: {port}")

    missing = set(Base58Type) - set(definition.base58_prefixes)
    if missing:
        raise ChainParamsError(f"Missing base58 prefixes: {sorted(kind.value for kind in missing)}")
    for kind, prefix in definition.base58_prefixes.items():
        if len(prefix) != kind.prefix_length:
            raise ChainParamsError(f"Base58 prefix {kind.value} must be {kind.prefix_length} bytes")


def build_profile(definition: NetworkDefinition, now: Optional[int] = None,
                  rand: Optional[Callable[[int], int]] = None) -> NetworkProfile:
    """
    Build and verify a network profile.

    The genesis block is constructed and checked before anything else is derived. The seed table is converted
    using the given clock value and random source, or the wall clock and secrets.randbelow.

    Raises:
        GenesisMismatchError: the genesis block does not reproduce its announced hash or merkle root
        ChainParamsError: the definition holds malformed constants
    """
    logger.info(f"Building {definition.network_id.value} network profile")
    _check_definition(definition)

    genesis_block = build_genesis(definition.genesis)
    fixed_seeds = convert_seed6(definition.seed_table, now=now, rand=rand)

    return NetworkProfile(
        network_id=definition.network_id,
        message_start=definition.message_start,
        alert_pubkey=definition.alert_pubkey,
        default_port=definition.default_port,
        rpc_port=definition.rpc_port,
        proof_of_work_limit=pow_limit(definition.pow_limit_shift),
        genesis_block=genesis_block,
        hash_genesis_block=genesis_block.block_id,
        base58_prefixes=MappingProxyType(dict(definition.base58_prefixes)),
        fixed_seeds=fixed_seeds,
        dns_seeds=tuple(definition.dns_seeds),
        target_spacing=definition.target_spacing,
        last_pow_block=definition.last_pow_block,
        premine_amount=definition.premine_amount,
        premine_block=definition.premine_block,
        regular_pow_reward=definition.regular_pow_reward,
        first_pos_block=definition.first_pos_block,
        coinbase_maturity=definition.coinbase_maturity,
        launch_time=definition.launch_time,
        stake_min_age=definition.stake_min_age,
        modifier_interval=definition.modifier_interval,
        pos_coin_reward=definition.pos_coin_reward,
        advisable_pos_txout=definition.advisable_pos_txout,
        masternode_fix_reward=definition.masternode_fix_reward,
        masternode_proportional_reward=definition.masternode_proportional_reward,
        masternode_value=definition.masternode_value,
        data_dir=definition.data_dir
    )


# --- MAIN NETWORK --- #

MAIN_POW_LIMIT_SHIFT = 20
MAIN_LAUNCH_TIME = 1435774855
MAIN_LAST_POW_BLOCK = 19130

MAIN_GENESIS = GenesisParams(
    payload="MasterDoge FIXED",
    extra_nonce=42,
    timestamp=MAIN_LAUNCH_TIME,
    bits=target_to_bits(pow_limit(MAIN_POW_LIMIT_SHIFT)),
    nonce=1476223,
    expected_hash="00000cf795158c6e102d3bf2c91ba14bf4a9932e8b759214341892782d5e4904",
    expected_merkle_root="d3414c5a81b461dfe3066b11f4265da48cfc851f02b6933c0ae0a4a4f7d475d8"
)

MAIN_DEFINITION = NetworkDefinition(
    network_id=NetworkID.MAIN,
    # Rarely used upper ASCII, not valid as UTF-8, and a large 4-byte int at any alignment
    message_start=bytes.fromhex("53d72d0a"),
    alert_pubkey=bytes.fromhex(
        "04bd92e9f7ec8b3c48ebb27b743ff19cc131b06b18dcac8663d75ee0cc55878057"
        "ce9989dd1c82ba13b5277c0d058dd3241ebdeefab91f38300bda1cf8fabf3ad2"),
    default_port=2589,
    rpc_port=2588,
    pow_limit_shift=MAIN_POW_LIMIT_SHIFT,
    genesis=MAIN_GENESIS,
    base58_prefixes=MappingProxyType({
        Base58Type.PUBKEY_ADDRESS: bytes([51]),
        Base58Type.SCRIPT_ADDRESS: bytes([97]),
        Base58Type.SECRET_KEY: bytes([139]),
        Base58Type.EXT_PUBLIC_KEY: bytes.fromhex("0488b21e"),
        Base58Type.EXT_SECRET_KEY: bytes.fromhex("0488ade4"),
    }),
    seed_table=MAIN_SEEDS,
    dns_seeds=(("104.238.152.99", "104.238.152.99"),),
    target_spacing=60,
    last_pow_block=MAIN_LAST_POW_BLOCK,
    premine_amount=4_350_000 * COIN,
    premine_block=1,
    regular_pow_reward=5000 * COIN,
    first_pos_block=MAIN_LAST_POW_BLOCK - 50,
    coinbase_maturity=100,
    launch_time=MAIN_LAUNCH_TIME,
    stake_min_age=6 * 60 * 60,
    modifier_interval=1 * 60,
    pos_coin_reward=10,
    advisable_pos_txout=5000 * COIN,
    masternode_fix_reward=1000 * COIN,
    masternode_proportional_reward=5,
    masternode_value=20_000 * COIN,
)

# --- TESTNET --- #

TEST_POW_LIMIT_SHIFT = 16

# Everything testnet changes relative to main. The genesis keeps main's payload and time but is re-mined for the
# looser target, so its hash differs while the merkle root does not.
TEST_OVERRIDES = MappingProxyType({
    "network_id": NetworkID.TESTNET,
    "message_start": bytes.fromhex("5307196d"),
    "alert_pubkey": bytes.fromhex(
        "04d66d222f3552e2405ffd3604c9f17a6642d04ea031199197ab32bedb0134bafd"
        "38c5b85464465e3434303a54c7f481f478e699efd35a47c14deaa30b1eb0dfee"),
    "default_port": 55007,
    "rpc_port": 55008,
    "pow_limit_shift": TEST_POW_LIMIT_SHIFT,
    "genesis": replace(
        MAIN_GENESIS,
        bits=target_to_bits(pow_limit(TEST_POW_LIMIT_SHIFT)),
        nonce=45234,
        expected_hash="0000ed00fec7d19aa0614f1fc2f4cf8fa143d71187b1395614e38edc2afbfb5e"
    ),
    "base58_prefixes": MappingProxyType({
        Base58Type.PUBKEY_ADDRESS: bytes([117]),
        Base58Type.SCRIPT_ADDRESS: bytes([164]),
        Base58Type.SECRET_KEY: bytes([219]),
        Base58Type.EXT_PUBLIC_KEY: bytes.fromhex("043587cf"),
        Base58Type.EXT_SECRET_KEY: bytes.fromhex("04358394"),
    }),
    "seed_table": TEST_SEEDS,
    "dns_seeds": (),
    "target_spacing": 10,
    "last_pow_block": MAX_HEIGHT,  # proof-of-work never ends on testnet
    "premine_amount": 1_000_000 * COIN,
    "premine_block": 1,
    "regular_pow_reward": 10_000 * COIN,
    "first_pos_block": 7000,
    "coinbase_maturity": 200,
    "launch_time": 1433538000,
    "stake_min_age": 1 * 60 * 60,
    "modifier_interval": 1 * 60,
    "pos_coin_reward": 15,
    "advisable_pos_txout": 10_000 * COIN,
    "masternode_fix_reward": 50 * COIN,
    "masternode_proportional_reward": 20,
    "masternode_value": 5000 * COIN,
    "data_dir": "testnet",
})

TEST_DEFINITION = replace(MAIN_DEFINITION, **TEST_OVERRIDES)
