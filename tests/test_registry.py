"""
Tests for network selection
"""
import pytest

from mdoge.core import UnknownNetworkError
from mdoge.params import NetworkID, ProfileRegistry, get_registry, params, parse_testnet_flag, select_params, \
    select_params_from_command_line


def test_default_is_main(registry):
    assert registry.current().network_id == NetworkID.MAIN


def test_select_round_trip(registry):
    assert registry.select(NetworkID.TESTNET).network_id == NetworkID.TESTNET
    assert registry.current().network_id == NetworkID.TESTNET

    registry.select(NetworkID.MAIN)
    assert registry.current().network_id == NetworkID.MAIN


def test_select_returns_singletons(registry, main_profile, test_profile):
    assert registry.select("test") is test_profile
    assert registry.select("main") is main_profile
    assert registry.get(NetworkID.TESTNET) is test_profile
    assert registry.current() is main_profile


def test_select_from_environment(registry):
    assert registry.select_from_environment(True).network_id == NetworkID.TESTNET
    assert registry.current().network_id == NetworkID.TESTNET
    assert registry.select_from_environment(False).network_id == NetworkID.MAIN
    assert registry.current().network_id == NetworkID.MAIN


@pytest.mark.parametrize("network", ["regtest", "MAIN", "", 3])
def test_unknown_network(registry, network):
    with pytest.raises(UnknownNetworkError):
        registry.select(network)
    assert registry.current().network_id == NetworkID.MAIN


def test_unimplemented_network(main_profile):
    main_only = ProfileRegistry({NetworkID.MAIN: main_profile})
    assert main_only.networks == (NetworkID.MAIN,)
    with pytest.raises(UnknownNetworkError):
        main_only.select(NetworkID.TESTNET)
    with pytest.raises(UnknownNetworkError):
        ProfileRegistry({NetworkID.MAIN: main_profile}, default=NetworkID.TESTNET)


@pytest.mark.parametrize("argv, expected", [
    ([], False),
    (["-testnet"], True),
    (["--testnet"], True),
    (["-testnet=1"], True),
    (["-testnet=0"], False),
    (["-datadir=/tmp", "-testnet", "-server"], True),
    (["-datadir=/tmp"], False),
    (["-testnet", "getinfo"], True),
    (["getinfo", "-testnet"], True),
    (["-testnet=yes"], True),
    (["-testnet=junk"], False),
    (["-testnet", "-testnet=0"], False),
    (["-testnet=0", "--testnet"], True),
])
def test_parse_testnet_flag(argv, expected):
    assert parse_testnet_flag(argv) is expected


def test_select_from_command_line(registry):
    assert registry.select_from_command_line(["-testnet"]) is True
    assert registry.current().network_id == NetworkID.TESTNET
    assert registry.select_from_command_line([]) is True
    assert registry.current().network_id == NetworkID.MAIN


def test_process_registry():
    assert get_registry() is get_registry()
    try:
        assert params().network_id == NetworkID.MAIN
        select_params(NetworkID.TESTNET)
        assert params().network_id == NetworkID.TESTNET
        select_params_from_command_line(["-testnet=0"])
        assert params().network_id == NetworkID.MAIN
    finally:
        select_params(NetworkID.MAIN)
