"""
Fixtures used in the tests
"""
import pytest

from mdoge.params import MAIN_DEFINITION, TEST_DEFINITION, NetworkID, ProfileRegistry, build_profile

# Fixed clock for reproducible seed timestamps
NOW = 1_700_000_000


def fixed_rand(n: int) -> int:
    """Deterministic stand-in for randbelow: the midpoint of [0, n)"""
    return n // 2


@pytest.fixture(scope="session")
def main_profile():
    return build_profile(MAIN_DEFINITION, now=NOW, rand=fixed_rand)


@pytest.fixture(scope="session")
def test_profile():
    return build_profile(TEST_DEFINITION, now=NOW, rand=fixed_rand)


@pytest.fixture()
def registry(main_profile, test_profile):
    return ProfileRegistry({NetworkID.MAIN: main_profile, NetworkID.TESTNET: test_profile})


@pytest.fixture()
def now():
    return NOW
