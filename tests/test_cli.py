"""
Tests for the command line entry point
"""
import json

from mdoge.__main__ import main
from mdoge.params import NetworkID, select_params


def test_main_prints_selected_profile(capsys):
    try:
        assert main(["-testnet"]) == 0
        profile_dict = json.loads(capsys.readouterr().out)
        assert profile_dict["network"] == "test"
        assert profile_dict["default_port"] == 55007

        assert main(["--log-level", "ERROR"]) == 0
        profile_dict = json.loads(capsys.readouterr().out)
        assert profile_dict["network"] == "main"
        assert profile_dict["genesis"]["merkle_root"] == \
               "d3414c5a81b461dfe3066b11f4265da48cfc851f02b6933c0ae0a4a4f7d475d8"
    finally:
        select_params(NetworkID.MAIN)


def test_main_ignores_word_after_flag(capsys):
    try:
        assert main(["-testnet", "getinfo"]) == 0
        assert json.loads(capsys.readouterr().out)["network"] == "test"
    finally:
        select_params(NetworkID.MAIN)
