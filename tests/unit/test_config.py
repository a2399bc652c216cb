"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import logging

import pytest

from cryptonote import config
from cryptonote.util import helpers
from cryptonote.xmr import nets


@pytest.fixture
def cfgFile(tmp_path):
    path = tmp_path / config.CONFIG_NAME

    def _write(text):
        path.write_text(text)
        return path

    return _write


def test_parseLogLevel():
    assert config.parseLogLevel("debug") == (logging.DEBUG, {})
    assert config.parseLogLevel("WARNING") == (logging.WARNING, {})
    assert config.parseLogLevel("XMR:debug,TXEXTRA:error") == (
        None,
        {"XMR": logging.DEBUG, "TXEXTRA": logging.ERROR},
    )
    with pytest.raises(KeyError):
        config.parseLogLevel("loud")


def test_defaults(tmp_path):
    cfg = config.CmdArgs([], cfgPath=tmp_path / "missing.conf")
    assert cfg.netParams is nets.mainnet
    assert cfg.walletAddress is None
    assert cfg.logLevel == logging.INFO
    assert cfg.moduleLevels == {}


def test_network_flags(tmp_path):
    missing = tmp_path / "missing.conf"
    assert config.CmdArgs(["--testnet"], missing).netParams is nets.testnet
    assert config.CmdArgs(["--stagenet"], missing).netParams is nets.stagenet
    with pytest.raises(SystemExit):
        config.CmdArgs(["--testnet", "--stagenet"], missing)
    with pytest.raises(SystemExit):
        config.CmdArgs(["--regtest"], missing)


def test_config_file(cfgFile):
    path = cfgFile(
        "network = stagenet\nwalletaddress = 5fileaddress\nloglevel = XMR:debug\n"
    )
    assert config.readConfigFile(path) == {
        "network": "stagenet",
        "walletaddress": "5fileaddress",
        "loglevel": "XMR:debug",
    }
    cfg = config.CmdArgs([], path)
    assert cfg.netParams is nets.stagenet
    assert cfg.walletAddress == "5fileaddress"
    assert cfg.logLevel == logging.INFO
    assert cfg.moduleLevels == {"XMR": logging.DEBUG}

    # The command line takes precedence.
    cfg = config.CmdArgs(
        ["--testnet", "--walletaddress", "9argaddress", "--loglevel", "error"], path
    )
    assert cfg.netParams is nets.testnet
    assert cfg.walletAddress == "9argaddress"
    assert cfg.logLevel == logging.ERROR


def test_bad_config(cfgFile):
    with pytest.raises(SystemExit):
        config.CmdArgs([], cfgFile("network = regtest\n"))
    with pytest.raises(SystemExit):
        config.CmdArgs([], cfgFile("loglevel = loud\n"))
    with pytest.raises(SystemExit):
        config.CmdArgs([], cfgFile("loglevel = XMR\n"))
    with pytest.raises(SystemExit):
        config.CmdArgs(["--loglevel", "XMR:debug:extra"], cfgFile(""))


def test_prepareLogging(tmp_path):
    cfg = config.CmdArgs(
        ["--loglevel", "XMR:debug"], cfgPath=tmp_path / "missing.conf"
    )
    logPath = tmp_path / "cryptonote.log"
    cfg.prepareLogging(logPath)
    assert helpers.getLogger("XMR").level == logging.DEBUG
    helpers.prepareLogging(lvlMap={"XMR": logging.INFO})


def test_load(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "cnConfig", None)
    monkeypatch.setattr(config, "configPath", lambda: str(tmp_path / "none.conf"))
    cfg = config.load(["--stagenet"])
    assert cfg.netParams is nets.stagenet
    assert config.load(["--testnet"]) is cfg
