"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Configuration settings for cryptonote tools.
"""

import argparse
import logging
import os
import sys

from cryptonote import CryptonoteError
from cryptonote.util import helpers
from cryptonote.xmr import nets


# The configuration file name, found in the OS-appropriate data directory.
CONFIG_NAME = "cryptonote.conf"

# Keys read from the configuration file.
CONFIG_KEYS = ("network", "walletaddress", "loglevel")

MAINNET = nets.mainnet.Name
TESTNET = nets.testnet.Name
STAGENET = nets.stagenet.Name

logLevelMap = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "notset": logging.NOTSET,
    "0": logging.NOTSET,
}


def logLvl(s):
    """
    Get the log level from the map.

    Args:
        s (str): A string which is a key for the logLevelMap. Case-insensitive.
    """
    return logLevelMap[s.lower()]


def parseLogLevel(specifier):
    """
    Parse a log level specifier, either a single level name or
    comma-separated module:level pairs.

    Args:
        specifier (str): The level specifier.

    Returns:
        int or None: The default level, if one was given.
        dict: Module name to level.
    """
    if any(ch in specifier for ch in (",", ":")):
        pairs = (s.split(":") for s in specifier.split(","))
        return None, {k: logLvl(v) for k, v in pairs}
    return logLvl(specifier), {}


def configPath():
    """
    The default configuration file path.
    """
    return os.path.join(helpers.appDataDir("cryptonote"), CONFIG_NAME)


def readConfigFile(path=None):
    """
    Read the configuration file, if there is one.

    Args:
        path (str): optional. The file path. Default is configPath().

    Returns:
        dict: The settings found in the file.
    """
    path = path or configPath()
    if not os.path.isfile(path):
        return {}
    return helpers.readINI(path, CONFIG_KEYS)


class CmdArgs:
    """
    CmdArgs are command-line configuration options, falling back to the
    configuration file for anything not given on the command line.
    """

    def __init__(self, argv=None, cfgPath=None):
        """
        Args:
            argv (list(str)): optional. The arguments. Default is sys.argv[1:].
            cfgPath (str): optional. The configuration file path.
        """
        self.logLevel = logging.INFO
        self.moduleLevels = {}
        parser = argparse.ArgumentParser()
        parser.add_argument("--loglevel")
        parser.add_argument("--walletaddress")
        netGroup = parser.add_mutually_exclusive_group()
        netGroup.add_argument("--testnet", action="store_true", help="use testnet")
        netGroup.add_argument("--stagenet", action="store_true", help="use stagenet")
        args, unknown = parser.parse_known_args(argv)
        if unknown:
            sys.exit(f"unknown arguments: {unknown}")
        fileCfg = readConfigFile(cfgPath)

        if args.testnet:
            self.netParams = nets.testnet
        elif args.stagenet:
            self.netParams = nets.stagenet
        else:
            try:
                self.netParams = nets.parse(fileCfg.get("network", MAINNET))
            except CryptonoteError:
                sys.exit(f"unknown network in config file: {fileCfg['network']}")

        self.walletAddress = args.walletaddress or fileCfg.get("walletaddress")

        levelSpec = args.loglevel or fileCfg.get("loglevel")
        if levelSpec:
            try:
                level, self.moduleLevels = parseLogLevel(levelSpec)
            except (KeyError, ValueError):
                sys.exit(f"malformed loglevel specifier: {levelSpec}")
            if level is not None:
                self.logLevel = level

    def prepareLogging(self, filepath=None):
        """
        Apply the configured log levels.

        Args:
            filepath (str): optional. A rotating log file path.
        """
        helpers.prepareLogging(filepath, self.logLevel, self.moduleLevels)


cnConfig = None


def load(argv=None):
    """
    Load and return the current configuration. The configuration is only
    loaded once. Successive calls to the modular `load` function will return
    the same instance.

    Returns:
        CmdArgs: The current configuration.
    """
    global cnConfig
    if not cnConfig:
        cnConfig = CmdArgs(argv)
    return cnConfig
