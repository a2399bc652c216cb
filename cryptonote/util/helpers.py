"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Logging, configuration file and data directory helpers.
"""

import configparser
import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import platform
import sys
from typing import Dict, Iterable, List, Optional, Union

from appdirs import AppDirs  # type: ignore


LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"

# Rotating log file limits.
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 2

# The section header given to sectionless INI files.
INI_SECTION = "cryptonote"


class LogSettings:
    """
    Used to track a few logging-related settings.
    """

    root = logging.getLogger("cryptonote")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: List[logging.Handler] = []


LogSettings.root.setLevel(logging.NOTSET)


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Prepare for using getLogger. Logs to stderr. If filepath is provided, log
    outputs will also be saved to a rotating log file at the specified
    location. Any loggers, both future loggers and those already created, will
    have their levels set according to the new logLvl and lvlMap. Handlers
    installed by a previous call are replaced, so records are never emitted
    twice.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The default logging level used for all loggers without
            entries in the lvlMap.
        lvlMap: The name->level mapping will be added to the stored level dict,
            which is referenced when loggers are created using getLogger.
    """
    LogSettings.defaultLevel = logLvl
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))

    for handler in LogSettings.handlers:
        LogSettings.root.removeHandler(handler)
        handler.close()
    LogSettings.handlers = []

    formatter = logging.Formatter(LOG_FORMAT)
    if filepath:
        LogSettings.handlers.append(
            RotatingFileHandler(
                filepath, mode="a", maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS
            )
        )
    if not sys.executable.endswith("pythonw.exe"):
        # pythonw on windows has no console.
        LogSettings.handlers.append(logging.StreamHandler())
    for handler in LogSettings.handlers:
        handler.setFormatter(formatter)
        LogSettings.root.addHandler(handler)


def getLogger(name: str) -> Logger:
    """
    Gets a named logger. If the name has a log level registered with
    prepareLogging, that level will be used, otherwise the default is used.

    Args:
        name: The logger name, e.g. "XMR".
    """
    l = LogSettings.root.getChild(name)
    l.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = l
    return l


def readINI(path: Union[Path, str], keys: Iterable[str]) -> Dict[str, str]:
    """
    Read the specified keys from an INI-formatted configuration file. The
    file doesn't need a section header, and all sections are searched. Keys
    that aren't found are absent from the result.

    Args:
        path: The path to the INI configuration file.
        keys: Keys to search for.

    Returns:
        Discovered keys and values.
    """
    config = configparser.ConfigParser(strict=False)
    with open(path) as f:
        config.read_string(f"[{INI_SECTION}]\n" + f.read())
    keys = set(keys)
    res = {}
    for section in config.sections():
        for k, v in config[section].items():
            if k in keys:
                res[k] = v
    return res


def appDataDir(appName: str) -> str:
    """
    An operating system specific directory for the application's data.
    Windows and macOS use the platform data directory. Other systems use a
    dot-directory in the user's home.

    Args:
        appName: The name of the app whose data directory is wanted.

    Returns:
        The path of the wanted data directory.
    """
    appName = appName.lstrip(".")
    if not appName:
        return "."

    if platform.system() in ("Windows", "Darwin"):
        return AppDirs(appName.capitalize(), "").user_data_dir

    homeDir = os.path.expanduser("~")
    if homeDir == "~":
        homeDir = os.getenv("HOME", "")
    if not homeDir:
        return "."
    return os.path.join(homeDir, "." + appName.lower())
