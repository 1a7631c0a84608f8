"""motorcar: Error Taxonomy and Logging
-------------------------------------

Error hierarchy and shared logger for the motorcar package.

Error Hierarchy
---------------
- CarError: Base exception for all motorcar errors
- CarInvalidArgumentError: Absent or non-engine argument given to a Car
- CarRegistryError: Registry conflicts, import and build failures (400-499)
- CarConfigError: Unknown engine names and invalid configuration (500-599)
- CarIOError: Configuration files that cannot be read

Warning Hierarchy
-----------------
- CarWarning: Base warning for all motorcar warnings

Logging
-------
The shared logger is named "motorcar" and can be configured for console and
file output with optional JSON formatting. Python warnings are captured into
logging with adjustable levels.
"""

import logging
import os

__all__ = [
    "CarError",
    "CarInvalidArgumentError",
    "CarRegistryError",
    "CarConfigError",
    "CarIOError",
    "CarWarning",
    "get_logger",
    "configure_logging",
]


# =============================================================================
# Exception Hierarchy
# =============================================================================


class CarError(Exception):
    """Base exception for all motorcar errors.

    Examples
    --------
    >>> try:
    ...     Car(None)
    ... except CarError as e:
    ...     print(f"car error: {e}")  # doctest: +SKIP

    """

    pass


class CarInvalidArgumentError(CarError, ValueError):
    """Invalid argument errors.

    Raised when a Car is constructed with, or switched to, an engine that is
    absent or does not satisfy the engine capability.
    """

    pass


class CarRegistryError(CarError):
    """Registry-related errors (Code 400-499).

    Raised on duplicate registrations [400-401], failed imports of lazily
    registered variants [402-403], and builders that raise or return a
    non-engine [404-405].
    """

    pass


class CarConfigError(CarError):
    """Configuration-related errors (Code 500-599).

    Raised when an engine name is not registered [501], the merged system
    configuration is invalid [502], or an explicit config file cannot be
    loaded [503].
    """

    pass


class CarIOError(CarError):
    """File access errors.

    Raised when a configuration file does not exist.
    """

    pass


class CarWarning(Warning):
    """Base warning for all motorcar warnings."""

    pass


# =============================================================================
# Logger Configuration
# =============================================================================

_LOGGER_NAME = "motorcar"
_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_JSON_FORMAT = (
    '{"time":"%(asctime)s","level":"%(levelname)s",'
    '"logger":"%(name)s","msg":"%(message)s"}'
)

_logger: logging.Logger | None = None


def get_logger() -> logging.Logger:
    """Get the shared motorcar logger instance.

    Returns
    -------
    logging.Logger
        The singleton logger named "motorcar" configured at INFO level by
        default with a console handler. Handlers are created lazily on first use.

    Examples
    --------
    >>> logger = get_logger()
    >>> logger.name
    'motorcar'

    """
    global _logger
    if _logger is None:
        _logger = logging.getLogger(_LOGGER_NAME)
        _logger.setLevel(logging.INFO)
        if not _logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter(_TEXT_FORMAT))
            _logger.addHandler(h)
    return _logger


def configure_logging(
    verbose: bool = False,
    log_file: str | None = None,
    as_json: bool = False,
    suppress_warnings: bool = False,
) -> None:
    """Configure the shared logger outputs and warning capture.

    Parameters
    ----------
    verbose : bool, default False
        When True, set logger level to DEBUG; otherwise INFO.
    log_file : str or None, default None
        Optional file path to append logs.
    as_json : bool, default False
        Emit logs in a compact JSON line format when True; otherwise plain text.
    suppress_warnings : bool, default False
        Raise the level of captured Python warnings to ERROR when True;
        otherwise capture warnings at WARNING level.

    Raises
    ------
    CarIOError
        If ``log_file`` cannot be opened for appending.

    """
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    fmt = logging.Formatter(_JSON_FORMAT if as_json else _TEXT_FORMAT)

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        try:
            fh = logging.FileHandler(os.fspath(log_file), encoding="utf-8")
        except OSError as e:
            raise CarIOError(f"Cannot open log file {log_file}: {e}") from e
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(
        logging.ERROR if suppress_warnings else logging.WARNING
    )
