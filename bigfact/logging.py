from datetime import datetime, timezone
from logging import DEBUG, INFO, WARNING, Formatter, LogRecord
from logging import basicConfig as _basicConfig
from logging import root as _root
from typing import Literal, Optional, Type

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def basicConfig(formatter: Optional[Formatter] = None, **kwargs) -> None:
    """Same as `logging.basicConfig`, but allows to specify a formatter instance
    to be added to the handlers instead of the default `logging.Formatter`
    """

    if formatter is not None and (kwargs.get("format") is not None or kwargs.get("datefmt") is not None):
        raise ValueError("Cannot specify `format` or `datefmt` with `formatter`")

    _basicConfig(**kwargs)

    if formatter is not None:
        for handler in _root.handlers:
            handler.setFormatter(formatter)


class IsoDatetimeFormatter(Formatter):

    """Displays the time in ISO 8601 format.
    Instead of passing a formatting string to `datefmt`, `sep` and `timespec`
    (see `datetime.datetime.isoformat`) can be passed. Times are UTC unless `aslocal` is True.
    """

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Type[None] = None,
        style: Literal["%", "{", "$"] = "%",
        sep: str = "T",
        timespec: str = "milliseconds",
        aslocal: bool = False,
    ) -> None:
        if datefmt is not None:
            raise ValueError("`datefmt` is not supported, use `sep` and `timespec`")

        Formatter.__init__(self, fmt, None, style)
        self.sep = sep
        self.timespec = timespec
        self.aslocal = aslocal

    def formatTime(self, record: LogRecord, datefmt: Optional[str] = None) -> str:
        dt = datetime.fromtimestamp(record.created, timezone.utc)
        if self.aslocal:
            dt = dt.astimezone()
        return dt.isoformat(self.sep, self.timespec)


def verbosity_level(verbose: int) -> int:
    """Maps the number of `-v` flags to a logging level."""

    if verbose <= 0:
        return WARNING
    elif verbose == 1:
        return INFO
    return DEBUG


def setup_logging(verbose: int = 0) -> None:
    basicConfig(formatter=IsoDatetimeFormatter(DEFAULT_FORMAT), level=verbosity_level(verbose))
