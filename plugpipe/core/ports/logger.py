from typing import Protocol


class LoggerPort(Protocol):
    """
    Operational log sink used by orchestrators.

    Implementations must never raise: a sink that cannot write drops the
    record and the business operation carries on.
    """

    def info(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...
