"""Ordered fallback chain: try extraction attempts in turn until one yields data."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, List, Optional, Sequence

from .exceptions import TranscriptUnavailableError
from ..utils.logging import get_logger

logger = get_logger("fallback")


class AttemptStatus(Enum):
    """Outcome of a single extraction attempt."""
    SUCCESS = "success"
    NO_DATA = "no_data"
    ERROR = "error"


@dataclass
class AttemptResult:
    """Tagged result of one attempt."""
    status: AttemptStatus
    data: Optional[List[Any]] = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, data: List[Any]) -> "AttemptResult":
        return cls(AttemptStatus.SUCCESS, data=data)

    @classmethod
    def no_data(cls) -> "AttemptResult":
        return cls(AttemptStatus.NO_DATA)

    @classmethod
    def failed(cls, error: Exception) -> "AttemptResult":
        return cls(AttemptStatus.ERROR, error=error)


@dataclass
class Attempt:
    """A named coroutine function producing a list of results."""
    name: str
    func: Callable[[], Awaitable[List[Any]]]

    async def run(self) -> AttemptResult:
        """
        Run the attempt and tag its outcome.

        Definitive unavailability is not tagged; it propagates so the chain
        stops without trying further attempts.
        """
        try:
            data = await self.func()
        except TranscriptUnavailableError:
            raise
        except Exception as e:
            logger.warning(f"Attempt '{self.name}' failed: {e}")
            return AttemptResult.failed(e)

        if not data:
            logger.info(f"Attempt '{self.name}' produced no data")
            return AttemptResult.no_data()
        return AttemptResult.success(data)


async def run_attempts(attempts: Sequence[Attempt]) -> List[Any]:
    """
    Run attempts in order and return the data of the first success.

    Raises:
        TranscriptUnavailableError: if an attempt reports definitive
            unavailability, or every attempt produced no data
        Exception: the first attempt error, if any attempt errored and none
            succeeded
    """
    first_error: Optional[Exception] = None

    for attempt in attempts:
        logger.info(f"Trying {attempt.name}")
        result = await attempt.run()
        if result.status is AttemptStatus.SUCCESS:
            logger.info(f"{attempt.name} succeeded with {len(result.data)} item(s)")
            return result.data
        if result.status is AttemptStatus.ERROR and first_error is None:
            first_error = result.error

    if first_error is not None:
        raise first_error
    raise TranscriptUnavailableError()
