"""
Two-phase operations with a primary and an auxiliary effect.

Some operations change a durable fact of record (the primary effect) and
then enrich other state on a best-effort basis (the auxiliary effect).
Only the primary effect decides the outcome: its errors propagate, while
auxiliary errors are logged and reported on the returned outcome.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class EffectOutcome(Generic[T]):
    """Result of a primary/auxiliary operation."""

    result: T
    auxiliary_succeeded: bool
    auxiliary_error: Optional[Exception] = None


async def run_with_auxiliary(
    primary: Callable[[], Awaitable[T]],
    auxiliary: Callable[[T], Awaitable[Any]],
    name: str,
) -> EffectOutcome[T]:
    """
    Run a primary effect, then an auxiliary effect on its result.

    Args:
        primary: Zero-argument coroutine function producing the result.
            Any exception it raises propagates unchanged and the
            auxiliary effect is not attempted.
        auxiliary: Coroutine function receiving the primary result.
            Exceptions are logged and never propagate.
        name: Name of the auxiliary effect, used in log messages.

    Returns:
        EffectOutcome wrapping the primary result and auxiliary status.
    """
    result = await primary()

    try:
        await auxiliary(result)
    except Exception as e:
        logger.error(f"Auxiliary effect '{name}' failed: {e}", exc_info=True)
        return EffectOutcome(
            result=result,
            auxiliary_succeeded=False,
            auxiliary_error=e,
        )

    return EffectOutcome(
        result=result,
        auxiliary_succeeded=True,
    )
