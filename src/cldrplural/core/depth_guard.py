"""Depth limiting for recursive condition parsing.

Plural rules have no parentheses, but "and" and "or" are right-recursive:
every chained relation opens one more level of recursive descent. The guard
turns a runaway chain into a structured error before Python raises
RecursionError.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from cldrplural.constants import MAX_DEPTH
from cldrplural.diagnostics import PluralRuleError
from cldrplural.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(PluralRuleError):
    """Raised when maximum condition depth is exceeded.

    This error indicates either adversarial input designed to cause stack
    overflow or a rule text that is not a CLDR plural rule at all.
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard()
        with guard:
            result = self.condition()

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol.

    Thread Safety:
        Uses explicit instance state, fully reentrant.
        Each rule evaluation owns its own DepthGuard instance.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing: __exit__ is not called
        when __enter__ raises, so incrementing first would leave
        current_depth permanently elevated.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.rule_depth_exceeded(self.max_depth))
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1


def depth_clamp(requested_depth: int, reserve_frames: int = 50, frames_per_level: int = 6) -> int:
    """Clamp requested depth against Python recursion limit.

    Each condition level costs several interpreter frames (production,
    choice closure, sequence), so the usable depth is the recursion limit
    minus a reserve, divided by the frames spent per level.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)
        frames_per_level: Interpreter frames consumed per nesting level

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(100)
        100
        >>> depth_clamp(500)
        158
    """
    max_safe_depth = max(1, (sys.getrecursionlimit() - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
