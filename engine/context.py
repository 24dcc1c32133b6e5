"""
context.py — Debugger Session Context
======================================
Everything one viewer session owns, in one object instead of module
globals: the selected algorithm, the raw input text, the generated trace
and the Stepper that plays it.

    ctx = DebuggerContext()
    ctx.select_algorithm("binary-search")
    ctx.array_input = "23,1,10,5,2,7,15"
    ctx.target_input = "10"
    ctx.generate()
    ctx.stepper.next_step()
"""

import logging
import random
import re
from typing import Any, Dict, List, Optional

from algorithms import get_algorithm, instrument
from algorithms.step import Step
from engine.stepper import Stepper, StepperState

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "insertion-sort"
DEFAULT_ARRAY     = "23,1,10,5,2,7,15"
DEFAULT_TARGET    = "10"

RANDOM_MIN_VALUE = 1
RANDOM_MAX_VALUE = 99
MIN_ARRAY_SIZE   = 1
MAX_ARRAY_SIZE   = 50

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


# ---------------------------------------------------------------------------
# Input parsing
# ---------------------------------------------------------------------------
def parse_int_prefix(token: str) -> Optional[int]:
    """Leading integer of `token` ("3.5" -> 3, "7x" -> 7), or None."""
    match = _INT_PREFIX.match(token)
    return int(match.group(1)) if match else None


def parse_array_input(text: Optional[str]) -> List[int]:
    """Comma-separated integers; tokens with no leading integer are dropped."""
    if not text:
        return []
    values = []
    for token in text.split(","):
        value = parse_int_prefix(token)
        if value is not None:
            values.append(value)
    return values


def parse_target(text: Optional[str], array: List[int]) -> Optional[int]:
    """Target value, or the first array element when missing / not a number."""
    if text is not None:
        value = parse_int_prefix(str(text))
        if value is not None:
            return value
    return array[0] if array else None


def random_array(size: int, seed: Optional[int] = None) -> List[int]:
    size = max(MIN_ARRAY_SIZE, min(MAX_ARRAY_SIZE, int(size)))
    rng = random.Random(seed)
    return [rng.randint(RANDOM_MIN_VALUE, RANDOM_MAX_VALUE) for _ in range(size)]


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------
class DebuggerContext:
    """
    Attributes:
        algorithm    : Registry key of the selected algorithm.
        array_input  : Raw comma-separated array text.
        target_input : Raw target text (searches only).
        steps        : The current trace; empty until generate() succeeds.
        stepper      : Playback cursor over `steps`.
    """

    def __init__(
        self,
        algorithm: str = DEFAULT_ALGORITHM,
        array_input: str = DEFAULT_ARRAY,
        target_input: str = DEFAULT_TARGET,
    ):
        if get_algorithm(algorithm) is None:
            raise ValueError(f"Unknown algorithm: {algorithm}")
        self.algorithm = algorithm
        self.array_input = array_input
        self.target_input = target_input
        self.steps: List[Step] = []
        self.stepper = Stepper()

    @property
    def info(self):
        return get_algorithm(self.algorithm)

    def select_algorithm(self, key: str) -> None:
        """Switch algorithms.  The old trace and cursor are discarded."""
        if get_algorithm(key) is None:
            raise ValueError(f"Unknown algorithm: {key}")
        self.algorithm = key
        self.invalidate()

    def invalidate(self) -> None:
        self.steps = []
        self.stepper.unload()

    def randomize(self, size: int, seed: Optional[int] = None) -> List[int]:
        values = random_array(size, seed)
        self.array_input = ",".join(str(v) for v in values)
        self.invalidate()
        return values

    def generate(self) -> bool:
        """
        Parse the inputs and build a fresh trace.  An empty array leaves no
        trace behind and returns False.
        """
        array = parse_array_input(self.array_input)
        if not array:
            logger.debug("generate skipped: no numbers in %r", self.array_input)
            self.invalidate()
            return False

        target = parse_target(self.target_input, array) if self.info.needs_target else None
        self.steps = instrument(self.algorithm, array, target)
        self.stepper.load(self.steps)
        return True

    def restore(self, cursor: int, state: str) -> None:
        """Put a regenerated trace back where a previous request left it."""
        if not self.steps:
            return
        self.stepper.seek(max(0, min(cursor, self.stepper.last_index)))
        saved = StepperState(state)
        if saved != StepperState.IDLE:
            self.stepper.state = saved

    @property
    def current_step(self) -> Optional[Step]:
        return self.stepper.current_step

    def to_dict(self) -> Dict[str, Any]:
        step = self.current_step
        return {
            "algorithm": self.algorithm,
            "array_input": self.array_input,
            "target_input": self.target_input,
            "total_steps": len(self.steps),
            "current_index": self.stepper.current_idx,
            "state": self.stepper.state.value,
            "current_step": step.to_dict() if step else None,
            "pseudocode": list(self.info.pseudocode),
        }
