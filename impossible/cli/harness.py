"""
Demo harness for the example functions.

Evaluates the fixed set of expressions the CLI prints for ``demo``:
    Equal(FuncF, FuncF), Equal(FuncG, FuncG),
    Equal(FuncF, FuncG), Equal(FuncG, FuncF),
    Modulus(FuncF), Modulus(FuncG)

Every run is deterministic: the same expressions, the same answers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from ..combinators import equal, modulus
from ..examples import func_f, func_g
from ..search import Enumeration, resolve_enumeration

logger = logging.getLogger(__name__)


# =============================================================================
# RESULTS
# =============================================================================

@dataclass(frozen=True)
class ExpressionResult:
    """One evaluated expression and its decided value (bool or natural)."""
    expression: str
    value: Union[bool, int]


@dataclass
class DemoResult:
    """Everything the demo evaluated, in evaluation order."""
    enumeration: Enumeration
    results: list[ExpressionResult] = field(default_factory=list)

    def get(self, expression: str) -> Optional[Union[bool, int]]:
        """Value of an expression by its printed form, or None."""
        for result in self.results:
            if result.expression == expression:
                return result.value
        return None


# =============================================================================
# EXECUTION
# =============================================================================

def demo_expressions(
    enumeration: Enumeration,
) -> list[tuple[str, Callable[[], Union[bool, int]]]]:
    """The demo expressions paired with thunks computing them."""
    return [
        ("Equal(FuncF, FuncF)", lambda: equal(func_f, func_f, enumeration)),
        ("Equal(FuncG, FuncG)", lambda: equal(func_g, func_g, enumeration)),
        ("Equal(FuncF, FuncG)", lambda: equal(func_f, func_g, enumeration)),
        ("Equal(FuncG, FuncF)", lambda: equal(func_g, func_f, enumeration)),
        ("Modulus(FuncF)", lambda: modulus(func_f, enumeration)),
        ("Modulus(FuncG)", lambda: modulus(func_g, enumeration)),
    ]


def run_demo(
    enumeration: Union[Enumeration, str, None] = None,
    on_result: Optional[Callable[[ExpressionResult], None]] = None,
) -> DemoResult:
    """
    Evaluate every demo expression.

    Args:
        enumeration: candidate ordering for the searches
        on_result: called after each expression, e.g. to print progress

    Returns:
        DemoResult with one entry per expression
    """
    enumeration = resolve_enumeration(enumeration)
    demo = DemoResult(enumeration=enumeration)

    for expression, thunk in demo_expressions(enumeration):
        logger.info("Evaluating %s", expression)
        result = ExpressionResult(expression=expression, value=thunk())
        demo.results.append(result)
        if on_result is not None:
            on_result(result)

    return demo
