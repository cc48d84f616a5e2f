"""
Rewrite rules - grow a melody from a short seed.

A rule replaces one symbol with a string ('A->AC'). A rule set applies all
of its rules to every symbol of a string at once; symbols without a rule are
copied unchanged. Repeating this a few times turns a short seed into a long,
self-similar melody which is then decoded like any other token string.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from melody_sketch.constants import MAX_EXPANDED_SYMBOLS, ErrorMessages
from melody_sketch.errors import RuleSyntaxError

logger = logging.getLogger(__name__)

RULE_SEPARATOR = "->"


@dataclass(frozen=True)
class RewriteRule:
    """
    A single-symbol substitution.

    Examples:
        RewriteRule("A", "AC") - every A becomes AC
        RewriteRule.parse("D -> Bx")
    """

    symbol: str
    replacement: str

    def __post_init__(self) -> None:
        if len(self.symbol) != 1:
            raise RuleSyntaxError(
                f"Rule left side must be exactly one symbol, got {self.symbol!r}"
            )
        if not self.replacement:
            raise RuleSyntaxError(f"Rule for {self.symbol!r} has an empty right side")

    @classmethod
    def parse(cls, text: str) -> RewriteRule:
        """Parse a rule from 'A->AC'. Whitespace around either side is ignored."""
        lhs, separator, rhs = text.partition(RULE_SEPARATOR)
        if not separator:
            raise RuleSyntaxError(f"Rule {text!r} has no {RULE_SEPARATOR!r}")
        return cls(lhs.strip(), rhs.strip())

    def __str__(self) -> str:
        return f"{self.symbol}{RULE_SEPARATOR}{self.replacement}"


class RuleSet:
    """
    A set of rewrite rules with at most one rule per symbol.

    Applied in parallel: every rule sees the string as it was before the
    current pass.
    """

    def __init__(self, rules: Iterable[RewriteRule] = ()):
        self._rules: dict[str, str] = {}
        for rule in rules:
            if rule.symbol in self._rules:
                raise RuleSyntaxError(f"Rule set contains two rules for {rule.symbol!r}")
            self._rules[rule.symbol] = rule.replacement

    @classmethod
    def parse(cls, texts: Iterable[str]) -> RuleSet:
        """Build a rule set from strings like ['A->AC', 'B->DD']."""
        return cls(RewriteRule.parse(text) for text in texts)

    def __len__(self) -> int:
        return len(self._rules)

    def __bool__(self) -> bool:
        return bool(self._rules)

    def apply(self, text: str) -> str:
        """Rewrite every symbol of `text` once."""
        return "".join(self._rules.get(symbol, symbol) for symbol in text)

    def rewritten_length(self, text: str) -> int:
        """Length `apply(text)` would have, without building it."""
        return sum(len(self._rules.get(symbol, symbol)) for symbol in text)

    def __repr__(self) -> str:
        rules = ", ".join(
            f"{symbol}{RULE_SEPARATOR}{replacement}" for symbol, replacement in sorted(self._rules.items())
        )
        return f"RuleSet({rules})"


def expand(seed: str, ruleset: RuleSet, iterations: int) -> str:
    """
    Apply a rule set to a seed string `iterations` times.

    Args:
        seed: Starting string
        ruleset: Rules to apply
        iterations: Number of passes (0 returns the seed unchanged)

    Returns:
        The rewritten string

    Raises:
        RuleSyntaxError: If iterations is negative, or a pass would grow the
            string past MAX_EXPANDED_SYMBOLS.
    """
    if iterations < 0:
        raise RuleSyntaxError(f"Iterations must be >= 0, got {iterations}")

    text = seed
    for iteration in range(1, iterations + 1):
        if ruleset.rewritten_length(text) > MAX_EXPANDED_SYMBOLS:
            raise RuleSyntaxError(
                ErrorMessages.EXPANSION_TOO_LONG.format(
                    limit=MAX_EXPANDED_SYMBOLS, iteration=iteration
                )
            )
        text = ruleset.apply(text)
    logger.debug("Expanded %r with %r x%d -> %d symbols", seed, ruleset, iterations, len(text))
    return text
