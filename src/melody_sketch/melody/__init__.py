"""
Melody layer - token strings to event sequences.

- decode: A-H / x token string to a MelodySequence
- RewriteRule / RuleSet / expand: grow a token string from a seed
"""

from melody_sketch.melody.decoder import (
    NOTE_TOKENS,
    REST_TOKEN,
    MelodyEvent,
    MelodySequence,
    Note,
    Rest,
    decode,
)
from melody_sketch.melody.rewrite import RewriteRule, RuleSet, expand

__all__ = [
    "NOTE_TOKENS",
    "REST_TOKEN",
    "MelodyEvent",
    "MelodySequence",
    "Note",
    "Rest",
    "decode",
    "RewriteRule",
    "RuleSet",
    "expand",
]
