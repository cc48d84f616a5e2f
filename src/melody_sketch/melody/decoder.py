"""
Melody decoder - token strings to performance events.

The alphabet is A-H for scale degrees 0-7 (seven degrees plus the octave)
and x for a rest. Every event lasts one event unit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from melody_sketch.core.key import OCTAVE_DEGREE
from melody_sketch.errors import InvalidDegreeError, InvalidMelodyTokenError

logger = logging.getLogger(__name__)

REST_TOKEN = "x"
_FIRST_NOTE_TOKEN = "A"
NOTE_TOKENS = "".join(chr(ord(_FIRST_NOTE_TOKEN) + degree) for degree in range(OCTAVE_DEGREE + 1))


@dataclass(frozen=True)
class Note:
    """A sounded scale degree (0 = tonic, 7 = octave)."""

    degree: int

    def __post_init__(self) -> None:
        if not 0 <= self.degree <= OCTAVE_DEGREE:
            raise InvalidDegreeError(self.degree)

    @property
    def token(self) -> str:
        return NOTE_TOKENS[self.degree]


@dataclass(frozen=True)
class Rest:
    """One event unit of silence."""

    @property
    def token(self) -> str:
        return REST_TOKEN


MelodyEvent = Note | Rest


@dataclass(frozen=True)
class MelodySequence:
    """
    An ordered, read-only list of melody events.

    Built once from a token string; never modified afterwards.
    """

    events: tuple[MelodyEvent, ...] = ()

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[MelodyEvent]:
        return iter(self.events)

    def __getitem__(self, index: int) -> MelodyEvent:
        return self.events[index]

    @property
    def note_count(self) -> int:
        """Number of sounded events."""
        return sum(1 for event in self.events if isinstance(event, Note))

    def to_tokens(self) -> str:
        """Encode the sequence back into its token string."""
        return "".join(event.token for event in self.events)

    def __str__(self) -> str:
        return self.to_tokens()


_TOKEN_EVENTS: dict[str, MelodyEvent] = {
    **{token: Note(degree) for degree, token in enumerate(NOTE_TOKENS)},
    REST_TOKEN: Rest(),
}


def decode(text: str) -> MelodySequence:
    """
    Decode a melody token string.

    Args:
        text: String over A-H and x; may be empty

    Returns:
        MelodySequence in input order, one event per character

    Raises:
        InvalidMelodyTokenError: At the first character outside the alphabet.
    """
    events: list[MelodyEvent] = []
    for position, char in enumerate(text):
        event = _TOKEN_EVENTS.get(char)
        if event is None:
            raise InvalidMelodyTokenError(char, position)
        events.append(event)

    sequence = MelodySequence(tuple(events))
    logger.debug("Decoded %d events (%d notes)", len(sequence), sequence.note_count)
    return sequence
