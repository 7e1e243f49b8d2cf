"""Harmonic tags and the chord state carried through a progression.

A ``ChordState`` holds two views of the same triad:

- ``canonical`` keeps the notes in fixed structural slots. Transition deltas
  are added to it position by position, so it is the harmonic bookkeeping.
- ``voicing`` is the same three notes reordered for playback, chosen to move
  as little as possible from the previous chord.

Harmonic tags: `"major"`, `"minor"`, `"suspended"`, `"diminished"`
"""

import dataclasses
import typing

import triadwalk.permutations
import triadwalk.pitch_class


Triad = typing.Tuple[int, int, int]

MAJOR = "major"
MINOR = "minor"
SUSPENDED = "suspended"
DIMINISHED = "diminished"

HARMONIC_TAGS: typing.Tuple[str, ...] = (MAJOR, MINOR, SUSPENDED, DIMINISHED)


def validate_tag (tag: str) -> str:

	"""Return ``tag`` unchanged, or raise ``ValueError`` if it is not a known harmonic tag."""

	if tag not in HARMONIC_TAGS:
		raise ValueError(f"Unknown harmonic tag: {tag!r}")

	return tag


def validate_triad (notes: typing.Sequence[int]) -> Triad:

	"""Check that ``notes`` holds exactly three pitch classes and return them as a tuple."""

	if len(notes) != 3:
		raise ValueError(f"A triad needs exactly 3 pitch classes, got {len(notes)}")

	for pc in notes:
		if not isinstance(pc, int) or isinstance(pc, bool):
			raise ValueError(f"Pitch class must be an integer, got {pc!r}")

		if pc < 0 or pc >= triadwalk.pitch_class.PITCH_CLASS_COUNT:
			raise ValueError(f"Pitch class out of range: {pc}")

	return (notes[0], notes[1], notes[2])


@dataclasses.dataclass(frozen=True)
class ChordState:

	"""
	One realized chord in a progression.
	"""

	tag: str
	canonical: Triad
	voicing: Triad


	def __post_init__ (self) -> None:

		validate_tag(self.tag)

		# canonical and voicing are always tuples.
		object.__setattr__(self, "canonical", validate_triad(self.canonical))
		object.__setattr__(self, "voicing", validate_triad(self.voicing))

		if sorted(self.voicing) != sorted(self.canonical):
			raise ValueError(f"Voicing {self.voicing} is not a permutation of {self.canonical}")


	def copy (self) -> "ChordState":

		"""Return an equal, independent chord state."""

		return dataclasses.replace(self)


	def as_tuple (self) -> typing.Tuple[str, Triad, Triad]:

		"""Return ``(tag, canonical, voicing)``, handy for comparing progressions."""

		return (self.tag, self.canonical, self.voicing)


	def describe (self) -> str:

		"""
		Return a human-friendly line, canonical first, voicing in brackets.

		Example:
			```python
			initial_state().describe()  # → "major: C E G (C E G)"
			```
		"""

		canonical = " ".join(triadwalk.pitch_class.pc_name(pc) for pc in self.canonical)
		voicing = " ".join(triadwalk.pitch_class.pc_name(pc) for pc in self.voicing)

		return f"{self.tag}: {canonical} ({voicing})"


def initial_state (tag: str = MAJOR, canonical: typing.Sequence[int] = (triadwalk.pitch_class.C, triadwalk.pitch_class.E, triadwalk.pitch_class.G)) -> ChordState:

	"""Build a starting chord state.

	The first chord has no predecessor to voice-lead from, so its voicing is
	the identity ordering of ``canonical``.

	Parameters:
		tag: Harmonic tag of the starting chord (default ``"major"``).
		canonical: Starting triad in structural order (default C E G).
	"""

	triad = validate_triad(canonical)

	return ChordState(
		tag = validate_tag(tag),
		canonical = triad,
		voicing = triadwalk.permutations.apply_permutation(triadwalk.permutations.IDENTITY, triad)
	)
