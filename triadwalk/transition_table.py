"""Tag-indexed transition tables for the harmonic random walk.

Each harmonic tag owns an ordered list of transitions. A transition adds a
delta to the canonical triad slot by slot (wrapping mod 12) and names the tag
of the resulting chord. Every transition in a row-group is equally likely.

Row-groups differ in size on purpose: major and minor chords have more ways
out than suspended and diminished ones.
"""

import dataclasses
import logging
import random
import typing

import triadwalk.chords
import triadwalk.pitch_class


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Transition:

	"""
	A positional transposition of the canonical triad plus the resulting tag.
	"""

	delta: typing.Tuple[int, int, int]
	result_tag: str
	description: str = ""


	def apply (self, canonical: typing.Sequence[int]) -> triadwalk.chords.Triad:

		"""Return the transposed canonical triad."""

		notes = triadwalk.pitch_class.transpose(canonical, self.delta)

		return (notes[0], notes[1], notes[2])


class TransitionTable:

	"""
	An ordered list of equally weighted transitions per harmonic tag.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty table.
		"""

		self._rows: typing.Dict[str, typing.List[Transition]] = {}
		self._frozen = False


	def add_transition (self, source_tag: str, delta: typing.Sequence[int], result_tag: str, description: str = "") -> None:

		"""
		Append a transition to the row-group of ``source_tag``.
		"""

		if self._frozen:
			raise ValueError("Transition table is frozen")

		triadwalk.chords.validate_tag(source_tag)
		triadwalk.chords.validate_tag(result_tag)

		if len(delta) != 3:
			raise ValueError(f"Transition delta must have 3 offsets, got {len(delta)}")

		if source_tag not in self._rows:
			self._rows[source_tag] = []

		self._rows[source_tag].append(Transition(
			delta = (delta[0], delta[1], delta[2]),
			result_tag = result_tag,
			description = description
		))


	def get_transitions (self, tag: str) -> typing.List[Transition]:

		"""
		Return the row-group for ``tag`` in insertion order.
		"""

		if tag not in self._rows:
			raise ValueError(f"No transitions for harmonic tag: {tag!r}")

		return list(self._rows[tag])


	def freeze (self) -> "TransitionTable":

		"""Validate the table and refuse further transitions. Returns the table."""

		self.validate()
		self._frozen = True

		return self


	def is_frozen (self) -> bool:

		"""Return True once ``freeze()`` has been called."""

		return self._frozen


	def tags (self) -> typing.List[str]:

		"""Return the tags that have a row-group."""

		return list(self._rows)


	def dangling_tags (self) -> typing.Set[str]:

		"""Return result tags that have no row-group of their own."""

		dangling: typing.Set[str] = set()

		for transitions in self._rows.values():
			for transition in transitions:
				if transition.result_tag not in self._rows:
					dangling.add(transition.result_tag)

		return dangling


	def validate (self) -> None:

		"""Raise ``ValueError`` unless every result tag leads to another row-group."""

		dangling = self.dangling_tags()

		if dangling:
			raise ValueError(f"Transitions lead to tags with no row-group: {sorted(dangling)}")


	def transition (self, tag: str, case: int) -> Transition:

		"""Return transition number ``case`` of the row-group for ``tag``."""

		options = self.get_transitions(tag)

		if case < 0 or case >= len(options):
			raise ValueError(f"Case {case} out of range for {tag!r} ({len(options)} transitions)")

		return options[case]


	def choose (self, tag: str, rng: random.Random) -> typing.Tuple[int, Transition]:

		"""
		Draw one transition uniformly from the row-group for ``tag``.

		Exactly one value is drawn from ``rng`` per call.

		Returns:
			``(case, transition)``
		"""

		options = self.get_transitions(tag)
		case = rng.randrange(len(options))

		logger.debug(f"{tag}, case {case}")

		return case, self.transition(tag, case)


def build_default_table () -> TransitionTable:

	"""Build the four-tag table: major, minor, suspended and diminished."""

	major = triadwalk.chords.MAJOR
	minor = triadwalk.chords.MINOR
	suspended = triadwalk.chords.SUSPENDED
	diminished = triadwalk.chords.DIMINISHED

	table = TransitionTable()

	# --- From major ---
	table.add_transition(major, (-2, -2, -2), major, "whole step down")
	table.add_transition(major, (-2, -3, -2), minor, "whole step down, make minor")
	table.add_transition(major, (+3, +3, +3), major, "minor third up")
	table.add_transition(major, (+4, +3, +4), minor, "major third up, make minor")
	table.add_transition(major, (-5, -4, -5), suspended, "fourth down, suspend")
	table.add_transition(major, (+2, +3, +2), suspended, "whole step up, suspend")
	table.add_transition(major, (0, +1, 0), suspended, "raise the third")
	table.add_transition(major, (+4, +3, +3), diminished, "major third up, diminish")
	table.add_transition(major, (+5, +4, +4), diminished, "fourth up, diminish")

	# --- From minor ---
	table.add_transition(minor, (-4, -4, -4), minor, "major third down")
	table.add_transition(minor, (+5, +6, +5), major, "fourth up, make major")
	table.add_transition(minor, (-5, -5, -5), minor, "fourth down")
	table.add_transition(minor, (-2, -1, -2), major, "whole step down, make major")
	table.add_transition(minor, (-5, -3, -5), suspended, "fourth down, suspend")
	table.add_transition(minor, (+5, +7, +5), suspended, "fourth up, suspend")
	table.add_transition(minor, (0, +2, 0), suspended, "raise the third a whole step")
	table.add_transition(minor, (0, 0, -1), diminished, "flatten the fifth")
	table.add_transition(minor, (-3, -3, -4), diminished, "minor third down, diminish")

	# --- From suspended ---
	table.add_transition(suspended, (0, -1, 0), major, "resolve to major")
	table.add_transition(suspended, (0, -2, 0), minor, "resolve to minor")
	table.add_transition(suspended, (+5, +4, +5), major, "fourth up, resolve to major")
	table.add_transition(suspended, (+5, +3, +5), minor, "fourth up, resolve to minor")

	# --- From diminished ---
	table.add_transition(diminished, (0, +1, +1), major, "resolve up to major")
	table.add_transition(diminished, (-5, -5, -4), minor, "fourth down, resolve to minor")
	table.add_transition(diminished, (+1, +2, +2), major, "semitone up, resolve to major")
	table.add_transition(diminished, (-1, 0, 0), major, "lower the root, resolve to major")

	return table.freeze()


DEFAULT_TABLE: TransitionTable = build_default_table()
