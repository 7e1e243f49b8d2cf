import logging
import random
import typing

import triadwalk.chords
import triadwalk.transition_table
import triadwalk.voicings


logger = logging.getLogger(__name__)


def step (
	current: triadwalk.chords.ChordState,
	rng: random.Random,
	table: typing.Optional[triadwalk.transition_table.TransitionTable] = None
) -> triadwalk.chords.ChordState:

	"""Advance one chord state to the next.

	Draws one transition for ``current.tag``, applies its delta to the
	canonical triad, then voices the result against the *canonical* triad of
	``current`` (not its voicing). ``current`` is never modified.

	Parameters:
		current: The chord being left.
		rng: Seeded ``random.Random``; exactly one value is drawn.
		table: Transition table (default ``DEFAULT_TABLE``).
	"""

	if table is None:
		table = triadwalk.transition_table.DEFAULT_TABLE

	case, transition = table.choose(current.tag, rng)
	canonical = transition.apply(current.canonical)
	voicing = triadwalk.voicings.voice_lead(current.canonical, canonical)

	logger.debug(f"{current.tag} case {case} ({transition.description}) -> {transition.result_tag}")

	return triadwalk.chords.ChordState(
		tag = transition.result_tag,
		canonical = canonical,
		voicing = voicing
	)


class HarmonicState:

	"""Holds the current chord and the random stream that moves it."""

	def __init__ (
		self,
		initial: typing.Optional[triadwalk.chords.ChordState] = None,
		rng: typing.Optional[random.Random] = None,
		table: typing.Optional[triadwalk.transition_table.TransitionTable] = None
	) -> None:

		"""
		Initialize the harmonic state.

		Parameters:
			initial: Starting chord (default C major, see ``chords.initial_state``).
			rng: Optional seeded ``random.Random`` for deterministic playback.
			table: Transition table (default ``DEFAULT_TABLE``).
		"""

		self.table = table or triadwalk.transition_table.DEFAULT_TABLE
		self.table.validate()

		self.current_chord = initial or triadwalk.chords.initial_state()

		# Decision path: a starting tag with no row-group could never advance.
		self.table.get_transitions(self.current_chord.tag)

		self.rng = rng or random.Random()


	def step (self) -> triadwalk.chords.ChordState:

		"""Advance to the next chord. The current chord changes only if the step succeeds."""

		self.current_chord = step(self.current_chord, self.rng, self.table)

		return self.current_chord


	def get_current_chord (self) -> triadwalk.chords.ChordState:

		"""Return the current chord."""

		return self.current_chord
