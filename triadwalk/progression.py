"""Progression driver.

Walks the transition table from a starting chord and hands each realized
chord to a renderer before the next one is computed, so rendering and
harmonic computation stay in lockstep.

Example:
	```python
	import random
	import triadwalk.chords
	import triadwalk.progression

	chords = triadwalk.progression.generate(
		triadwalk.chords.initial_state(),
		step_count = 24,
		rng = random.Random(0)
	)
	```
"""

import logging
import random
import typing

import triadwalk.chords
import triadwalk.harmonic_state
import triadwalk.transition_table
import triadwalk.voicings


logger = logging.getLogger(__name__)


@typing.runtime_checkable
class Renderer (typing.Protocol):

	"""
	Protocol for anything that consumes realized chords.

	``render`` must emit both the start and the end of the chord's notes
	before returning; the next chord is requested only afterwards.
	"""

	def render (self, chord: triadwalk.chords.ChordState) -> None:

		"""Emit one chord."""

		...


def walk (
	initial: triadwalk.chords.ChordState,
	rng: random.Random,
	table: typing.Optional[triadwalk.transition_table.TransitionTable] = None
) -> typing.Iterator[triadwalk.chords.ChordState]:

	"""Yield ``initial`` and then every following chord, forever.

	The next chord is only computed when the consumer asks for it, so nothing
	is drawn from ``rng`` beyond what has been consumed.
	"""

	state = triadwalk.harmonic_state.HarmonicState(initial=initial, rng=rng, table=table)

	yield state.get_current_chord()

	while True:
		yield state.step()


def generate (
	initial: triadwalk.chords.ChordState,
	step_count: int,
	rng: random.Random,
	renderer: typing.Optional[Renderer] = None,
	table: typing.Optional[triadwalk.transition_table.TransitionTable] = None
) -> typing.List[triadwalk.chords.ChordState]:

	"""Generate a progression of exactly ``step_count`` chords.

	The first chord is ``initial``. Each chord is rendered before the next is
	computed. A renderer failure propagates immediately; no later chord is
	computed.

	Parameters:
		initial: Starting chord, emitted first.
		step_count: Number of chords to produce (``0`` gives an empty list).
		rng: Seeded ``random.Random``; one value is drawn per chord after the first.
		renderer: Optional chord consumer (e.g. ``MidiFileRenderer``).
		table: Transition table (default ``DEFAULT_TABLE``).

	Returns:
		The chords in order.
	"""

	if step_count < 0:
		raise ValueError("Step count must be non-negative")

	chords: typing.List[triadwalk.chords.ChordState] = []

	if step_count == 0:
		return chords

	for chord in walk(initial, rng, table):

		logger.debug(chord.describe())

		if renderer is not None:
			renderer.render(chord)

		chords.append(chord)

		if len(chords) == step_count:
			break

	return chords


def revoice (previous_canonical: typing.Sequence[int], canonical: typing.Sequence[int]) -> triadwalk.chords.Triad:

	"""Recompute a stored chord's voicing from its canonical triad and its predecessor's."""

	return triadwalk.voicings.voice_lead(previous_canonical, canonical)
