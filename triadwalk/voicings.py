"""Voice leading between consecutive triads.

Each voice keeps its slot; the optimizer only chooses which member of the
new chord goes into which slot. Of the six orderings, the one with the
smallest sum of squared differences from the previous triad wins, so two
small moves beat one large move.

Distances are plain differences of the 0-11 values, not the shortest way
round the octave: B (11) against C (0) costs 121.

Example:
	```python
	from triadwalk.voicings import voice_lead
	voice_lead((0, 4, 7), (10, 2, 5))  # → (10, 2, 5) reordered for least motion
	```
"""

import logging
import typing

import triadwalk.chords
import triadwalk.permutations


logger = logging.getLogger(__name__)


def voice_leading_cost (previous: typing.Sequence[int], candidate: typing.Sequence[int]) -> int:

	"""Sum of squared semitone differences, slot by slot."""

	return sum((candidate[i] - previous[i]) ** 2 for i in range(len(previous)))


def best_permutation (previous: typing.Sequence[int], target: typing.Sequence[int]) -> str:

	"""Find the ordering of ``target`` that moves least from ``previous``.

	Tries every permutation in ``PERMUTATIONS`` order and keeps the first one
	reaching the minimum cost, so ties resolve the same way every time.

	Parameters:
		previous: The triad being left, in slot order.
		target: The triad being reached, in structural order.

	Returns:
		The winning permutation name.
	"""

	triadwalk.chords.validate_triad(previous)
	triadwalk.chords.validate_triad(target)

	best_name: typing.Optional[str] = None
	best_cost = 0

	for name in triadwalk.permutations.PERMUTATIONS:
		candidate = triadwalk.permutations.apply_permutation(name, target)
		cost = voice_leading_cost(previous, candidate)

		if best_name is None or cost < best_cost:
			best_name = name
			best_cost = cost

	assert best_name is not None

	logger.debug(f"Optimal permutation {best_name} (cost {best_cost})")

	return best_name


def voice_lead (previous: typing.Sequence[int], target: typing.Sequence[int]) -> triadwalk.chords.Triad:

	"""Return ``target`` reordered for the smoothest motion from ``previous``."""

	name = best_permutation(previous, target)

	return triadwalk.permutations.apply_permutation(name, target)


class VoiceLeadingState:

	"""Track the previous triad across chord changes.

	Example:
		```python
		state = VoiceLeadingState()
		state.next((0, 4, 7))    # (0, 4, 7) - nothing to lead from
		state.next((10, 2, 5))   # reordered against (0, 4, 7)
		```
	"""

	def __init__ (self) -> None:

		"""Start with no previous triad."""

		self.previous: typing.Optional[triadwalk.chords.Triad] = None

	def next (self, target: typing.Sequence[int]) -> triadwalk.chords.Triad:

		"""Voice ``target`` against the previous triad, then remember ``target`` (not the voicing)."""

		triad = triadwalk.chords.validate_triad(target)

		if self.previous is None:
			result = triadwalk.permutations.apply_permutation(triadwalk.permutations.IDENTITY, triad)

		else:
			result = voice_lead(self.previous, triad)

		self.previous = triad

		return result
