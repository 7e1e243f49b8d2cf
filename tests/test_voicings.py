import itertools
import random

import triadwalk.permutations
import triadwalk.voicings


def test_cost_is_sum_of_squares () -> None:

	"""Cost squares each slot's difference."""

	assert triadwalk.voicings.voice_leading_cost((0, 4, 7), (10, 1, 5)) == 100 + 9 + 4


def test_best_permutation_c_major_to_b_flat () -> None:

	"""C E G to Bb D F (whole step down) picks D F Bb.

	ABC (10, 2, 5) = 108, ACB (10, 5, 2) = 126, BAC (2, 10, 5) = 44,
	BCA (2, 5, 10) = 14, CAB (5, 10, 2) = 86, CBA (5, 2, 10) = 38.
	"""

	assert triadwalk.voicings.best_permutation((0, 4, 7), (10, 2, 5)) == "BCA"
	assert triadwalk.voicings.voice_lead((0, 4, 7), (10, 2, 5)) == (2, 5, 10)


def test_distance_is_linear_not_circular () -> None:

	"""B is 11 semitones from C here, not 1, so the identity order is not chosen.

	ABC (11, 4, 7) = 121 while BCA (4, 7, 11) = 16 + 9 + 16 = 41.
	"""

	assert triadwalk.voicings.voice_leading_cost((0, 4, 7), (11, 4, 7)) == 121
	assert triadwalk.voicings.best_permutation((0, 4, 7), (11, 4, 7)) == "BCA"


def test_ties_go_to_first_permutation () -> None:

	"""Equal costs resolve to the earliest permutation in enumeration order."""

	assert triadwalk.voicings.best_permutation((0, 4, 7), (0, 4, 7)) == "ABC"

	# Every ordering of (4, 6, 5) costs 2 against (5, 5, 5).
	assert triadwalk.voicings.best_permutation((5, 5, 5), (4, 6, 5)) == "ABC"

	# CAB (0, 1, 2) and CBA (0, 2, 1) both cost 1 from (0, 1, 1); CAB comes first.
	assert triadwalk.voicings.best_permutation((0, 1, 1), (1, 2, 0)) == "CAB"


def test_matches_brute_force () -> None:

	"""The chosen ordering is never beaten by any other ordering."""

	rng = random.Random(7)

	for _ in range(500):
		previous = tuple(rng.randrange(12) for _ in range(3))
		target = tuple(rng.randrange(12) for _ in range(3))

		chosen = triadwalk.voicings.voice_lead(previous, target)
		chosen_cost = triadwalk.voicings.voice_leading_cost(previous, chosen)

		for candidate in itertools.permutations(target):
			assert chosen_cost <= triadwalk.voicings.voice_leading_cost(previous, candidate)


def test_result_is_permutation_of_target () -> None:

	"""Voice leading only reorders notes."""

	result = triadwalk.voicings.voice_lead((3, 8, 11), (9, 0, 4))

	assert sorted(result) == [0, 4, 9]


# ─── VoiceLeadingState ──────────────────────────────────────────


def test_state_first_call_identity () -> None:

	"""With nothing to lead from, the first triad keeps its order."""

	state = triadwalk.voicings.VoiceLeadingState()

	assert state.next((0, 4, 7)) == (0, 4, 7)


def test_state_leads_from_previous_target () -> None:

	"""The state compares against the previous canonical triad, not the previous voicing."""

	state = triadwalk.voicings.VoiceLeadingState()
	state.next((0, 4, 7))

	assert state.next((10, 2, 5)) == (2, 5, 10)
	assert state.previous == (10, 2, 5)

	expected = triadwalk.voicings.voice_lead((10, 2, 5), (1, 5, 8))
	assert state.next((1, 5, 8)) == expected
