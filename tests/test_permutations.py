import itertools

import pytest

import triadwalk.permutations


def test_six_distinct_orderings () -> None:

	"""All six permutations produce every ordering exactly once."""

	results = [
		triadwalk.permutations.apply_permutation(name, ["a", "b", "c"])
		for name in triadwalk.permutations.PERMUTATIONS
	]

	assert len(results) == 6
	assert set(results) == set(itertools.permutations(["a", "b", "c"]))


def test_index_triples_are_bijections () -> None:

	"""Each permutation maps {0, 1, 2} onto itself."""

	for indices in triadwalk.permutations.PERMUTATIONS.values():
		assert sorted(indices) == [0, 1, 2]


def test_identity_is_noop () -> None:

	"""ABC leaves the order unchanged."""

	assert triadwalk.permutations.apply_permutation(triadwalk.permutations.IDENTITY, (3, 1, 2)) == (3, 1, 2)


def test_named_orderings () -> None:

	"""Letter k of the name is the source element in position k."""

	src = (0, 4, 7)

	assert triadwalk.permutations.apply_permutation("ACB", src) == (0, 7, 4)
	assert triadwalk.permutations.apply_permutation("BCA", src) == (4, 7, 0)
	assert triadwalk.permutations.apply_permutation("CAB", src) == (7, 0, 4)
	assert triadwalk.permutations.apply_permutation("CBA", src) == (7, 4, 0)


def test_invalid_permutation () -> None:

	"""Unknown names and wrong sizes raise ValueError."""

	with pytest.raises(ValueError):
		triadwalk.permutations.apply_permutation("AAB", (0, 4, 7))

	with pytest.raises(ValueError):
		triadwalk.permutations.apply_permutation("ABC", (0, 4, 7, 10))
