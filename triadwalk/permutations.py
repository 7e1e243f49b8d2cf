"""The six orderings of a three-note chord.

Voices stay in fixed slots; voice leading only decides which chord member
sits in which slot. ``PERMUTATIONS`` lists every ordering of positions
``{0, 1, 2}`` exactly once, and its iteration order is the tie-break order
used by ``triadwalk.voicings.best_permutation``.
"""

import typing


T = typing.TypeVar("T")

IDENTITY = "ABC"

PERMUTATIONS: typing.Dict[str, typing.Tuple[int, int, int]] = {
	"ABC": (0, 1, 2),
	"ACB": (0, 2, 1),
	"BAC": (1, 0, 2),
	"BCA": (1, 2, 0),
	"CAB": (2, 0, 1),
	"CBA": (2, 1, 0),
}


def apply_permutation (name: str, src: typing.Sequence[T]) -> typing.Tuple[T, T, T]:

	"""Return a reordered copy of a three-element sequence.

	Parameters:
		name: Permutation name, e.g. ``"BCA"`` - letter ``k`` of the name says
			which source element lands in position ``k``.
		src: Exactly three elements.

	Raises:
		ValueError: For an unknown permutation name or a sequence that is not three long.

	Example:
		```python
		apply_permutation("BCA", [0, 4, 7])  # → (4, 7, 0)
		```
	"""

	if name not in PERMUTATIONS:
		raise ValueError(f"Unknown permutation: {name!r}")

	if len(src) != 3:
		raise ValueError(f"Permutations apply to exactly 3 elements, got {len(src)}")

	first, second, third = PERMUTATIONS[name]

	return (src[first], src[second], src[third])
