"""Pitch class arithmetic and naming.

A pitch class is an integer in ``[0, 12)`` - a pitch with its octave thrown
away. Octaves are only assigned when a chord is rendered (see
``triadwalk.midi_file``).

Module-level constants:
- Named pitch classes (``C``, ``Cs``, ``Db``, ... ``B``), including enharmonic aliases
- `NOTE_NAME_TO_PC`: Maps note names (e.g. `"C"`, `"F#"`, `"Bb"`) to pitch classes
- `PC_TO_NOTE_NAME`: Maps pitch classes to a single display name each
"""

import typing


PITCH_CLASS_COUNT = 12

C = 0
Cs = 1
Db = 1
D = 2
Ds = 3
Eb = 3
E = 4
F = 5
Fs = 6
Gb = 6
G = 7
Gs = 8
Ab = 8
A = 9
As = 10
Bb = 10
B = 11

NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": C,
	"C#": Cs,
	"Db": Db,
	"D": D,
	"D#": Ds,
	"Eb": Eb,
	"E": E,
	"F": F,
	"F#": Fs,
	"Gb": Gb,
	"G": G,
	"G#": Gs,
	"Ab": Ab,
	"A": A,
	"A#": As,
	"Bb": Bb,
	"B": B,
}

# Flats for the black keys, one name per pitch class.
PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"Db",
	"D",
	"Eb",
	"E",
	"F",
	"Gb",
	"G",
	"Ab",
	"A",
	"Bb",
	"B",
]


def wrap (x: int) -> int:

	"""Reduce any integer into a pitch class in ``[0, 12)``.

	Transposition deltas may be negative, so the value is wrapped in both
	directions.

	Example:
		```python
		wrap(14)   # → 2
		wrap(-2)   # → 10
		```
	"""

	return ((x % PITCH_CLASS_COUNT) + PITCH_CLASS_COUNT) % PITCH_CLASS_COUNT


def transpose (triad: typing.Sequence[int], delta: typing.Sequence[int]) -> typing.Tuple[int, ...]:

	"""Add ``delta`` to ``triad`` position by position, wrapping each result."""

	if len(triad) != len(delta):
		raise ValueError(f"Cannot transpose {len(triad)} notes by {len(delta)} offsets")

	return tuple(wrap(pc + offset) for pc, offset in zip(triad, delta))


def pc_name (pc: int) -> str:

	"""Return the display name for a pitch class.

	Raises:
		ValueError: If ``pc`` is outside ``[0, 12)``.
	"""

	if pc < 0 or pc >= PITCH_CLASS_COUNT:
		raise ValueError(f"Pitch class out of range: {pc}")

	return PC_TO_NOTE_NAME[pc]


def note_name_to_pc (name: str) -> int:

	"""Validate a note name and return its pitch class (0–11).

	Parameters:
		name: Note name (e.g. ``"C"``, ``"F#"``, ``"Bb"``).

	Raises:
		ValueError: If the note name is not recognised.
	"""

	if name not in NOTE_NAME_TO_PC:
		raise ValueError(
			f"Unknown note name: {name!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)

	return NOTE_NAME_TO_PC[name]
