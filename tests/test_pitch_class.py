import pytest

import triadwalk.pitch_class


def test_wrap_stays_in_range () -> None:

	"""Every integer should wrap into [0, 12) and repeat every octave."""

	for x in range(-1000, 1001):
		pc = triadwalk.pitch_class.wrap(x)

		assert 0 <= pc < 12
		assert pc == triadwalk.pitch_class.wrap(x + 12)


def test_wrap_negative_offsets () -> None:

	"""Negative values should wrap downward from C."""

	assert triadwalk.pitch_class.wrap(-2) == triadwalk.pitch_class.Bb
	assert triadwalk.pitch_class.wrap(-12) == triadwalk.pitch_class.C
	assert triadwalk.pitch_class.wrap(-13) == triadwalk.pitch_class.B


def test_transpose_is_positional () -> None:

	"""Each offset applies only to its own slot."""

	assert triadwalk.pitch_class.transpose((0, 4, 7), (-2, -3, -2)) == (10, 1, 5)
	assert triadwalk.pitch_class.transpose((11, 4, 7), (+1, 0, +5)) == (0, 4, 0)


def test_transpose_length_mismatch () -> None:

	"""Triad and delta must be the same size."""

	with pytest.raises(ValueError):
		triadwalk.pitch_class.transpose((0, 4, 7), (1, 2))


def test_names_cover_every_pitch_class () -> None:

	"""Display names should be distinct and map back to their pitch class."""

	names = [triadwalk.pitch_class.pc_name(pc) for pc in range(12)]

	assert len(set(names)) == 12

	for pc, name in enumerate(names):
		assert triadwalk.pitch_class.note_name_to_pc(name) == pc


def test_enharmonic_names () -> None:

	"""Sharps and flats for the same key give the same pitch class."""

	assert triadwalk.pitch_class.note_name_to_pc("C#") == triadwalk.pitch_class.note_name_to_pc("Db")
	assert triadwalk.pitch_class.note_name_to_pc("A#") == 10


def test_unknown_name_and_out_of_range () -> None:

	"""Bad names and pitch classes should raise ValueError."""

	with pytest.raises(ValueError):
		triadwalk.pitch_class.note_name_to_pc("H")

	with pytest.raises(ValueError):
		triadwalk.pitch_class.pc_name(12)

	with pytest.raises(ValueError):
		triadwalk.pitch_class.pc_name(-1)
