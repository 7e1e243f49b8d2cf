"""Render a progression to a Standard MIDI File.

Two tracks in a type 1 (simultaneous) file:

- a chord track, voice ``i`` of the voicing placed in ``voice_octaves[i]``
- a bass track doubling voice 0 in ``bass_octave``

Every chord starts right where the previous one ended and all its notes are
released after ``chord_length`` ticks, so consecutive chords never overlap.
"""

import logging
import os
import typing

import mido

import triadwalk.chords
import triadwalk.constants


logger = logging.getLogger(__name__)


def pitch (octave: int, pc: int) -> int:

	"""Return the MIDI note number for a pitch class in an octave (``12 * octave + pc``)."""

	note = 12 * octave + pc

	if note < triadwalk.constants.MIN_NOTE or note > triadwalk.constants.MAX_NOTE:
		raise ValueError(f"MIDI note out of range: octave {octave}, pitch class {pc}")

	return note


class MidiFileRenderer:

	"""Collect chords as note events and write them out as a MIDI file.

	Example:
		```python
		renderer = MidiFileRenderer()
		triadwalk.progression.generate(initial, 24, rng, renderer=renderer)
		renderer.save("progression.mid")
		```
	"""

	def __init__ (
		self,
		ticks_per_beat: int = triadwalk.constants.TICKS_PER_BEAT,
		chord_length: int = triadwalk.constants.CHORD_LENGTH,
		velocity: int = triadwalk.constants.VELOCITY,
		voice_octaves: typing.Sequence[int] = triadwalk.constants.VOICE_OCTAVES,
		bass_octave: int = triadwalk.constants.BASS_OCTAVE,
		channel: int = triadwalk.constants.MIDI_CHANNEL
	) -> None:

		"""
		Initialize an empty two-track rendering.

		Parameters:
			ticks_per_beat: File resolution in ticks per quarter note.
			chord_length: Duration of every chord in ticks.
			velocity: Note-on and note-off velocity (0-127).
			voice_octaves: Octave for each of the three voices.
			bass_octave: Octave for the bass note.
			channel: MIDI channel (0-15).
		"""

		if ticks_per_beat <= 0:
			raise ValueError("Ticks per beat must be positive")

		if chord_length <= 0:
			raise ValueError("Chord length must be positive")

		if velocity < triadwalk.constants.MIN_VELOCITY or velocity > triadwalk.constants.MAX_VELOCITY:
			raise ValueError(f"Velocity out of range: {velocity}")

		if len(voice_octaves) != 3:
			raise ValueError(f"Need one octave per voice (3), got {len(voice_octaves)}")

		self.ticks_per_beat = ticks_per_beat
		self.chord_length = chord_length
		self.velocity = velocity
		self.voice_octaves = tuple(voice_octaves)
		self.bass_octave = bass_octave
		self.channel = channel

		self.chord_track = mido.MidiTrack()
		self.bass_track = mido.MidiTrack()
		self.chord_count = 0


	def _note (self, message_type: str, note: int, time: int) -> mido.Message:

		return mido.Message(message_type, channel=self.channel, note=note, velocity=self.velocity, time=time)


	def render (self, chord: triadwalk.chords.ChordState) -> None:

		"""Append one chord's note-ons and note-offs, in voicing order."""

		bass = pitch(self.bass_octave, chord.voicing[0])
		voices = [pitch(octave, pc) for octave, pc in zip(self.voice_octaves, chord.voicing)]

		self.bass_track.append(self._note('note_on', bass, 0))

		for note in voices:
			self.chord_track.append(self._note('note_on', note, 0))

		self.bass_track.append(self._note('note_off', bass, self.chord_length))

		# Only the first release carries the duration; the rest land on the same tick.
		for i, note in enumerate(voices):
			self.chord_track.append(self._note('note_off', note, self.chord_length if i == 0 else 0))

		self.chord_count += 1


	def midi_file (self) -> mido.MidiFile:

		"""Return a type 1 ``mido.MidiFile`` holding both tracks, each closed with end-of-track."""

		mid = mido.MidiFile(type=1, ticks_per_beat=self.ticks_per_beat)

		for source in (self.chord_track, self.bass_track):
			track = mido.MidiTrack(message.copy() for message in source)
			track.append(mido.MetaMessage('end_of_track', time=0))
			mid.tracks.append(track)

		return mid


	def save (self, target: typing.Union[str, os.PathLike, typing.BinaryIO]) -> None:

		"""Write the MIDI file to a path or to an open binary file object."""

		mid = self.midi_file()

		logger.info(f"Writing {self.chord_count} chords ({len(mid.tracks)} tracks)")

		if isinstance(target, (str, os.PathLike)):
			mid.save(filename=target)

		else:
			mid.save(file=target)
