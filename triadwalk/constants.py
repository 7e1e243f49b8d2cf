"""Defaults for a progression run and its MIDI rendering.

Timing values are in MIDI ticks. With 2048 ticks per quarter note a chord
lasts two beats.
"""

DEFAULT_SEED = 0
DEFAULT_CHORD_COUNT = 24

TICKS_PER_BEAT = 2048
CHORD_LENGTH = TICKS_PER_BEAT * 2

VELOCITY = 96
MIDI_CHANNEL = 0

# Voice i of the voicing sounds in VOICE_OCTAVES[i]; the bass doubles voice 0.
VOICE_OCTAVES = (4, 5, 6)
BASS_OCTAVE = 3

MIN_NOTE = 0
MAX_NOTE = 127

MIN_VELOCITY = 0
MAX_VELOCITY = 127
