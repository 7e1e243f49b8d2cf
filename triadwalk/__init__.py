"""
Triadwalk - a random-walk chord progression generator that writes MIDI.

Starting from a C major triad, each step draws one transition for the
current harmonic tag (major, minor, suspended, diminished), transposes the
triad slot by slot, and reorders the new triad so the three voices move as
little as possible. The result is rendered as a two-track MIDI file.

Everything is driven by an explicitly seeded ``random.Random``, so the same
seed always produces the same progression.

Minimal example:

    ```python
    import random
    import triadwalk

    renderer = triadwalk.MidiFileRenderer()
    chords = triadwalk.generate(triadwalk.initial_state(), 24, random.Random(0), renderer=renderer)
    renderer.save("progression.mid")
    ```

Package-level exports: ``ChordState``, ``HarmonicState``, ``MidiFileRenderer``,
``generate``, ``initial_state``.
"""

import triadwalk.chords
import triadwalk.harmonic_state
import triadwalk.midi_file
import triadwalk.progression


ChordState = triadwalk.chords.ChordState
HarmonicState = triadwalk.harmonic_state.HarmonicState
MidiFileRenderer = triadwalk.midi_file.MidiFileRenderer
generate = triadwalk.progression.generate
initial_state = triadwalk.chords.initial_state
