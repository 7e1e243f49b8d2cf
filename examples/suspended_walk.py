import logging
import random

import triadwalk
import triadwalk.chords
import triadwalk.pitch_class
import triadwalk.transition_table

logging.basicConfig(level=logging.INFO)

# A smaller table that only moves between major and suspended chords.
table = triadwalk.transition_table.TransitionTable()

table.add_transition("major", (-5, -4, -5), "suspended", "fourth down, suspend")
table.add_transition("major", (+2, +3, +2), "suspended", "whole step up, suspend")
table.add_transition("major", (0, +1, 0), "suspended", "raise the third")

table.add_transition("suspended", (0, -1, 0), "major", "resolve to major")
table.add_transition("suspended", (+5, +4, +5), "major", "fourth up, resolve to major")

start = triadwalk.chords.initial_state("major", (triadwalk.pitch_class.D, triadwalk.pitch_class.Fs, triadwalk.pitch_class.A))

renderer = triadwalk.MidiFileRenderer(ticks_per_beat=480, chord_length=1920, velocity=80)

chords = triadwalk.generate(start, 16, random.Random(42), renderer=renderer, table=table)

for chord in chords:
	logging.info(chord.describe())

renderer.save("suspended_walk.mid")
