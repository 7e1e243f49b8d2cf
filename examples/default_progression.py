import logging
import random

import triadwalk

logging.basicConfig(level=logging.INFO)

# 32 chords from C major, seed 0.
renderer = triadwalk.MidiFileRenderer()
chords = triadwalk.generate(triadwalk.initial_state(), 32, random.Random(0), renderer=renderer)

for chord in chords:
	logging.info(chord.describe())

renderer.save("progression.mid")
