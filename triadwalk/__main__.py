import logging
import os
import random
import sys
import typing

import yaml

import triadwalk.chords
import triadwalk.constants
import triadwalk.midi_file
import triadwalk.progression


# Configure logging (stderr, so MIDI written to stdout stays intact)
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


class LoggingRenderer:

	"""Log each chord, then hand it on to another renderer."""

	def __init__ (self, renderer: triadwalk.progression.Renderer) -> None:

		self.renderer = renderer

	def render (self, chord: triadwalk.chords.ChordState) -> None:

		logger.info(chord.describe())
		self.renderer.render(chord)


def main () -> None:

	"""
	Generate a progression and write it as a MIDI file.
	"""

	config = load_config()

	progression_config: typing.Dict[str, typing.Any] = config.get('progression', {})
	midi_config: typing.Dict[str, typing.Any] = config.get('midi', {})

	seed = progression_config.get('seed', triadwalk.constants.DEFAULT_SEED)
	chord_count = progression_config.get('chord_count', triadwalk.constants.DEFAULT_CHORD_COUNT)
	output = midi_config.get('output')

	renderer = triadwalk.midi_file.MidiFileRenderer(
		ticks_per_beat = midi_config.get('ticks_per_beat', triadwalk.constants.TICKS_PER_BEAT),
		chord_length = midi_config.get('chord_length', triadwalk.constants.CHORD_LENGTH),
		velocity = midi_config.get('velocity', triadwalk.constants.VELOCITY)
	)

	rng = random.Random(seed)

	logger.info(f"Generating {chord_count} chords (seed {seed})")

	triadwalk.progression.generate(
		triadwalk.chords.initial_state(),
		step_count = chord_count,
		rng = rng,
		renderer = LoggingRenderer(renderer)
	)

	if output:
		renderer.save(output)

	else:
		renderer.save(sys.stdout.buffer)


if __name__ == "__main__":
	main()
