"""Quantize every track of a MIDI file to a note grid and save the result.

	python examples/quantize_file.py input.mid output.mid "sixteenth"

Messages the event model does not cover (SysEx, key signatures, ...) are
not written back for the quantized tracks.
"""

import logging
import sys

import mido

import miditrack
import miditrack.mido_bridge

logging.basicConfig(level=logging.DEBUG)

input_path, output_path = sys.argv[1], sys.argv[2]
grid = sys.argv[3] if len(sys.argv) > 3 else "sixteenth"

mid = mido.MidiFile(input_path)
sequence = miditrack.Sequence(ppqn=mid.ticks_per_beat)

for midi_track in mid.tracks:
	miditrack.mido_bridge.track_from_mido(sequence, midi_track)

for index, track in enumerate(sequence):

	# Leave the conductor track (tempo and time signature) where it is.
	if index == 0 and mid.type == 1:
		continue

	track.quantize(grid)
	mid.tracks[index] = miditrack.mido_bridge.track_to_mido(track)

	logging.info(f"{track.name}: {len(track)} events, channels 0x{track.channels_used:04x}")

mid.save(output_path)
