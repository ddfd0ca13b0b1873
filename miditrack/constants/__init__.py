"""Constants for miditrack.

- ``miditrack.constants.meta`` - Meta-event sub-type tags (track name, instrument, tempo, ...)
- ``miditrack.constants.note_lengths`` - Note names and their length in quarter notes

The defaults used by ``Sequence`` and ``Track`` live here.
"""

# Resolution of a new sequence, in ticks per quarter note.
DEFAULT_PPQN = 480

# Name reported by a track that has no sequence/track name meta event.
UNNAMED = "Unnamed"

# Number of MIDI channels covered by a track's channel bitmask.
MIDI_CHANNELS = 16
