"""
miditrack - editable MIDI event tracks for Python.

A ``Track`` holds the events of one track of a ``Sequence`` and keeps two
views of their timing in step: the delta time stored in a MIDI file (ticks
since the previous event) and the absolute tick position from the start of
the track. On top of that it can:

- **Merge** another list of events into a track, ordered by time.
- **Quantize** every event to a grid given as a length (``0.25``) or a note
  name (``"sixteenth"``, ``"8th triplet"``, ``"dotted quarter"``).
- **Re-sort stably**, so events that share a tick keep their original order.
- Read and set the **track name** (a meta event in the track) and an
  **instrument** name held on the track.

File reading and writing is left to ``mido``; ``miditrack.mido_bridge``
converts between ``mido.MidiTrack`` and ``Track``.

Minimal example:

    ```python
    import miditrack
    import miditrack.event

    seq = miditrack.Sequence(ppqn=480)
    track = miditrack.Track(seq)
    seq.tracks.append(track)

    track.name = "Piano"
    on = miditrack.event.NoteOn(channel=0, note=60, velocity=100, delta_time=10)
    off = miditrack.event.NoteOff(channel=0, note=60, delta_time=470, on=on)
    track.merge([on, off])
    track.quantize("sixteenth")
    ```

Package-level exports: ``Sequence``, ``Track``.
"""

import miditrack.sequence
import miditrack.track


Sequence = miditrack.sequence.Sequence
Track = miditrack.track.Track
