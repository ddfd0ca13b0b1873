import pytest

import miditrack
import miditrack.sequence
import miditrack.track


def test_default_ppqn () -> None:

	"""A sequence defaults to 480 ticks per quarter note."""

	assert miditrack.sequence.Sequence().ppqn == 480


def test_invalid_ppqn_raises () -> None:

	"""Zero or negative resolutions are rejected."""

	with pytest.raises(ValueError):
		miditrack.sequence.Sequence(ppqn=0)

	with pytest.raises(ValueError):
		miditrack.sequence.Sequence(ppqn=-96)


def test_length_to_delta (sequence: miditrack.sequence.Sequence) -> None:

	"""Quarter-note multiples convert to ticks, fractions included."""

	assert sequence.length_to_delta(1) == 480
	assert sequence.length_to_delta(0.25) == 120
	assert sequence.length_to_delta(4) == 1920
	assert sequence.length_to_delta(0) == 0


def test_length_to_delta_rounds_to_nearest_tick () -> None:

	"""Lengths that do not divide the resolution round to a whole tick."""

	seq = miditrack.sequence.Sequence(ppqn=96)

	assert seq.length_to_delta(1 / 3) == 32
	assert seq.length_to_delta(1 / 7) == 14


def test_note_to_length_plain_names (sequence: miditrack.sequence.Sequence) -> None:

	"""Each note name and its abbreviations map to a quarter-note multiple."""

	assert sequence.note_to_length("whole") == 4.0
	assert sequence.note_to_length("half") == 2.0
	assert sequence.note_to_length("quarter") == 1.0
	assert sequence.note_to_length("eighth") == 0.5
	assert sequence.note_to_length("8th") == 0.5
	assert sequence.note_to_length("16th") == 0.25
	assert sequence.note_to_length("thirty second") == 0.125
	assert sequence.note_to_length("32nd") == 0.125
	assert sequence.note_to_length("sixty fourth") == 0.0625


def test_note_to_length_modifiers (sequence: miditrack.sequence.Sequence) -> None:

	"""dotted and triplet scale the base length, in any position and case."""

	assert sequence.note_to_length("dotted quarter") == 1.5
	assert sequence.note_to_length("Dotted Quarter") == 1.5
	assert sequence.note_to_length("8th triplet") == pytest.approx(1 / 3)
	assert sequence.note_to_length("triplet 8th") == pytest.approx(1 / 3)
	assert sequence.note_to_length("dotted 8th triplet") == pytest.approx(0.5)


def test_note_to_delta (sequence: miditrack.sequence.Sequence) -> None:

	"""Note names resolve to ticks at the sequence resolution."""

	assert sequence.note_to_delta("sixteenth") == 120
	assert sequence.note_to_delta("8th triplet") == 160
	assert sequence.note_to_delta("dotted quarter") == 720


def test_unknown_note_name_raises (sequence: miditrack.sequence.Sequence) -> None:

	"""Names outside the table are reported rather than defaulted."""

	with pytest.raises(ValueError, match="Unrecognized note-length name"):
		sequence.note_to_length("breve")

	with pytest.raises(ValueError):
		sequence.note_to_delta("dotted")


def test_sequence_name_comes_from_first_track (sequence: miditrack.sequence.Sequence) -> None:

	"""The sequence is named after its first track."""

	assert sequence.name == "Unnamed"

	first = miditrack.track.Track(sequence)
	second = miditrack.track.Track(sequence)
	sequence.tracks.extend([first, second])

	first.name = "Tempo Map"
	second.name = "Piano"

	assert sequence.name == "Tempo Map"
	assert list(sequence) == [first, second]


def test_package_exports () -> None:

	"""The package root exposes Sequence and Track."""

	assert miditrack.Sequence is miditrack.sequence.Sequence
	assert miditrack.Track is miditrack.track.Track
