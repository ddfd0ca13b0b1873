import pytest

import miditrack.constants.meta
import miditrack.event


def test_quantize_to_rounds_to_nearest () -> None:

	"""Events snap to the closer grid line, half-way rounding up."""

	cases = [(0, 0), (119, 0), (120, 240), (250, 240), (359, 240), (360, 480)]

	for time_from_start, expected in cases:
		event = miditrack.event.Controller(time_from_start=time_from_start)
		event.quantize_to(240)
		assert event.time_from_start == expected


def test_quantize_to_odd_boundary_snaps_to_nearest () -> None:

	"""On an odd grid, ticks below the midpoint snap down and those above snap up."""

	cases = [(22, 0), (23, 45), (67, 45), (68, 90)]

	for time_from_start, expected in cases:
		event = miditrack.event.Controller(time_from_start=time_from_start)
		event.quantize_to(45)
		assert event.time_from_start == expected


def test_quantize_to_leaves_delta_alone () -> None:

	"""Only the absolute time moves; the track recomputes deltas."""

	event = miditrack.event.Controller(delta_time=250, time_from_start=250)
	event.quantize_to(240)

	assert event.time_from_start == 240
	assert event.delta_time == 250


def test_quantize_to_rejects_non_positive_boundary () -> None:

	"""A zero boundary would divide by zero and is refused."""

	with pytest.raises(ValueError):
		miditrack.event.Controller(time_from_start=10).quantize_to(0)


def test_negative_delta_time_raises () -> None:

	"""Delta times count forward from the previous event."""

	with pytest.raises(ValueError):
		miditrack.event.Controller(delta_time=-1)


def test_channel_out_of_range_raises () -> None:

	"""Channel events accept channels 0-15 only."""

	miditrack.event.NoteOn(channel=15)

	with pytest.raises(ValueError):
		miditrack.event.NoteOn(channel=16)


def test_note_off_links_note_on () -> None:

	"""Passing on= pairs the two events in both directions."""

	on = miditrack.event.NoteOn(channel=2, note=64)
	off = miditrack.event.NoteOff(channel=2, note=64, on=on)

	assert off.on is on
	assert on.off is off
	assert on.sustain == 0.0


def test_meta_event_payload_conversion () -> None:

	"""Text payloads are stored as bytes and decoded back on request."""

	event = miditrack.event.MetaEvent(miditrack.constants.meta.META_SEQ_NAME, "Café")

	assert event.data == b"Caf\xe9"
	assert event.data_as_str() == "Café"

	event.data = b"Drums"
	assert event.data_as_str() == "Drums"

	event.data = None
	assert event.data == b""


def test_meta_event_static_helpers () -> None:

	"""str_as_bytes and bytes_as_str convert both ways and pass None through."""

	assert miditrack.event.MetaEvent.str_as_bytes("Organ") == b"Organ"
	assert miditrack.event.MetaEvent.bytes_as_str(b"Organ") == "Organ"
	assert miditrack.event.MetaEvent.bytes_as_str(None) is None


def test_tempo_payload () -> None:

	"""Tempo is held as a 3-byte meta payload."""

	tempo = miditrack.event.Tempo(tempo=500000)

	assert tempo.meta_type == miditrack.constants.meta.META_SET_TEMPO
	assert tempo.data == (500000).to_bytes(3, "big")

	tempo.tempo = 400000
	assert tempo.tempo == 400000
	assert tempo.data == (400000).to_bytes(3, "big")
