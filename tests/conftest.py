import typing

import pytest

import miditrack.event
import miditrack.sequence
import miditrack.track


@pytest.fixture
def sequence () -> miditrack.sequence.Sequence:

	"""A sequence at the common 480 PPQN resolution."""

	return miditrack.sequence.Sequence(ppqn=480)


@pytest.fixture
def track (sequence: miditrack.sequence.Sequence) -> miditrack.track.Track:

	"""An empty track attached to the 480 PPQN sequence."""

	track = miditrack.track.Track(sequence)
	sequence.tracks.append(track)
	return track


def controllers_at (*times: int) -> typing.List[miditrack.event.Event]:

	"""Build controller events at the given absolute ticks, with matching delta times."""

	events: typing.List[miditrack.event.Event] = []
	previous = 0

	for index, tick in enumerate(times):
		events.append(miditrack.event.Controller(channel=0, controller=index, value=0, delta_time=tick - previous, time_from_start=tick))
		previous = tick

	return events
