from __future__ import annotations

import copy
import logging
import typing

import miditrack.constants
import miditrack.constants.meta
import miditrack.event

if typing.TYPE_CHECKING:
	import miditrack.sequence


logger = logging.getLogger(__name__)


EventList = typing.List[miditrack.event.Event]


class Track:

	"""
	An ordered list of events belonging to one ``Sequence``.

	Each event carries both a ``delta_time`` and a ``time_from_start``. After
	editing ``events`` directly, call ``recalc_times()`` (deltas changed) or
	``recalc_delta_from_times()`` (absolute times changed) to bring the other
	representation back in line. ``merge()`` and ``quantize()`` do this for
	you.

	``channels_used`` is a 16-bit mask of the channels the track plays on.
	It is filled in by ``miditrack.mido_bridge.track_from_mido`` and is not
	kept up to date by anything else.
	"""

	def __init__ (self, sequence: miditrack.sequence.Sequence) -> None:

		"""
		Create an empty track bound to ``sequence``.
		"""

		self._sequence = sequence
		self.events: EventList = []
		self.channels_used = 0
		self._instrument: typing.Optional[bytes] = None


	@property
	def sequence (self) -> miditrack.sequence.Sequence:

		"""The owning ``Sequence``."""

		return self._sequence


	def _name_event (self) -> typing.Optional[miditrack.event.MetaEvent]:

		for event in self.events:
			if isinstance(event, miditrack.event.MetaEvent) and event.meta_type == miditrack.constants.meta.META_SEQ_NAME:
				return event

		return None


	@property
	def name (self) -> str:

		"""Text of the track name meta event, or ``"Unnamed"`` if there is none."""

		event = self._name_event()

		if event is None:
			return miditrack.constants.UNNAMED

		return event.data_as_str()


	@name.setter
	def name (self, value: str) -> None:

		event = self._name_event()

		if event is not None:
			event.data = value

		else:
			self.events.insert(0, miditrack.event.MetaEvent(miditrack.constants.meta.META_SEQ_NAME, value, delta_time=0))


	@property
	def instrument (self) -> typing.Optional[str]:

		"""
		Instrument name held on the track itself, not in the event list.
		"""

		return miditrack.event.MetaEvent.bytes_as_str(self._instrument)


	@instrument.setter
	def instrument (self, value: typing.Union[str, bytes, None]) -> None:

		if isinstance(value, str):
			self._instrument = miditrack.event.MetaEvent.str_as_bytes(value)

		else:
			self._instrument = value


	def merge (self, new_events: typing.Iterable[miditrack.event.Event]) -> None:

		"""
		Merge ``new_events`` into this track.

		The incoming events are copied first, so the caller's objects are left
		as they were. References from them to events already in this track
		are kept, so a merged note-off can close a note-on the track holds.
		Afterwards every event has correct ``time_from_start`` and
		``delta_time`` values and the list is in time order.
		"""

		# Events already in the track stay shared rather than copied.
		incoming = copy.deepcopy(list(new_events), {id(e): e for e in self.events})

		for event in incoming:
			if isinstance(event, miditrack.event.NoteOff) and event.on is not None:
				event.on.off = event

		logger.debug(f"Merging {len(incoming)} events into track with {len(self.events)} events")

		self.events = self.merge_event_lists(self.events, incoming)


	def merge_event_lists (self, list1: EventList, list2: EventList) -> EventList:

		"""
		Return a new list holding the events of both lists ordered by time.

		Each list is timed from its own start. The events' time fields are
		updated in place; the track's own event list is not touched.
		"""

		self.recalc_times(0, list1)
		self.recalc_times(0, list2)

		merged = list1 + list2
		self.recalc_delta_from_times(0, merged)

		return merged


	def quantize (self, length_or_note: typing.Union[float, str]) -> None:

		"""
		Snap every event to a grid and re-sort the track.

		``length_or_note`` is either a length in quarter notes (1 = quarter,
		0.25 = sixteenth, 4 = whole) or a note name understood by
		``Sequence.note_to_length`` ("sixteenth", "8th triplet",
		"dotted quarter").
		"""

		if isinstance(length_or_note, str):
			delta = self._sequence.note_to_delta(length_or_note)
		else:
			delta = self._sequence.length_to_delta(length_or_note)

		if delta <= 0:
			raise ValueError(f"Quantize grid {length_or_note!r} resolves to {delta} ticks")

		logger.debug(f"Quantizing {len(self.events)} events to {delta} ticks")

		for event in self.events:
			event.quantize_to(delta)

		# Quantizing can reorder events that were close together.
		self.recalc_delta_from_times()


	def recalc_times (self, starting_at: int = 0, events: typing.Optional[EventList] = None) -> None:

		"""
		Recalculate ``time_from_start`` from ``delta_time`` for
		``events[starting_at:]``.

		The running total starts from the preceding event's time, or 0 at the
		head of the list. Along the way each note-on gets its ``sustain``
		from its paired note-off, and each event its ``wait`` since the last
		event of the same class.
		"""

		if events is None:
			events = self.events

		if starting_at < 0:
			raise ValueError("starting_at cannot be negative")

		if starting_at >= len(events):
			return

		ppqn = self._sequence.ppqn
		t = 0 if starting_at == 0 else events[starting_at - 1].time_from_start
		previous_events: typing.Dict[type, miditrack.event.Event] = {}

		for event in events[starting_at:]:

			t += event.delta_time
			event.time_from_start = t

			if isinstance(event, miditrack.event.NoteOff):

				if event.on is not None:
					event.on.sustain = (t - event.on.time_from_start) / ppqn

				else:
					logger.debug(f"Note off without a note on at tick {t}, sustain not set")

			previous = previous_events.get(type(event))

			if previous is not None:
				event.wait = (t - previous.time_from_start) / ppqn
			else:
				event.wait = t / ppqn

			previous_events[type(event)] = event


	def recalc_delta_from_times (self, starting_at: int = 0, events: typing.Optional[EventList] = None) -> None:

		"""
		Recalculate ``delta_time`` from ``time_from_start`` for
		``events[starting_at:]``, sorting that part of the list by time first.

		The sort is stable: events sharing a tick keep their relative order,
		which matters for things like a note-off followed by a note-on at the
		same moment. Events before ``starting_at`` are untouched.

		The first re-sorted event's delta is measured from tick 0, even when
		``starting_at`` is past the head of the list.
		"""

		if events is None:
			events = self.events

		if starting_at < 0:
			raise ValueError("starting_at cannot be negative")

		events[starting_at:] = sorted(events[starting_at:], key=lambda e: e.time_from_start)

		prev_time_from_start = 0

		for event in events[starting_at:]:
			event.delta_time = event.time_from_start - prev_time_from_start
			prev_time_from_start = event.time_from_start


	sort = recalc_delta_from_times


	def __iter__ (self) -> typing.Iterator[miditrack.event.Event]:

		return iter(self.events)


	def __len__ (self) -> int:

		return len(self.events)
