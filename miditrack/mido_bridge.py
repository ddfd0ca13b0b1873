"""Conversion between miditrack tracks and ``mido`` tracks.

``mido`` handles the Standard MIDI File byte encoding; this module maps its
messages onto the event classes in ``miditrack.event`` and back::

	import mido
	import miditrack
	import miditrack.mido_bridge

	mid = mido.MidiFile("song.mid")
	seq = miditrack.Sequence(ppqn=mid.ticks_per_beat)

	for midi_track in mid.tracks:
		miditrack.mido_bridge.track_from_mido(seq, midi_track)

	seq.tracks[1].quantize("sixteenth")
	mid.tracks[1] = miditrack.mido_bridge.track_to_mido(seq.tracks[1])

Reading a track is the only place ``Track.channels_used`` is filled in.
"""

import collections
import logging
import typing

import mido

import miditrack.constants.meta
import miditrack.event
import miditrack.sequence
import miditrack.track


logger = logging.getLogger(__name__)


MidoMessage = typing.Union[mido.Message, mido.MetaMessage, mido.UnknownMetaMessage]

# mido text meta message types, keyed back to their sub-type tag.
_TEXT_TYPES_BY_NAME = {name: meta_type for meta_type, name in miditrack.constants.meta.TEXT_META_TYPES.items()}

# mido stores the payload of these two under 'name' rather than 'text'.
_NAME_ATTRIBUTE_TYPES = ("track_name", "instrument_name")


def _text_attribute (message_type: str) -> str:

	return "name" if message_type in _NAME_ATTRIBUTE_TYPES else "text"


def event_from_message (message: MidoMessage) -> typing.Optional[miditrack.event.Event]:

	"""
	Convert a single mido message to an event.

	Returns ``None`` for message types the event model does not cover (SysEx,
	aftertouch, end of track, ...). A ``note_on`` with velocity 0 is treated
	as a note-off, as most MIDI files use it that way.
	"""

	delta = message.time

	if message.type == "note_on" and message.velocity > 0:
		return miditrack.event.NoteOn(channel=message.channel, note=message.note, velocity=message.velocity, delta_time=delta)

	if message.type in ("note_on", "note_off"):
		return miditrack.event.NoteOff(channel=message.channel, note=message.note, velocity=message.velocity, delta_time=delta)

	if message.type == "control_change":
		return miditrack.event.Controller(channel=message.channel, controller=message.control, value=message.value, delta_time=delta)

	if message.type == "program_change":
		return miditrack.event.ProgramChange(channel=message.channel, program=message.program, delta_time=delta)

	if message.type == "pitchwheel":
		return miditrack.event.PitchBend(channel=message.channel, value=message.pitch, delta_time=delta)

	if message.type == "set_tempo":
		return miditrack.event.Tempo(tempo=message.tempo, delta_time=delta)

	if message.type in _TEXT_TYPES_BY_NAME:
		text = getattr(message, _text_attribute(message.type))
		return miditrack.event.MetaEvent(_TEXT_TYPES_BY_NAME[message.type], text, delta_time=delta)

	if message.type == "unknown_meta":
		return miditrack.event.MetaEvent(message.type_byte, bytes(message.data), delta_time=delta)

	logger.debug(f"Skipping unsupported MIDI message type '{message.type}'")

	return None


def event_to_message (event: miditrack.event.Event) -> MidoMessage:

	"""
	Convert an event to a mido message whose ``time`` is the event's delta time.
	"""

	delta = event.delta_time

	if isinstance(event, miditrack.event.NoteOn):
		return mido.Message("note_on", channel=event.channel, note=event.note, velocity=event.velocity, time=delta)

	if isinstance(event, miditrack.event.NoteOff):
		return mido.Message("note_off", channel=event.channel, note=event.note, velocity=event.velocity, time=delta)

	if isinstance(event, miditrack.event.Controller):
		return mido.Message("control_change", channel=event.channel, control=event.controller, value=event.value, time=delta)

	if isinstance(event, miditrack.event.ProgramChange):
		return mido.Message("program_change", channel=event.channel, program=event.program, time=delta)

	if isinstance(event, miditrack.event.PitchBend):
		return mido.Message("pitchwheel", channel=event.channel, pitch=event.value, time=delta)

	if isinstance(event, miditrack.event.Tempo):
		return mido.MetaMessage("set_tempo", tempo=event.tempo, time=delta)

	if isinstance(event, miditrack.event.MetaEvent):

		message_type = miditrack.constants.meta.TEXT_META_TYPES.get(event.meta_type)

		if message_type is not None:
			return mido.MetaMessage(message_type, time=delta, **{_text_attribute(message_type): event.data_as_str()})

		return mido.UnknownMetaMessage(event.meta_type, data=tuple(event.data), time=delta)

	raise ValueError(f"Cannot convert {type(event).__name__} to a MIDI message")


def track_from_mido (sequence: miditrack.sequence.Sequence, midi_track: typing.Iterable[MidoMessage]) -> miditrack.track.Track:

	"""
	Build a ``Track`` from a ``mido.MidiTrack`` and append it to ``sequence``.

	Sets a ``channels_used`` bit for every channel message (including ones
	that are not kept as events), pairs each note-off with the oldest open note-on
	of the same channel and note, and computes every event's absolute time.
	An ``instrument_name`` message sets the track's ``instrument`` instead of
	becoming an event. Delta time of skipped messages is carried over to the
	next kept event so absolute timing is preserved.
	"""

	track = miditrack.track.Track(sequence)
	open_notes: typing.Dict[typing.Tuple[int, int], typing.Deque[miditrack.event.NoteOn]] = collections.defaultdict(collections.deque)
	carried_delta = 0

	for message in midi_track:

		if not message.is_meta and hasattr(message, "channel"):
			track.channels_used |= 1 << message.channel

		if message.type == "instrument_name":
			track.instrument = message.name
			carried_delta += message.time
			continue

		event = event_from_message(message)

		if event is None:
			carried_delta += message.time
			continue

		event.delta_time += carried_delta
		carried_delta = 0

		if isinstance(event, miditrack.event.NoteOn):
			open_notes[(event.channel, event.note)].append(event)

		elif isinstance(event, miditrack.event.NoteOff):

			pending = open_notes[(event.channel, event.note)]

			if pending:
				on = pending.popleft()
				event.on = on
				on.off = event

		track.events.append(event)

	track.recalc_times()
	sequence.tracks.append(track)

	logger.debug(f"Read track '{track.name}' with {len(track.events)} events, channels 0x{track.channels_used:04x}")

	return track


def track_to_mido (track: miditrack.track.Track) -> mido.MidiTrack:

	"""
	Build a ``mido.MidiTrack`` from the track's events in list order.

	Call ``recalc_delta_from_times()`` first if absolute times were edited.
	The end-of-track message is added by mido when the file is saved.
	"""

	midi_track = mido.MidiTrack()

	if track.instrument is not None:
		midi_track.append(mido.MetaMessage("instrument_name", name=track.instrument, time=0))

	for event in track.events:
		midi_track.append(event_to_message(event))

	return midi_track
