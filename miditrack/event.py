from __future__ import annotations

import typing

import miditrack.constants
import miditrack.constants.meta


class Event:

	"""
	Base class for everything stored in a track.

	``delta_time`` is the number of ticks since the previous event in the
	list. ``time_from_start``, ``wait`` (and ``sustain`` on note-ons) are
	derived values that ``Track.recalc_times`` fills in.
	"""

	def __init__ (self, delta_time: int = 0, time_from_start: int = 0) -> None:

		if delta_time < 0:
			raise ValueError("Delta time cannot be negative")

		self.delta_time = delta_time
		self.time_from_start = time_from_start
		self.wait: float = 0.0


	def quantize_to (self, boundary: int) -> None:

		"""
		Snap ``time_from_start`` to the nearest multiple of ``boundary`` ticks.

		Half-way values round up. ``delta_time`` is left alone; the owning
		track recalculates it afterwards.
		"""

		if boundary <= 0:
			raise ValueError("Quantize boundary must be positive")

		diff = self.time_from_start % boundary
		self.time_from_start -= diff

		if 2 * diff >= boundary:
			self.time_from_start += boundary


	def __repr__ (self) -> str:

		return f"<{type(self).__name__} delta={self.delta_time} time={self.time_from_start}>"


class ChannelEvent (Event):

	"""
	An event addressed to one of the 16 MIDI channels (0-15).
	"""

	def __init__ (self, channel: int = 0, delta_time: int = 0, time_from_start: int = 0) -> None:

		super().__init__(delta_time=delta_time, time_from_start=time_from_start)

		if not 0 <= channel < miditrack.constants.MIDI_CHANNELS:
			raise ValueError(f"MIDI channel must be between 0 and {miditrack.constants.MIDI_CHANNELS - 1}")

		self.channel = channel


class NoteEvent (ChannelEvent):

	def __init__ (self, channel: int = 0, note: int = 64, velocity: int = 64, delta_time: int = 0, time_from_start: int = 0) -> None:

		super().__init__(channel=channel, delta_time=delta_time, time_from_start=time_from_start)

		self.note = note
		self.velocity = velocity


	def __repr__ (self) -> str:

		return f"<{type(self).__name__} ch={self.channel} note={self.note} vel={self.velocity} delta={self.delta_time} time={self.time_from_start}>"


class NoteOn (NoteEvent):

	"""
	Start of a note. ``off`` points at the matching ``NoteOff`` once paired,
	and ``sustain`` holds the note length in quarter notes.
	"""

	def __init__ (self, channel: int = 0, note: int = 64, velocity: int = 64, delta_time: int = 0, time_from_start: int = 0) -> None:

		super().__init__(channel=channel, note=note, velocity=velocity, delta_time=delta_time, time_from_start=time_from_start)

		self.off: typing.Optional[NoteOff] = None
		self.sustain: float = 0.0


class NoteOff (NoteEvent):

	"""
	End of a note. ``on`` references the originating ``NoteOn``, or is
	``None`` for an unpaired note-off.
	"""

	def __init__ (self, channel: int = 0, note: int = 64, velocity: int = 64, delta_time: int = 0, time_from_start: int = 0, on: typing.Optional[NoteOn] = None) -> None:

		super().__init__(channel=channel, note=note, velocity=velocity, delta_time=delta_time, time_from_start=time_from_start)

		self.on = on

		if on is not None:
			on.off = self


class Controller (ChannelEvent):

	def __init__ (self, channel: int = 0, controller: int = 0, value: int = 0, delta_time: int = 0, time_from_start: int = 0) -> None:

		super().__init__(channel=channel, delta_time=delta_time, time_from_start=time_from_start)

		self.controller = controller
		self.value = value


class ProgramChange (ChannelEvent):

	def __init__ (self, channel: int = 0, program: int = 0, delta_time: int = 0, time_from_start: int = 0) -> None:

		super().__init__(channel=channel, delta_time=delta_time, time_from_start=time_from_start)

		self.program = program


class PitchBend (ChannelEvent):

	"""Pitch wheel change; ``value`` runs from -8192 to 8191 with 0 as centre."""

	def __init__ (self, channel: int = 0, value: int = 0, delta_time: int = 0, time_from_start: int = 0) -> None:

		super().__init__(channel=channel, delta_time=delta_time, time_from_start=time_from_start)

		self.value = value


class MetaEvent (Event):

	"""
	A non-sonic event identified by a sub-type tag (``meta_type``) with a
	byte payload.

	Assigning a ``str`` to ``data`` encodes it; ``data_as_str()`` decodes it
	again. Text is stored as latin-1, which maps each byte to one character
	and so round-trips any payload.
	"""

	ENCODING = "latin-1"

	def __init__ (self, meta_type: int, data: typing.Union[str, bytes, None] = None, delta_time: int = 0, time_from_start: int = 0) -> None:

		super().__init__(delta_time=delta_time, time_from_start=time_from_start)

		self.meta_type = meta_type
		self.data = data


	@property
	def data (self) -> bytes:

		"""Raw payload bytes."""

		return self._data


	@data.setter
	def data (self, value: typing.Union[str, bytes, None]) -> None:

		if value is None:
			self._data = b""

		elif isinstance(value, str):
			self._data = MetaEvent.str_as_bytes(value)

		else:
			self._data = bytes(value)


	def data_as_str (self) -> str:

		"""Return the payload decoded as text."""

		return self._data.decode(MetaEvent.ENCODING)


	@staticmethod
	def str_as_bytes (text: str) -> bytes:

		return text.encode(MetaEvent.ENCODING)


	@staticmethod
	def bytes_as_str (data: typing.Optional[bytes]) -> typing.Optional[str]:

		"""Decode ``data``, passing ``None`` through unchanged."""

		if data is None:
			return None

		return bytes(data).decode(MetaEvent.ENCODING)


	def __repr__ (self) -> str:

		return f"<{type(self).__name__} type=0x{self.meta_type:02x} data={self._data!r} delta={self.delta_time} time={self.time_from_start}>"


class Tempo (MetaEvent):

	"""
	Tempo change, in microseconds per quarter note (500000 = 120 BPM).
	"""

	def __init__ (self, tempo: int = 500000, delta_time: int = 0, time_from_start: int = 0) -> None:

		super().__init__(miditrack.constants.meta.META_SET_TEMPO, delta_time=delta_time, time_from_start=time_from_start)

		self.tempo = tempo


	@property
	def tempo (self) -> int:

		"""Microseconds per quarter note, read from the 3-byte payload."""

		return int.from_bytes(self.data, "big")


	@tempo.setter
	def tempo (self, value: int) -> None:

		self.data = value.to_bytes(3, "big")


	def __repr__ (self) -> str:

		return f"<Tempo tempo={self.tempo} delta={self.delta_time} time={self.time_from_start}>"
