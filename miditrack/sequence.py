from __future__ import annotations

import typing

import miditrack.constants
import miditrack.constants.note_lengths

if typing.TYPE_CHECKING:
	import miditrack.track


class Sequence:

	"""
	A collection of tracks sharing one timing resolution.

	The sequence owns the PPQN (ticks per quarter note) and turns musical
	lengths into tick counts for its tracks::

		seq = Sequence(ppqn=480)
		seq.length_to_delta(0.25)           # 120
		seq.note_to_delta("dotted quarter") # 720
	"""

	def __init__ (self, ppqn: int = miditrack.constants.DEFAULT_PPQN) -> None:

		if ppqn <= 0:
			raise ValueError("PPQN must be positive")

		self.ppqn = ppqn
		self.tracks: typing.List[miditrack.track.Track] = []


	@property
	def name (self) -> str:

		"""Name of the first track, which by convention names the whole sequence."""

		if not self.tracks:
			return miditrack.constants.UNNAMED

		return self.tracks[0].name


	def __iter__ (self) -> typing.Iterator[miditrack.track.Track]:

		return iter(self.tracks)


	def length_to_delta (self, length: float) -> int:

		"""
		Convert a length in quarter notes (1 = quarter, 0.25 = sixteenth,
		4 = whole) to ticks.
		"""

		return int(round(self.ppqn * length))


	def note_to_length (self, name: str) -> float:

		"""
		Convert a note name to a length in quarter notes.

		Accepts the names in ``miditrack.constants.note_lengths.NOTE_LENGTHS``
		optionally combined with ``dotted`` and/or ``triplet``, in any order
		and case: ``"sixteenth"``, ``"8th triplet"``, ``"Dotted Quarter"``.

		Raises ``ValueError`` for anything else.
		"""

		words = name.lower().split()
		multiplier = 1.0

		if miditrack.constants.note_lengths.DOTTED in words:
			words.remove(miditrack.constants.note_lengths.DOTTED)
			multiplier *= miditrack.constants.note_lengths.DOTTED_MULTIPLIER

		if miditrack.constants.note_lengths.TRIPLET in words:
			words.remove(miditrack.constants.note_lengths.TRIPLET)
			multiplier *= miditrack.constants.note_lengths.TRIPLET_MULTIPLIER

		base = " ".join(words)

		if base not in miditrack.constants.note_lengths.NOTE_LENGTHS:
			raise ValueError(f"Unrecognized note-length name {name!r}")

		return miditrack.constants.note_lengths.NOTE_LENGTHS[base] * multiplier


	def note_to_delta (self, name: str) -> int:

		"""Convert a note name to ticks at this sequence's resolution."""

		return self.length_to_delta(self.note_to_length(name))
