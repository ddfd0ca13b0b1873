"""Note names and their lengths in quarter notes.

Used by ``Sequence.note_to_length`` to turn names such as ``"sixteenth"``,
``"8th triplet"`` or ``"dotted quarter"`` into a multiple of a quarter note::

    sequence.note_to_length("dotted quarter")   # 1.5
    sequence.note_to_delta("8th triplet")       # 160 ticks at 480 PPQN
"""

NOTE_LENGTHS = {
	"whole": 4.0,
	"half": 2.0,
	"quarter": 1.0,
	"eighth": 0.5,
	"8th": 0.5,
	"sixteenth": 0.25,
	"16th": 0.25,
	"thirty second": 0.125,
	"thirtysecond": 0.125,
	"32nd": 0.125,
	"sixty fourth": 0.0625,
	"sixtyfourth": 0.0625,
	"64th": 0.0625,
}

DOTTED = "dotted"
TRIPLET = "triplet"

DOTTED_MULTIPLIER = 1.5
TRIPLET_MULTIPLIER = 2 / 3
