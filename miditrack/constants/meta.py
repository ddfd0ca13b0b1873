"""Meta event sub-type tags, as they appear after the 0xFF status byte in a MIDI file."""

META_SEQ_NUM = 0x00
META_TEXT = 0x01
META_COPYRIGHT = 0x02
META_SEQ_NAME = 0x03
META_INSTRUMENT = 0x04
META_LYRIC = 0x05
META_MARKER = 0x06
META_CUE = 0x07
META_TRACK_END = 0x2F
META_SET_TEMPO = 0x51

# mido message type for each text-carrying meta event.
TEXT_META_TYPES = {
	META_TEXT: "text",
	META_COPYRIGHT: "copyright",
	META_SEQ_NAME: "track_name",
	META_INSTRUMENT: "instrument_name",
	META_LYRIC: "lyrics",
	META_MARKER: "marker",
	META_CUE: "cue_marker",
}
