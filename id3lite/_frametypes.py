# -*- coding: utf-8 -*-

# Copyright (C) 2005  Michael Urman
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of version 2 of the GNU General Public License as
# published by the Free Software Foundation.

"""The frame IDs declared by ID3v2.3.0, and the kind of frame each is.

The table is built once at import time and never changed afterwards.
"""

TEXT = "text"
USER_TEXT = "user_text"
URL = "url"
USER_URL = "user_url"
UFID = "ufid"
OTHER = "other"

KINDS = (TEXT, USER_TEXT, URL, USER_URL, UFID, OTHER)

Frames = {
    b"AENC": (OTHER, "Audio encryption"),
    b"APIC": (OTHER, "Attached picture"),
    b"COMM": (OTHER, "Comments"),
    b"COMR": (OTHER, "Commercial frame"),
    b"ENCR": (OTHER, "Encryption method registration"),
    b"EQUA": (OTHER, "Equalization"),
    b"ETCO": (OTHER, "Event timing codes"),
    b"GEOB": (OTHER, "General encapsulated object"),
    b"GRID": (OTHER, "Group identification registration"),
    b"IPLS": (OTHER, "Involved people list"),
    b"LINK": (OTHER, "Linked information"),
    b"MCDI": (OTHER, "Music CD identifier"),
    b"MLLT": (OTHER, "MPEG location lookup table"),
    b"OWNE": (OTHER, "Ownership frame"),
    b"PRIV": (OTHER, "Private frame"),
    b"PCNT": (OTHER, "Play counter"),
    b"POPM": (OTHER, "Popularimeter"),
    b"POSS": (OTHER, "Position synchronisation frame"),
    b"RBUF": (OTHER, "Recommended buffer size"),
    b"RVAD": (OTHER, "Relative volume adjustment"),
    b"RVRB": (OTHER, "Reverb"),
    b"SYLT": (OTHER, "Synchronized lyric/text"),
    b"SYTC": (OTHER, "Synchronized tempo codes"),
    b"TALB": (TEXT, "Album/Movie/Show title"),
    b"TBPM": (TEXT, "BPM (beats per minute)"),
    b"TCOM": (TEXT, "Composer"),
    b"TCON": (TEXT, "Content type"),
    b"TCOP": (TEXT, "Copyright message"),
    b"TDAT": (TEXT, "Date"),
    b"TDLY": (TEXT, "Playlist delay"),
    b"TENC": (TEXT, "Encoded by"),
    b"TEXT": (TEXT, "Lyricist/Text writer"),
    b"TFLT": (TEXT, "File type"),
    b"TIME": (TEXT, "Time"),
    b"TIT1": (TEXT, "Content group description"),
    b"TIT2": (TEXT, "Title/songname/content description"),
    b"TIT3": (TEXT, "Subtitle/Description refinement"),
    b"TKEY": (TEXT, "Initial key"),
    b"TLAN": (TEXT, "Language(s)"),
    b"TLEN": (TEXT, "Length"),
    b"TMED": (TEXT, "Media type"),
    b"TOAL": (TEXT, "Original album/movie/show title"),
    b"TOFN": (TEXT, "Original filename"),
    b"TOLY": (TEXT, "Original lyricist(s)/text writer(s)"),
    b"TOPE": (TEXT, "Original artist(s)/performer(s)"),
    b"TORY": (TEXT, "Original release year"),
    b"TOWN": (TEXT, "File owner/licensee"),
    b"TPE1": (TEXT, "Lead performer(s)/Soloist(s)"),
    b"TPE2": (TEXT, "Band/orchestra/accompaniment"),
    b"TPE3": (TEXT, "Conductor/performer refinement"),
    b"TPE4": (TEXT, "Interpreted, remixed, or otherwise modified by"),
    b"TPOS": (TEXT, "Part of a set"),
    b"TPUB": (TEXT, "Publisher"),
    b"TRCK": (TEXT, "Track number/Position in set"),
    b"TRDA": (TEXT, "Recording dates"),
    b"TRSN": (TEXT, "Internet radio station name"),
    b"TRSO": (TEXT, "Internet radio station owner"),
    b"TSIZ": (TEXT, "Size"),
    b"TSRC": (TEXT, "ISRC (international standard recording code)"),
    b"TSSE": (TEXT, "Software/Hardware and settings used for encoding"),
    b"TYER": (TEXT, "Year"),
    b"TXXX": (USER_TEXT, "User defined text information frame"),
    b"UFID": (UFID, "Unique file identifier"),
    b"USER": (OTHER, "Terms of use"),
    b"USLT": (OTHER, "Unsychronized lyric/text transcription"),
    b"WCOM": (URL, "Commercial information"),
    b"WCOP": (URL, "Copyright/Legal information"),
    b"WOAF": (URL, "Official audio file webpage"),
    b"WOAR": (URL, "Official artist/performer webpage"),
    b"WOAS": (URL, "Official audio source webpage"),
    b"WORS": (URL, "Official internet radio station homepage"),
    b"WPAY": (URL, "Payment"),
    b"WPUB": (URL, "Publishers official webpage"),
    b"WXXX": (USER_URL, "User defined URL link frame"),
}


def _frame_id(frame_id):
    if isinstance(frame_id, str):
        return frame_id.encode('latin1')
    return bytes(frame_id)


def is_valid_frame_id(frame_id):
    """Whether frame_id looks like a frame ID, declared or not."""
    frame_id = _frame_id(frame_id)
    return len(frame_id) == 4 and frame_id.isalnum() and frame_id.isupper()


def is_recognized(frame_id):
    return _frame_id(frame_id) in Frames


def classify(frame_id):
    """Return the kind of a declared frame ID.

    Raises KeyError for IDs not declared by ID3v2.3.0.
    """
    return Frames[_frame_id(frame_id)][0]


def describe(frame_id):
    return Frames[_frame_id(frame_id)][1]


def is_text_frame_id(frame_id):
    return is_recognized(frame_id) and classify(frame_id) == TEXT
