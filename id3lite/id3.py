# -*- coding: utf-8 -*-

# Copyright (C) 2005  Michael Urman
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of version 2 of the GNU General Public License as
# published by the Free Software Foundation.

"""ID3v2.3 reading.

To read a tag, hand ID3 the tag bytes, starting with the 'ID3' header:

    tag = ID3(data)
    print(tag['TIT2'])
    for frame in tag.getall('TXXX'):
        print(frame.desc, str(frame))

Only ID3v2.3 tags without unsynchronisation, extended header or
experimental flag are read; anything else raises an error.
"""

from collections import namedtuple
from warnings import warn

import id3lite
from id3lite._util import DictProxy, cdata
from id3lite._id3util import (
    error, ID3InsufficientBytesError, ID3NoHeaderError,
    ID3UnsupportedVersionError, ID3UnsupportedFlagsError,
    ID3UnrecognizedFrameError, ID3WrongFrameKindError, ID3JunkFrameError,
    ID3BadEncodingError, ID3BadBOMError, ID3BadOwnerError,
    ID3MissingTerminatorError, ID3Warning, BitPaddedInt)
from id3lite._frametypes import (
    Frames, TEXT, USER_TEXT, URL, USER_URL, UFID, OTHER, classify,
    is_recognized, is_text_frame_id, is_valid_frame_id)
from id3lite._tags import ID3Header, FrameHeader
from id3lite._frames import (
    Frame, TextInformationFrame, UserTextInformationFrame, UrlLinkFrame,
    UserUrlLinkFrame, UniqueFileIdentifierFrame, BinaryFrame, Kinds,
    decode_frame)


class BrokenFrame(namedtuple('BrokenFrame', 'header error data')):
    """A declared frame whose payload could not be decoded.

    'data' is the raw frame, header included; 'error' says what was
    wrong with it.
    """

    FrameID = property(lambda s: s.header.FrameID)


class ID3(DictProxy, id3lite.Metadata):
    """A dictionary-like view of the frames of an ID3v2.3 tag.

    Frames are keyed by their HashKey: the frame ID, plus a description
    for frames which may appear more than once. Frames with an ID not
    declared by ID3v2.3 are kept as raw bytes in 'unknown_frames';
    declared frames which could not be decoded are kept in
    'broken_frames'.

    With PEDANTIC set (the default) a description or owner field
    missing its null terminator breaks the frame; without it the field
    runs to the end of the frame and a warning is issued.
    """

    PEDANTIC = True

    def __init__(self, *args, **kwargs):
        self.header = None
        self.unknown_frames = []
        self.broken_frames = []

        # Initialize the metadata base class with any input arguments.
        super(ID3, self).__init__(*args, **kwargs)

    version = property(lambda s: s.header.version if s.header else None)
    size = property(
        lambda s: s.header.size + ID3Header.SIZE if s.header else 0,
        doc="the tag size, header included")

    def load(self, data):
        self._clear()
        del self.unknown_frames[:]
        del self.broken_frames[:]

        data = bytes(data)
        self.header = ID3Header.parse(data)
        if len(data) < self.size:
            raise ID3InsufficientBytesError(
                "tag declares {} bytes, got {}".format(self.size, len(data)))

        for frame in self.__read_frames(data[ID3Header.SIZE:self.size]):
            if isinstance(frame, Frame):
                self.add(frame)
            elif isinstance(frame, BrokenFrame):
                self.broken_frames.append(frame)
            else:
                self.unknown_frames.append(frame)

    def __read_frames(self, data):
        while len(data) >= FrameHeader.SIZE:
            header = data[:FrameHeader.SIZE]
            name = header[:4]
            if name.strip(b'\x00') == b'':
                return  # padding

            size = cdata.uint_be(header[4:8])
            framedata = data[FrameHeader.SIZE:FrameHeader.SIZE + size]
            data = data[FrameHeader.SIZE + size:]

            try:
                fheader = FrameHeader.parse(header)
            except ID3UnrecognizedFrameError:
                if is_valid_frame_id(name):
                    yield header + framedata
                continue

            if size == 0:
                continue  # drop empty frames

            try:
                yield self.__load_framedata(fheader, framedata)
            except ID3JunkFrameError as err:
                yield BrokenFrame(fheader, err, header + framedata)
            except ID3InsufficientBytesError as err:
                # the frame runs past the end of the tag
                yield BrokenFrame(fheader, err, header + framedata)
                return

    def __load_framedata(self, header, framedata):
        cls = Kinds[classify(header.frame_id)]
        return cls.fromData(header, framedata, self.PEDANTIC)

    def add(self, frame):
        if frame.HashKey in self:
            warn("Frame {} duplicated, only the last instance is "
                 "kept".format(frame.HashKey), ID3Warning)
        self._set(frame.HashKey, frame)

    def getall(self, key):
        """Return all frames with a given name (the list may be empty).

        This is best explained by examples:
            id3.getall('TIT2') == [id3['TIT2']]
            id3.getall('TTTT') == []
            id3.getall('TXXX') == [TXXX frame with desc 'woo',
                                   TXXX frame with desc 'baz', ...]

        Since this is based on the frame's HashKey, which is
        colon-separated, you can use it to do things like
        getall('TXXX:MusicBrainz Album Id').
        """
        if key in self:
            return [self[key]]
        else:
            key = key + ':'
            return [v for s, v in self.items() if s.startswith(key)]

    def pprint(self):
        """Return tags in a human-readable format.

        "Human-readable" is used loosely here. The format is intended
        to mirror that used for Vorbis or APEv2 output, e.g.
            TIT2=My Title
        However, ID3 frames can have multiple keys:
            TXXX=QuodLibet::albumartist=Various Artists
        """
        frames = sorted(Frame.pprint(s) for s in self.values())
        return '\n'.join(frames)
