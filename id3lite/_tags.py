# -*- coding: utf-8 -*-

# Copyright (C) 2005  Michael Urman
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of version 2 of the GNU General Public License as
# published by the Free Software Foundation.

import struct
from collections import namedtuple

from id3lite._frametypes import is_recognized
from id3lite._id3util import (BitPaddedInt, ID3InsufficientBytesError,
                              ID3NoHeaderError, ID3UnsupportedVersionError,
                              ID3UnsupportedFlagsError,
                              ID3UnrecognizedFrameError)


class ID3Header(namedtuple('ID3Header', 'identifier major revision flags size')):
    """The 10 byte header at the start of an ID3v2.3 tag.

    'size' is the length of the frame region which follows the header;
    it does not include the header's own 10 bytes.
    """

    SIZE = 10

    @classmethod
    def parse(cls, data):
        if len(data) < cls.SIZE:
            raise ID3InsufficientBytesError(
                "insufficient header bytes: needed {}, got {}".format(
                    cls.SIZE, len(data)))

        id3, vmaj, vrev, flags, size = struct.unpack(
            '>3sBBB4s', bytes(data[:cls.SIZE]))

        if id3 != b'ID3':
            raise ID3NoHeaderError("unsupported tag format {!r}".format(id3))
        if vmaj != 3:
            raise ID3UnsupportedVersionError(
                "unsupported major version: ID3v2.{} not "
                "supported".format(vmaj), vmaj)
        # unsynchronisation, extended headers and experimental tags are
        # refused rather than read wrongly
        if flags:
            raise ID3UnsupportedFlagsError(
                "unsupported header flags {:#04x}".format(flags), flags)

        return cls(id3, vmaj, vrev, flags, BitPaddedInt(size))

    version = property(lambda s: (2, s.major, s.revision))


class FrameHeader(namedtuple('FrameHeader', 'frame_id size flags')):
    """The 10 byte header in front of every frame.

    Unlike the tag header, 'size' is a plain big-endian integer: the
    exact length of the payload following this header. The two flag
    bytes are kept as they are.
    """

    SIZE = 10

    @classmethod
    def parse(cls, data):
        if len(data) < cls.SIZE:
            raise ID3InsufficientBytesError(
                "insufficient frame header bytes: needed {}, got {}".format(
                    cls.SIZE, len(data)))

        frame_id, size, flags = struct.unpack('>4sL2s', bytes(data[:cls.SIZE]))
        if not is_recognized(frame_id):
            raise ID3UnrecognizedFrameError(
                "unrecognized frame type {}".format(frame_id.decode('latin1')),
                frame_id)

        return cls(frame_id, size, flags)

    FrameID = property(lambda s: s.frame_id.decode('ascii'),
                       doc="ID3v2 four character frame ID")
