# -*- coding: utf-8 -*-

# Copyright (C) 2005  Michael Urman
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of version 2 of the GNU General Public License as
# published by the Free Software Foundation.

from warnings import warn

from id3lite._util import split_terminated
from id3lite._id3util import (ID3InsufficientBytesError, ID3BadEncodingError,
                              ID3BadBOMError, ID3BadOwnerError,
                              ID3MissingTerminatorError, ID3Warning)

LATIN1 = 0
UTF16 = 1

BOM_BE = b'\xfe\xff'
BOM_LE = b'\xff\xfe'

# Okay, seriously. ID3v2.3 has exactly two text encodings and two byte
# orders. You can't just add encodings here however you want.
_terminators = {LATIN1: b'\x00', UTF16: b'\x00\x00'}
_codecs = {BOM_LE: 'utf_16_le', BOM_BE: 'utf_16_be'}


def decode_text(encoding, bom, data):
    """Decode a raw text field, terminator included."""
    if encoding == UTF16:
        return data.decode(_codecs[bom], 'replace')
    return data.decode('latin1')


class Spec(object):
    """Reads one field off the front of a frame payload.

    read() returns the field value and whatever data follows it.
    """

    def __init__(self, name):
        self.name = name

    def __hash__(self):
        raise TypeError("Spec objects are unhashable")

    def read(self, frame, data):
        raise NotImplementedError


class EncodingSpec(Spec):
    def read(self, frame, data):
        if not data:
            raise ID3InsufficientBytesError("insufficient payload bytes for "
                                            "the text encoding")
        enc = data[0]
        if enc not in _terminators:
            raise ID3BadEncodingError("invalid text encoding "
                                      "{:#04x}".format(enc), enc)
        return enc, data[1:]


class BOMSpec(Spec):
    """The byte order mark of a UTF-16 frame; empty for Latin-1."""

    def read(self, frame, data):
        if frame.encoding != UTF16:
            return b'', data

        bom = bytes(data[:2])
        if bom not in _codecs:
            raise ID3BadBOMError("invalid BOM {!r}".format(bom), bom)
        return bom, data[2:]


class TerminatedSpec(Spec):
    """A field ended by a null terminator, with more fields after it.

    The value keeps its terminator. A field without one is an error
    unless the frame is being read leniently; then it swallows the rest
    of the payload and the following fields come out empty.
    """

    def terminator(self, frame):
        return b'\x00'

    def read(self, frame, data):
        try:
            return split_terminated(data, self.terminator(frame))
        except ValueError:
            if frame._pedantic:
                raise ID3MissingTerminatorError(
                    "{} of {} is not null terminated".format(
                        self.name, frame.FrameID))
            warn("{}: {} is not null terminated, using the remaining {} "
                 "bytes".format(frame.FrameID, self.name, len(data)),
                 ID3Warning)
            return data, b''


class EncodedTextSpec(TerminatedSpec):
    def terminator(self, frame):
        return _terminators[frame.encoding]


class Latin1TextSpec(TerminatedSpec):
    pass


class OwnerSpec(Latin1TextSpec):
    """The owner identifier of a UFID frame; it may not be empty."""

    def read(self, frame, data):
        if not data or data[0] == 0:
            raise ID3BadOwnerError("{} owner identifier must be "
                                   "non-empty".format(frame.FrameID))
        return super(OwnerSpec, self).read(frame, data)


class TrailingSpec(Spec):
    """Everything left in the payload, verbatim."""

    def __init__(self, name, maxsize=None):
        super(TrailingSpec, self).__init__(name)
        self.maxsize = maxsize

    def read(self, frame, data):
        if self.maxsize is not None and len(data) > self.maxsize:
            warn("{}: {} is {} bytes, more than the allowed {}".format(
                 frame.FrameID, self.name, len(data), self.maxsize),
                 ID3Warning)
        return bytes(data), b''
