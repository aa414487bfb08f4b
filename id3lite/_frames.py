# -*- coding: utf-8 -*-

# Copyright (C) 2005  Michael Urman
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of version 2 of the GNU General Public License as
# published by the Free Software Foundation.

from id3lite._frametypes import (TEXT, USER_TEXT, URL, USER_URL, UFID, OTHER,
                                 classify, is_recognized)
from id3lite._id3util import (ID3InsufficientBytesError,
                              ID3WrongFrameKindError, ID3JunkFrameError)
from id3lite._specs import (EncodingSpec, BOMSpec, EncodedTextSpec,
                            Latin1TextSpec, OwnerSpec, TrailingSpec,
                            decode_text, LATIN1)
from id3lite._tags import FrameHeader


def _cut(text):
    # anything after a terminator is not to be displayed
    return text.split('\x00', 1)[0]


class Frame(object):
    """Fundamental unit of ID3 data.

    ID3 tags are split into frames. Each frame has a header, shared by
    all kinds of frames, and a payload whose fields depend on the kind.
    Field values are the raw bytes of the payload, terminators
    included; frames are read-only once decoded.
    """

    kind = None
    kind_name = "Frame"

    _framespec = []

    def __init__(self, header, **kwargs):
        object.__setattr__(self, 'header', header)
        object.__setattr__(self, '_pedantic', kwargs.pop('pedantic', True))
        for checker in self._framespec:
            object.__setattr__(self, checker.name, kwargs.get(checker.name))

    def __setattr__(self, name, value):
        raise AttributeError("{} objects are read-only".format(
                             type(self).__name__))

    HashKey = property(
        lambda s: s.FrameID,
        doc="an internal key used to ensure frame uniqueness in a tag")
    FrameID = property(
        lambda s: s.header.FrameID,
        doc="ID3v2 four character frame ID")

    def __repr__(self):
        """Python representation of a frame.

        The string returned is a valid Python expression to construct
        a copy of this frame.
        """
        kw = ["{}={}".format(a.name, repr(getattr(self, a.name)))
              for a in self._framespec]

        return "{}({})".format(type(self).__name__,
                               ', '.join([repr(self.header)] + kw))

    def __eq__(self, other):
        return (type(self) is type(other) and self.header == other.header
                and all(getattr(self, s.name) == getattr(other, s.name)
                        for s in self._framespec))

    def __hash__(self):
        raise TypeError("Frame objects are unhashable")

    @classmethod
    def matches(cls, frame_id):
        """Whether frames with this ID are of this kind."""
        return is_recognized(frame_id) and classify(frame_id) == cls.kind

    def _readData(self, data):
        for reader in self._framespec:
            value, data = reader.read(self, data)
            object.__setattr__(self, reader.name, value)
        if data:
            raise ID3JunkFrameError("{} bytes left over after reading {}"
                                    .format(len(data), self.FrameID))

    @classmethod
    def fromData(cls, header, data, pedantic=True):
        """Construct this ID3 frame from its header and raw payload.

        Only the first header.size bytes of data belong to the frame.
        """
        if not cls.matches(header.frame_id):
            raise ID3WrongFrameKindError(
                "frame type {} is not a valid {}".format(
                    header.frame_id.decode('latin1'), cls.kind_name),
                header.frame_id, cls.kind)

        if len(data) < header.size:
            raise ID3InsufficientBytesError(
                "{} declares {} payload bytes, got {}".format(
                    header.FrameID, header.size, len(data)))

        frame = cls(header, pedantic=pedantic)
        frame._readData(bytes(data[:header.size]))
        return frame

    @classmethod
    def parse(cls, data, pedantic=True):
        """Construct this ID3 frame from raw frame data, header first."""
        header = FrameHeader.parse(data)
        return cls.fromData(header, data[FrameHeader.SIZE:], pedantic)

    def pprint(self):
        """Return a human-readable representation of the frame."""
        return "{}={}".format(self.FrameID, self._pprint())

    def _pprint(self):
        return "[unrepresentable data]"


class TextInformationFrame(Frame):
    """Text strings.

    Any declared frame ID starting with 'T', except TXXX. The
    'information' attribute holds the encoded text without the
    encoding byte and byte order mark; 'text' decodes it. 'encoding'
    is 0 for ISO-8859-1 and 1 for UTF-16, in which case 'bom' is either
    b'\\xff\\xfe' (little endian) or b'\\xfe\\xff' (big endian).
    """

    kind = TEXT
    kind_name = "Text Information Frame"

    _framespec = [EncodingSpec('encoding'), BOMSpec('bom'),
                  TrailingSpec('information')]

    def _readData(self, data):
        super(TextInformationFrame, self)._readData(data)
        consumed = len(self.information) + 1 + len(self.bom)
        if consumed != self.header.size:
            raise ID3JunkFrameError("{} read {} of {} payload bytes".format(
                self.FrameID, consumed, self.header.size))

    text = property(lambda s: decode_text(s.encoding, s.bom, s.information),
                    doc="the decoded information, terminator included")

    def __str__(self):
        return _cut(self.text)

    _pprint = __str__


class UserTextInformationFrame(Frame):
    """User-defined text data.

    TXXX frames have a 'description' and a 'value', both in the
    frame's encoding. There may be many TXXX frames in a tag, but only
    one with each description.
    """

    kind = USER_TEXT
    kind_name = "User Text Information Frame"

    _framespec = [EncodingSpec('encoding'), BOMSpec('bom'),
                  EncodedTextSpec('description'), TrailingSpec('value')]

    desc = property(lambda s: _cut(
        decode_text(s.encoding, s.bom, s.description)))
    text = property(lambda s: decode_text(s.encoding, s.bom, s.value))

    HashKey = property(lambda s: '{}:{}'.format(s.FrameID, s.desc))

    def __str__(self):
        return _cut(self.text)

    def _pprint(self):
        return "{}={}".format(self.desc, str(self))


class UrlLinkFrame(Frame):
    """A frame containing a URL string.

    Any declared frame ID starting with 'W', except WXXX. There is no
    encoding byte; URLs are always ISO-8859-1.
    """

    kind = URL
    kind_name = "Url Link Frame"

    _framespec = [TrailingSpec('url')]

    # WCOM, WOAR and friends may appear more than once, with different URLs
    HashKey = property(lambda s: '{}:{}'.format(s.FrameID, str(s)))

    def __str__(self):
        return _cut(decode_text(LATIN1, b'', self.url))

    _pprint = __str__


class UserUrlLinkFrame(Frame):
    """User-defined URL data.

    Like TXXX, this has a freeform description, in the frame's
    encoding. The URL itself is always ISO-8859-1.
    """

    kind = USER_URL
    kind_name = "User Url Link Frame"

    _framespec = [EncodingSpec('encoding'), BOMSpec('bom'),
                  EncodedTextSpec('description'), TrailingSpec('url')]

    desc = property(lambda s: _cut(
        decode_text(s.encoding, s.bom, s.description)))

    HashKey = property(lambda s: '{}:{}'.format(s.FrameID, s.desc))

    def __str__(self):
        return _cut(decode_text(LATIN1, b'', self.url))

    def _pprint(self):
        return "{}={}".format(self.desc, str(self))


class UniqueFileIdentifierFrame(Frame):
    """Unique file identifier.

    Attributes:
    owner -- null terminated ISO-8859-1 URL or e-mail of the organisation
             which issued the identifier
    identifier -- up to 64 bytes of binary data
    """

    kind = UFID
    kind_name = "Unique File Identifier Frame"

    _framespec = [OwnerSpec('owner'), TrailingSpec('identifier', maxsize=64)]

    HashKey = property(lambda s: '{}:{}'.format(
        s.FrameID, _cut(decode_text(LATIN1, b'', s.owner))))

    def _pprint(self):
        owner = _cut(decode_text(LATIN1, b'', self.owner))
        isascii = not self.identifier or max(self.identifier) < 128
        if isascii:
            return "{}={}".format(owner, self.identifier.decode('ascii'))
        else:
            return "{} ({} bytes)".format(owner, len(self.identifier))


class BinaryFrame(Frame):
    """Binary data

    A declared frame without a decoder of its own. The 'data'
    attribute contains the raw payload.
    """

    kind = OTHER
    kind_name = "Binary Frame"

    _framespec = [TrailingSpec('data')]

    HashKey = property(lambda s: '{}:{}'.format(s.FrameID, s.data))

    def _pprint(self):
        return "[{} bytes]".format(len(self.data))


Kinds = {cls.kind: cls for cls in (TextInformationFrame,
                                   UserTextInformationFrame, UrlLinkFrame,
                                   UserUrlLinkFrame, UniqueFileIdentifierFrame,
                                   BinaryFrame)}


def decode_frame(data, pedantic=True):
    """Decode a whole frame, header included, as whatever kind it is."""
    header = FrameHeader.parse(data)
    cls = Kinds[classify(header.frame_id)]
    return cls.fromData(header, data[FrameHeader.SIZE:], pedantic)
