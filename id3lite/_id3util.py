# -*- coding: utf-8 -*-

# Copyright (C) 2005  Michael Urman
#               2013  Christoph Reiter
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of version 2 of the GNU General Public License as
# published by the Free Software Foundation.


class error(Exception):
    pass


class ID3InsufficientBytesError(error, EOFError):
    pass


class ID3NoHeaderError(error, ValueError):
    pass


class ID3UnsupportedVersionError(error, NotImplementedError):
    def __init__(self, msg, major=None):
        super(ID3UnsupportedVersionError, self).__init__(msg)
        self.major = major


class ID3UnsupportedFlagsError(error, NotImplementedError):
    def __init__(self, msg, flags=None):
        super(ID3UnsupportedFlagsError, self).__init__(msg)
        self.flags = flags


class ID3UnrecognizedFrameError(error, ValueError):
    def __init__(self, msg, frame_id=None):
        super(ID3UnrecognizedFrameError, self).__init__(msg)
        self.frame_id = frame_id


class ID3WrongFrameKindError(error, ValueError):
    def __init__(self, msg, frame_id=None, kind=None):
        super(ID3WrongFrameKindError, self).__init__(msg)
        self.frame_id = frame_id
        self.kind = kind


class ID3JunkFrameError(error, ValueError):
    pass


class ID3BadEncodingError(ID3JunkFrameError):
    def __init__(self, msg, encoding=None):
        super(ID3BadEncodingError, self).__init__(msg)
        self.encoding = encoding


class ID3BadBOMError(ID3JunkFrameError):
    def __init__(self, msg, bom=None):
        super(ID3BadBOMError, self).__init__(msg)
        self.bom = bom


class ID3BadOwnerError(ID3JunkFrameError):
    pass


class ID3MissingTerminatorError(ID3JunkFrameError):
    pass


class ID3Warning(error, UserWarning):
    pass


class BitPaddedInt(int):
    """A synchsafe integer.

    28 bits of value spread over 4 bytes, most significant byte first,
    with the top bit of every byte left clear so the encoded form never
    looks like an MPEG frame sync.
    """

    BITS = 7
    WIDTH = 4

    def __new__(cls, value):
        "Strips the padding bit out of every byte"
        mask = (1 << cls.BITS) - 1
        if isinstance(value, int):
            # the raw big-endian word as read from the file
            if not 0 <= value < (1 << (8 * cls.WIDTH)):
                raise ValueError("{:#x} is not a {}-byte word".format(
                                 value, cls.WIDTH))
            value = int.to_bytes(value, cls.WIDTH, 'big')
        elif isinstance(value, (bytes, bytearray)):
            if len(value) != cls.WIDTH:
                raise ValueError("Expected {} bytes, got {}".format(
                                 cls.WIDTH, len(value)))
        else:
            raise TypeError

        numeric_value = 0
        for byte in value:
            numeric_value = (numeric_value << cls.BITS) | (byte & mask)

        return int.__new__(cls, numeric_value)

    @classmethod
    def to_bytes(cls, value):
        value = int(value)
        if not 0 <= value < (1 << (cls.BITS * cls.WIDTH)):
            raise ValueError("Value too wide ({:#x})".format(value))

        mask = (1 << cls.BITS) - 1
        bytes_ = bytearray(cls.WIDTH)
        for index in range(cls.WIDTH - 1, -1, -1):
            bytes_[index] = value & mask
            value >>= cls.BITS
        return bytes(bytes_)

    def as_bytes(self):
        return BitPaddedInt.to_bytes(self)

    @staticmethod
    def has_valid_padding(value):
        """Whether the padding bits are all zero"""

        if isinstance(value, int):
            value = int.to_bytes(value, BitPaddedInt.WIDTH, 'big')
        elif not isinstance(value, (bytes, bytearray)):
            raise TypeError

        return not any(byte & 0x80 for byte in value)
