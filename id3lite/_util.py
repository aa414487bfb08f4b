# -*- coding: utf-8 -*-

# Copyright 2006 Joe Wreschnig
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 2 as
# published by the Free Software Foundation.

"""Utility classes for id3lite.

You should not rely on the interfaces here being stable. They are
intended for internal use in id3lite only.
"""

import struct

from collections import OrderedDict
from collections.abc import Mapping


class DictProxy(Mapping):
    def __init__(self, *args, **kwargs):
        # frames keep the order they had in the tag
        self.__dict = OrderedDict()
        super(DictProxy, self).__init__(*args, **kwargs)

    def __getitem__(self, key):
        return self.__dict[key]

    def _set(self, key, value):
        self.__dict[key] = value

    def _clear(self):
        self.__dict.clear()

    def __iter__(self):
        return iter(self.__dict)

    def __len__(self):
        return len(self.__dict)


class cdata(object):
    """C character buffer to Python numeric type conversions."""

    from struct import error
    error = error

    @staticmethod
    def uint_be(data): return struct.unpack('>I', data)[0]

    @staticmethod
    def to_uint_be(data): return struct.pack('>I', data)


def split_terminated(data, term):
    """Split data after the first terminator.

    Returns the bytes up to and including the terminator and all data
    after it. Multi-byte terminators are only matched on offsets that
    are a multiple of their width, so the zero half of a UTF-16 code
    unit next to a real terminator can't end the field early.

    In case the data isn't terminated raises ValueError.
    """

    width = len(term)
    if width == 1:
        index = data.find(term)
        if index == -1:
            raise ValueError("not null terminated")
        return data[:index + 1], data[index + 1:]

    offset = -1
    while True:
        offset = data.find(term, offset + 1)
        if offset == -1:
            raise ValueError("not null terminated")
        if offset % width:
            continue
        return data[:offset + width], data[offset + width:]
