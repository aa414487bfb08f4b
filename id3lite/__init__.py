# -*- coding: utf-8 -*-

# Copyright (C) 2005  Michael Urman
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of version 2 of the GNU General Public License as
# published by the Free Software Foundation.


"""id3lite decodes ID3v2.3 tags.

::

    import id3lite.id3
    tag = id3lite.id3.ID3(data)

`data` is the tag as found at the start of an audio file: the 10 byte
header followed by the frame region. Locating it in the file is up to
the caller. `tag` acts like a read-only dictionary of decoded frames,
keyed by frame ID (or frame ID and description, for frames which may
appear more than once).
"""

version = (0, 3)
"""Version tuple."""

version_string = '.'.join(str(v) for v in version)
"""Version string."""


class Metadata(object):
    """An abstract dict-like object.

    Metadata is the base class for the tag objects in id3lite.
    """

    def __init__(self, *args, **kwargs):
        if args or kwargs:
            self.load(*args, **kwargs)

    def load(self, *args, **kwargs):
        raise NotImplementedError

    def pprint(self):
        """Return the tag contents in a human-readable format."""

        raise NotImplementedError
