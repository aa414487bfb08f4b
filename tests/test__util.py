from id3lite._util import DictProxy, cdata, split_terminated
from tests import TestCase, add


class TDictProxy(TestCase):

    def setUp(self):
        self.proxy = DictProxy()
        self.proxy._set("TIT2", 1)
        self.proxy._set("TALB", 2)

    def test_get(self):
        self.assertEqual(self.proxy["TIT2"], 1)
        self.assertRaises(KeyError, self.proxy.__getitem__, "TPE1")

    def test_order(self):
        self.proxy._set("AAAA", 3)
        self.assertEqual(list(self.proxy), ["TIT2", "TALB", "AAAA"])

    def test_len(self):
        self.assertEqual(len(self.proxy), 2)
        self.proxy._clear()
        self.assertEqual(len(self.proxy), 0)

    def test_readonly(self):
        def setit():
            self.proxy["TPE1"] = 3
        self.assertRaises(TypeError, setit)

    def test_mapping(self):
        self.assertTrue("TALB" in self.proxy)
        self.assertEqual(self.proxy.get("TPE1"), None)
        self.assertEqual(dict(self.proxy.items()), {"TIT2": 1, "TALB": 2})

add(TDictProxy)


class Tcdata(TestCase):

    ZERO = b"\x00\x00\x00\x00"
    BEONE = b"\x00\x00\x00\x01"
    NEGONE = b"\xff\xff\xff\xff"

    def test_uint_be(self):
        self.assertEqual(cdata.uint_be(self.ZERO), 0)
        self.assertEqual(cdata.uint_be(self.BEONE), 1)
        self.assertEqual(cdata.uint_be(self.NEGONE), 2 ** 32 - 1)

    def test_not_synchsafe(self):
        self.assertEqual(cdata.uint_be(b"\x00\x00\x01\x00"), 256)

    def test_to_uint_be(self):
        self.assertEqual(cdata.to_uint_be(1), self.BEONE)
        self.assertEqual(cdata.to_uint_be(41), b"\x00\x00\x00\x29")

    def test_short(self):
        self.assertRaises(cdata.error, cdata.uint_be, b"\x00\x01")

add(Tcdata)


class Tsplit_terminated(TestCase):

    def test_latin1(self):
        self.assertEqual(split_terminated(b"abc\x00def", b"\x00"),
                         (b"abc\x00", b"def"))

    def test_latin1_first(self):
        self.assertEqual(split_terminated(b"a\x00b\x00", b"\x00"),
                         (b"a\x00", b"b\x00"))

    def test_latin1_at_end(self):
        self.assertEqual(split_terminated(b"abc\x00", b"\x00"),
                         (b"abc\x00", b""))

    def test_missing(self):
        self.assertRaises(ValueError, split_terminated, b"abc", b"\x00")
        self.assertRaises(ValueError, split_terminated, b"", b"\x00")
        self.assertRaises(ValueError, split_terminated, b"", b"\x00\x00")

    def test_utf16_le_trailing_zero(self):
        # 'b' is 62 00, so three zero bytes in a row before the value
        data = b"a\x00b\x00\x00\x00c\x00"
        self.assertEqual(split_terminated(data, b"\x00\x00"),
                         (b"a\x00b\x00\x00\x00", b"c\x00"))

    def test_utf16_be_leading_zero(self):
        # U+0100 then 'a' in big endian is 01 00 00 61
        data = b"\x01\x00\x00a\x00\x00\x00b"
        self.assertEqual(split_terminated(data, b"\x00\x00"),
                         (b"\x01\x00\x00a\x00\x00", b"\x00b"))

    def test_utf16_odd_only(self):
        self.assertRaises(ValueError, split_terminated, b"a\x00\x00b",
                          b"\x00\x00")

    def test_utf16_empty_string(self):
        self.assertEqual(split_terminated(b"\x00\x00rest", b"\x00\x00"),
                         (b"\x00\x00", b"rest"))

add(Tsplit_terminated)
