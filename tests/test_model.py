import unittest
from ctypes import c_uint16

from inireader import Char, IniDocument, IniSection, loads


class ReadTests(unittest.TestCase):
    def setUp(self):
        self.doc = loads(
            "\n".join(
                [
                    "top = 1",
                    "[k]",
                    "slash = 5 // five",
                    "off = off ; note",
                    "cap = True",
                    "num = 42xyz",
                    "fruit = banana",
                    "shout = HELLO",
                    "empty =",
                    "ratio = 0.75",
                    "port = 65536",
                ]
            )
        )

    def test_slash_comment_int(self):
        self.assertEqual(self.doc['k']['slash'], '5')
        self.assertEqual(self.doc.read('k', 'slash', 0), 5)

    def test_bool_off_with_true_default(self):
        self.assertIs(self.doc.read('k', 'off', True), False)

    def test_bool_exact_case(self):
        self.assertIs(self.doc.read('k', 'cap', False), False)

    def test_int_prefix(self):
        self.assertEqual(self.doc.read('k', 'num', -1), 42)

    def test_int_without_prefix(self):
        self.assertEqual(self.doc.read('k', 'fruit', -1), -1)

    def test_fold_case(self):
        self.assertEqual(self.doc.read('k', 'shout', '', True), 'hello')
        self.assertEqual(self.doc.read('k', 'shout', ''), 'HELLO')
        self.assertEqual(self.doc.read('k', 'shout', '', fold_case=False),
                         'HELLO')

    def test_implicit_section(self):
        self.assertEqual(self.doc.read('', 'top', ''), '1')
        self.assertIs(self.doc.read('', 'top', False), True)

    def test_misses_return_default(self):
        sentinel = object()
        self.assertIs(self.doc.read('nope', 'x', sentinel), sentinel)
        self.assertEqual(self.doc.read('k', 'nope', 'dflt'), 'dflt')
        self.assertEqual(self.doc.read('K', 'num', 3), 3)

    def test_same_raw_value_as_many_types(self):
        self.assertEqual(self.doc.read('k', 'num', ''), '42xyz')
        self.assertEqual(self.doc.read('k', 'num', 0), 42)
        self.assertEqual(self.doc.read('k', 'num', 0.0), 42.0)
        self.assertEqual(self.doc.read('k', 'num', Char('z')), '4')
        self.assertIs(self.doc.read('k', 'num', True), False)

    def test_empty_value(self):
        self.assertEqual(self.doc.read('k', 'empty', 'd'), '')
        self.assertEqual(self.doc.read('k', 'empty', Char('d')), 'd')
        self.assertEqual(self.doc.read('k', 'empty', 9), 9)
        self.assertIs(self.doc.read('k', 'empty', True), False)

    def test_float(self):
        self.assertEqual(self.doc.read('k', 'ratio', 0.0), 0.75)

    def test_fixed_width_overflow(self):
        default = c_uint16(80)
        self.assertIs(self.doc.read('k', 'port', default), default)
        self.assertEqual(self.doc.read('k', 'slash', default).value, 5)

    def test_unsupported_type(self):
        self.assertEqual(self.doc.read('k', 'num', [1, 2]), [1, 2])
        self.assertIsNone(self.doc.read('k', 'num', None))


class MappingTests(unittest.TestCase):
    def test_read_only_views(self):
        doc = loads('[a]\nx=1\n[b]\n')
        self.assertEqual(list(doc), ['a', 'b'])
        self.assertEqual(len(doc), 2)
        self.assertIsInstance(doc['a'], IniSection)
        self.assertEqual(doc['a'].name, 'a')
        self.assertEqual(doc.get('c'), None)
        with self.assertRaises(KeyError):
            doc['c']
        with self.assertRaises(TypeError):
            doc['a'] = IniSection('a')  # type: ignore[index]
        with self.assertRaises(TypeError):
            doc['a']['x'] = '2'  # type: ignore[index]

    def test_section_str_repr(self):
        sect = IniSection('net', {'port': '80'})
        self.assertEqual(str(sect), '[net]')
        self.assertEqual(repr(sect), '[net] { .cnt = 1 }')
        self.assertEqual(sect['port'], '80')

    def test_header_is_the_stored_empty_section(self):
        doc = loads('[ ]\n[a]\nx=1\n')
        self.assertIn('', doc)
        self.assertIs(doc.header, doc[''])

    def test_overflowing_numbers_give_default(self):
        doc = loads('[n]\nbig = ' + '9' * 5000 + '\nfar = 1e999\n')
        self.assertEqual(doc.read('n', 'big', -1), -1)
        self.assertEqual(doc.read('n', 'far', 2.5), 2.5)

    def test_empty_document(self):
        doc = IniDocument()
        self.assertEqual(len(doc), 0)
        self.assertEqual(len(doc.header), 0)
        self.assertEqual(doc.read('', 'k', 1.5), 1.5)
        self.assertEqual(repr(doc), '<IniDocument { .sections = 0 }>')


if __name__ == "__main__":
    unittest.main()
