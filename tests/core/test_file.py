import copy
import os
import pickle
import tempfile
import unittest

from hostsfile.core import HostsFile, HostsFileError, parse_file, split_lines

hosts = os.path.join(os.path.dirname(__file__), '../fixtures/hosts')

CONTENT = '127.0.0.1 a.com #x\n# comment\n\n10.0.0.1 b.com'


class TestSplitLines(unittest.TestCase):
    def test_split(self):
        self.assertEqual(list(split_lines('')), [])
        self.assertEqual(list(split_lines('\r')), ['\r'])
        self.assertEqual(list(split_lines('a\nb')), ['a', 'b'])
        self.assertEqual(list(split_lines('a\nb\n')), ['a', 'b'])
        self.assertEqual(list(split_lines('a\r\nb\r\n')), ['a', 'b'])
        self.assertEqual(list(split_lines('a\rb\n\n')), ['a\rb', ''])
        self.assertEqual(list(split_lines('\n')), [''])


class TestParseFile(unittest.TestCase):
    def test_scenario(self):
        result = parse_file(CONTENT)
        self.assertEqual(len(result), 4)
        self.assertEqual([h.ip for h in result], ['127.0.0.1', None, None, '10.0.0.1'])
        self.assertEqual([h.comment for h in result], ['x', '# comment', None, None])
        self.assertTrue(result[2].is_blank())
        self.assertEqual([h.raw for h in result], CONTENT.split('\n'))

    def test_carriage_return(self):
        self.assertEqual(len(parse_file('\r')), 1)

    def test_empty(self):
        self.assertEqual(len(parse_file('')), 0)
        self.assertEqual(list(parse_file('').hosts()), [])

    def test_hosts(self):
        result = HostsFile.parse(CONTENT)
        self.assertEqual([h.hosts for h in result.hosts()], ['a.com', 'b.com'])
        self.assertEqual([h.ip for h in result.filter('b.com')], ['10.0.0.1'])
        self.assertEqual([h.ip for h in result.filter('comment')], [])
        self.assertEqual(len(list(result.filter())), 2)

    def test_str(self):
        self.assertEqual(str(parse_file(CONTENT)), CONTENT)
        self.assertEqual(parse_file(CONTENT), parse_file(CONTENT + '\n'))

    def test_read_only(self):
        result = parse_file(CONTENT)
        with self.assertRaises(AttributeError):
            result.entries = ()
        with self.assertRaises(AttributeError):
            result.extra = 1
        self.assertEqual(len(result), 4)

    def test_copy(self):
        result = parse_file(CONTENT)
        for other in [copy.copy(result), copy.deepcopy(result), pickle.loads(pickle.dumps(result))]:
            self.assertEqual(other, result)
            self.assertEqual(str(other), CONTENT)


class TestLoad(unittest.TestCase):
    def test_fixture(self):
        result = HostsFile.load(hosts)
        self.assertEqual(len(result), 9)
        self.assertEqual(
            [(h.ip, h.hosts) for h in result.hosts()],
            [('127.0.0.1', 'localhost'),
             ('::1', 'localhost'),
             ('192.168.199.4', 'pi3.lan'),
             ('192.168.199.5\tred.pi', None)],
        )

    def test_bom(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'hosts')
            with open(path, 'wb') as f:
                f.write(b'\xef\xbb\xbf1.1.1.1 one.one\r\n')
            result = HostsFile.load(path)
        self.assertEqual([(h.raw, h.ip) for h in result], [('1.1.1.1 one.one', '1.1.1.1')])

    def test_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'missing')
            with self.assertRaises(HostsFileError) as cm:
                HostsFile.load(path)
        self.assertEqual(cm.exception.path, path)
        self.assertIn(path, str(cm.exception))

    def test_not_text(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'hosts')
            with open(path, 'wb') as f:
                f.write(b'\xff\xfe\x00')
            with self.assertRaises(HostsFileError):
                HostsFile.load(path)
