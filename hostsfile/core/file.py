'''
Parse the full content of a hosts file.
'''

import os
from typing import Iterable, Iterator, Tuple, Union

from .line import HostsFileLine
from .logger import logger

__all__ = [
    'HostsFile',
    'HostsFileError',
    'parse_file',
    'split_lines',
]


class HostsFileError(Exception):
    def __init__(self, path, reason):
        super().__init__('Could not read file %s: %s' % (path, reason))
        self.path = path
        self.reason = reason


def split_lines(content: str) -> Iterator[str]:
    '''
    Split content on line feeds.

    A carriage return directly before a line feed belongs to the line
    ending; a bare carriage return does not end a line. A trailing line
    feed does not start another line, and empty content has no lines.
    '''
    start = 0
    size = len(content)
    while start < size:
        end = content.find('\n', start)
        if end < 0:
            yield content[start:]
            return
        line = content[start:end]
        if line.endswith('\r'):
            line = line[:-1]
        yield line
        start = end + 1


class HostsFile:
    '''An ordered, read-only list of parsed lines.'''

    __slots__ = ('_entries', )

    def __init__(self, entries: Iterable[HostsFileLine] = ()):
        self._entries: Tuple[HostsFileLine, ...] = tuple(entries)

    @property
    def entries(self) -> Tuple[HostsFileLine, ...]:
        return self._entries

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __getitem__(self, index):
        return self.entries[index]

    def __eq__(self, other):
        if not isinstance(other, HostsFile):
            return NotImplemented
        return self.entries == other.entries

    def __repr__(self):
        return '<%s [%d lines]>' % (self.__class__.__name__, len(self.entries))

    def __str__(self):
        return '\n'.join(map(str, self.entries))

    def hosts(self) -> Iterator[HostsFileLine]:
        return (entry for entry in self.entries if entry.contains_host())

    def filter(self, pattern: str = '') -> Iterator[HostsFileLine]:
        '''Host entries whose raw line contains `pattern`.'''
        return (entry for entry in self.hosts() if pattern in entry.raw)

    @classmethod
    def parse(cls, content: str) -> 'HostsFile':
        return cls(map(HostsFileLine.parse, split_lines(content)))

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> 'HostsFile':
        '''
        Read and parse a hosts file. Raises `HostsFileError` with the path
        when the file cannot be read.
        '''
        filename = os.path.expanduser(path)
        try:
            with open(filename, 'r', encoding='utf-8-sig', newline='') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise HostsFileError(path, e) from e
        hosts_file = cls.parse(content)
        logger.debug('[HostsFile.load][%s] %d lines', path, len(hosts_file))
        return hosts_file


def parse_file(content: str) -> HostsFile:
    return HostsFile.parse(content)
