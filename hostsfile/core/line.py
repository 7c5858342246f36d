'''
Classify and split a single line of a hosts file.
'''

from typing import Optional

__all__ = [
    'HostsFileLine',
    'parse_line',
]

# Unicode White_Space: what str.isspace() accepts minus \x1c-\x1f.
WHITESPACE = (
    '\t\n\x0b\x0c\r \x85\xa0\u1680'
    '\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a'
    '\u2028\u2029\u202f\u205f\u3000'
)


class HostsFileLine:
    '''
    One parsed line of a hosts file.

    `raw` is always the line exactly as it was read. `ip`, `hosts` and
    `comment` are `None` when the line has no such part.
    '''
    __slots__ = ('raw', 'ip', 'hosts', 'comment')

    def __init__(self,
                 raw: str,
                 ip: Optional[str] = None,
                 hosts: Optional[str] = None,
                 comment: Optional[str] = None):
        object.__setattr__(self, 'raw', raw)
        object.__setattr__(self, 'ip', ip)
        object.__setattr__(self, 'hosts', hosts)
        object.__setattr__(self, 'comment', comment)

    def __setattr__(self, name, value):
        raise AttributeError('%s is read-only' % self.__class__.__name__)

    def __delattr__(self, name):
        raise AttributeError('%s is read-only' % self.__class__.__name__)

    def __reduce__(self):
        return self.__class__, self._key()

    def __eq__(self, other):
        if not isinstance(other, HostsFileLine):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.raw

    def __repr__(self):
        return '<%s ip=%r hosts=%r comment=%r>' % (
            self.__class__.__name__, self.ip, self.hosts, self.comment)

    def _key(self):
        return self.raw, self.ip, self.hosts, self.comment

    def contains_host(self) -> bool:
        return self.ip is not None

    def is_blank(self) -> bool:
        return self.ip is None and self.hosts is None and self.comment is None

    def is_comment(self) -> bool:
        return self.ip is None and self.comment is not None

    @classmethod
    def parse(cls, line: str) -> 'HostsFileLine':
        '''
        Parse one line. Never fails: anything that is not blank or a pure
        comment is read as `<ip> <hosts>[ #comment]`.
        '''
        trimmed = line.strip(WHITESPACE)
        if not trimmed:
            return cls(line)
        if trimmed.startswith('#'):
            return cls(line, comment=trimmed)

        data, sep, comment = trimmed.partition('#')
        # Only single spaces separate fields, so tabs and runs of spaces
        # leave empty tokens behind.
        parts = data.split(' ')
        ip = parts[0]
        hosts = parts[1] if len(parts) > 1 else None
        return cls(line, ip, hosts, comment if sep else None)


def parse_line(line: str) -> HostsFileLine:
    return HostsFileLine.parse(line)
