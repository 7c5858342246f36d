from .core import (
    HostsFile,
    HostsFileError,
    HostsFileLine,
    parse_file,
    parse_line,
    split_lines,
)

__version__ = '0.1.0'
