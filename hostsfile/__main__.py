'''
Print the addresses of host entries in a hosts file.
'''
import argparse
import sys

from .core import HostsFile, HostsFileError, hosts_file, logger


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='python3 -m hostsfile',
        description='List the host entries of a hosts file.')
    parser.add_argument(
        'pattern',
        help='only show entries whose line contains this text')
    parser.add_argument(
        'path', nargs='?', default=hosts_file,
        help='the path of the hosts file, default as `%s`' % hosts_file)
    parser.add_argument(
        '-r', '--raw', action='store_true',
        help='print the whole line instead of the IP')
    return parser.parse_args(argv)


def main(argv=None, out=None):
    '''Run the command line tool, return the exit status.'''
    args = _parse_args(argv)
    if out is None:
        out = sys.stdout
    if args.path is None:
        logger.error('No default hosts file on this platform')
        return 1
    logger.info('Parsing %r for "%s"', args.path, args.pattern)
    try:
        hosts = HostsFile.load(args.path)
    except HostsFileError as e:
        logger.error('%s', e)
        return 1
    for host in hosts.filter(args.pattern):
        if args.raw:
            print(host.raw, file=out)
        else:
            print(host.ip if host.ip is not None else 'No IP', file=out)
    return 0


if __name__ == '__main__':
    sys.exit(main())
