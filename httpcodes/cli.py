"""The command-line interface to httpcodes."""

import argparse
import sys
import traceback

import httpcodes
from httpcodes import registry, reports
from httpcodes.structure import Category


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description='Look up standard HTTP status codes.')
    parser.add_argument('--version', action='version',
                        version='httpcodes %s' % httpcodes.__version__)
    parser.add_argument('-o', '--output', choices=reports.formats,
                        default='text', help='output format')
    parser.add_argument('-c', '--category', metavar='CATEGORY',
                        choices=[category.tag for category in Category],
                        action='append',
                        help='list all codes of this class '
                             '(one of: %(choices)s)')
    parser.add_argument('--full-traceback', action='store_true',
                        help='do not hide the traceback on exceptions')
    parser.add_argument('key', nargs='*', metavar='KEY',
                        help='status code (such as 404) '
                             'or name (such as NOT_FOUND)')
    return parser.parse_args(argv[1:])


def resolve(key):
    """Look up a command-line `key`, which is either a code or a name."""
    if key.isdecimal():
        return registry.lookup_by_code(int(key))
    return registry.lookup_by_name(key)


def run_cli(args, stdout, stderr):
    report = reports.formats[args.output]
    entries = []
    n_missing = 0
    for category in args.category or []:
        entries.extend(registry.list_by_category(category))
    for key in args.key:
        try:
            entries.append(resolve(key))
        except registry.NotFound as exc:
            stderr.write('httpcodes: %s\n' % exc)
            n_missing += 1
    if not args.category and not args.key:
        entries = list(registry.all_entries())
    # One entry per code, ascending.
    entries = sorted({entry.code: entry for entry in entries}.values(),
                     key=lambda entry: entry.code)

    try:
        # Reports are always UTF-8, whatever the encoding of stdout.
        report(entries, stdout.buffer)
    except EnvironmentError as exc:
        if args.full_traceback:
            traceback.print_exc(file=stderr)
        stderr.write('httpcodes: %s\n' % exc)
        return 1

    return 1 if n_missing else 0


def excepthook(_type, exc, _traceback):     # pragma: no cover
    sys.stderr.write('httpcodes: unhandled exception: %r\n' % exc)


def main():     # pragma: no cover
    args = parse_args(sys.argv)
    if not args.full_traceback:
        sys.excepthook = excepthook
    sys.exit(run_cli(args, sys.stdout, sys.stderr))

if __name__ == '__main__':
    main()
