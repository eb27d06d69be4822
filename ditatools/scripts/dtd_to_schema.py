import argparse
import os
import sys

from lxml import etree

from ditatools import __version__
from ditatools.core.constants import Constants
from ditatools.core.dtd_to_schema import Target, iter_dita_files, process_paths
from ditatools.core.schema_association import read_schema_association

"""
"Upgrade" DITA documents conforming to a standard DITA 1.3 DTD
to the corresponding W3C XML schema or RELAX NG schema.
Files are modified in place, the original is kept as <file>_DTD.BAK.
Directories are recursively processed: all the .ditamap, .dita and .ditaval
files found in them are processed.
"""

DESCRIPTION = '''
    "Upgrade" DITA documents conforming to a standard DITA 1.3 DTD
    to the corresponding W3C XML schema or RELAX NG schema.
'''
PATHS_HELP = '''
    DITA file or directory containing DITA files (processed recursively)
'''


def parse_command_line_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(prog='ditatools-dtd2schema', description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    mode = argument_parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        '-rng',
        dest='target',
        action='store_const',
        const=Target.RNG,
        help='upgrade to RELAX NG schema',
    )
    mode.add_argument(
        '-xsd',
        dest='target',
        action='store_const',
        const=Target.XSD,
        help='upgrade to W3C XML schema',
    )
    mode.add_argument(
        '--inspect',
        dest='inspect_mode_enabled',
        action='store_true',
        help='only print the schema each document is associated with',
    )
    argument_parser.add_argument(
        'paths',
        help=PATHS_HELP,
        metavar='path',
        nargs='+',
    )
    return argument_parser.parse_args(argv)


def list_dita_files(path: str) -> list[str]:
    if not os.path.isdir(path):
        return [path]

    def report_error(error: OSError):
        print(f'error: cannot list `{error.filename}`: {error.strerror}', file=sys.stderr)

    return list(iter_dita_files(path, report_error))


def inspect(paths: list[str]) -> int:
    exit_code = 0
    for path in paths:
        for file_path in list_dita_files(path):
            try:
                association = read_schema_association(file_path)
            except (OSError, etree.XMLSyntaxError) as e:
                print(f'error: `{file_path}`: {e}', file=sys.stderr)
                exit_code = Constants.PROCESSING_ERROR_EXIT_CODE.value
                continue
            print(f'{file_path}: {association}')
    return exit_code


def upgrade(paths: list[str], target: Target) -> int:
    report = process_paths(paths, target)
    for path in report.upgraded:
        print(f'upgraded: `{path}`')
    for path, reason in report.skipped:
        print(f'skipped: `{path}`: {reason.value}')
    for path, error in report.failed:
        print(f'error: cannot process `{path}`: {error}', file=sys.stderr)
    print(f'{len(report.upgraded)} upgraded, {len(report.skipped)} skipped, {len(report.failed)} failed')
    return 0 if report.ok else Constants.PROCESSING_ERROR_EXIT_CODE.value


def main(argv: list[str] | None = None):
    parsed_arguments = parse_command_line_arguments(argv)

    for path in parsed_arguments.paths:
        if not os.path.exists(path):
            print(f'error: `{path}`, not a file or directory', file=sys.stderr)
            sys.exit(Constants.USAGE_ERROR_EXIT_CODE.value)

    if parsed_arguments.inspect_mode_enabled:
        exit_code = inspect(parsed_arguments.paths)
    else:
        exit_code = upgrade(parsed_arguments.paths, parsed_arguments.target)
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
