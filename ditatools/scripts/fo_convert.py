import argparse
import sys

from ditatools import __version__
from ditatools.core.command import expand
from ditatools.core.constants import Constants
from ditatools.core.exceptions import CommandFailedError
from ditatools.core.fileref import FileLocation
from ditatools.core.fo_converter import ExternalFOConverter, Format, get_fo_converter

DESCRIPTION = '''
    Convert an XSL-FO file using an external XSL-FO processor.
'''
COMMAND_HELP = '''
    command template run by the shell; %%I, %%O, %%i, %%o, %%S and %%%% are substituted,
    optionally with a ~p, ~n, ~r or ~e modifier (ex. %%~rO)
'''


def parse_command_line_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(prog='ditatools-fo', description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    processor = argument_parser.add_mutually_exclusive_group(required=True)
    processor.add_argument(
        '-p', '--processor',
        choices=sorted(Constants.FO_PROCESSORS.value),
        help='configured XSL-FO processor',
    )
    processor.add_argument(
        '-c', '--command',
        help=COMMAND_HELP,
    )
    argument_parser.add_argument(
        '-f', '--format',
        dest='target_format',
        choices=[f.value for f in Format],
        default=Format.PDF.value,
        help='format generated by the command given with --command (default: pdf)',
    )
    argument_parser.add_argument(
        '-n', '--dry-run',
        dest='dry_run_enabled',
        action='store_true',
        help='print the expanded command instead of running it',
    )
    argument_parser.add_argument('in_file', metavar='in.fo')
    argument_parser.add_argument('out_file', metavar='out_file')
    return argument_parser.parse_args(argv)


def make_converter(parsed_arguments: argparse.Namespace) -> ExternalFOConverter:
    if parsed_arguments.processor:
        return get_fo_converter(parsed_arguments.processor)
    return ExternalFOConverter('command', Format(parsed_arguments.target_format), parsed_arguments.command)


def main(argv: list[str] | None = None):
    parsed_arguments = parse_command_line_arguments(argv)
    converter = make_converter(parsed_arguments)

    if parsed_arguments.dry_run_enabled:
        print(expand(converter.command,
                     FileLocation.from_path(parsed_arguments.in_file),
                     FileLocation.from_path(parsed_arguments.out_file)))
        sys.exit(0)

    try:
        converter.convert_fo(parsed_arguments.in_file, parsed_arguments.out_file)
    except CommandFailedError as e:
        print(f'error: {e}', file=sys.stderr)
        sys.exit(Constants.PROCESSING_ERROR_EXIT_CODE.value)
    print(f'success: wrote to `{parsed_arguments.out_file}`')


if __name__ == '__main__':
    main()
