import os
import subprocess
from enum import Enum
from typing import Callable

from ditatools.core.command import expand
from ditatools.core.constants import Constants
from ditatools.core.dita_debug import logger, debugmethods
from ditatools.core.exceptions import CommandFailedError
from ditatools.core.fileref import FileLocation


class Format(Enum):
    PDF = 'pdf'
    PS = 'ps'
    RTF = 'rtf'
    ODT = 'odt'
    DOCX = 'docx'
    WML = 'wml'

    def __str__(self):
        return self.name


def shell_exec(command: str, cwd: str | None = None) -> int:
    """
    Run a command with /bin/sh on Unix and cmd.exe on Windows.
    :return: exit code of the command
    """
    return subprocess.run(command, shell=True, cwd=cwd).returncode


@debugmethods
class ExternalFOConverter:
    """
    Converts XSL-FO to the target format using a command-line utility
    such as /opt/xep/xep or D:\\opt\\fop\\fop.bat.
    See ditatools.core.command for the variables allowed in the command.
    """

    def __init__(self,
                 processor_name: str,
                 target_format: Format,
                 command: str,
                 runner: Callable[[str, str | None], int] = shell_exec) -> None:
        self.processor_name = processor_name
        self.target_format = target_format
        self.command = command
        self.runner = runner

    def __str__(self) -> str:
        return '%s[%s]: "%s"' % (self.processor_name, self.target_format, self.command)

    def __repr__(self) -> str:
        return '<ExternalFOConverter: ' + str(self) + '>'

    def convert_fo(self, in_file: str | os.PathLike, out_file: str | os.PathLike) -> None:
        in_location = FileLocation.from_path(in_file)
        out_location = FileLocation.from_path(out_file)
        cmd = expand(self.command, in_location, out_location)

        logger.info('Running %s to convert XSL-FO to %s: %s' % (self.processor_name, self.target_format, cmd))

        out_dir = out_location.parent
        if not os.path.isdir(out_dir):
            out_dir = None

        exit_code = self.runner(cmd, out_dir)
        if exit_code != 0:
            raise CommandFailedError(cmd, exit_code)


def processor_command(name: str) -> str:
    """
    Command of a configured processor, overridden by DITATOOLS_<NAME>_COMMAND if set.
    """
    _, command = Constants.FO_PROCESSORS.value[name]
    variable = 'DITATOOLS_' + name.upper().replace('-', '_') + '_COMMAND'
    return os.environ.get(variable, command)


def get_fo_converter(name: str) -> ExternalFOConverter:
    """
    :param name: ex. 'fop', 'xfc-rtf'
    :raise KeyError: if there is no such processor
    """
    target_format, _ = Constants.FO_PROCESSORS.value[name]
    return ExternalFOConverter(name, Format[target_format], processor_command(name))
