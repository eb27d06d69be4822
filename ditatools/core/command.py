"""
Variable substitution in the command templates of external processors.

A template may contain the following variables:

    %I  the input file
    %i  same as %I, but a URL rather than a filename
    %O  the output file
    %o  same as %O, but a URL rather than a filename
    %S  the filename separator: '\\' on Windows, '/' on all the other platforms
    %%  a literal '%'

A file variable may be preceded by one of these modifiers:

    ~p  parent directory   %~pI = /home/john/doc src
                           %~pi = file:///home/john/doc%20src/ (note the trailing '/')
    ~n  basename           %~nI = manual.xml
    ~r  basename without the extension
                           %~rI = manual
    ~e  extension, if any  %~eI = xml

A '%' not followed by a variable is copied as is. A variable whose file
was not given for this call loses its '%' and the rest is copied as plain text.
"""

import os
from enum import Enum
from typing import NamedTuple

from ditatools.core.fileref import FileLocation


class Role(Enum):
    INPUT = 'I'
    OUTPUT = 'O'


class Form(Enum):
    PATH = 'path'
    URL = 'url'


class Modifier(Enum):
    NONE = ''
    PARENT = 'p'
    NAME = 'n'
    ROOT_NAME = 'r'
    EXTENSION = 'e'


roles: dict[str, tuple[Role, Form]] = {
    'I': (Role.INPUT, Form.PATH),
    'O': (Role.OUTPUT, Form.PATH),
    'i': (Role.INPUT, Form.URL),
    'o': (Role.OUTPUT, Form.URL),
}

modifiers: dict[str, Modifier] = {m.value: m for m in Modifier if m is not Modifier.NONE}


class VariableRef(NamedTuple):
    role: Role
    form: Form
    modifier: Modifier = Modifier.NONE

    @property
    def length(self) -> int:
        """
        Number of characters after the '%'.
        """
        return 1 if self.modifier is Modifier.NONE else 3


def char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else ''


def parse_variable(text: str, start: int) -> VariableRef | None:
    """
    :param text: the whole template
    :param start: index of the character following '%'
    :return: the reference, or None if this is not a variable
    """
    c = char_at(text, start)
    if c == '~':
        modifier = modifiers.get(char_at(text, start + 1))
        role = roles.get(char_at(text, start + 2))
        if modifier is None or role is None:
            return None
        return VariableRef(*role, modifier)
    if c in roles:
        return VariableRef(*roles[c])
    return None


def variable_value(location: FileLocation, ref: VariableRef) -> str:
    if ref.form is Form.URL:
        match ref.modifier:
            case Modifier.PARENT:
                value = location.parent_url
            case Modifier.NAME:
                value = location.url_name
            case Modifier.ROOT_NAME:
                value = location.url_root_name
            case Modifier.EXTENSION:
                value = location.url_extension
            case _:
                value = location.url
    else:
        match ref.modifier:
            case Modifier.PARENT:
                value = location.parent
            case Modifier.NAME:
                value = location.name
            case Modifier.ROOT_NAME:
                value = location.root_name
            case Modifier.EXTENSION:
                value = location.extension
            case _:
                value = location.path
    return value or ''


def expand(template: str,
           input_file: FileLocation | None = None,
           output_file: FileLocation | None = None) -> str:
    """
    Substitute the variables of a command template.
    Never fails: malformed references are copied as is,
    references to a file that was not given are copied without their '%'.
    :param template: ex. 'fop -fo "%I" -pdf "%~pO%S%~rO.pdf"'
    :param input_file: bound to %I and %i
    :param output_file: bound to %O and %o
    :return: the command, ready to be passed to a shell
    """
    if '%' not in template:
        return template

    files = {Role.INPUT: input_file, Role.OUTPUT: output_file}
    expanded = []
    i = 0
    length = len(template)
    while i < length:
        c = template[i]
        if c != '%':
            expanded.append(c)
            i += 1
            continue

        following = char_at(template, i + 1)
        if following == '%':
            expanded.append('%')
            i += 2
        elif following == 'S':
            expanded.append(os.sep)
            i += 2
        else:
            ref = parse_variable(template, i + 1)
            if ref is None:
                expanded.append(c)
                i += 1
                continue
            location = files[ref.role]
            if location is not None:
                expanded.append(variable_value(location, ref))
                i += 1 + ref.length
            else:
                # file not given: drop the '%', the rest is plain text
                i += 1
    return ''.join(expanded)
