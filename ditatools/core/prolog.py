"""
Minimal scanning of an XML prolog: the DOCTYPE declaration and what comes
between it and the start tag of the root element. This is not a parser:
anything unexpected makes the scanner give up.
"""

import re
from enum import Enum
from typing import Iterator, NamedTuple

XML_SPACE = ' \t\r\n'

_NAME_START = (":A-Z_a-z\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u02FF\u0370-\u037D\u037F-\u1FFF"
               "\u200C-\u200D\u2070-\u218F\u2C00-\u2FEF\u3001-\uD7FF\uF900-\uFDCF\uFDF0-\uFFFD"
               "\U00010000-\U000EFFFF")
_NAME_CHAR = _NAME_START + "\\-.0-9\u00B7\u0300-\u036F\u203F-\u2040"
NAME = re.compile('[%s][%s]*' % (_NAME_START, _NAME_CHAR))

DOCTYPE_OPEN = '<!DOCTYPE'


class Doctype(NamedTuple):
    start: int  # at '<'
    end: int  # after '>'
    text: str
    has_internal_subset: bool = False

    @property
    def public_id(self) -> str | None:
        """
        Text between the quotes following the PUBLIC keyword.
        """
        pos = self.text.find('PUBLIC')
        if pos < 0:
            return None
        pos += len('PUBLIC')
        while pos < len(self.text) and self.text[pos] in XML_SPACE:
            pos += 1
        quote = self.text[pos:pos + 1]
        if quote not in ('"', "'"):
            return None
        close = self.text.find(quote, pos + 1)
        if close < 0:
            return None
        return self.text[pos + 1:close]


def find_doctype(source: str) -> Doctype | None:
    """
    :return: the first DOCTYPE declaration, None if there is none or if it is not terminated
    """
    start = source.find(DOCTYPE_OPEN)
    if start < 0:
        return None

    quote = ''
    i = start + len(DOCTYPE_OPEN)
    while i < len(source):
        c = source[i]
        if quote:
            if c == quote:
                quote = ''
        elif c in ('"', "'"):
            quote = c
        elif c == '[':
            # <!DOCTYPE topic PUBLIC "..." "topic.dtd" [ <!ENTITY nbsp "&#160;"> ]>
            close = source.find(']', i + 1)
            if close < 0:
                return None
            end = source.find('>', close + 1)
            if end < 0:
                return None
            return Doctype(start, end + 1, source[start:end + 1], has_internal_subset=True)
        elif c == '>':
            return Doctype(start, i + 1, source[start:i + 1])
        i += 1
    return None


class Token(Enum):
    WHITESPACE = 'whitespace'
    COMMENT = 'comment'
    PI = 'processing instruction'
    START_TAG = 'start tag'


class PrologItem(NamedTuple):
    token: Token
    start: int
    end: int  # for START_TAG: right after the element name


def scan_prolog(source: str, start: int = 0) -> Iterator[PrologItem]:
    """
    Yield the whitespace, comments and processing instructions found from start,
    then the root start tag. Stops silently on anything else.
    """
    i = start
    length = len(source)
    while i < length:
        if source[i] in XML_SPACE:
            end = i
            while end < length and source[end] in XML_SPACE:
                end += 1
            yield PrologItem(Token.WHITESPACE, i, end)
        elif source.startswith('<!--', i):
            close = source.find('-->', i + 4)
            if close < 0:
                return
            end = close + 3
            yield PrologItem(Token.COMMENT, i, end)
        elif source.startswith('<?', i):
            close = source.find('?>', i + 2)
            if close < 0:
                return
            end = close + 2
            yield PrologItem(Token.PI, i, end)
        elif source.startswith('<', i):
            name = NAME.match(source, i + 1)
            if name is None or source.find('>', name.end()) < 0:
                return
            yield PrologItem(Token.START_TAG, i, name.end())
            return
        else:
            return
        i = end


def find_root_start_tag(source: str, start: int = 0) -> int | None:
    """
    :return: index right after the name of the root element, None if not found
    """
    for item in scan_prolog(source, start):
        if item.token is Token.START_TAG:
            return item.end
    return None
