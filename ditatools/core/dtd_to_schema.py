"""
"Upgrade" DITA documents conforming to a standard DITA 1.3 DTD
to the corresponding W3C XML schema or RELAX NG schema.

Only the prolog is edited, as text: the DOCTYPE declaration is removed and
replaced by an xsi:noNamespaceSchemaLocation attribute on the root element
or by an <?xml-model?> processing instruction. Documents whose DOCTYPE has an
internal subset are never modified.
"""

import codecs
import os
import re
from enum import Enum
from typing import Callable, Iterator, NamedTuple

from ditatools.core.constants import Constants, schema_locations
from ditatools.core.dita_debug import logger, debug
from ditatools.core.prolog import XML_SPACE, find_doctype, find_root_start_tag


class Target(Enum):
    XSD = '_XSD.TEMP'
    RNG = '_RNG.TEMP'

    @property
    def temp_suffix(self) -> str:
        return self.value


class SkipReason(Enum):
    NO_DOCTYPE = 'No <!DOCTYPE>'
    INTERNAL_SUBSET = 'DTD has an internal subset'
    NO_PUBLIC_ID = 'No DTD PUBLIC ID'
    UNKNOWN_PUBLIC_ID = 'Unknown DTD PUBLIC ID'
    NO_ROOT_ELEMENT = 'No root element'


class RewriteResult(NamedTuple):
    text: str | None
    skipped: SkipReason | None = None
    public_id: str | None = None

    @property
    def upgraded(self) -> bool:
        return self.skipped is None

    def describe(self, path: str) -> str:
        if self.upgraded:
            return "Upgraded '%s' (%s)." % (path, self.public_id)
        if self.skipped is SkipReason.UNKNOWN_PUBLIC_ID:
            return "'%s', %s; skipping '%s'." % (self.public_id, self.skipped.value.lower(), path)
        return "%s; skipping '%s'." % (self.skipped.value, path)


def rewrite(source: str, target: Target) -> RewriteResult:
    """
    :param source: text of a DITA document
    :param target: Target.XSD or Target.RNG
    :return: the rewritten text, or the reason why the document is left unchanged
    """
    doctype = find_doctype(source)
    if doctype is None:
        return RewriteResult(None, SkipReason.NO_DOCTYPE)
    if doctype.has_internal_subset:
        return RewriteResult(None, SkipReason.INTERNAL_SUBSET)

    public_id = doctype.public_id
    if public_id is None:
        return RewriteResult(None, SkipReason.NO_PUBLIC_ID)
    location = schema_locations.get(public_id)
    if location is None:
        return RewriteResult(None, SkipReason.UNKNOWN_PUBLIC_ID, public_id)

    if target is Target.XSD:
        after_root_name = find_root_start_tag(source, doctype.end)
        if after_root_name is None:
            return RewriteResult(None, SkipReason.NO_ROOT_ELEMENT, public_id)
        attributes = ' xmlns:xsi="%s" xsi:noNamespaceSchemaLocation="%s"' % (Constants.XSI_NS.value,
                                                                              location.xsd_location)
        text = (source[:doctype.start]
                + source[doctype.end:after_root_name].lstrip(XML_SPACE)
                + attributes
                + source[after_root_name:])
    else:
        xml_model = '<?xml-model href="%s"?>' % location.rng_href
        text = source[:doctype.start] + xml_model + source[doctype.end:]
    return RewriteResult(text, None, public_id)


"""
Files
"""

boms: list[tuple[bytes, str]] = [
    # UTF-32 first: its little-endian BOM starts with the UTF-16 one.
    # The UTF-16 and UTF-32 codecs keep the BOM as a leading U+FEFF, written back in the same byte order.
    (codecs.BOM_UTF32_LE, 'utf-32-le'),
    (codecs.BOM_UTF32_BE, 'utf-32-be'),
    (codecs.BOM_UTF8, 'utf-8-sig'),
    (codecs.BOM_UTF16_LE, 'utf-16-le'),
    (codecs.BOM_UTF16_BE, 'utf-16-be'),
]

xml_declaration = re.compile(rb'<\?xml[^>]*?encoding\s*=\s*["\']([A-Za-z][A-Za-z0-9._\-]*)["\']')

FALLBACK_ENCODING = 'utf-8'


def detect_encoding(data: bytes) -> str:
    for bom, encoding in boms:
        if data.startswith(bom):
            return encoding
    declaration = xml_declaration.match(data)
    if declaration:
        encoding = declaration.group(1).decode('ascii')
        try:
            codecs.lookup(encoding)
            return encoding
        except LookupError:
            logger.warning('Unknown encoding ' + encoding + ', using ' + FALLBACK_ENCODING)
    return FALLBACK_ENCODING


def load_xml(path: str) -> tuple[str, str]:
    """
    :return: text of the file with its line endings untouched, encoding used to decode it
    """
    with open(path, 'rb') as f:
        data = f.read()
    encoding = detect_encoding(data)
    return data.decode(encoding), encoding


def save_xml(text: str, path: str, encoding: str) -> None:
    with open(path, 'w', encoding=encoding, newline='') as f:
        f.write(text)


@debug
def process_file(path: str, target: Target) -> RewriteResult:
    """
    Rewrite a file in place. The original is kept as <path>_DTD.BAK.
    :raise OSError: if the file cannot be read or replaced
    """
    source, encoding = load_xml(path)
    result = rewrite(source, target)
    if not result.upgraded:
        logger.info(result.describe(path))
        return result

    temp_path = path + target.temp_suffix
    save_xml(result.text, temp_path, encoding)
    os.replace(path, path + Constants.BACKUP_SUFFIX.value)
    os.replace(temp_path, path)
    logger.info(result.describe(path))
    return result


"""
Batch processing
"""


class BatchReport:

    def __init__(self) -> None:
        self.upgraded: list[str] = []
        self.skipped: list[tuple[str, SkipReason]] = []
        self.failed: list[tuple[str, Exception]] = []

    def __repr__(self) -> str:
        return '<BatchReport: %d upgraded, %d skipped, %d failed>' % (
            len(self.upgraded), len(self.skipped), len(self.failed))

    @property
    def ok(self) -> bool:
        return len(self.failed) == 0


def is_dita_file(path: str) -> bool:
    ext = os.path.splitext(path)[1][1:].lower()
    return ext in Constants.DITA_EXTENSIONS.value


def process_one(path: str, target: Target, report: BatchReport) -> None:
    try:
        result = process_file(path, target)
    except (OSError, UnicodeError) as e:
        logger.error("Cannot process '" + path + "': " + str(e))
        report.failed.append((path, e))
        return
    if result.upgraded:
        report.upgraded.append(path)
    else:
        report.skipped.append((path, result.skipped))


def iter_dita_files(path: str, onerror: Callable[[OSError], None] | None = None) -> Iterator[str]:
    """
    Yield the .dita, .ditamap and .ditaval files of a directory tree, in sorted order.
    Symbolic links to directories are not followed.
    :param onerror: called with the OSError of a directory that cannot be listed
    """
    for folder, folder_names, file_names in os.walk(path, onerror=onerror):
        folder_names.sort()
        for file_name in sorted(file_names):
            if is_dita_file(file_name):
                yield os.path.join(folder, file_name)


def process_dir(path: str, target: Target, report: BatchReport) -> None:
    """
    Recursively process all the .dita, .ditamap and .ditaval files of a directory.
    """
    logger.info("Processing DITA files in '" + path + "'")

    def record_error(e: OSError):
        logger.error("Cannot list '" + str(e.filename) + "': " + str(e))
        report.failed.append((e.filename, e))

    for file_path in iter_dita_files(path, record_error):
        process_one(file_path, target, report)


def process_paths(paths: list[str], target: Target) -> BatchReport:
    """
    :param paths: DITA files and directories containing DITA files
    """
    report = BatchReport()
    for path in paths:
        if os.path.isdir(path):
            process_dir(path, target, report)
        elif os.path.exists(path):
            process_one(path, target, report)
        else:
            e = FileNotFoundError("'" + path + "', not a file or directory")
            logger.error(str(e))
            report.failed.append((path, e))
    return report
