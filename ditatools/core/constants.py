from enum import Enum
from os import environ, path
from typing import NamedTuple

import ditatools


class Constants(Enum):
    LOG_FOLDER = environ.get('DITATOOLS_LOG_DIR',
                             path.join(path.dirname(ditatools.__file__), 'logs'))

    # Processor name: (target format, command template).
    # Override any command with DITATOOLS_<NAME>_COMMAND, e.g. DITATOOLS_XFC_RTF_COMMAND.
    FO_PROCESSORS: dict[str, tuple[str, str]] = {
        'fop': ('PDF', 'fop -q -fo "%I" -pdf "%O"'),
        'xep': ('PDF', 'xep -quiet -fo "%I" -pdf "%O"'),
        'ahf': ('PDF', 'AHFCmd -x 3 -d "%I" -o "%O"'),
        'xfc-rtf': ('RTF', 'fo2rtf "%I" "%O"'),
        'xfc-docx': ('DOCX', 'fo2docx "%I" "%O"'),
        'xfc-odt': ('ODT', 'fo2odt "%I" "%O"'),
        'xfc-wml': ('WML', 'fo2wml "%I" "%O"'),
    }

    DITA_EXTENSIONS = ('dita', 'ditamap', 'ditaval')
    BACKUP_SUFFIX = '_DTD.BAK'
    XSI_NS = 'http://www.w3.org/2001/XMLSchema-instance'
    RNG_NS = 'http://relaxng.org/ns/structure/1.0'

    USAGE_ERROR_EXIT_CODE = 1
    PROCESSING_ERROR_EXIT_CODE = 2

    def __str__(self):
        return str(self.value)


class SchemaLocation(NamedTuple):
    xsd_location: str
    rng_href: str


def _locations(public_ids: tuple[str, str], xsd: str, rng: str) -> dict[str, SchemaLocation]:
    """
    The DITA 1.3 public identifier points to the 1.3 schemas,
    the unversioned one to the unversioned schemas.
    """
    versioned, unversioned = public_ids
    return {
        versioned: SchemaLocation(xsd + ':1.3', rng + ':1.3'),
        unversioned: SchemaLocation(xsd, rng),
    }


schema_locations: dict[str, SchemaLocation] = {
    # Public identifier of a standard DITA DTD -> W3C XML schema URN and RELAX NG URN.
    **_locations(('-//OASIS//DTD DITA 1.3 Machinery Task//EN', '-//OASIS//DTD DITA Machinery Task//EN'),
                 'urn:oasis:names:tc:dita:spec:machinery:xsd:machinerytask.xsd',
                 'urn:oasis:names:tc:dita:spec:machinery:rng:machinerytask.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 DITAVAL//EN', '-//OASIS//DTD DITA DITAVAL//EN'),
                 'urn:oasis:names:tc:dita:xsd:ditaval.xsd',
                 'urn:oasis:names:tc:dita:rng:ditaval.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Concept//EN', '-//OASIS//DTD DITA Concept//EN'),
                 'urn:oasis:names:tc:dita:xsd:concept.xsd',
                 'urn:oasis:names:tc:dita:rng:concept.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Composite//EN', '-//OASIS//DTD DITA Composite//EN'),
                 'urn:oasis:names:tc:dita:xsd:ditabase.xsd',
                 'urn:oasis:names:tc:dita:rng:ditabase.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 General Task//EN', '-//OASIS//DTD DITA General Task//EN'),
                 'urn:oasis:names:tc:dita:xsd:generalTask.xsd',
                 'urn:oasis:names:tc:dita:rng:generalTask.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Glossary//EN', '-//OASIS//DTD DITA Glossary//EN'),
                 'urn:oasis:names:tc:dita:xsd:glossary.xsd',
                 'urn:oasis:names:tc:dita:rng:glossary.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Glossary Entry//EN', '-//OASIS//DTD DITA Glossary Entry//EN'),
                 'urn:oasis:names:tc:dita:xsd:glossentry.xsd',
                 'urn:oasis:names:tc:dita:rng:glossentry.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Glossary Group//EN', '-//OASIS//DTD DITA Glossary Group//EN'),
                 'urn:oasis:names:tc:dita:xsd:glossgroup.xsd',
                 'urn:oasis:names:tc:dita:rng:glossgroup.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Map//EN', '-//OASIS//DTD DITA Map//EN'),
                 'urn:oasis:names:tc:dita:xsd:map.xsd',
                 'urn:oasis:names:tc:dita:rng:map.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Reference//EN', '-//OASIS//DTD DITA Reference//EN'),
                 'urn:oasis:names:tc:dita:xsd:reference.xsd',
                 'urn:oasis:names:tc:dita:rng:reference.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Task//EN', '-//OASIS//DTD DITA Task//EN'),
                 'urn:oasis:names:tc:dita:xsd:task.xsd',
                 'urn:oasis:names:tc:dita:rng:task.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Topic//EN', '-//OASIS//DTD DITA Topic//EN'),
                 'urn:oasis:names:tc:dita:xsd:topic.xsd',
                 'urn:oasis:names:tc:dita:rng:topic.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Troubleshooting//EN', '-//OASIS//DTD DITA Troubleshooting//EN'),
                 'urn:oasis:names:tc:dita:xsd:troubleshooting.xsd',
                 'urn:oasis:names:tc:dita:rng:troubleshooting.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 BookMap//EN', '-//OASIS//DTD DITA BookMap//EN'),
                 'urn:oasis:names:tc:dita:xsd:bookmap.xsd',
                 'urn:oasis:names:tc:dita:rng:bookmap.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Base Map//EN', '-//OASIS//DTD DITA Base Map//EN'),
                 'urn:oasis:names:tc:dita:xsd:basemap.xsd',
                 'urn:oasis:names:tc:dita:rng:basemap.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Base Topic//EN', '-//OASIS//DTD DITA Base Topic//EN'),
                 'urn:oasis:names:tc:dita:xsd:basetopic.xsd',
                 'urn:oasis:names:tc:dita:rng:basetopic.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Classification Map//EN', '-//OASIS//DTD DITA Classification Map//EN'),
                 'urn:oasis:names:tc:dita:spec:classification:xsd:classifyMap.xsd',
                 'urn:oasis:names:tc:dita:spec:classification:rng:classifyMap.rng'),
    **_locations(('-//OASIS//DTD DITA 1.3 Subject Scheme Map//EN', '-//OASIS//DTD DITA Subject Scheme Map//EN'),
                 'urn:oasis:names:tc:dita:spec:classification:xsd:subjectScheme.xsd',
                 'urn:oasis:names:tc:dita:spec:classification:rng:subjectScheme.rng'),
}
