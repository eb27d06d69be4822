from enum import Enum
from typing import NamedTuple

from lxml import etree

from ditatools.core.constants import Constants

"""
How a document associates itself with a grammar:
a DOCTYPE, an xsi:noNamespaceSchemaLocation attribute or an <?xml-model?> PI.
"""

XML_MODEL_TARGET = 'xml-model'
XML_TYPE = 'application/xml'


class SchemaKind(Enum):
    DTD = 'DTD'
    XSD = 'W3C XML schema'
    RNG = 'RELAX NG schema'
    NONE = 'no schema'


class SchemaAssociation(NamedTuple):
    kind: SchemaKind
    location: str | None = None

    def __str__(self) -> str:
        if self.location is None:
            return self.kind.value
        return self.kind.value + ' ' + self.location


class XMLModel(NamedTuple):
    href: str
    type: str = XML_TYPE
    schematypens: str | None = None

    @property
    def is_rng(self) -> bool:
        return self.schematypens == Constants.RNG_NS.value or self.href.endswith('.rng') \
            or ':rng:' in self.href

    @classmethod
    def from_pi(cls, pi: etree._ProcessingInstruction) -> 'XMLModel | None':
        """
        :param pi: <?xml-model href="..." type="..." schematypens="..."?>
        :return: None if the PI is not an xml-model PI or has no href
        """
        if pi.target != XML_MODEL_TARGET:
            return None
        href = (pi.get('href') or '').strip()
        if not href:
            return None
        return cls(href, pi.get('type') or XML_TYPE, pi.get('schematypens'))


def parse_prolog(path: str) -> etree._ElementTree:
    """
    Parse without loading the DTD, resolving entities or accessing the network.
    Entities declared in the DTD may be undefined: the parser recovers.
    """
    parser = etree.XMLParser(load_dtd=False, resolve_entities=False, no_network=True, recover=True)
    return etree.parse(path, parser)


def xml_models(tree: etree._ElementTree) -> list[XMLModel]:
    models = []
    root = tree.getroot()
    for node in reversed(list(root.itersiblings(preceding=True))):
        if isinstance(node, etree._ProcessingInstruction):
            model = XMLModel.from_pi(node)
            if model is not None:
                models.append(model)
    return models


def read_schema_association(path: str) -> SchemaAssociation:
    """
    :raise OSError: if the file cannot be read
    :raise lxml.etree.XMLSyntaxError: if the file is not XML at all
    """
    tree = parse_prolog(path)
    root = tree.getroot()
    if root is None:
        return SchemaAssociation(SchemaKind.NONE)
    dtd = tree.docinfo.public_id or tree.docinfo.system_url
    if dtd:
        return SchemaAssociation(SchemaKind.DTD, dtd)
    xsd_location = root.get('{%s}noNamespaceSchemaLocation' % Constants.XSI_NS.value)
    if xsd_location:
        return SchemaAssociation(SchemaKind.XSD, xsd_location)
    for model in xml_models(tree):
        if model.is_rng:
            return SchemaAssociation(SchemaKind.RNG, model.href)
    return SchemaAssociation(SchemaKind.NONE)
