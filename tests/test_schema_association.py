"""
Perform unit testing for `schema_association.py`.
"""

import os
import tempfile
import unittest

from lxml import etree

from ditatools.core.dtd_to_schema import Target, process_file
from ditatools.core.schema_association import SchemaAssociation, SchemaKind, XMLModel, read_schema_association

TOPIC = '''<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE topic PUBLIC "-//OASIS//DTD DITA Topic//EN" "topic.dtd">
<topic id="t1"><title>Title</title></topic>
'''

TOPIC_WITH_ENTITY = TOPIC.replace('Title', 'A&nbsp;title')


class TestXMLModel(unittest.TestCase):
    def test_from_pi(self):
        pi = etree.ProcessingInstruction(
            'xml-model', 'href="topic.rng" schematypens="http://relaxng.org/ns/structure/1.0"')
        model = XMLModel.from_pi(pi)
        self.assertEqual(model, XMLModel('topic.rng', 'application/xml', 'http://relaxng.org/ns/structure/1.0'))
        self.assertTrue(model.is_rng)

    def test_not_an_xml_model(self):
        self.assertIsNone(XMLModel.from_pi(etree.ProcessingInstruction('xml-stylesheet', 'href="a.css"')))
        self.assertIsNone(XMLModel.from_pi(etree.ProcessingInstruction('xml-model', 'type="application/xml"')))

    def test_is_rng(self):
        self.assertTrue(XMLModel('urn:oasis:names:tc:dita:rng:topic.rng:1.3').is_rng)
        self.assertFalse(XMLModel('topic.sch', 'application/xml', 'http://purl.oclc.org/dsdl/schematron').is_rng)


class TestReadSchemaAssociation(unittest.TestCase):
    def setUp(self):
        self.folder = tempfile.TemporaryDirectory()
        self.addCleanup(self.folder.cleanup)

    def write(self, text):
        path = os.path.join(self.folder.name, 't1.dita')
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return path

    def test_dtd(self):
        path = self.write(TOPIC)
        self.assertEqual(read_schema_association(path),
                         SchemaAssociation(SchemaKind.DTD, '-//OASIS//DTD DITA Topic//EN'))

    def test_dtd_entities_are_not_resolved(self):
        path = self.write(TOPIC_WITH_ENTITY)
        self.assertEqual(read_schema_association(path).kind, SchemaKind.DTD)

    def test_after_xsd_upgrade(self):
        path = self.write(TOPIC)
        process_file(path, Target.XSD)
        self.assertEqual(read_schema_association(path),
                         SchemaAssociation(SchemaKind.XSD, 'urn:oasis:names:tc:dita:xsd:topic.xsd'))

    def test_after_rng_upgrade(self):
        path = self.write(TOPIC)
        process_file(path, Target.RNG)
        self.assertEqual(read_schema_association(path),
                         SchemaAssociation(SchemaKind.RNG, 'urn:oasis:names:tc:dita:rng:topic.rng'))

    def test_no_schema(self):
        path = self.write('<?xml-stylesheet href="a.css"?><topic id="t1"/>')
        association = read_schema_association(path)
        self.assertEqual(association.kind, SchemaKind.NONE)
        self.assertEqual(str(association), 'no schema')

    def test_str(self):
        self.assertEqual(str(SchemaAssociation(SchemaKind.RNG, 'topic.rng')), 'RELAX NG schema topic.rng')


if __name__ == '__main__':
    unittest.main()
