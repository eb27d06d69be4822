"""
Perform unit testing for `command.py`.
"""

import os
import unittest

from ditatools.core.command import Form, Modifier, Role, VariableRef, expand, parse_variable
from ditatools.core.fileref import FileLocation

POSIX = os.sep == '/'


class TestParseVariable(unittest.TestCase):
    def test_role_letters(self):
        self.assertEqual(parse_variable('I', 0), VariableRef(Role.INPUT, Form.PATH))
        self.assertEqual(parse_variable('O', 0), VariableRef(Role.OUTPUT, Form.PATH))
        self.assertEqual(parse_variable('i', 0), VariableRef(Role.INPUT, Form.URL))
        self.assertEqual(parse_variable('o', 0), VariableRef(Role.OUTPUT, Form.URL))
        self.assertEqual(parse_variable('I', 0).length, 1)

    def test_modifiers(self):
        self.assertEqual(parse_variable('%~pI', 1), VariableRef(Role.INPUT, Form.PATH, Modifier.PARENT))
        self.assertEqual(parse_variable('~no', 0), VariableRef(Role.OUTPUT, Form.URL, Modifier.NAME))
        self.assertEqual(parse_variable('~ri', 0).modifier, Modifier.ROOT_NAME)
        self.assertEqual(parse_variable('~eO', 0).modifier, Modifier.EXTENSION)
        self.assertEqual(parse_variable('~eO', 0).length, 3)

    def test_not_a_variable(self):
        self.assertIsNone(parse_variable('', 0))
        self.assertIsNone(parse_variable('x', 0))
        self.assertIsNone(parse_variable('~', 0))
        self.assertIsNone(parse_variable('~p', 0))
        self.assertIsNone(parse_variable('~xI', 0))
        self.assertIsNone(parse_variable('~pX', 0))
        self.assertIsNone(parse_variable('I', 1))


class TestExpandLiterals(unittest.TestCase):
    def test_no_percent(self):
        self.assertEqual(expand(''), '')
        self.assertEqual(expand('fop -q'), 'fop -q')
        self.assertEqual(expand('I O i o ~pI'), 'I O i o ~pI')

    def test_escapes(self):
        self.assertEqual(expand('%%'), '%')
        self.assertEqual(expand('%S'), os.sep)
        self.assertEqual(expand('100%%'), '100%')
        self.assertEqual(expand('%%I'), '%I')
        self.assertEqual(expand('a%Sb%Sc'), 'a' + os.sep + 'b' + os.sep + 'c')

    def test_unrecognized_references_pass_through(self):
        self.assertEqual(expand('%x'), '%x')
        self.assertEqual(expand('%~xI'), '%~xI')
        self.assertEqual(expand('%~p'), '%~p')
        self.assertEqual(expand('100%'), '100%')
        self.assertEqual(expand('%'), '%')


@unittest.skipUnless(POSIX, 'POSIX paths')
class TestExpandFiles(unittest.TestCase):
    def setUp(self):
        self.input_file = FileLocation('/a/b/report.xml')
        self.output_file = FileLocation('/a/out/report.pdf')

    def expand(self, template):
        return expand(template, self.input_file, self.output_file)

    def test_path_form(self):
        self.assertEqual(self.expand('%I'), '/a/b/report.xml')
        self.assertEqual(self.expand('%~nI'), 'report.xml')
        self.assertEqual(self.expand('%~rI'), 'report')
        self.assertEqual(self.expand('%~eI'), 'xml')
        self.assertEqual(self.expand('%~pI'), '/a/b')
        self.assertEqual(self.expand('%O'), '/a/out/report.pdf')
        self.assertEqual(self.expand('%~pO'), '/a/out')

    def test_url_form(self):
        self.assertEqual(self.expand('%i'), 'file:///a/b/report.xml')
        self.assertEqual(self.expand('%~pi'), 'file:///a/b/')
        self.assertTrue(self.expand('%~pi').endswith('/'))
        self.assertEqual(self.expand('%~ni'), 'report.xml')
        self.assertEqual(self.expand('%~ri'), 'report')
        self.assertEqual(self.expand('%~ei'), 'xml')
        self.assertEqual(self.expand('%o'), 'file:///a/out/report.pdf')

    def test_url_form_is_decoded_for_names(self):
        location = FileLocation('/a/doc src/my manual.xml')
        self.assertEqual(expand('%i', location), 'file:///a/doc%20src/my%20manual.xml')
        self.assertEqual(expand('%~pi', location), 'file:///a/doc%20src/')
        self.assertEqual(expand('%~ni', location), 'my manual.xml')
        self.assertEqual(expand('%~ri', location), 'my manual')

    def test_missing_derivations_are_empty(self):
        no_extension = FileLocation('/a/README')
        self.assertEqual(expand('[%~eI]', no_extension), '[]')
        self.assertEqual(expand('[%~ei]', no_extension), '[]')
        self.assertEqual(expand('%~rI', no_extension), 'README')
        root = FileLocation('/')
        self.assertEqual(expand('[%~pI]', root), '[]')
        self.assertEqual(expand('[%~pi]', root), '[]')

    def test_command(self):
        self.assertEqual(
            self.expand('fop -fo "%I" -pdf "%~pO%S%~rO.pdf"'),
            'fop -fo "/a/b/report.xml" -pdf "/a/out/report.pdf"',
        )
        self.assertEqual(
            self.expand('xep -quiet -fo %i -pdf %~rO.pdf 2>%%TEMP%%'),
            'xep -quiet -fo file:///a/b/report.xml -pdf report.pdf 2>%TEMP%',
        )

    def test_absent_file_swallows_only_the_percent(self):
        self.assertEqual(expand('%O', self.input_file), 'O')
        self.assertEqual(expand('%o', self.input_file), 'o')
        self.assertEqual(expand('%~nO', self.input_file), '~nO')
        self.assertEqual(expand('%I', None, self.output_file), 'I')
        self.assertEqual(expand('cp %I %O', self.input_file), 'cp /a/b/report.xml O')
        self.assertEqual(expand('%I-%O'), 'I-O')

    def test_fixed_point(self):
        for template in ['%I', '%~pO%S%~rO.pdf', 'cat %~nI', 'fop -fo %i']:
            expanded = self.expand(template)
            self.assertNotIn('%', expanded)
            self.assertEqual(expand(expanded, self.input_file, self.output_file), expanded)


if __name__ == '__main__':
    unittest.main()
