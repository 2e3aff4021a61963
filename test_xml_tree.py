#!/usr/bin/env python3
"""
Tests for the attributed element tree.
"""

import unittest

from lxml import etree

from odata_openapi_lib.constants import SAP_NAMESPACE
from odata_openapi_lib.xml_tree import build_tree, parse_optional_bool

DOCUMENT = """<?xml version="1.0" encoding="utf-8"?>
<edmx:Edmx Version="1.0" xmlns:edmx="http://schemas.microsoft.com/ado/2007/06/edmx"
    xmlns:sap="http://www.sap.com/Protocols/SAPData">
  <!-- generated -->
  <edmx:DataServices>
    <Schema Namespace="S" xmlns="http://schemas.microsoft.com/ado/2008/09/edm">
      <EntityType Name="One" sap:label="First"/>
      <EntityType Name="Two"/>
      <Documentation>  Some text  </Documentation>
    </Schema>
  </edmx:DataServices>
</edmx:Edmx>
"""


class TestXmlNode(unittest.TestCase):

    def setUp(self):
        self.root = build_tree(DOCUMENT)
        self.schema = self.root.first('DataServices').first('Schema')

    def test_local_names(self):
        self.assertEqual(self.root.name, 'Edmx')
        self.assertEqual(self.schema.name, 'Schema')

    def test_attributes_separate_from_children(self):
        self.assertEqual(self.root.get('Version'), '1.0')
        self.assertEqual(self.schema.attributes, {'Namespace': 'S'})
        self.assertEqual([n.get('Name') for n in self.schema.children('EntityType')], ['One', 'Two'])

    def test_repeatable_children_always_lists(self):
        self.assertEqual(len(self.root.children('DataServices')), 1)
        self.assertEqual(self.schema.children('Association'), [])
        self.assertIsNone(self.schema.first('EntityContainer'))
        self.assertFalse(self.schema.has('EntityContainer'))
        self.assertTrue(self.schema.has('EntityType'))

    def test_namespaced_attribute_lookup(self):
        one = self.schema.first('EntityType')
        self.assertEqual(one.get_ns(SAP_NAMESPACE, 'label'), 'First')
        self.assertIsNone(one.get('label'))
        self.assertEqual(one.get_ns(SAP_NAMESPACE, 'creatable', 'true'), 'true')

    def test_root_namespace_declarations(self):
        self.assertEqual(self.root.namespaces['sap'], SAP_NAMESPACE)

    def test_text_trimmed(self):
        self.assertEqual(self.schema.first('Documentation').text, 'Some text')

    def test_malformed(self):
        with self.assertRaises(etree.XMLSyntaxError):
            build_tree('<a><b></a>')


class TestOptionalBool(unittest.TestCase):

    def test_values(self):
        self.assertIsNone(parse_optional_bool(None))
        self.assertTrue(parse_optional_bool('true'))
        self.assertTrue(parse_optional_bool('True'))
        self.assertFalse(parse_optional_bool('false'))
        self.assertFalse(parse_optional_bool('0'))


if __name__ == '__main__':
    unittest.main()
