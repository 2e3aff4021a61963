#!/usr/bin/env python3
"""
Tests for the plain and SAP entity set builders.
"""

import unittest

from odata_openapi_lib import Annotation, EntitySet, EntitySetBuilder, FunctionImport, SAPEntitySet, SAPEntitySetBuilder
from odata_openapi_lib.entity_sets import parse_entity_type_annotations
from odata_openapi_lib.verbose_log import VerboseLog
from odata_openapi_lib.xml_tree import build_tree
from edmx_samples import schema_snippet

SCHEMA = schema_snippet("""
  <EntityType Name="E">
    <Key><PropertyRef Name="Id"/></Key>
    <Property Name="Id" Type="Edm.Int32" Nullable="false"/>
  </EntityType>
  <EntityType Name="D" BaseType="Test.E">
    <Property Name="Extra" Type="Edm.String"/>
    <NavigationProperty Name="Owner" Relationship="Test.D_Owner" FromRole="FromRole_D" ToRole="ToRole_Owner"/>
  </EntityType>
  <EntityType Name="Owner">
    <Key><PropertyRef Name="Id"/></Key>
    <Property Name="Id" Type="Edm.Int32" Nullable="false"/>
  </EntityType>
  <Association Name="D_Owner">
    <End Type="Test.D" Multiplicity="*" Role="FromRole_D"/>
    <End Type="Test.Owner" Multiplicity="1" Role="ToRole_Owner"/>
  </Association>
  <EntityContainer Name="Container">
    <EntitySet Name="Ds" EntityType="Test.D" sap:label="All Ds" sap:searchable="TRUE" sap:pageable="false"/>
    <EntitySet Name="Owners" EntityType="Test.Owner"/>
    <EntitySet Name="Elsewhere" EntityType="Other.Thing"/>
  </EntityContainer>
""")


class TestAnnotationUnion(unittest.TestCase):
    """Terms of an entity type and its ancestors."""

    def setUp(self):
        self.schema = build_tree(SCHEMA)
        self.raw_types = self.schema.children('EntityType')
        self.d = self.raw_types[1]

    def test_union_in_first_discovery_order(self):
        annotations = [
            Annotation(target='Test.D', terms=['t1']),
            Annotation(target='Test.E', terms=['t2', 't1']),
        ]
        self.assertEqual(parse_entity_type_annotations('Test', self.d, self.raw_types, annotations), ['t1', 't2'])

    def test_ancestor_terms_first_when_declared_first(self):
        annotations = [
            Annotation(target='Test.E', terms=['t2']),
            Annotation(target='Test.D', terms=['t1', 't2']),
        ]
        self.assertEqual(parse_entity_type_annotations('Test', self.d, self.raw_types, annotations), ['t2', 't1'])

    def test_target_must_be_namespace_qualified(self):
        annotations = [Annotation(target='D', terms=['t1']), Annotation(target='Other.D', terms=['t3'])]
        self.assertEqual(parse_entity_type_annotations('Test', self.d, self.raw_types, annotations), [])


class TestEntitySetBuilder(unittest.TestCase):
    """Plain builder."""

    def setUp(self):
        self.schema = build_tree(SCHEMA)
        self.container = self.schema.first('EntityContainer')
        self.function_imports = [
            FunctionImport(name='Recalculate', entity_set='Ds'),
            FunctionImport(name='Global'),
        ]

    def test_builds_known_sets_in_container_order(self):
        sets = EntitySetBuilder().build(self.schema, self.container, [], self.function_imports)
        self.assertEqual([es.name for es in sets], ['Ds', 'Owners'])
        for entity_set in sets:
            self.assertIs(type(entity_set), EntitySet)
            self.assertEqual(entity_set.namespace, 'Test')

    def test_function_imports_filtered_by_entity_set(self):
        ds, owners = EntitySetBuilder().build(self.schema, self.container, [], self.function_imports)
        self.assertEqual([fi.name for fi in ds.function_imports], ['Recalculate'])
        self.assertEqual(owners.function_imports, [])

    def test_plain_builder_ignores_associations(self):
        ds = EntitySetBuilder().build(self.schema, self.container, [], [])[0]
        self.assertEqual([p.name for p in ds.entity_type.properties], ['Id', 'Extra'])
        self.assertEqual(EntitySetBuilder().associations(self.schema), [])

    def test_annotations_attached(self):
        annotations = [Annotation(target='Test.E', terms=['Core.Computed'])]
        ds, owners = EntitySetBuilder().build(self.schema, self.container, annotations, [])
        self.assertEqual(ds.annotations, ['Core.Computed'])
        self.assertEqual(owners.annotations, [])


class TestSAPEntitySetBuilder(unittest.TestCase):
    """SAP builder: associations, flags and labels."""

    def setUp(self):
        self.schema = build_tree(SCHEMA)
        self.container = self.schema.first('EntityContainer')
        self.log = VerboseLog()
        self.builder = SAPEntitySetBuilder(log=self.log)

    def test_flags_and_label(self):
        ds, owners = self.builder.build(self.schema, self.container, [], [])
        self.assertIsInstance(ds, SAPEntitySet)
        self.assertEqual(ds.label, 'All Ds')
        self.assertTrue(ds.searchable)
        self.assertFalse(ds.pageable)
        self.assertTrue(ds.creatable and ds.updatable and ds.deleteable)

        self.assertEqual((owners.creatable, owners.updatable, owners.deleteable, owners.pageable, owners.searchable),
                         (True, True, True, True, False))
        self.assertIsNone(owners.label)

    def test_associations_resolve_navigation(self):
        ds = self.builder.build(self.schema, self.container, [], [])[0]
        owner = ds.entity_type.get_property('Owner')
        self.assertEqual(owner.ref, '#/definitions/Test.Owner')
        self.assertEqual(len(self.builder.associations(self.schema)), 1)

    def test_capabilities_mapping(self):
        node = self.container.children('EntitySet')[0]
        self.assertEqual(self.builder.capabilities(node), {
            'creatable': True,
            'updatable': True,
            'deleteable': True,
            'pageable': False,
            'searchable': True,
        })
        self.assertEqual(self.log.warnings, [])


if __name__ == '__main__':
    unittest.main()
