#!/usr/bin/env python
#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import unittest
from decimal import Decimal
from unittest import mock

from featureschema import AttributeTypeBuilder, FeatureTypeFactory, Name, \
    AttributeType, GeometryType, AttributeDescriptor, GeometryDescriptor, \
    Restriction, LengthRestriction, OptionsRestriction, SimpleInternationalString, \
    FeatureSchemaStateError, FeatureSchemaTypeError, Point, Polygon, WGS84, \
    get_field_length, get_feature_type_factory, length_restriction

NAMESPACE = 'http://example.test/ns'


class TestAttributeTypeBuilder(unittest.TestCase):

    def setUp(self):
        self.builder = AttributeTypeBuilder()

    def check_type_state_is_reset(self, builder):
        self.assertIsNone(builder.name)
        self.assertIsNone(builder.namespace_uri)
        self.assertFalse(builder.is_abstract)
        self.assertEqual(builder.restrictions, [])
        self.assertIsNone(builder.description)
        self.assertFalse(builder.is_identifiable)
        self.assertIsNone(builder.binding)
        self.assertIsNone(builder.super_type)
        self.assertIsNone(builder.crs)
        self.assertFalse(builder.is_crs_set)
        self.assertIsNone(builder.length)

    def check_descriptor_state_is_reset(self, builder):
        self.check_type_state_is_reset(builder)
        self.assertIsNone(builder.min_occurs)
        self.assertIsNone(builder.max_occurs)
        self.assertTrue(builder.is_nillable)
        self.assertIsNone(builder.default_value)
        self.assertFalse(builder.is_default_value_set)
        self.assertEqual(builder.user_data, {})
        self.assertIsNone(builder.options)

    def configure_type(self, builder):
        builder.set_name('alpha').set_namespace_uri(NAMESPACE).set_binding(str)
        builder.set_abstract(True).set_identifiable(True).set_length(20)
        builder.set_description('the alpha attribute')
        builder.add_restriction(Restriction("$value ne 'omega'"))
        builder.set_crs(WGS84)

    def test_initial_state(self):
        self.check_descriptor_state_is_reset(self.builder)
        self.assertEqual(self.builder.separator, ':')
        self.assertIs(self.builder.factory, get_feature_type_factory())
        self.assertEqual(repr(self.builder), 'AttributeTypeBuilder(factory=FeatureTypeFactory())')

    def test_factory_injection(self):
        factory = FeatureTypeFactory()
        builder = AttributeTypeBuilder(factory)
        self.assertIs(builder.factory, factory)

        other_factory = FeatureTypeFactory()
        self.assertIs(builder.set_factory(other_factory), builder)
        self.assertIs(builder.factory, other_factory)

    def test_setters_chaining(self):
        builder = self.builder
        for method, arg in [('set_binding', int), ('set_name', 'a'),
                            ('set_namespace_uri', NAMESPACE), ('set_separator', '#'),
                            ('set_crs', None), ('set_description', 'desc'),
                            ('set_abstract', True), ('set_identifiable', True),
                            ('set_length', 5), ('set_super_type', None),
                            ('set_options', ['x']), ('set_nillable', False),
                            ('set_min_occurs', 1), ('set_max_occurs', 2),
                            ('set_default_value', 0),
                            ('add_restriction', Restriction('true()'))]:
            self.assertIs(getattr(builder, method)(arg), builder, msg=method)
        self.assertIs(builder.add_user_data('key', 'value'), builder)

    def test_restrictions_are_lazily_created(self):
        self.assertIsNone(self.builder._restrictions)
        restrictions = self.builder.restrictions
        self.assertEqual(restrictions, [])
        self.assertIs(self.builder.restrictions, restrictions)

        restriction = Restriction('$value gt 0')
        self.builder.add_restriction(restriction)
        self.assertListEqual(self.builder.restrictions, [restriction])

    def test_set_crs_to_none(self):
        self.assertFalse(self.builder.is_crs_set)
        self.builder.set_crs(None)
        self.assertTrue(self.builder.is_crs_set)
        self.assertIsNone(self.builder.crs)

        self.builder.set_crs(WGS84)
        self.assertTrue(self.builder.is_crs_set)
        self.assertIs(self.builder.crs, WGS84)

    def test_set_default_value_to_none(self):
        self.assertFalse(self.builder.is_default_value_set)
        self.builder.set_default_value(None)
        self.assertTrue(self.builder.is_default_value_set)
        self.assertIsNone(self.builder.default_value)

    def test_set_description(self):
        self.builder.set_description('a text')
        self.assertEqual(self.builder.description, SimpleInternationalString('a text'))

        description = SimpleInternationalString('another text')
        self.builder.set_description(description)
        self.assertIs(self.builder.description, description)

        self.builder.set_description(None)
        self.assertIsNone(self.builder.description)

    def test_build_type(self):
        super_type = AttributeTypeBuilder().set_binding(str).build_type()

        self.configure_type(self.builder)
        self.builder.set_super_type(super_type)
        attribute_type = self.builder.build_type()

        self.assertIs(type(attribute_type), AttributeType)
        self.assertEqual(attribute_type.name, Name(NAMESPACE, 'alpha'))
        self.assertEqual(str(attribute_type.name), NAMESPACE + ':alpha')
        self.assertEqual(attribute_type.local_name, 'alpha')
        self.assertIs(attribute_type.binding, str)
        self.assertTrue(attribute_type.abstract)
        self.assertTrue(attribute_type.identified)
        self.assertIs(attribute_type.super, super_type)
        self.assertEqual(attribute_type.description.to_string(), 'the alpha attribute')
        self.assertEqual(attribute_type.restrictions,
                         (Restriction("$value ne 'omega'"), LengthRestriction(20)))

        self.check_type_state_is_reset(self.builder)

    def test_build_type_keeps_descriptor_state(self):
        self.builder.set_binding(int).set_nillable(False).set_min_occurs(2)
        self.builder.set_max_occurs(4).set_default_value(7).add_user_data('k', 'v')
        self.builder.set_options([1, 2, 3])
        self.builder.build_type()

        self.check_type_state_is_reset(self.builder)
        self.assertFalse(self.builder.is_nillable)
        self.assertEqual(self.builder.min_occurs, 2)
        self.assertEqual(self.builder.max_occurs, 4)
        self.assertEqual(self.builder.default_value, 7)
        self.assertEqual(self.builder.user_data, {'k': 'v'})
        self.assertEqual(self.builder.options, [1, 2, 3])

    def test_build_type_without_name(self):
        attribute_type = self.builder.set_binding(int).build_type()
        self.assertEqual(attribute_type.name, Name(None, 'int'))

        attribute_type = self.builder.set_binding(Decimal).set_namespace_uri(NAMESPACE).build_type()
        self.assertEqual(attribute_type.name, Name(NAMESPACE, 'Decimal'))

        with self.assertRaises(FeatureSchemaTypeError):
            self.builder.build_type()

    def test_build_type_without_binding(self):
        self.builder.set_name('alpha')
        with self.assertRaises(FeatureSchemaTypeError):
            self.builder.build_type()

        super_type = AttributeTypeBuilder().set_binding(float).build_type()
        attribute_type = self.builder.set_name('beta').set_super_type(super_type).build_type()
        self.assertIs(attribute_type.binding, float)

    def test_name_separator(self):
        attribute_type = self.builder.set_namespace_uri(NAMESPACE).set_name('alpha') \
            .set_separator('/').set_binding(str).build_type()
        self.assertEqual(str(attribute_type.name), NAMESPACE + '/alpha')
        self.assertEqual(self.builder.separator, '/')  # not reset by the build

        self.builder.set_separator(None)
        attribute_type = self.builder.set_namespace_uri(NAMESPACE).set_name('alpha') \
            .set_binding(str).build_type()
        self.assertEqual(str(attribute_type.name), NAMESPACE + ':alpha')

    def test_length_restriction(self):
        attribute_type = self.builder.set_binding(str).set_length(10).build_type()
        self.assertIsInstance(attribute_type.restrictions[-1], LengthRestriction)
        self.assertEqual(attribute_type.restrictions[-1], length_restriction(10))
        self.assertEqual(get_field_length(attribute_type), 10)

        attribute_type = self.builder.set_binding(str).build_type()
        self.assertEqual(attribute_type.restrictions, ())
        self.assertIsNone(get_field_length(attribute_type))

    def test_options_restriction(self):
        attribute_type = self.builder.set_binding(str).set_options(['A', 'B']).build_type()
        restriction = attribute_type.restrictions[-1]
        self.assertIsInstance(restriction, OptionsRestriction)
        self.assertEqual(restriction.options, ('A', 'B'))
        self.assertTrue(restriction.evaluate('A'))
        self.assertTrue(restriction.evaluate('B'))
        self.assertFalse(restriction.evaluate('C'))

    def test_empty_options(self):
        attribute_type = self.builder.set_binding(str).set_options([]).build_type()
        self.assertEqual(attribute_type.restrictions, ())

        attribute_type = self.builder.set_binding(str).set_options(None).build_type()
        self.assertEqual(attribute_type.restrictions, ())

    def test_restrictions_order(self):
        manual = Restriction("starts-with($value, 'a')")
        self.builder.set_binding(str).set_options(['ab', 'abc']).set_length(3)
        attribute_type = self.builder.add_restriction(manual).build_type()

        self.assertEqual(len(attribute_type.restrictions), 3)
        self.assertIs(attribute_type.restrictions[0], manual)
        self.assertIsInstance(attribute_type.restrictions[1], LengthRestriction)
        self.assertIsInstance(attribute_type.restrictions[2], OptionsRestriction)

    def test_build_geometry_type(self):
        self.configure_type(self.builder)
        self.builder.set_binding(Polygon).set_options(['x'])
        geometry_type = self.builder.build_geometry_type()

        self.assertIs(type(geometry_type), GeometryType)
        self.assertIs(geometry_type.binding, Polygon)
        self.assertIs(geometry_type.crs, WGS84)
        self.assertEqual(geometry_type.name, Name(NAMESPACE, 'alpha'))
        # Length and options are not converted to restrictions
        self.assertEqual(geometry_type.restrictions, (Restriction("$value ne 'omega'"),))

        self.check_type_state_is_reset(self.builder)
        self.assertEqual(self.builder.options, ['x'])

    def test_build_geometry_type_without_crs(self):
        geometry_type = self.builder.set_binding(Point).build_geometry_type()
        self.assertIsNone(geometry_type.crs)
        self.assertEqual(geometry_type.name, Name(None, 'Point'))

    def test_build_descriptor(self):
        self.builder.set_binding(int).set_name('intType').set_nillable(False)
        self.builder.add_user_data('source', 'column_1')
        descriptor = self.builder.build_descriptor('intProperty')

        self.assertIs(type(descriptor), AttributeDescriptor)
        self.assertEqual(descriptor.name, Name(None, 'intProperty'))
        self.assertEqual(descriptor.local_name, 'intProperty')
        self.assertEqual(descriptor.type.name, Name(None, 'intType'))
        self.assertIs(descriptor.binding, int)
        self.assertEqual(descriptor.min_occurs, 1)
        self.assertEqual(descriptor.max_occurs, 1)
        self.assertFalse(descriptor.nillable)
        self.assertEqual(descriptor.default_value, 0)
        self.assertEqual(descriptor.user_data, {'source': 'column_1'})

        self.check_descriptor_state_is_reset(self.builder)
        self.assertIsNot(self.builder.user_data, descriptor.user_data)

    def test_build_descriptor_with_name_instance(self):
        name = Name(NAMESPACE, 'alpha')
        descriptor = self.builder.set_binding(str).build_descriptor(name)
        self.assertIs(descriptor.name, name)
        self.assertEqual(descriptor.type.name, Name(None, 'str'))

    def test_build_descriptor_resets_state(self):
        self.configure_type(self.builder)
        self.builder.set_binding(str).set_crs(None).set_options(['a'])
        self.builder.set_nillable(False).set_min_occurs(1).set_max_occurs(3)
        self.builder.set_default_value('a').add_user_data('k', 1)

        self.builder.build_descriptor('alpha')
        self.check_descriptor_state_is_reset(self.builder)

    def test_descriptor_occurrences_defaults(self):
        descriptor = self.builder.set_binding(int).set_nillable(False).build_descriptor('a')
        self.assertEqual((descriptor.min_occurs, descriptor.max_occurs), (1, 1))

        descriptor = self.builder.set_binding(int).build_descriptor('a')
        self.assertTrue(descriptor.nillable)
        self.assertEqual((descriptor.min_occurs, descriptor.max_occurs), (0, 1))

        descriptor = self.builder.set_binding(int).set_min_occurs(1).build_descriptor('a')
        self.assertTrue(descriptor.nillable)
        self.assertEqual((descriptor.min_occurs, descriptor.max_occurs), (1, 1))

        descriptor = self.builder.set_binding(int).set_nillable(False) \
            .set_min_occurs(0).set_max_occurs(-1).build_descriptor('a')
        self.assertEqual((descriptor.min_occurs, descriptor.max_occurs), (0, -1))
        self.assertTrue(descriptor.is_multiple())

    def test_descriptor_default_value(self):
        descriptor = self.builder.set_binding(int).set_nillable(False).build_descriptor('a')
        self.assertEqual(descriptor.default_value, 0)

        descriptor = self.builder.set_binding(str).set_nillable(False).build_descriptor('a')
        self.assertEqual(descriptor.default_value, '')

        descriptor = self.builder.set_binding(float).set_nillable(False) \
            .set_default_value(None).build_descriptor('a')
        self.assertEqual(descriptor.default_value, 0.0)

        descriptor = self.builder.set_binding(int).set_nillable(False) \
            .set_default_value(5).build_descriptor('a')
        self.assertEqual(descriptor.default_value, 5)

        descriptor = self.builder.set_binding(int).build_descriptor('a')
        self.assertIsNone(descriptor.default_value)

        descriptor = self.builder.set_binding(int).set_default_value(None).build_descriptor('a')
        self.assertIsNone(descriptor.default_value)

    def test_build_descriptor_with_type(self):
        attribute_type = self.builder.set_binding(int).build_type()

        self.builder.set_name('ignored').set_nillable(False).add_user_data('k', 'v')
        descriptor = self.builder.build_descriptor('beta', attribute_type)
        self.assertIs(type(descriptor), AttributeDescriptor)
        self.assertIs(descriptor.type, attribute_type)
        self.assertEqual((descriptor.min_occurs, descriptor.max_occurs), (1, 1))
        self.assertIsNone(descriptor.default_value)  # no binding configured
        self.assertEqual(descriptor.user_data, {'k': 'v'})
        self.check_descriptor_state_is_reset(self.builder)

        descriptor = self.builder.set_binding(int).set_nillable(False) \
            .build_descriptor('beta', attribute_type)
        self.assertEqual(descriptor.default_value, 0)

    def test_build_descriptor_with_geometry_type(self):
        geometry_type = self.builder.set_binding(Point).set_crs(WGS84).build_geometry_type()
        descriptor = self.builder.build_descriptor('location', geometry_type)

        self.assertIs(type(descriptor), GeometryDescriptor)
        self.assertIs(descriptor.type, geometry_type)
        self.assertIs(descriptor.crs, WGS84)

    def test_build_geometry_descriptor_from_binding(self):
        descriptor = self.builder.set_binding(Point).build_descriptor('geom')
        self.assertIsInstance(descriptor, GeometryDescriptor)
        self.assertIsInstance(descriptor.type, GeometryType)
        self.assertIsNone(descriptor.crs)

        descriptor = self.builder.set_binding(Point).set_nillable(False).build_descriptor('geom')
        self.assertEqual(descriptor.default_value, Point((0.0, 0.0)))

    def test_build_geometry_descriptor_from_crs(self):
        descriptor = self.builder.set_binding(str).set_crs(WGS84).build_descriptor('geom')
        self.assertIsInstance(descriptor, GeometryDescriptor)
        self.assertIs(descriptor.type.binding, str)
        self.assertIs(descriptor.crs, WGS84)

        # A CRS set to None doesn't select a geometry type
        descriptor = self.builder.set_binding(str).set_crs(None).build_descriptor('text')
        self.assertIs(type(descriptor), AttributeDescriptor)

    def test_build_descriptor_without_binding(self):
        self.builder.set_name('alpha').set_namespace_uri(NAMESPACE).set_nillable(False)
        self.builder.set_length(8).add_user_data('k', 'v')

        with self.assertRaises(FeatureSchemaStateError) as ctx:
            self.builder.build_descriptor('alpha')
        self.assertIsInstance(ctx.exception, RuntimeError)
        self.assertEqual(str(ctx.exception), "No binding has been provided for this attribute")

        self.assertEqual(self.builder.name, 'alpha')
        self.assertEqual(self.builder.namespace_uri, NAMESPACE)
        self.assertFalse(self.builder.is_nillable)
        self.assertEqual(self.builder.length, 8)
        self.assertEqual(self.builder.user_data, {'k': 'v'})

    def test_init_from_type(self):
        restriction = Restriction('$value ge 0')
        attribute_type = self.builder.set_name('alpha').set_namespace_uri(NAMESPACE) \
            .set_separator('/').set_binding(int).set_abstract(True) \
            .set_description('alpha').add_restriction(restriction).build_type()

        builder = AttributeTypeBuilder()
        other_restriction = Restriction('$value lt 100')
        builder.add_restriction(other_restriction).set_min_occurs(3)
        self.assertIs(builder.init(attribute_type), builder)

        self.assertEqual(builder.name, 'alpha')
        self.assertEqual(builder.namespace_uri, NAMESPACE)
        self.assertEqual(builder.separator, '/')
        self.assertTrue(builder.is_abstract)
        self.assertFalse(builder.is_identifiable)
        self.assertIs(builder.binding, int)
        self.assertEqual(builder.description, SimpleInternationalString('alpha'))
        self.assertListEqual(builder.restrictions, [other_restriction, restriction])
        self.assertEqual(builder.min_occurs, 3)
        self.assertFalse(builder.is_crs_set)

    def test_init_from_geometry_type(self):
        geometry_type = self.builder.set_binding(Point).set_crs(WGS84).build_geometry_type()
        self.builder.init(geometry_type)
        self.assertIs(self.builder.crs, WGS84)
        self.assertIs(self.builder.binding, Point)
        self.assertTrue(self.builder.is_crs_set)

        geometry_type = self.builder.set_binding(Point).build_geometry_type()
        self.assertIsNone(geometry_type.crs)
        builder = AttributeTypeBuilder().init(geometry_type)
        self.assertIsNone(builder.crs)
        self.assertFalse(builder.is_crs_set)

        builder = AttributeTypeBuilder().set_crs(WGS84).init(geometry_type)
        self.assertIsNone(builder.crs)
        self.assertTrue(builder.is_crs_set)

    def test_init_from_descriptor(self):
        self.builder.set_binding(int).set_nillable(False).set_max_occurs(3)
        descriptor = self.builder.add_user_data('k', 'v').build_descriptor('alpha')

        builder = AttributeTypeBuilder().init(descriptor)
        self.assertIs(builder.binding, int)
        self.assertEqual(builder.name, 'int')
        self.assertEqual(builder.min_occurs, 1)
        self.assertEqual(builder.max_occurs, 3)
        self.assertFalse(builder.is_nillable)
        self.assertIs(builder.user_data, descriptor.user_data)

    def test_init_with_wrong_argument(self):
        with self.assertRaises(FeatureSchemaTypeError):
            self.builder.init('alpha')
        with self.assertRaises(TypeError):
            self.builder.init(None)

    def test_type_round_trip(self):
        self.configure_type(self.builder)
        self.builder.set_options(['a', 'b'])
        attribute_type = self.builder.build_type()

        builder = AttributeTypeBuilder()
        other_type = builder.init(attribute_type).build_type()
        self.assertIsNot(other_type, attribute_type)
        self.assertEqual(other_type, attribute_type)

    def test_descriptor_round_trip(self):
        self.builder.set_binding(int).set_name('intType').set_namespace_uri(NAMESPACE)
        self.builder.set_nillable(False).set_max_occurs(3).set_length(4)
        descriptor = self.builder.add_user_data('k', 'v').build_descriptor('alpha')

        other_descriptor = AttributeTypeBuilder().init(descriptor).build_descriptor(descriptor.name)
        self.assertIsNot(other_descriptor, descriptor)
        self.assertEqual(other_descriptor, descriptor)
        self.assertEqual(other_descriptor.type, descriptor.type)
        self.assertEqual(other_descriptor.default_value, 0)
        self.assertEqual(other_descriptor.user_data, descriptor.user_data)
        self.assertIsNot(other_descriptor.user_data, descriptor.user_data)

    def test_geometry_descriptor_round_trip(self):
        self.builder.set_binding(Polygon).set_crs(WGS84).set_nillable(False)
        descriptor = self.builder.build_descriptor('area')

        other_descriptor = AttributeTypeBuilder().init(descriptor).build_descriptor(descriptor.name)
        self.assertIsInstance(other_descriptor, GeometryDescriptor)
        self.assertEqual(other_descriptor, descriptor)
        self.assertEqual(other_descriptor.default_value, descriptor.default_value)

    def test_serial_reuse(self):
        descriptors = [
            self.builder.set_binding(binding).set_nillable(nillable).build_descriptor(name)
            for name, binding, nillable in [('id', int, False), ('label', str, True),
                                            ('geom', Point, True)]
        ]
        self.assertListEqual([d.local_name for d in descriptors], ['id', 'label', 'geom'])
        self.assertListEqual([d.min_occurs for d in descriptors], [1, 0, 0])
        self.assertListEqual([type(d) for d in descriptors],
                             [AttributeDescriptor, AttributeDescriptor, GeometryDescriptor])

    def test_factory_delegation(self):
        factory = mock.Mock(spec=FeatureTypeFactory)
        builder = AttributeTypeBuilder(factory)

        builder.set_name('alpha').set_binding(str).set_description('text').build_type()
        factory.create_attribute_type.assert_called_once_with(
            Name(None, 'alpha'), str, False, False, [], None, SimpleInternationalString('text')
        )

        builder.set_binding(Point).set_crs(WGS84).build_geometry_type()
        factory.create_geometry_type.assert_called_once_with(
            Name(None, 'Point'), Point, WGS84, False, False, [], None, None
        )

        builder.set_binding(int).set_nillable(False).build_descriptor('beta')
        factory.create_attribute_descriptor.assert_called_once_with(
            factory.create_attribute_type.return_value, Name(None, 'beta'), 1, 1, False, 0
        )
        factory.create_geometry_descriptor.assert_not_called()

    def test_build_logging(self):
        with self.assertLogs('featureschema', level='DEBUG') as ctx:
            self.builder.set_binding(int).build_descriptor('alpha')

        self.assertTrue(any('create_attribute_type' in line for line in ctx.output))
        self.assertTrue(any('built AttributeType' in line for line in ctx.output))
        self.assertTrue(any('built AttributeDescriptor' in line for line in ctx.output))


if __name__ == '__main__':
    import platform
    header_template = "Test featureschema's attribute type builder with Python {} on {}"
    header = header_template.format(platform.python_version(), platform.platform())
    print('{0}\n{1}\n{0}'.format("*" * len(header), header))

    unittest.main()
