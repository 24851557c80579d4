#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from . import translation
from . import defaults
from .exceptions import FeatureSchemaException, FeatureSchemaAttributeError, \
    FeatureSchemaTypeError, FeatureSchemaValueError, FeatureSchemaStateError
from .utils.logger import set_logging_level
from .utils.qnames import Name
from .translation import InternationalString, SimpleInternationalString
from .geometry import CoordinateReferenceSystem, WGS84, Geometry, Point, LineString, \
    LinearRing, Polygon, GeometryCollection, MultiPoint, MultiLineString, MultiPolygon
from .bindings import short_name, is_geometry_binding, default_value
from .restrictions import Restriction, LengthRestriction, OptionsRestriction, \
    length_restriction, options_restriction, get_field_length, get_field_options
from .types import UNBOUNDED, AttributeType, GeometryType, \
    AttributeDescriptor, GeometryDescriptor
from .factories import FeatureTypeFactory, get_feature_type_factory, \
    set_feature_type_factory
from .builder import UNSET, AttributeTypeBuilder

__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2016-2024, SISSA"
__license__ = "MIT"
__status__ = "Production/Stable"

__all__ = [
    'translation', 'defaults', 'FeatureSchemaException', 'FeatureSchemaAttributeError',
    'FeatureSchemaTypeError', 'FeatureSchemaValueError',
    'FeatureSchemaStateError', 'set_logging_level', 'Name', 'InternationalString',
    'SimpleInternationalString', 'CoordinateReferenceSystem', 'WGS84', 'Geometry',
    'Point', 'LineString', 'LinearRing', 'Polygon', 'GeometryCollection', 'MultiPoint',
    'MultiLineString', 'MultiPolygon', 'short_name', 'is_geometry_binding',
    'default_value', 'Restriction', 'LengthRestriction', 'OptionsRestriction',
    'length_restriction', 'options_restriction', 'get_field_length',
    'get_field_options', 'UNBOUNDED', 'AttributeType', 'GeometryType',
    'AttributeDescriptor', 'GeometryDescriptor', 'FeatureTypeFactory',
    'get_feature_type_factory', 'set_feature_type_factory', 'UNSET',
    'AttributeTypeBuilder',
]
