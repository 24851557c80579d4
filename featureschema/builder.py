#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
This module contains the builder of attribute types and attribute descriptors.
"""
from collections.abc import Sequence
from typing import Any, Optional, Union

from featureschema import defaults
from featureschema.aliases import BindingType, CRSType, DescriptionType, \
    DescriptorType, NameType, RestrictionType, UserDataType
from featureschema.bindings import default_value, is_geometry_binding, short_name
from featureschema.exceptions import FeatureSchemaStateError, FeatureSchemaTypeError
from featureschema.factories import FeatureTypeFactory, get_feature_type_factory
from featureschema.restrictions import length_restriction, options_restriction
from featureschema.translation import gettext as _, InternationalString, \
    SimpleInternationalString
from featureschema.types import AttributeType, GeometryType, AttributeDescriptor
from featureschema.utils.logger import logger
from featureschema.utils.qnames import Name


class _Unset:
    """The type of the placeholder for values never configured."""
    __slots__ = ()

    def __repr__(self) -> str:
        return 'UNSET'

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class AttributeTypeBuilder:
    """
    Builder for attribute types and attribute descriptors. The configuration
    is accumulated with setters, that return the builder itself so they can be
    chained, and is consumed by the build methods, that reset the builder
    state after each build.

    Building an attribute type::

        builder = AttributeTypeBuilder()
        attribute_type = builder.set_name('intType').set_binding(int).build_type()

    Building an attribute descriptor::

        builder = AttributeTypeBuilder()
        builder.set_name('intType').set_binding(int)
        builder.set_min_occurs(0).set_max_occurs(1).set_nillable(True)
        descriptor = builder.build_descriptor('intProperty')

    The builder maintains state and is not thread safe.

    :param factory: the factory used to create types and descriptors, for \
    default is the factory returned by `get_feature_type_factory()`.
    """
    factory: FeatureTypeFactory

    # Attribute type state
    name: Optional[str]
    namespace_uri: Optional[str]
    separator: Optional[str]
    binding: Optional[BindingType]
    is_abstract: bool
    is_identifiable: bool
    super_type: Optional[AttributeType]
    description: Optional[DescriptionType]
    length: Optional[int]
    _restrictions: Optional[list[RestrictionType]]
    _crs: Union[CRSType, None, Any]

    # Attribute descriptor state
    min_occurs: Optional[int]
    max_occurs: Optional[int]
    is_nillable: bool
    user_data: UserDataType
    options: Optional[Sequence[Any]]
    _default_value: Any

    def __init__(self, factory: Optional[FeatureTypeFactory] = None) -> None:
        self.factory = get_feature_type_factory() if factory is None else factory
        self.separator = defaults.NAME_SEPARATOR
        self.reset()

    def __repr__(self) -> str:
        return '%s(factory=%r)' % (self.__class__.__name__, self.factory)

    def reset(self) -> None:
        """Resets all the builder state."""
        self._reset_descriptor_state()

    def _reset_type_state(self) -> None:
        # Called after each build of a type. The separator is not reset.
        self.name = None
        self.namespace_uri = None
        self.is_abstract = False
        self._restrictions = None
        self.description = None
        self.is_identifiable = False
        self.binding = None
        self.super_type = None
        self._crs = UNSET
        self.length = None

    def _reset_descriptor_state(self) -> None:
        self._reset_type_state()
        self.min_occurs = None
        self.max_occurs = None
        self.is_nillable = True
        self.user_data = {}
        self._default_value = UNSET
        self.options = None

    def set_factory(self, factory: FeatureTypeFactory) -> 'AttributeTypeBuilder':
        self.factory = factory
        return self

    def init(self, source: Union[AttributeType, AttributeDescriptor]) -> 'AttributeTypeBuilder':
        """
        Initializes the builder state from an attribute type or from an attribute
        descriptor. The restrictions of the type are appended to the restrictions
        already configured. A descriptor also provides the occurrence bounds, the
        nillability and the user data mapping, that is shared, not copied.
        """
        if isinstance(source, AttributeDescriptor):
            self._init_type(source.type)
            self.min_occurs = source.min_occurs
            self.max_occurs = source.max_occurs
            self.is_nillable = source.nillable
            self.user_data = source.user_data
        elif isinstance(source, AttributeType):
            self._init_type(source)
        else:
            raise FeatureSchemaTypeError(
                _("{!r} is neither an attribute type nor an attribute descriptor").format(source)
            )
        return self

    def _init_type(self, attribute_type: AttributeType) -> None:
        self.name = attribute_type.name.local_part
        self.separator = attribute_type.name.separator
        self.namespace_uri = attribute_type.name.namespace_uri
        self.is_abstract = attribute_type.abstract
        self.restrictions.extend(attribute_type.restrictions)

        self.description = attribute_type.description
        self.is_identifiable = attribute_type.identified
        self.binding = attribute_type.binding
        self.super_type = attribute_type.super

        if isinstance(attribute_type, GeometryType) and \
                (attribute_type.crs is not None or self.is_crs_set):
            self._crs = attribute_type.crs

    ###
    # Attribute type configuration
    def set_binding(self, binding: Optional[BindingType]) -> 'AttributeTypeBuilder':
        self.binding = binding
        return self

    def set_name(self, name: Optional[str]) -> 'AttributeTypeBuilder':
        self.name = name
        return self

    def set_namespace_uri(self, namespace_uri: Optional[str]) -> 'AttributeTypeBuilder':
        self.namespace_uri = namespace_uri
        return self

    def set_separator(self, separator: Optional[str]) -> 'AttributeTypeBuilder':
        self.separator = separator
        return self

    def set_crs(self, crs: Optional[CRSType]) -> 'AttributeTypeBuilder':
        """Sets the coordinate reference system. Setting `None` counts as set."""
        self._crs = crs
        return self

    @property
    def crs(self) -> Optional[CRSType]:
        return None if self._crs is UNSET else self._crs

    @property
    def is_crs_set(self) -> bool:
        """`True` if the CRS has been set, also if it has been set to `None`."""
        return self._crs is not UNSET

    def set_description(self, description: Union[None, str, InternationalString]) \
            -> 'AttributeTypeBuilder':
        if isinstance(description, str):
            self.description = SimpleInternationalString(description)
        else:
            self.description = description
        return self

    def set_abstract(self, is_abstract: bool) -> 'AttributeTypeBuilder':
        self.is_abstract = is_abstract
        return self

    def set_identifiable(self, is_identifiable: bool) -> 'AttributeTypeBuilder':
        self.is_identifiable = is_identifiable
        return self

    def set_length(self, length: int) -> 'AttributeTypeBuilder':
        self.length = length
        return self

    def set_super_type(self, super_type: Optional[AttributeType]) -> 'AttributeTypeBuilder':
        self.super_type = super_type
        return self

    def set_options(self, options: Optional[Sequence[Any]]) -> 'AttributeTypeBuilder':
        """Sets the list of the valid values of the attribute type."""
        self.options = options
        return self

    @property
    def restrictions(self) -> list[RestrictionType]:
        if self._restrictions is None:
            self._restrictions = []
        return self._restrictions

    def add_restriction(self, restriction: RestrictionType) -> 'AttributeTypeBuilder':
        self.restrictions.append(restriction)
        return self

    def add_user_data(self, key: Any, value: Any) -> 'AttributeTypeBuilder':
        self.user_data[key] = value
        return self

    ###
    # Attribute descriptor configuration
    def set_nillable(self, is_nillable: bool) -> 'AttributeTypeBuilder':
        self.is_nillable = is_nillable
        return self

    def set_min_occurs(self, min_occurs: int) -> 'AttributeTypeBuilder':
        self.min_occurs = min_occurs
        return self

    def set_max_occurs(self, max_occurs: int) -> 'AttributeTypeBuilder':
        self.max_occurs = max_occurs
        return self

    def set_default_value(self, value: Any) -> 'AttributeTypeBuilder':
        """Sets the default value. Setting `None` counts as set."""
        self._default_value = value
        return self

    @property
    def default_value(self) -> Any:
        return None if self._default_value is UNSET else self._default_value

    @property
    def is_default_value_set(self) -> bool:
        return self._default_value is not UNSET

    ###
    # Build methods
    def build_type(self) -> AttributeType:
        """
        Builds an attribute type. The length and the options, if configured,
        are added as restrictions after the other restrictions. The type state
        is reset after the build.
        """
        if self.length is not None:
            self.restrictions.append(self.length_restriction(self.length))

        if self.options:
            self.restrictions.append(options_restriction(self.options))

        attribute_type = self.factory.create_attribute_type(
            self._get_name(),
            self.binding,
            self.is_identifiable,
            self.is_abstract,
            self.restrictions,
            self.super_type,
            self.description,
        )
        self._reset_type_state()
        logger.debug("%r: built %r", self, attribute_type)
        return attribute_type

    def build_geometry_type(self) -> GeometryType:
        """
        Builds a geometry type with the configured CRS. Length and options are
        not added as restrictions. The type state is reset after the build.
        """
        geometry_type = self.factory.create_geometry_type(
            self._get_name(),
            self.binding,
            self.crs,
            self.is_identifiable,
            self.is_abstract,
            self.restrictions,
            self.super_type,
            self.description,
        )
        self._reset_type_state()
        logger.debug("%r: built %r", self, geometry_type)
        return geometry_type

    def build_descriptor(self, name: NameType,
                         attribute_type: Optional[AttributeType] = None) -> DescriptorType:
        """
        Builds an attribute descriptor. Without an attribute type first builds
        one from the builder state: a geometry type if a CRS is set or if the
        binding is a geometry kind, otherwise a plain attribute type. A geometry
        type is described by a `GeometryDescriptor`. All the builder state is
        reset after the build.

        :param name: the name of the descriptor, a string or a `Name` instance.
        :param attribute_type: the type of the descriptor.
        :raises FeatureSchemaStateError: if no type is provided and no binding \
        has been configured. The builder state is left unchanged.
        """
        binding = self.binding
        if attribute_type is None:
            if binding is None:
                raise FeatureSchemaStateError(
                    _("No binding has been provided for this attribute")
                )
            elif self.crs is not None or is_geometry_binding(binding):
                attribute_type = self.build_geometry_type()
            else:
                attribute_type = self.build_type()

        if not isinstance(name, Name):
            name = Name(None, name)

        descriptor: DescriptorType
        if isinstance(attribute_type, GeometryType):
            descriptor = self.factory.create_geometry_descriptor(
                attribute_type,
                name,
                self._get_min_occurs(),
                self._get_max_occurs(),
                self.is_nillable,
                self._get_default_value(binding),
            )
        else:
            descriptor = self.factory.create_attribute_descriptor(
                attribute_type,
                name,
                self._get_min_occurs(),
                self._get_max_occurs(),
                self.is_nillable,
                self._get_default_value(binding),
            )

        descriptor.user_data.update(self.user_data)
        self._reset_descriptor_state()
        logger.debug("%r: built %r", self, descriptor)
        return descriptor

    def length_restriction(self, length: int) -> RestrictionType:
        """Creates the restriction for the configured length."""
        return length_restriction(length)

    ###
    # Computed values
    def _get_name(self) -> Name:
        if self.name is None:
            self.name = short_name(self.binding)
        return Name(self.namespace_uri, self.name, self.separator)

    def _get_min_occurs(self) -> int:
        # An explicit value is not checked against nillability, for backward
        # compatibility with existing schemas.
        if self.min_occurs is None:
            return 0 if self.is_nillable else 1
        return self.min_occurs

    def _get_max_occurs(self) -> int:
        if self.max_occurs is None:
            return 1
        return self.max_occurs

    def _get_default_value(self, binding: Optional[BindingType]) -> Any:
        value = self.default_value
        if value is None and not self.is_nillable and binding is not None:
            value = default_value(binding)
        return value


__all__ = ['UNSET', 'AttributeTypeBuilder']
