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
This module contains the factory of attribute types and attribute descriptors.
"""
import logging
from collections.abc import Callable, Iterable
from functools import wraps
from typing import Any, Optional, TypeVar

from featureschema.aliases import BindingType, CRSType, DescriptionType, RestrictionType
from featureschema.exceptions import FeatureSchemaTypeError, FeatureSchemaValueError
from featureschema.translation import gettext as _
from featureschema.utils.logger import logger
from featureschema.utils.qnames import Name
from featureschema.types import AttributeType, GeometryType, \
    AttributeDescriptor, GeometryDescriptor

RT = TypeVar('RT')


def factory_method(func: Callable[..., RT]) -> Callable[..., RT]:
    """Decorator that logs the arguments and the result of a factory method."""
    @wraps(func)
    def factory_wrapper(self: 'FeatureTypeFactory', *args: Any, **kwargs: Any) -> RT:
        result = func(self, *args, **kwargs)
        if logger.getEffectiveLevel() == logging.DEBUG:
            logger.debug("%s: args=%r, kwargs=%r", func.__name__, args, kwargs)
            logger.debug("%s: return %r", func.__name__, result)
        return result

    return factory_wrapper


def check_type_arguments(name: Any,
                         binding: Optional[BindingType],
                         super_type: Optional[AttributeType]) -> BindingType:
    """
    Checks the common arguments of attribute types and returns the effective
    binding, that is inherited from the super type if it's not provided.
    """
    if not isinstance(name, Name):
        raise FeatureSchemaTypeError(_("name must be a Name instance, not {!r}").format(name))
    elif super_type is not None and not isinstance(super_type, AttributeType):
        raise FeatureSchemaTypeError(
            _("super type must be an AttributeType instance, not {!r}").format(super_type)
        )

    if binding is None:
        if super_type is None:
            raise FeatureSchemaTypeError(
                _("a binding is required for attribute type {!r}").format(str(name))
            )
        binding = super_type.binding
    return binding


def check_descriptor_arguments(name: Any, min_occurs: int, max_occurs: int) -> None:
    """Checks the name and the occurrence bounds of an attribute descriptor."""
    if not isinstance(name, Name):
        raise FeatureSchemaTypeError(_("name must be a Name instance, not {!r}").format(name))
    elif not isinstance(min_occurs, int) or not isinstance(max_occurs, int):
        raise FeatureSchemaTypeError(_("occurrence bounds must be integers"))
    elif min_occurs < 0:
        raise FeatureSchemaValueError(_("minOccurs must be a non negative integer"))
    elif 0 < max_occurs < min_occurs:
        raise FeatureSchemaValueError(_("maxOccurs must be -1, or not lesser than minOccurs"))


class FeatureTypeFactory:
    """
    Factory for creating attribute types and attribute descriptors. The classes
    of the created instances can be changed by subclassing.
    """
    attribute_type_class = AttributeType
    geometry_type_class = GeometryType
    attribute_descriptor_class = AttributeDescriptor
    geometry_descriptor_class = GeometryDescriptor

    def __repr__(self) -> str:
        return '%s()' % self.__class__.__name__

    @factory_method
    def create_attribute_type(self, name: Name,
                              binding: Optional[BindingType],
                              identified: bool,
                              abstract: bool,
                              restrictions: Optional[Iterable[RestrictionType]],
                              super_type: Optional[AttributeType],
                              description: Optional[DescriptionType]) -> AttributeType:
        binding = check_type_arguments(name, binding, super_type)
        return self.attribute_type_class(
            name, binding, identified, abstract, restrictions, super_type, description
        )

    @factory_method
    def create_geometry_type(self, name: Name,
                             binding: Optional[BindingType],
                             crs: Optional[CRSType],
                             identified: bool,
                             abstract: bool,
                             restrictions: Optional[Iterable[RestrictionType]],
                             super_type: Optional[AttributeType],
                             description: Optional[DescriptionType]) -> GeometryType:
        binding = check_type_arguments(name, binding, super_type)
        return self.geometry_type_class(
            name, binding, crs, identified, abstract, restrictions, super_type, description
        )

    @factory_method
    def create_attribute_descriptor(self, attribute_type: AttributeType,
                                    name: Name,
                                    min_occurs: int,
                                    max_occurs: int,
                                    nillable: bool,
                                    default_value: Any) -> AttributeDescriptor:
        if not isinstance(attribute_type, AttributeType):
            raise FeatureSchemaTypeError(
                _("{!r} is not an AttributeType instance").format(attribute_type)
            )
        check_descriptor_arguments(name, min_occurs, max_occurs)
        return self.attribute_descriptor_class(
            attribute_type, name, min_occurs, max_occurs, nillable, default_value
        )

    @factory_method
    def create_geometry_descriptor(self, geometry_type: GeometryType,
                                   name: Name,
                                   min_occurs: int,
                                   max_occurs: int,
                                   nillable: bool,
                                   default_value: Any) -> GeometryDescriptor:
        if not isinstance(geometry_type, GeometryType):
            raise FeatureSchemaTypeError(
                _("{!r} is not a GeometryType instance").format(geometry_type)
            )
        check_descriptor_arguments(name, min_occurs, max_occurs)
        return self.geometry_descriptor_class(
            geometry_type, name, min_occurs, max_occurs, nillable, default_value
        )


_default_factory: Optional[FeatureTypeFactory] = None


def get_feature_type_factory() -> FeatureTypeFactory:
    """Returns the default factory, used by builders created without a factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = FeatureTypeFactory()
    return _default_factory


def set_feature_type_factory(factory: Optional[FeatureTypeFactory]) -> None:
    """
    Sets the default factory. Provide `None` for restoring the builtin factory.
    Builders created before the call keep their factory.
    """
    global _default_factory
    if factory is not None and not isinstance(factory, FeatureTypeFactory):
        raise FeatureSchemaTypeError(
            _("{!r} is not a FeatureTypeFactory instance").format(factory)
        )
    _default_factory = factory
