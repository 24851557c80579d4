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
This module contains the immutable attribute types and attribute descriptors.
"""
from collections.abc import Iterable
from typing import Any, Optional

from featureschema.aliases import BindingType, CRSType, DescriptionType, \
    RestrictionType, UserDataType
from featureschema.exceptions import FeatureSchemaAttributeError
from featureschema.translation import gettext as _
from featureschema.utils.qnames import Name

UNBOUNDED = -1
"""The value of *max_occurs* for attributes that admit an unbounded number of values."""


class _Immutable:
    __slots__ = ()

    def __setattr__(self, name: str, value: Any) -> None:
        raise FeatureSchemaAttributeError(_("Can't set attribute {}").format(name))

    def __delattr__(self, name: str) -> None:
        raise FeatureSchemaAttributeError(_("Can't delete attribute {}").format(name))

    def _set(self, **kwargs: Any) -> None:
        for name, value in kwargs.items():
            object.__setattr__(self, name, value)


class AttributeType(_Immutable):
    """
    The type of an attribute, that binds a name to a Python class, optionally
    restricting the admitted values.

    :param name: the qualified name of the type.
    :param binding: the Python class of the values.
    :param identified: `True` if instances of the type are identifiable.
    :param abstract: `True` if the type is abstract.
    :param restrictions: the restrictions on the values, in evaluation order.
    :param super_type: the parent type, if any.
    :param description: a human-readable description.
    """
    __slots__ = ('name', 'binding', 'identified', 'abstract',
                 'restrictions', 'super', 'description')

    name: Name
    binding: BindingType
    identified: bool
    abstract: bool
    restrictions: tuple[RestrictionType, ...]
    super: Optional['AttributeType']
    description: Optional[DescriptionType]

    def __init__(self, name: Name,
                 binding: BindingType,
                 identified: bool = False,
                 abstract: bool = False,
                 restrictions: Optional[Iterable[RestrictionType]] = None,
                 super_type: Optional['AttributeType'] = None,
                 description: Optional[DescriptionType] = None) -> None:
        self._set(
            name=name,
            binding=binding,
            identified=identified,
            abstract=abstract,
            restrictions=tuple(restrictions) if restrictions else (),
            super=super_type,
            description=description,
        )

    def __repr__(self) -> str:
        return '%s(name=%r, binding=%s)' % (
            self.__class__.__name__, str(self.name), self.binding.__name__
        )

    def _key(self) -> tuple[Any, ...]:
        return (self.name, self.binding, self.identified, self.abstract,
                self.restrictions, self.super, self.description)

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._key() == other._key()  # type: ignore[attr-defined]
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def local_name(self) -> str:
        return self.name.local_part


class GeometryType(AttributeType):
    """An attribute type for geometries, that carries a coordinate reference system."""
    __slots__ = ('crs',)

    crs: Optional[CRSType]

    def __init__(self, name: Name,
                 binding: BindingType,
                 crs: Optional[CRSType] = None,
                 identified: bool = False,
                 abstract: bool = False,
                 restrictions: Optional[Iterable[RestrictionType]] = None,
                 super_type: Optional[AttributeType] = None,
                 description: Optional[DescriptionType] = None) -> None:
        super().__init__(name, binding, identified, abstract,
                         restrictions, super_type, description)
        self._set(crs=crs)

    def __repr__(self) -> str:
        return '%s(name=%r, binding=%s, crs=%r)' % (
            self.__class__.__name__, str(self.name), self.binding.__name__, self.crs
        )

    def _key(self) -> tuple[Any, ...]:
        return super()._key() + (self.crs,)


class AttributeDescriptor(_Immutable):
    """
    The descriptor of an attribute of a record: a name bound to an attribute
    type, with cardinality, nillability and default value. The user data is a
    mapping of out-of-band metadata and it's the only mutable part.
    """
    __slots__ = ('type', 'name', 'min_occurs', 'max_occurs',
                 'nillable', 'default_value', 'user_data')

    type: AttributeType
    name: Name
    min_occurs: int
    max_occurs: int
    nillable: bool
    default_value: Any
    user_data: UserDataType

    def __init__(self, attribute_type: AttributeType,
                 name: Name,
                 min_occurs: int = 1,
                 max_occurs: int = 1,
                 nillable: bool = True,
                 default_value: Any = None) -> None:
        self._set(
            type=attribute_type,
            name=name,
            min_occurs=min_occurs,
            max_occurs=max_occurs,
            nillable=nillable,
            default_value=default_value,
            user_data={},
        )

    def __repr__(self) -> str:
        return '%s(name=%r, type=%r)' % (self.__class__.__name__, str(self.name), self.type)

    def _key(self) -> tuple[Any, ...]:
        return (self.type, self.name, self.min_occurs, self.max_occurs,
                self.nillable, self.default_value)

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._key() == other._key()  # type: ignore[attr-defined]
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key()[:5])

    @property
    def local_name(self) -> str:
        return self.name.local_part

    @property
    def binding(self) -> BindingType:
        return self.type.binding

    def is_multiple(self) -> bool:
        """Returns `True` if the attribute admits more than one value."""
        return self.max_occurs == UNBOUNDED or self.max_occurs > 1


class GeometryDescriptor(AttributeDescriptor):
    """The descriptor of a geometry attribute."""
    __slots__ = ()

    type: GeometryType

    def __init__(self, geometry_type: GeometryType,
                 name: Name,
                 min_occurs: int = 1,
                 max_occurs: int = 1,
                 nillable: bool = True,
                 default_value: Any = None) -> None:
        super().__init__(geometry_type, name, min_occurs, max_occurs, nillable, default_value)

    @property
    def crs(self) -> Optional[CRSType]:
        return self.type.crs
