#
# Copyright (c), 2021, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
Type aliases for static typing analysis. In a type checking context the aliases
are defined from effective classes imported from package modules. In a runtime
context the aliases that can't be set from the same bases, due to circular
imports, are set with a common.
"""
from collections.abc import MutableMapping
from typing import Any, TYPE_CHECKING, Union

__all__ = ['BindingType', 'UserDataType', 'RestrictionType', 'DescriptionType',
           'NameType', 'CRSType', 'DescriptorType']

if TYPE_CHECKING:
    from featureschema.restrictions import Restriction  # noqa: F401
    from featureschema.translation import InternationalString  # noqa: F401
    from featureschema.utils.qnames import Name  # noqa: F401
    from featureschema.geometry import CoordinateReferenceSystem  # noqa: F401
    from featureschema.types import AttributeDescriptor, GeometryDescriptor  # noqa: F401

    RestrictionType = Restriction
    DescriptionType = InternationalString
    NameType = Union[str, Name]
    CRSType = CoordinateReferenceSystem
    DescriptorType = Union[AttributeDescriptor, GeometryDescriptor]
else:
    RestrictionType = DescriptionType = NameType = CRSType = Any
    DescriptorType = Any

BindingType = type
UserDataType = MutableMapping[Any, Any]
