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
Helpers for bindings, the Python classes of the values held by attributes.
"""
import datetime
from collections.abc import Callable
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Optional

from featureschema.exceptions import FeatureSchemaTypeError
from featureschema.translation import gettext as _
from featureschema.aliases import BindingType
from featureschema.geometry import ORIGIN, Geometry, Point, LineString, LinearRing, \
    Polygon, GeometryCollection, MultiPoint, MultiLineString, MultiPolygon

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

DEFAULT_VALUES: MappingProxyType[type, Callable[[], Any]] = MappingProxyType({
    str: str,
    bytes: bytes,
    bool: bool,
    int: int,
    float: float,
    Decimal: Decimal,
    datetime.datetime: lambda: EPOCH,
    datetime.date: lambda: EPOCH.date(),
    datetime.time: datetime.time,
    datetime.timedelta: datetime.timedelta,
    Point: Point,
    LinearRing: lambda: LinearRing((ORIGIN,) * 4),
    LineString: lambda: LineString((ORIGIN, ORIGIN)),
    Polygon: lambda: Polygon(LinearRing((ORIGIN,) * 4)),
    MultiPoint: MultiPoint,
    MultiLineString: MultiLineString,
    MultiPolygon: MultiPolygon,
    GeometryCollection: GeometryCollection,
    Geometry: GeometryCollection,
})
"""
Factories of the canonical default values, keyed by binding. Subclasses of a
listed binding use the factory of their nearest listed base class.
"""


def short_name(binding: Optional[BindingType]) -> str:
    """Returns the short display name of a binding, used for unnamed types."""
    if binding is None:
        raise FeatureSchemaTypeError(_("cannot derive a name from a missing binding"))
    try:
        return binding.__name__
    except AttributeError:
        return type(binding).__name__


def is_geometry_binding(binding: Optional[BindingType]) -> bool:
    """Returns `True` if the binding is a geometry value kind."""
    return isinstance(binding, type) and issubclass(binding, Geometry)


def default_value(binding: BindingType) -> Any:
    """
    Returns the canonical default value for a binding: zero for numeric kinds,
    empty for textual and binary kinds, the epoch for dates and a geometry at
    the origin for geometry kinds. Returns `None` for bindings without a
    canonical default.

    :param binding: a Python class.
    """
    if not isinstance(binding, type):
        raise FeatureSchemaTypeError(_("binding must be a class, not {!r}").format(binding))

    for cls in binding.__mro__:
        try:
            return DEFAULT_VALUES[cls]()
        except KeyError:
            continue
    return None
