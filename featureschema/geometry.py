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
Geometry value kinds, usable as bindings of geometry attributes, and the
coordinate reference system value attached to geometry types.
"""
import dataclasses as dc
from typing import Optional

CoordinateType = tuple[float, ...]

ORIGIN: CoordinateType = (0.0, 0.0)


@dc.dataclass(frozen=True)
class CoordinateReferenceSystem:
    """A coordinate reference system, identified by an authority code."""

    code: str
    """The authority code, e.g. 'EPSG:4326'."""

    name: Optional[str] = None
    """An optional human-readable name."""

    def __str__(self) -> str:
        return self.code


WGS84 = CoordinateReferenceSystem('EPSG:4326', 'WGS 84')


class Geometry:
    """Base class of geometry value kinds."""
    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._key() == other._key()  # type: ignore[attr-defined]
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._key()))

    def _key(self) -> tuple[object, ...]:
        return ()

    @property
    def geometry_type(self) -> str:
        return self.__class__.__name__

    @property
    def is_empty(self) -> bool:
        return not self._key()


class Point(Geometry):
    __slots__ = ('coordinates',)

    def __init__(self, coordinates: CoordinateType = ORIGIN) -> None:
        self.coordinates = tuple(coordinates)

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self.coordinates)

    def _key(self) -> tuple[object, ...]:
        return self.coordinates


class LineString(Geometry):
    __slots__ = ('coordinates',)

    def __init__(self, coordinates: tuple[CoordinateType, ...] = ()) -> None:
        self.coordinates = tuple(tuple(c) for c in coordinates)

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self.coordinates)

    def _key(self) -> tuple[object, ...]:
        return self.coordinates


class LinearRing(LineString):
    __slots__ = ()


class Polygon(Geometry):
    __slots__ = ('shell', 'holes')

    def __init__(self, shell: Optional[LinearRing] = None,
                 holes: tuple[LinearRing, ...] = ()) -> None:
        self.shell = shell if shell is not None else LinearRing()
        self.holes = tuple(holes)

    def __repr__(self) -> str:
        return '%s(%r, %r)' % (self.__class__.__name__, self.shell, self.holes)

    def _key(self) -> tuple[object, ...]:
        if self.shell.is_empty and not self.holes:
            return ()
        return self.shell, self.holes


class GeometryCollection(Geometry):
    __slots__ = ('geometries',)

    def __init__(self, geometries: tuple[Geometry, ...] = ()) -> None:
        self.geometries = tuple(geometries)

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self.geometries)

    def __len__(self) -> int:
        return len(self.geometries)

    def _key(self) -> tuple[object, ...]:
        return self.geometries


class MultiPoint(GeometryCollection):
    __slots__ = ()


class MultiLineString(GeometryCollection):
    __slots__ = ()


class MultiPolygon(GeometryCollection):
    __slots__ = ()
