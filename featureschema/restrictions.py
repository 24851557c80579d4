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
This module contains the restrictions of attribute types, predicates on the
values of attributes expressed with XPath 2.0 expressions on variable `$value`.
"""
import datetime
import math
from collections.abc import Iterable
from decimal import Decimal
from typing import Any, Optional, TYPE_CHECKING
from xml.etree.ElementTree import Element

from elementpath import datatypes, ElementPathError, XPath2Parser, XPathContext

from featureschema.exceptions import FeatureSchemaTypeError, FeatureSchemaValueError
from featureschema.translation import gettext as _

if TYPE_CHECKING:
    from featureschema.types import AttributeType

__all__ = ['Restriction', 'LengthRestriction', 'OptionsRestriction', 'xpath_literal',
           'xpath_value', 'length_restriction', 'options_restriction',
           'get_field_length', 'get_field_options']


def _duration_string(value: datetime.timedelta) -> str:
    seconds = Decimal(value.days * 86400 + value.seconds) \
        + Decimal(value.microseconds).scaleb(-6)
    if seconds < 0:
        return '-PT%sS' % format(-seconds.normalize(), 'f')
    return 'PT%sS' % format(seconds.normalize(), 'f')


def xpath_value(value: Any) -> Any:
    """
    Returns the value to bind to an XPath variable. Temporal values are
    converted to the corresponding XSD datatypes, `None` to an empty sequence.
    """
    if value is None:
        return []
    elif isinstance(value, datetime.datetime):
        return datatypes.DateTime10.fromstring(value.isoformat())
    elif isinstance(value, datetime.date):
        return datatypes.Date10.fromstring(value.isoformat())
    elif isinstance(value, datetime.time):
        return datatypes.Time.fromstring(value.isoformat())
    elif isinstance(value, datetime.timedelta):
        return datatypes.DayTimeDuration.fromstring(_duration_string(value))
    return value


def xpath_literal(value: Any) -> str:
    """Returns the XPath 2.0 literal or constructor expression of a Python value."""
    if value is None:
        raise FeatureSchemaValueError(_("None has no XPath literal, it's an empty sequence"))
    elif isinstance(value, bool):
        return 'true()' if value else 'false()'
    elif isinstance(value, int):
        return str(value)
    elif isinstance(value, Decimal):
        if value.is_finite():
            return format(value, 'f')
        raise FeatureSchemaValueError(_("{!r} is not a valid decimal option").format(value))
    elif isinstance(value, float):
        if math.isnan(value):
            return "xs:double('NaN')"
        elif math.isinf(value):
            return "xs:double('INF')" if value > 0 else "xs:double('-INF')"
        return "xs:double('%r')" % value
    elif isinstance(value, datetime.datetime):
        return "xs:dateTime('%s')" % value.isoformat()
    elif isinstance(value, datetime.date):
        return "xs:date('%s')" % value.isoformat()
    elif isinstance(value, datetime.time):
        return "xs:time('%s')" % value.isoformat()
    elif isinstance(value, datetime.timedelta):
        return "xs:dayTimeDuration('%s')" % _duration_string(value)
    else:
        return "'%s'" % str(value).replace("'", "''")


class Restriction:
    """
    A predicate on the values of an attribute. The predicate is an XPath 2.0
    expression that refers the value to check with variable `$value`.

    :param path: the XPath 2.0 expression.
    """
    _root = Element('value')

    def __init__(self, path: str) -> None:
        if not isinstance(path, str):
            raise FeatureSchemaTypeError(
                _("restriction expression must be a string, not {!r}").format(type(path))
            )
        self.path = path
        self.parser = XPath2Parser(strict=False)
        try:
            self.token = self.parser.parse(path)
        except ElementPathError as err:
            msg = _("invalid restriction expression {!r}: {}").format(path, err)
            raise FeatureSchemaValueError(msg) from None

    def __repr__(self) -> str:
        return '%s(path=%r)' % (self.__class__.__name__, self.path)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Restriction):
            return self.path == other.path
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.path)

    def evaluate(self, value: Any) -> bool:
        """
        Evaluates the restriction for a value, returning `True` if the value
        satisfies the restriction. A `None` value is evaluated as an empty sequence.
        """
        try:
            context = XPathContext(self._root, variables={'value': xpath_value(value)})
            return self.token.boolean_value(list(self.token.select(context)))
        except (ElementPathError, TypeError, ValueError) as err:
            msg = _("cannot evaluate restriction {!r} for {!r}: {}").format(self.path, value, err)
            raise FeatureSchemaValueError(msg) from None

    __call__ = evaluate


class LengthRestriction(Restriction):
    """A restriction on the maximum length of the string value of an attribute."""

    def __init__(self, length: int) -> None:
        if not isinstance(length, int) or isinstance(length, bool):
            raise FeatureSchemaTypeError(_("length must be an int, not {!r}").format(length))
        elif length < 0:
            raise FeatureSchemaValueError(_("length must be non negative"))
        self.length = length
        super().__init__(f'string-length(string($value)) le {length}')


class OptionsRestriction(Restriction):
    """
    A restriction that limits the values of an attribute to a list of options.
    A `None` option admits the missing value.
    """

    def __init__(self, options: Iterable[Any]) -> None:
        self.options = tuple(options)
        predicates: list[str] = []
        if any(x is None for x in self.options):
            predicates.append('empty($value)')
        literals = ', '.join(xpath_literal(x) for x in self.options if x is not None)
        if literals or not predicates:
            predicates.append(f'$value = ({literals})')
        super().__init__(' or '.join(predicates))


def length_restriction(length: int) -> LengthRestriction:
    """Creates a restriction on the maximum length of values."""
    return LengthRestriction(length)


def options_restriction(options: Iterable[Any]) -> OptionsRestriction:
    """Creates an enumeration restriction from a list of admitted values."""
    return OptionsRestriction(options)


def get_field_length(attribute_type: 'AttributeType') -> Optional[int]:
    """
    Returns the maximum length admitted by the length restrictions of an attribute
    type and of its super types, or `None` if the values length is not restricted.
    """
    lengths = []
    attr_type: Optional['AttributeType'] = attribute_type
    while attr_type is not None:
        lengths.extend(r.length for r in attr_type.restrictions
                       if isinstance(r, LengthRestriction))
        attr_type = attr_type.super
    return min(lengths) if lengths else None


def get_field_options(attribute_type: 'AttributeType') -> Optional[tuple[Any, ...]]:
    """
    Returns the options of the first enumeration restriction found on an attribute
    type or on its super types, or `None` if there is no enumeration restriction.
    """
    attr_type: Optional['AttributeType'] = attribute_type
    while attr_type is not None:
        for restriction in attr_type.restrictions:
            if isinstance(restriction, OptionsRestriction):
                return restriction.options
        attr_type = attr_type.super
    return None
