#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Qualified names of types and descriptors, and helper functions for QNames."""
from typing import Any, Optional

from featureschema import defaults
from featureschema.exceptions import FeatureSchemaAttributeError, FeatureSchemaTypeError, \
    FeatureSchemaValueError
from featureschema.translation import gettext as _


def get_namespace(qname: str) -> str:
    """
    Returns the namespace URI associated with a QName in extended form or a local name.
    If the argument is not conformant to QName format returns the empty string, which
    means no namespace.
    """
    try:
        if qname[0] != '{':
            return ''
        namespace, _ = qname[1:].split('}')
    except (IndexError, ValueError):
        return ''
    except TypeError:
        raise FeatureSchemaTypeError("the argument must be a string-like object")
    else:
        return namespace


def get_qname(uri: Optional[str], name: str) -> str:
    """
    Returns an expanded QName from URI and local part. If any argument has boolean value
    `False` or if the name is already an expanded QName, returns the *name* argument.

    :param uri: namespace URI
    :param name: local or qualified name
    :return: string or the name argument
    """
    try:
        if name[0] == '{' or not uri:
            return name
    except IndexError:
        return ''
    except TypeError:
        raise FeatureSchemaTypeError("the 2nd argument must be a string-like object")
    else:
        return f'{{{uri}}}{name}'


def local_name(qname: str) -> str:
    """
    Return the local part of an expanded QName. If the name is `None` or empty
    returns the *name* argument.

    :param qname: an expanded QName or a local name.
    """
    try:
        if qname[0] == '{':
            _namespace, qname = qname.split('}')
    except IndexError:
        return ''
    except ValueError:
        raise FeatureSchemaValueError(_("{!r} is not a valid QName").format(qname))
    except TypeError:
        raise FeatureSchemaTypeError("the argument must be a string-like object")
    return qname


class Name:
    """
    The name of a type or of a descriptor, made of an optional namespace URI
    and a local part. The separator is used only for the string representation.

    :param namespace_uri: the namespace URI, `None` or empty for no namespace.
    :param local_part: the local name.
    :param separator: the string that joins the namespace URI and the local part, \
    for default is `featureschema.defaults.NAME_SEPARATOR`.
    """
    __slots__ = ('namespace_uri', 'local_part', 'separator')

    namespace_uri: Optional[str]
    local_part: str
    separator: str

    def __init__(self, namespace_uri: Optional[str],
                 local_part: str,
                 separator: Optional[str] = None) -> None:
        if not isinstance(local_part, str):
            raise FeatureSchemaTypeError(
                _("local part must be a string, not {!r}").format(type(local_part))
            )
        if separator is None:
            separator = defaults.NAME_SEPARATOR

        object.__setattr__(self, 'namespace_uri', namespace_uri or None)
        object.__setattr__(self, 'local_part', local_part)
        object.__setattr__(self, 'separator', separator)

    @classmethod
    def from_string(cls, name: str) -> 'Name':
        """Creates a name from a local name or from an expanded QName."""
        return cls(get_namespace(name), local_name(name))

    def __setattr__(self, name: str, value: Any) -> None:
        raise FeatureSchemaAttributeError(_("Can't set attribute {}").format(name))

    def __delattr__(self, name: str) -> None:
        raise FeatureSchemaAttributeError(_("Can't delete attribute {}").format(name))

    def __repr__(self) -> str:
        if self.namespace_uri is None:
            return '%s(%r)' % (self.__class__.__name__, self.local_part)
        return '%s(%r, %r, separator=%r)' % (
            self.__class__.__name__, self.namespace_uri, self.local_part, self.separator
        )

    def __str__(self) -> str:
        if self.namespace_uri is None:
            return self.local_part
        return f'{self.namespace_uri}{self.separator}{self.local_part}'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Name):
            return self.namespace_uri == other.namespace_uri and \
                self.local_part == other.local_part
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.namespace_uri, self.local_part))

    @property
    def expanded(self) -> str:
        """The name in extended QName format `{namespace_uri}local_part`."""
        return get_qname(self.namespace_uri, self.local_part)
