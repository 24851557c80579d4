#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from abc import ABCMeta, abstractmethod
from typing import cast, Any, Iterable, Optional, Union
import gettext as _gettext
from pathlib import Path

__all__ = ['activate', 'deactivate', 'gettext',
           'InternationalString', 'SimpleInternationalString']

_translation: Any = None
_installed: bool = False


def activate(localedir: Union[None, str, Path] = None,
             languages: Optional[Iterable[str]] = None,
             fallback: bool = True,
             install: bool = False) -> None:
    """
    Activate translation of featureschema error messages and descriptions.
    The package doesn't ship message catalogs: applications provide their
    `featureschema.mo` catalogs, with descriptions text as message ids, in a
    locale directory. Without a catalog the messages are left untranslated
    if fallback mode is active.

    :param localedir: a string or Path-like object to locale directory, \
    for default is the system locale directory used by `gettext`.
    :param languages: list of language codes
    :param fallback: for default fallback mode is activated
    :param install: if `True` installs function _() in Python’s builtins namespace
    """
    global _translation
    global _installed

    translation = _gettext.translation(
        domain='featureschema',
        localedir=localedir,
        languages=languages,
        fallback=fallback,
    )

    deactivate()

    _translation = translation
    if install:
        _translation.install()
        _installed = True


def deactivate() -> None:
    """Deactivate translation of featureschema messages."""
    global _translation
    global _installed

    if _installed and _translation is not None:
        import builtins
        if builtins.__dict__.get('_') == _translation.gettext:  # pragma: no cover
            builtins.__dict__.pop('_')

    _translation = None
    _installed = False


def gettext(message: str) -> str:
    if _translation is None:
        return message
    return cast(str, _translation.gettext(message))


class InternationalString(metaclass=ABCMeta):
    """A text that can be rendered in the active language."""

    __slots__ = ()

    @abstractmethod
    def to_string(self) -> str:
        """Returns the text translated with the active translation, if any."""

    def __str__(self) -> str:
        return self.to_string()


class SimpleInternationalString(InternationalString):
    """
    An international string built from a plain text, that is used also as the
    message id for looking up its translation.
    """
    __slots__ = ('_text',)

    def __init__(self, text: str) -> None:
        self._text = text

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SimpleInternationalString):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    @property
    def text(self) -> str:
        return self._text

    def to_string(self) -> str:
        return gettext(self._text)
