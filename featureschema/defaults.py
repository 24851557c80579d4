#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Package defaults. Values can be changed after import to set different defaults."""
import sys
from types import ModuleType
from typing import Any

from featureschema.translation import gettext as _
from featureschema.exceptions import FeatureSchemaTypeError


class DefaultsModule(ModuleType):
    def __setattr__(self, attr: str, value: Any) -> None:
        if attr == 'NAME_SEPARATOR' and not isinstance(value, str):
            raise FeatureSchemaTypeError(_('Value {!r} is not a string').format(value))
        super().__setattr__(attr, value)


sys.modules[__name__].__class__ = DefaultsModule


NAME_SEPARATOR = ':'
"""
Separator used for joining the namespace URI and the local part of a name. It's
the default for new `Name` instances and for the separator of a new builder.
"""
