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
This module contains the exception classes for the package.
"""


class FeatureSchemaException(Exception):
    """The base exception that let you catch all the errors generated by the library."""


class FeatureSchemaAttributeError(FeatureSchemaException, AttributeError):
    pass


class FeatureSchemaTypeError(FeatureSchemaException, TypeError):
    pass


class FeatureSchemaValueError(FeatureSchemaException, ValueError):
    pass


class FeatureSchemaStateError(FeatureSchemaException, RuntimeError):
    """Raised when a builder is asked to build from an incomplete state."""


__all__ = ['FeatureSchemaException', 'FeatureSchemaAttributeError',
           'FeatureSchemaTypeError', 'FeatureSchemaValueError',
           'FeatureSchemaStateError']
