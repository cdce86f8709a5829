"""Algorithm subpackage: the typing rules of the converter.

Public API:
- classify: text + directive -> typed JSON scalar
- resolve: exact path lookup of a directive override
- ConverterConfig / EmptyElementPolicy: immutable conversion settings
- Infer / AlwaysString / StringIfLeadingZero / Bool: type directives
"""

from typed_xmljson.algorithm.classifier import classify
from typed_xmljson.algorithm.config import ConverterConfig, EmptyElementPolicy
from typed_xmljson.algorithm.directives import (
    AlwaysString,
    Bool,
    Infer,
    StringIfLeadingZero,
    TypeDirective,
    parse_directive,
)
from typed_xmljson.algorithm.overrides import resolve

__all__ = [
    "AlwaysString",
    "Bool",
    "ConverterConfig",
    "EmptyElementPolicy",
    "Infer",
    "StringIfLeadingZero",
    "TypeDirective",
    "classify",
    "parse_directive",
    "resolve",
]
