# Package exports
from fieldrules.config import Settings, get_settings
from fieldrules.errors import RuleDefinitionError
from fieldrules.logging import configure_logging, get_logger
from fieldrules.validation import (
    Bool,
    Contains,
    Email,
    FieldDeclaration,
    Length,
    LengthRange,
    MaxLength,
    MaxSize,
    MinLength,
    MinSize,
    Password,
    Required,
    Rule,
    RuleBinding,
    Size,
    SizeExact,
    SizeMax,
    SizeMin,
    SizeRange,
    ValidationConfig,
    ValidationError,
    ValidationOutcome,
    Validator,
    declare,
    validate,
)

__version__ = "0.1.0"
