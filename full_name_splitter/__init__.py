from full_name_splitter.splitter import (
    DEFAULT_CONFIG,
    InvalidNameError,
    Rule,
    SplitResult,
    Splitter,
    SplitterConfig,
    compose,
    split,
    split_with_honorific,
)
from full_name_splitter.binding import (
    DEFAULT_FIELD_MAPPING,
    FieldAccessor,
    FieldMapping,
    FullNameMixin,
    NameFields,
    get_full_name,
    set_full_name,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_FIELD_MAPPING",
    "FieldAccessor",
    "FieldMapping",
    "FullNameMixin",
    "InvalidNameError",
    "NameFields",
    "Rule",
    "SplitResult",
    "Splitter",
    "SplitterConfig",
    "compose",
    "get_full_name",
    "set_full_name",
    "split",
    "split_with_honorific",
]
