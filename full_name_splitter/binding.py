"""
Binding of full names onto host objects.

A host stores a name as three fields. `FieldMapping` names those fields, `NameFields`
describes which of them can be read or written, and `get_full_name`/`set_full_name` move a
full name in and out of the host. Accessors that are missing are skipped.

```python
@dataclass
class Person(FullNameMixin):
    honorific: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

person = Person()
person.full_name = "Dr. Ludwig Mies van der Rohe"
person.last_name   # "Mies van der Rohe"
person.full_name   # "Dr. Ludwig Mies van der Rohe"
```
"""

from __future__ import annotations
import logging
from collections.abc import MutableMapping
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Union

from full_name_splitter.splitter import SplitResult, SplitterConfig, compose, split

Getter = Callable[[], Optional[str]]
Setter = Callable[[Optional[str]], None]


@dataclass(frozen=True)
class FieldMapping:
    """Host field names for each part of a name. A None honorific disables it."""

    honorific: Optional[str] = "honorific"
    first_name: str = "first_name"
    last_name: str = "last_name"

    def extend(self, **overrides: Optional[str]) -> "FieldMapping":
        """Copy of this mapping with some field names replaced, e.g. for a subclass."""
        return replace(self, **overrides)


DEFAULT_FIELD_MAPPING = FieldMapping()


@dataclass(frozen=True)
class FieldAccessor:
    """Optional getter and setter for one name field."""

    getter: Optional[Getter] = None
    setter: Optional[Setter] = None

    @property
    def readable(self) -> bool:
        return self.getter is not None

    @property
    def writable(self) -> bool:
        return self.setter is not None

    def get(self) -> Optional[str]:
        return self.getter() if self.getter is not None else None

    def set(self, value: Optional[str]) -> bool:
        """Write value; False when there is no setter."""
        if self.setter is None:
            return False
        self.setter(value)
        return True


MISSING_FIELD = FieldAccessor()


def _attribute_accessor(obj: Any, field: Optional[str]) -> FieldAccessor:
    if field is None:
        return MISSING_FIELD
    name: str = field

    attribute = getattr(type(obj), name, None)
    if isinstance(attribute, property):
        return FieldAccessor(
            getter=(lambda: getattr(obj, name)) if attribute.fget is not None else None,
            setter=(lambda value: setattr(obj, name, value)) if attribute.fset is not None else None,
        )
    if not hasattr(obj, name):
        return MISSING_FIELD
    return FieldAccessor(getter=lambda: getattr(obj, name), setter=lambda value: setattr(obj, name, value))


def _record_accessor(record: MutableMapping, field: Optional[str], optional: bool = False) -> FieldAccessor:
    if field is None or (optional and field not in record):
        return MISSING_FIELD
    name: str = field

    def setter(value: Optional[str]) -> None:
        record[name] = value

    getter = (lambda: record[name]) if name in record else None
    return FieldAccessor(getter=getter, setter=setter)


@dataclass(frozen=True)
class NameFields:
    """Which name fields of a host can be read and written."""

    honorific: FieldAccessor = MISSING_FIELD
    first_name: FieldAccessor = MISSING_FIELD
    last_name: FieldAccessor = MISSING_FIELD

    @classmethod
    def for_object(cls, obj: Any, mapping: FieldMapping = DEFAULT_FIELD_MAPPING) -> "NameFields":
        """Attribute access. Read-only properties get no setter; missing attributes get neither."""
        return cls(
            honorific=_attribute_accessor(obj, mapping.honorific),
            first_name=_attribute_accessor(obj, mapping.first_name),
            last_name=_attribute_accessor(obj, mapping.last_name),
        )

    @classmethod
    def for_record(cls, record: MutableMapping, mapping: FieldMapping = DEFAULT_FIELD_MAPPING) -> "NameFields":
        """Key access. The honorific is only written when its key is already present."""
        return cls(
            honorific=_record_accessor(record, mapping.honorific, optional=True),
            first_name=_record_accessor(record, mapping.first_name),
            last_name=_record_accessor(record, mapping.last_name),
        )

    @classmethod
    def resolve(cls, target: Any, mapping: FieldMapping = DEFAULT_FIELD_MAPPING) -> "NameFields":
        if isinstance(target, NameFields):
            return target
        if isinstance(target, MutableMapping):
            return cls.for_record(target, mapping)
        return cls.for_object(target, mapping)


HostLike = Union[NameFields, MutableMapping, Any]


def get_full_name(target: HostLike, mapping: FieldMapping = DEFAULT_FIELD_MAPPING) -> str:
    """Compose the display name from the readable fields of target."""
    fields = NameFields.resolve(target, mapping)
    return compose(fields.honorific.get(), fields.first_name.get(), fields.last_name.get())


def set_full_name(
    target: HostLike,
    name: Optional[str],
    mapping: FieldMapping = DEFAULT_FIELD_MAPPING,
    config: Optional[SplitterConfig] = None,
) -> SplitResult:
    """
    Split name and write its parts into the writable fields of target.

    The honorific is only extracted when target can store it; otherwise a leading title
    stays part of the first name.

    Returns:
        The SplitResult that was written
    """
    fields = NameFields.resolve(target, mapping)
    result = split(name, fields.honorific.writable, config)

    for field_name, accessor, value in zip(
        ("honorific", "first_name", "last_name"),
        (fields.honorific, fields.first_name, fields.last_name),
        result,
    ):
        if not accessor.set(value):
            logging.debug(f"No setter for {field_name}, skipping value {value!r}")

    return result


class FullNameMixin:
    """Adds a read/write `full_name` property driven by the `full_name_fields` mapping."""

    full_name_fields: FieldMapping = DEFAULT_FIELD_MAPPING
    full_name_config: Optional[SplitterConfig] = None

    @property
    def full_name(self) -> str:
        return get_full_name(NameFields.for_object(self, self.full_name_fields))

    @full_name.setter
    def full_name(self, name: Optional[str]) -> None:
        set_full_name(NameFields.for_object(self, self.full_name_fields), name, config=self.full_name_config)
