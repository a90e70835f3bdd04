# (c) Copyright Datacraft, 2026
"""
Typed attributes for reading values out of an evaluation context.

An Attribute names one key of the context map and knows how to coerce the
raw value stored under that key into a typed value, then validate it.

Built-in kinds:
    Attribute.string("resource")
    Attribute.integer("age", lambda age: age >= 0)
    Attribute.enum_type("tier", Tier)
    Attribute.list_of("roles", Attribute.string("role"))
"""
import numbers
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from .exceptions import ConversionError

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


def _accept_all(value: Any) -> bool:
	return True


@dataclass(frozen=True)
class Conversion(Generic[T]):
	"""Result of converting a raw value: either a value or a ConversionError."""
	value: T | None = None
	error: ConversionError | None = None

	@property
	def ok(self) -> bool:
		return self.error is None


@dataclass(frozen=True, eq=False)
class Attribute(Generic[T]):
	"""
	Named, typed and validated accessor into a context map.

	Attributes compare by identity: two attributes sharing a name are
	still independent objects.
	"""
	name: str
	type: type
	converter: Callable[[Any], T]
	validator: Callable[[T], bool] = _accept_all

	def convert(self, raw: Any) -> T | None:
		"""
		Coerce ``raw`` to the attribute type and validate the result.

		None converts to None without running the converter or validator.
		Any converter or validator failure is raised as a ConversionError
		chained to its cause; a ConversionError raised by the converter
		itself propagates unchanged.
		"""
		if raw is None:
			return None

		try:
			converted = self.converter(raw)
			if converted is not None and not self.validator(converted):
				raise ConversionError(
					f"Value {raw!r} is not valid for attribute {self.name}",
					attribute=self.name,
					value=raw,
				)
			return converted
		except ConversionError:
			raise
		except Exception as e:
			raise ConversionError(
				f"Cannot convert {raw!r} to {self.type_name} for attribute {self.name}",
				attribute=self.name,
				value=raw,
			) from e

	def try_convert(self, raw: Any) -> Conversion[T]:
		"""Convert without raising; failures are returned in the result."""
		try:
			return Conversion(value=self.convert(raw))
		except ConversionError as e:
			return Conversion(error=e)

	def is_valid(self, raw: Any) -> bool:
		"""Check whether ``raw`` converts to a non-null, valid value. Never raises."""
		try:
			converted = self.convert(raw)
			return converted is not None and bool(self.validator(converted))
		except Exception:
			return False

	@property
	def type_name(self) -> str:
		return getattr(self.type, "__name__", str(self.type))

	def __repr__(self) -> str:
		return f"Attribute(name={self.name!r}, type={self.type_name})"

	@classmethod
	def string(
		cls,
		name: str,
		validator: Callable[[str], bool] | None = None,
	) -> "Attribute[str]":
		return cls(name, str, _to_string, validator or _accept_all)

	@classmethod
	def integer(
		cls,
		name: str,
		validator: Callable[[int], bool] | None = None,
	) -> "Attribute[int]":
		return cls(name, int, _to_integer, validator or _accept_all)

	@classmethod
	def enum_type(
		cls,
		name: str,
		enum_cls: type[E],
		validator: Callable[[E], bool] | None = None,
	) -> "Attribute[E]":
		return cls(name, enum_cls, _enum_converter(enum_cls), validator or _accept_all)

	@classmethod
	def list_of(cls, name: str, element: "Attribute[T]") -> "Attribute[list[T]]":
		"""List attribute; valid only when every element validates on its own."""
		return cls(
			name,
			list,
			_list_converter(element),
			lambda items: all(element.is_valid(item) for item in items),
		)


def _to_string(value: Any) -> str:
	if isinstance(value, str):
		return value
	return str(value)


def _to_integer(value: Any) -> int:
	# bool is an int subclass but not a number for our purposes
	if isinstance(value, bool):
		raise TypeError(f"Cannot convert bool to int: {value!r}")
	if isinstance(value, int):
		return value
	if isinstance(value, numbers.Number):
		# int() truncates toward zero
		return int(value)
	if isinstance(value, str):
		if not _INTEGER_TEXT.fullmatch(value):
			raise ValueError(f"Invalid base-10 integer: {value!r}")
		return int(value)
	raise TypeError(f"Cannot convert {type(value).__name__} to int: {value!r}")


def _enum_converter(enum_cls: type[E]) -> Callable[[Any], E]:
	def convert(value: Any) -> E:
		if isinstance(value, enum_cls):
			return value
		if isinstance(value, str):
			members = enum_cls.__members__
			if value in members:
				return members[value]
			lowered = value.lower()
			for member_name, member in members.items():
				if member_name.lower() == lowered:
					return member
			raise ValueError(f"No {enum_cls.__name__} member named {value!r}")
		raise TypeError(f"Cannot convert {type(value).__name__} to {enum_cls.__name__}: {value!r}")

	return convert


def _list_converter(element: Attribute[T]) -> Callable[[Any], list[T]]:
	def convert(value: Any) -> list[T]:
		if isinstance(value, (list, tuple)):
			return [element.convert(item) for item in value]
		if isinstance(value, str) and "," in value:
			parts = [part.strip() for part in value.split(",")]
			while parts and parts[-1] == "":
				parts.pop()
			return [element.convert(part) for part in parts]
		return [element.convert(value)]

	return convert
