# (c) Copyright Datacraft, 2026
"""
Typed predicates over a single attribute.

A condition is one of two closed variants:
    ValueCondition  compares against one stored value (EQUALS, NOT_EQUALS,
                    GREATER_THAN, LESS_THAN)
    ListCondition   tests membership in a stored list (IN, NOT_IN)

Variants reject operators of the other kind when they are constructed.
"""
import operator as op
from dataclasses import dataclass
from enum import Enum
from collections.abc import Iterable
from typing import Any, Callable, Generic, TypeVar

from policyengine.core.types import Operator
from .attributes import Attribute
from .exceptions import ConstructionError, OperatorError

T = TypeVar("T")


@dataclass(frozen=True)
class ScalarValue:
	"""A single context value."""
	value: Any


@dataclass(frozen=True)
class SequenceValue:
	"""A context value that holds several items."""
	items: tuple


def tag_value(value: Any) -> ScalarValue | SequenceValue:
	"""Tag a converted context value as a scalar or a sequence."""
	if isinstance(value, (list, tuple)):
		return SequenceValue(tuple(value))
	return ScalarValue(value)


def _coerce_operator(value: Any) -> Operator:
	try:
		return Operator(value)
	except ValueError as e:
		raise ConstructionError(f"Unknown operator: {value!r}") from e


@dataclass(frozen=True)
class ValueCondition(Generic[T]):
	"""Compare a context value against one stored value."""
	attribute: Attribute[T]
	operator: Operator
	value: T | None

	def __post_init__(self):
		operator = _coerce_operator(self.operator)
		if operator.is_membership:
			raise ConstructionError(
				f"ValueCondition does not support {operator.name}; use ListCondition"
			)
		if operator.is_relational and self.value is None:
			raise ConstructionError(
				f"{operator.name} on attribute {self.attribute.name} needs a non-null value"
			)
		object.__setattr__(self, "operator", operator)

	def evaluate(self, context_value: T | None) -> bool:
		"""
		Evaluate against an already converted context value.

		A null context value never matches a non-null stored value, so only
		NOT_EQUALS holds in that case. Two nulls are equal. Members of one
		Enum class order by definition.

		Raises:
			OperatorError: GREATER_THAN/LESS_THAN on operands without ordering.
		"""
		if context_value is None and self.value is not None:
			return self.operator == Operator.NOT_EQUALS

		match self.operator:
			case Operator.EQUALS:
				return context_value == self.value
			case Operator.NOT_EQUALS:
				return not context_value == self.value
			case Operator.GREATER_THAN:
				return self._compare(op.gt, context_value)
			case Operator.LESS_THAN:
				return self._compare(op.lt, context_value)
			case _:
				raise ConstructionError(f"ValueCondition does not support {self.operator.name}")

	def _compare(self, compare: Callable[[Any, Any], Any], context_value: T) -> bool:
		left, right = context_value, self.value
		if isinstance(left, Enum) and type(left) is type(right):
			# members order by definition
			members = list(type(left))
			left, right = members.index(left), members.index(right)
		try:
			return bool(compare(left, right))
		except TypeError as e:
			raise OperatorError(self.operator, context_value, self.value) from e


@dataclass(frozen=True)
class ListCondition(Generic[T]):
	"""Test a context value for membership in a stored list."""
	attribute: Attribute[T]
	operator: Operator
	values: tuple

	def __post_init__(self):
		operator = _coerce_operator(self.operator)
		if not operator.is_membership:
			raise ConstructionError(
				f"ListCondition only supports IN or NOT_IN, got {operator.name}"
			)
		if isinstance(self.values, (str, bytes)) or not isinstance(self.values, Iterable):
			raise ConstructionError(
				f"ListCondition on attribute {self.attribute.name} needs a list of values"
			)
		object.__setattr__(self, "operator", operator)
		object.__setattr__(self, "values", tuple(self.values))

	def evaluate(self, context_value: Any) -> bool:
		"""
		Evaluate against an already converted context value.

		A null context value is never a member. A sequence context value
		is a member when any of its items is in the stored list.
		"""
		if context_value is None:
			return self.operator == Operator.NOT_IN

		contained = self.contains(tag_value(context_value))
		return contained if self.operator == Operator.IN else not contained

	def contains(self, tagged: ScalarValue | SequenceValue) -> bool:
		match tagged:
			case SequenceValue(items=items):
				return any(item in self.values for item in items)
			case ScalarValue(value=value):
				return value in self.values


Condition = ValueCondition | ListCondition


def equals(attribute: Attribute[T], value: T | None) -> ValueCondition[T]:
	return ValueCondition(attribute, Operator.EQUALS, value)


def not_equals(attribute: Attribute[T], value: T | None) -> ValueCondition[T]:
	return ValueCondition(attribute, Operator.NOT_EQUALS, value)


def greater_than(attribute: Attribute[T], value: T) -> ValueCondition[T]:
	return ValueCondition(attribute, Operator.GREATER_THAN, value)


def less_than(attribute: Attribute[T], value: T) -> ValueCondition[T]:
	return ValueCondition(attribute, Operator.LESS_THAN, value)


def is_in(attribute: Attribute[T], values: Iterable[T | None]) -> ListCondition[T]:
	return ListCondition(attribute, Operator.IN, values)


def not_in(attribute: Attribute[T], values: Iterable[T | None]) -> ListCondition[T]:
	return ListCondition(attribute, Operator.NOT_IN, values)
