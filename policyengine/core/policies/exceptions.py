# (c) Copyright Datacraft, 2026
"""Errors raised while building or evaluating policies."""
from typing import Any


class PolicyEngineError(Exception):
	"""Base class for all policy engine errors."""


class ConstructionError(PolicyEngineError, ValueError):
	"""Raised when a condition or policy is assembled from incompatible parts."""


class ContextError(PolicyEngineError, ValueError):
	"""Raised when an evaluation context is built with invalid actions."""


class ConversionError(PolicyEngineError):
	"""Raised when a raw context value cannot be coerced or fails validation."""
	def __init__(self, message: str, attribute: str | None = None, value: Any = None):
		self.attribute = attribute
		self.value = value
		super().__init__(message)


class OperatorError(PolicyEngineError, TypeError):
	"""Raised when a relational operator is applied to unordered operands."""
	def __init__(self, operator: Any, left: Any, right: Any):
		self.operator = operator
		self.left = left
		self.right = right
		op_name = getattr(operator, "name", operator)
		super().__init__(
			f"Cannot compare {type(left).__name__} with {type(right).__name__} "
			f"using {op_name}"
		)
