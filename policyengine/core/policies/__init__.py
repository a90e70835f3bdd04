# (c) Copyright Datacraft, 2026
"""
Attribute-Based Access Control (ABAC) policy evaluation.

This module provides:
- Typed attributes that convert and validate raw context values
- Value and list conditions over a single attribute
- Immutable policies assembled through PolicyBuilder
- Deny-override combination of many policies, per action or overall
"""
from .attributes import Attribute, Conversion
from .conditions import (
	Condition, ValueCondition, ListCondition, ScalarValue, SequenceValue,
	tag_value, equals, not_equals, greater_than, less_than, is_in, not_in,
)
from .context import EvaluationContext, PolicySource, PolicySet
from .engine import PolicyEvaluator, ContextEvaluator
from .exceptions import (
	PolicyEngineError, ConstructionError, ContextError,
	ConversionError, OperatorError,
)
from .models import Policy, PolicyBuilder

__all__ = [
	# Attributes
	"Attribute",
	"Conversion",
	# Conditions
	"Condition",
	"ValueCondition",
	"ListCondition",
	"ScalarValue",
	"SequenceValue",
	"tag_value",
	"equals",
	"not_equals",
	"greater_than",
	"less_than",
	"is_in",
	"not_in",
	# Context
	"EvaluationContext",
	"PolicySource",
	"PolicySet",
	# Engine
	"PolicyEvaluator",
	"ContextEvaluator",
	# Errors
	"PolicyEngineError",
	"ConstructionError",
	"ContextError",
	"ConversionError",
	"OperatorError",
	# Models
	"Policy",
	"PolicyBuilder",
]
