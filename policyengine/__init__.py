# (c) Copyright Datacraft, 2026
"""Attribute-based access control policy engine."""
from policyengine.core.logging_config import configure_logging
from policyengine.core.policies import (
	Attribute, Conversion,
	Condition, ValueCondition, ListCondition,
	equals, not_equals, greater_than, less_than, is_in, not_in,
	EvaluationContext, PolicySource, PolicySet,
	PolicyEvaluator, ContextEvaluator,
	PolicyEngineError, ConstructionError, ContextError,
	ConversionError, OperatorError,
	Policy, PolicyBuilder,
)
from policyengine.core.types import Operator, Effect, Verdict

__version__ = "2025.1.2"

__all__ = [
	"Attribute",
	"Conversion",
	"Condition",
	"ValueCondition",
	"ListCondition",
	"equals",
	"not_equals",
	"greater_than",
	"less_than",
	"is_in",
	"not_in",
	"EvaluationContext",
	"PolicySource",
	"PolicySet",
	"PolicyEvaluator",
	"ContextEvaluator",
	"PolicyEngineError",
	"ConstructionError",
	"ContextError",
	"ConversionError",
	"OperatorError",
	"Policy",
	"PolicyBuilder",
	"Operator",
	"Effect",
	"Verdict",
	"configure_logging",
]
