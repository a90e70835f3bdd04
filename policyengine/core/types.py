# (c) Copyright Datacraft, 2026
"""Enumerated tags shared by the policy engine."""
from enum import Enum


class Operator(str, Enum):
	"""Operators for policy conditions."""
	EQUALS = "eq"
	NOT_EQUALS = "ne"
	GREATER_THAN = "gt"
	LESS_THAN = "lt"
	IN = "in"
	NOT_IN = "not_in"

	@property
	def is_membership(self) -> bool:
		return self in (Operator.IN, Operator.NOT_IN)

	@property
	def is_relational(self) -> bool:
		return self in (Operator.GREATER_THAN, Operator.LESS_THAN)


class Effect(str, Enum):
	"""Policy decision effect."""
	ALLOW = "allow"
	DENY = "deny"


class Verdict(str, Enum):
	"""
	Outcome of an evaluation.

	NOT_APPLICABLE means no policy spoke, which is not the same as ALLOW.
	"""
	ALLOW = "allow"
	DENY = "deny"
	NOT_APPLICABLE = "not_applicable"
