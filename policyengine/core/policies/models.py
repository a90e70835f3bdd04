# (c) Copyright Datacraft, 2026
"""Policy domain models."""
from dataclasses import dataclass, field
from typing import Any, Iterable

from policyengine.core.types import Effect
from .conditions import Condition, ListCondition
from .exceptions import ConstructionError


@dataclass(frozen=True)
class Policy:
	"""
	An effect guarded by a conjunction of conditions.

	Conditions are evaluated in the given order. A policy without
	conditions always applies.
	"""
	id: str
	effect: Effect
	conditions: tuple[Condition, ...] = ()
	name: str | None = None
	description: str = ""

	def __post_init__(self):
		try:
			effect = Effect(self.effect)
		except ValueError as e:
			raise ConstructionError(f"Unknown effect for policy {self.id}: {self.effect!r}") from e
		object.__setattr__(self, "effect", effect)
		object.__setattr__(self, "conditions", tuple(self.conditions))

	@property
	def display_name(self) -> str:
		return self.name or self.id

	def to_dict(self) -> dict:
		return {
			"id": self.id,
			"name": self.name,
			"description": self.description,
			"effect": self.effect.value,
			"conditions": [_condition_to_dict(c) for c in self.conditions],
		}


def _condition_to_dict(condition: Condition) -> dict:
	data: dict[str, Any] = {
		"attribute": condition.attribute.name,
		"type": condition.attribute.type_name,
		"operator": condition.operator.value,
	}
	if isinstance(condition, ListCondition):
		data["values"] = list(condition.values)
	else:
		data["value"] = condition.value
	return data


@dataclass
class PolicyBuilder:
	"""
	Mutable assembly step for a Policy.

	Usage:
		policy = (
			PolicyBuilder()
			.set_id("minors")
			.add_condition(less_than(age, 18))
			.set_effect(Effect.DENY)
			.build()
		)
	"""
	id: str | None = None
	name: str | None = None
	description: str = ""
	conditions: list[Condition] = field(default_factory=list)
	effect: Effect | None = None

	def set_id(self, policy_id: str) -> "PolicyBuilder":
		self.id = policy_id
		return self

	def set_name(self, name: str | None) -> "PolicyBuilder":
		self.name = name
		return self

	def set_description(self, description: str) -> "PolicyBuilder":
		self.description = description
		return self

	def set_effect(self, effect: Effect) -> "PolicyBuilder":
		self.effect = effect
		return self

	def add_condition(self, condition: Condition) -> "PolicyBuilder":
		self.conditions.append(condition)
		return self

	def set_conditions(self, conditions: Iterable[Condition]) -> "PolicyBuilder":
		self.conditions = list(conditions)
		return self

	def build(self) -> Policy:
		if not self.id:
			raise ConstructionError("Policy id is required")
		if self.effect is None:
			raise ConstructionError(f"Policy {self.id} has no effect")
		return Policy(
			id=self.id,
			effect=self.effect,
			conditions=tuple(self.conditions),
			name=self.name,
			description=self.description,
		)
