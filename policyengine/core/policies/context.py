# (c) Copyright Datacraft, 2026
"""Per-request evaluation context and the policy sources it draws from."""
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from .exceptions import ContextError
from .models import Policy


class PolicySource(ABC):
	"""Supplies the policies that apply to an evaluation."""

	@abstractmethod
	def policies(self) -> list[Policy]:
		"""All applicable policies, in evaluation order."""

	def policies_for_action(self, action: str) -> list[Policy]:
		"""Policies scoped to one action. Defaults to all policies."""
		return self.policies()


class PolicySet(PolicySource):
	"""
	In-memory policy source.

	Policies listed under an action in ``by_action`` are used for that
	action; any other action falls back to the unconditional list.
	"""

	def __init__(
		self,
		policies: Iterable[Policy] = (),
		by_action: Mapping[str, Iterable[Policy]] | None = None,
	):
		self._policies: tuple[Policy, ...] = tuple(policies)
		self._by_action: dict[str, tuple[Policy, ...]] = {
			action: tuple(scoped) for action, scoped in (by_action or {}).items()
		}

	def policies(self) -> list[Policy]:
		return list(self._policies)

	def policies_for_action(self, action: str) -> list[Policy]:
		if action in self._by_action:
			return list(self._by_action[action])
		return self.policies()


def _normalize_actions(actions: str | Iterable[str]) -> frozenset[str]:
	if isinstance(actions, str):
		actions = (actions,)
	normalized = set()
	for action in actions:
		if not isinstance(action, str) or not action:
			raise ContextError(f"Actions must be non-empty strings, got {action!r}")
		normalized.add(action)
	return frozenset(normalized)


class EvaluationContext:
	"""
	Requested actions plus the raw attribute values of one request.

	Attribute values are kept as supplied; conversion happens during
	evaluation. The attribute map is copied, so later changes to the
	caller's dict do not leak into an evaluation.
	"""

	def __init__(
		self,
		actions: str | Iterable[str],
		context: Mapping[str, Any],
		source: PolicySource,
	):
		self._actions = _normalize_actions(actions)
		self._context: dict[str, Any] = dict(context)
		self._source = source

	@property
	def actions(self) -> frozenset[str]:
		return self._actions

	@property
	def context(self) -> Mapping[str, Any]:
		return MappingProxyType(self._context)

	def has_action(self, action: str) -> bool:
		return action in self._actions

	def get(self, name: str) -> Any:
		"""Raw value stored under ``name``, or None when absent."""
		return self._context.get(name)

	def policies(self) -> list[Policy]:
		return self._source.policies()

	def policies_for_action(self, action: str) -> list[Policy]:
		return self._source.policies_for_action(action)

	def __repr__(self) -> str:
		return f"EvaluationContext(actions={sorted(self._actions)}, attributes={list(self._context)})"
