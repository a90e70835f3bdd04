# (c) Copyright Datacraft, 2026
"""
Policy evaluation engine.

PolicyEvaluator decides a single policy against a map of raw context
values. ContextEvaluator combines many policies with deny-override:

1. An empty policy list is NOT_APPLICABLE
2. Policies are evaluated in the given order
3. The first DENY ends evaluation with DENY
4. Otherwise any ALLOW gives ALLOW, and no ALLOW gives NOT_APPLICABLE

Conversion problems in the context degrade a policy to NOT_APPLICABLE.
OperatorError from a relational condition is not caught here.
"""
import logging
from collections.abc import Mapping
from typing import Any

from policyengine.core.config import get_settings
from policyengine.core.types import Effect, Verdict
from .conditions import Condition
from .context import EvaluationContext
from .models import Policy

logger = logging.getLogger(__name__)


class PolicyEvaluator:
	"""Evaluates one policy against raw context values."""

	def __init__(self, conversion_log_level: str | int | None = None):
		if conversion_log_level is None:
			conversion_log_level = get_settings().conversion_log_level
		if isinstance(conversion_log_level, str):
			conversion_log_level = logging.getLevelName(conversion_log_level.upper())
		if not isinstance(conversion_log_level, int):
			raise ValueError(f"Unknown log level: {conversion_log_level}")
		self._conversion_log_level: int = conversion_log_level

	def evaluate(self, policy: Policy, context: Mapping[str, Any]) -> Verdict:
		"""
		Evaluate ``policy`` against ``context``.

		Returns the policy effect when every condition holds, otherwise
		NOT_APPLICABLE.
		"""
		if all(self._evaluate_condition(c, context) for c in policy.conditions):
			return Verdict.ALLOW if policy.effect == Effect.ALLOW else Verdict.DENY
		return Verdict.NOT_APPLICABLE

	def _evaluate_condition(self, condition: Condition, context: Mapping[str, Any]) -> bool:
		attribute = condition.attribute
		raw = context.get(attribute.name)

		if raw is None:
			return condition.evaluate(None)

		conversion = attribute.try_convert(raw)
		if not conversion.ok:
			logger.log(
				self._conversion_log_level,
				f"Error evaluating condition on {attribute.name}: {conversion.error}",
			)
			return False

		return condition.evaluate(conversion.value)


class ContextEvaluator:
	"""
	Combines policy verdicts for an evaluation context using deny-override.

	Usage:
		evaluator = ContextEvaluator()
		context = EvaluationContext("read", {"resource": "document1"}, policy_set)
		if evaluator.evaluate_for_action(context, "read") != Verdict.ALLOW:
			raise PermissionDenied()
	"""

	def __init__(
		self,
		policy_evaluator: PolicyEvaluator | None = None,
		log_policy_verdicts: bool | None = None,
	):
		self.policy_evaluator = policy_evaluator or PolicyEvaluator()
		if log_policy_verdicts is None:
			log_policy_verdicts = get_settings().log_policy_verdicts
		self._log_policy_verdicts = log_policy_verdicts

	def evaluate(self, context: EvaluationContext) -> Verdict:
		"""Evaluate every policy of the context, ignoring action scoping."""
		policies = context.policies()
		logger.debug(f"Evaluating {len(policies)} policies for actions: {sorted(context.actions)}")
		return self._combine(policies, context.context)

	def evaluate_for_action(self, context: EvaluationContext, action: str) -> Verdict:
		"""Evaluate the policies scoped to one of the context's actions."""
		if not context.has_action(action):
			logger.debug(f"Action {action} not present in context actions: {sorted(context.actions)}")
			return Verdict.NOT_APPLICABLE

		policies = context.policies_for_action(action)
		logger.debug(f"Evaluating {len(policies)} policies for action: {action}")
		return self._combine(policies, context.context, action)

	def evaluate_all_actions(self, context: EvaluationContext) -> dict[str, Verdict]:
		"""Evaluate each action of the context independently."""
		return {
			action: self.evaluate_for_action(context, action)
			for action in context.actions
		}

	def _combine(
		self,
		policies: list[Policy],
		attributes: Mapping[str, Any],
		action: str | None = None,
	) -> Verdict:
		if not policies:
			suffix = f" for action {action}" if action else ""
			logger.debug(f"No policies found{suffix}")
			return Verdict.NOT_APPLICABLE

		any_allow = False
		for policy in policies:
			verdict = self.policy_evaluator.evaluate(policy, attributes)
			if self._log_policy_verdicts:
				suffix = f" for action {action}" if action else ""
				logger.debug(f"Policy {policy.display_name} evaluated to {verdict.name}{suffix}")

			if verdict == Verdict.DENY:
				return Verdict.DENY
			if verdict == Verdict.ALLOW:
				any_allow = True

		return Verdict.ALLOW if any_allow else Verdict.NOT_APPLICABLE
