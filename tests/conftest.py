# (c) Copyright Datacraft, 2026
"""Pytest fixtures shared by the policy engine tests."""
import pytest

from policyengine.core.config import reset_settings
from policyengine.core.logging_config import LOGGING_CFG_ENV
from policyengine.core.policies import (
	Attribute, ContextEvaluator, EvaluationContext, PolicyEvaluator, PolicySet,
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
	"""Isolate every test from environment driven settings."""
	for name in ("PE_LOG_CONFIG", "PE_CONVERSION_LOG_LEVEL", "PE_LOG_POLICY_VERDICTS", LOGGING_CFG_ENV):
		monkeypatch.delenv(name, raising=False)
	reset_settings()
	yield
	reset_settings()


@pytest.fixture
def resource_attr():
	return Attribute.string("resource")


@pytest.fixture
def age_attr():
	return Attribute.integer("age")


@pytest.fixture
def role_attr():
	return Attribute.string("role")


@pytest.fixture
def roles_attr():
	return Attribute.list_of("roles", Attribute.string("role"))


@pytest.fixture
def policy_evaluator():
	return PolicyEvaluator()


@pytest.fixture
def context_evaluator():
	return ContextEvaluator()


@pytest.fixture
def make_context():
	"""Build an EvaluationContext over an in-memory PolicySet."""
	def _make(actions, attributes, policies=(), by_action=None):
		return EvaluationContext(actions, attributes, PolicySet(policies, by_action))
	return _make
