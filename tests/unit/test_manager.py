"""Unit tests for temporal_rbac.rbac.manager.SessionRoleManager.

Covers link mutation, containment queries, introspection, the diagnostic
dump, and both the silent and strict handling of malformed temporal
arguments.
"""
from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from temporal_rbac.rbac.base import RoleManager
from temporal_rbac.rbac.config import ManagerConfig
from temporal_rbac.rbac.manager import InvalidTemporalArgumentsError, SessionRoleManager
from temporal_rbac.storage.memory import InMemoryRoleStore

S = "2020-01-01"
E = "2020-12-31"
T = "2020-06-01"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def rm() -> SessionRoleManager:
    return SessionRoleManager()


@pytest.fixture()
def strict_rm() -> SessionRoleManager:
    return SessionRoleManager(config=ManagerConfig(strict_arguments=True))


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestSessionRoleManagerConstruction:
    def test_zero_argument_construction(self) -> None:
        rm = SessionRoleManager()
        assert rm.max_hierarchy_level == 10

    def test_is_role_manager(self, rm: SessionRoleManager) -> None:
        assert isinstance(rm, RoleManager)

    def test_explicit_depth(self) -> None:
        assert SessionRoleManager(3).max_hierarchy_level == 3

    def test_depth_overrides_config(self) -> None:
        rm = SessionRoleManager(2, config=ManagerConfig(max_hierarchy_level=7, strict_arguments=True))
        assert rm.max_hierarchy_level == 2
        assert rm.config.strict_arguments is True

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SessionRoleManager(-1)

    def test_uses_supplied_store(self) -> None:
        store = InMemoryRoleStore()
        rm = SessionRoleManager(store=store)
        rm.add_link("a", "b", S, E)
        assert store.exists("a")
        assert store.exists("b")

    def test_new_manager_is_empty(self, rm: SessionRoleManager) -> None:
        assert len(rm) == 0

    def test_repr(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", S, E)
        text = repr(rm)
        assert "roles=2" in text
        assert "max_hierarchy_level=10" in text


# ---------------------------------------------------------------------------
# add_link
# ---------------------------------------------------------------------------


class TestSessionRoleManagerAddLink:
    def test_creates_both_roles(self, rm: SessionRoleManager) -> None:
        rm.add_link("u", "admin", S, E)
        assert rm.has_role("u")
        assert rm.has_role("admin")

    def test_appends_session(self, rm: SessionRoleManager) -> None:
        rm.add_link("u", "admin", S, E)
        assert rm.get_sessions("u") == [("admin", S, E)]

    def test_does_not_deduplicate(self, rm: SessionRoleManager) -> None:
        rm.add_link("u", "admin", S, E)
        rm.add_link("u", "admin", S, E)
        assert rm.get_roles("u") == ["admin", "admin"]

    @pytest.mark.parametrize("window", [(), (S,), (S, E, "extra")])
    def test_wrong_arity_is_noop(self, rm: SessionRoleManager, window: tuple[str, ...]) -> None:
        rm.add_link("u", "admin", *window)
        assert len(rm) == 0
        assert rm.has_role("u") is False
        assert rm.has_link("u", "admin", T) is False

    def test_wrong_arity_logged_at_debug(
        self, rm: SessionRoleManager, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="temporal_rbac.rbac.manager"):
            rm.add_link("u", "admin", S)
        assert any("add_link" in r.message for r in caplog.records)


# ---------------------------------------------------------------------------
# delete_link
# ---------------------------------------------------------------------------


class TestSessionRoleManagerDeleteLink:
    def test_removes_every_window(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", "2019-01-01", "2019-12-31")
        rm.add_link("a", "b", S, E)
        rm.delete_link("a", "b")
        for when in ("2019-06-01", T):
            assert rm.has_link("a", "b", when) is False
        assert rm.get_roles("a") == []

    def test_window_argument_ignored(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", "2019-01-01", "2019-12-31")
        rm.add_link("a", "b", S, E)
        rm.delete_link("a", "b", "2019-01-01", "2019-12-31")
        assert rm.get_roles("a") == []

    def test_keeps_other_targets_in_order(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "x", S, E)
        rm.add_link("a", "b", S, E)
        rm.add_link("a", "y", S, E)
        rm.add_link("a", "b", S, E)
        rm.add_link("a", "z", S, E)
        rm.delete_link("a", "b")
        assert rm.get_roles("a") == ["x", "y", "z"]

    def test_unknown_source_is_noop(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", S, E)
        rm.delete_link("ghost", "b")
        assert rm.has_role("ghost") is False
        assert rm.get_roles("a") == ["b"]

    def test_unknown_target_is_noop(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", S, E)
        rm.delete_link("a", "ghost")
        assert rm.has_role("ghost") is False
        assert rm.get_roles("a") == ["b"]

    def test_roles_persist_after_delete(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", S, E)
        rm.delete_link("a", "b")
        assert rm.has_role("a")
        assert rm.has_role("b")

    def test_only_direction_given_is_removed(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", S, E)
        rm.add_link("b", "a", S, E)
        rm.delete_link("a", "b")
        assert rm.has_link("b", "a", T) is True


# ---------------------------------------------------------------------------
# has_link
# ---------------------------------------------------------------------------


class TestSessionRoleManagerHasLink:
    def test_reflexive_for_unknown_name(self, rm: SessionRoleManager) -> None:
        assert rm.has_link("nobody", "nobody", T) is True

    def test_reflexive_does_not_create_role(self, rm: SessionRoleManager) -> None:
        rm.has_link("nobody", "nobody", T)
        assert rm.has_role("nobody") is False

    def test_unknown_source(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", S, E)
        assert rm.has_link("ghost", "b", T) is False

    def test_unknown_target(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", S, E)
        assert rm.has_link("a", "ghost", T) is False

    def test_query_does_not_create_roles(self, rm: SessionRoleManager) -> None:
        rm.has_link("x", "y", T)
        assert len(rm) == 0

    def test_temporal_bound(self, rm: SessionRoleManager) -> None:
        rm.add_link("u", "admin", "2020-01-01", "2020-12-31")
        assert rm.has_link("u", "admin", "2020-06-01") is True
        assert rm.has_link("u", "admin", "2021-01-01") is False

    def test_not_symmetric(self, rm: SessionRoleManager) -> None:
        rm.add_link("u", "admin", S, E)
        assert rm.has_link("admin", "u", T) is False

    def test_transitive_within_depth(self) -> None:
        rm = SessionRoleManager(2)
        rm.add_link("a", "b", S, E)
        rm.add_link("b", "c", S, E)
        assert rm.has_link("a", "c", T) is True

    def test_transitive_beyond_depth(self) -> None:
        rm = SessionRoleManager(1)
        rm.add_link("a", "b", S, E)
        rm.add_link("b", "c", S, E)
        assert rm.has_link("a", "b", T) is True
        assert rm.has_link("a", "c", T) is False

    def test_depth_zero_only_reflexive(self) -> None:
        rm = SessionRoleManager(0)
        rm.add_link("a", "b", S, E)
        assert rm.has_link("a", "b", T) is False
        assert rm.has_link("a", "a", T) is True

    def test_cycle_terminates(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", S, E)
        rm.add_link("b", "a", S, E)
        rm.add_link("c", "d", S, E)
        assert rm.has_link("a", "d", T) is False

    @pytest.mark.parametrize("request_args", [(), (S, E)])
    def test_wrong_arity_returns_false(
        self, rm: SessionRoleManager, request_args: tuple[str, ...]
    ) -> None:
        rm.add_link("a", "b", S, E)
        assert rm.has_link("a", "b", *request_args) is False

    def test_wrong_arity_checked_before_reflexivity(self, rm: SessionRoleManager) -> None:
        assert rm.has_link("a", "a") is False

    def test_log_queries(self, caplog: pytest.LogCaptureFixture) -> None:
        rm = SessionRoleManager(config=ManagerConfig(log_queries=True))
        rm.add_link("a", "b", S, E)
        with caplog.at_level(logging.DEBUG, logger="temporal_rbac.rbac.manager"):
            rm.has_link("a", "b", T)
        assert any("has_link" in r.message and "True" in r.message for r in caplog.records)


# ---------------------------------------------------------------------------
# get_roles / get_users / get_sessions / list_roles
# ---------------------------------------------------------------------------


class TestSessionRoleManagerIntrospection:
    def test_get_roles_direct_only(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", S, E)
        rm.add_link("b", "c", S, E)
        assert rm.get_roles("a") == ["b"]

    def test_get_roles_ignores_time(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "old", "2000-01-01", "2000-12-31")
        assert rm.get_roles("a") == ["old"]

    def test_get_roles_ignores_domain(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", S, E)
        assert rm.get_roles("a", "2099-01-01") == ["b"]

    def test_get_roles_unknown(self, rm: SessionRoleManager) -> None:
        assert rm.get_roles("ghost") == []

    def test_get_users(self, rm: SessionRoleManager) -> None:
        rm.add_link("alice", "admin", S, E)
        rm.add_link("bob", "dev", S, E)
        rm.add_link("carol", "admin", S, E)
        assert sorted(rm.get_users("admin")) == ["alice", "carol"]

    def test_get_users_direct_only(self, rm: SessionRoleManager) -> None:
        rm.add_link("alice", "dev", S, E)
        rm.add_link("dev", "admin", S, E)
        assert rm.get_users("admin") == ["dev"]

    def test_get_users_includes_out_of_window_session(self, rm: SessionRoleManager) -> None:
        rm.add_link("alice", "admin", S, E)
        rm.add_link("newcomer", "admin", "2099-01-01", "2099-12-31")
        assert set(rm.get_users("admin")) == {"alice", "newcomer"}

    def test_get_users_lists_holder_once(self, rm: SessionRoleManager) -> None:
        rm.add_link("alice", "admin", S, E)
        rm.add_link("alice", "admin", "2021-01-01", "2021-12-31")
        assert rm.get_users("admin") == ["alice"]

    def test_get_users_unknown(self, rm: SessionRoleManager) -> None:
        assert rm.get_users("ghost") == []

    def test_get_users_after_delete(self, rm: SessionRoleManager) -> None:
        rm.add_link("alice", "admin", S, E)
        rm.delete_link("alice", "admin")
        assert rm.get_users("admin") == []

    def test_get_sessions_unknown(self, rm: SessionRoleManager) -> None:
        assert rm.get_sessions("ghost") == []

    def test_list_roles(self, rm: SessionRoleManager) -> None:
        rm.add_link("u", "admin", S, E)
        rm.add_link("v", "u", S, E)
        assert sorted(rm.list_roles()) == ["admin", "u", "v"]


# ---------------------------------------------------------------------------
# print_roles
# ---------------------------------------------------------------------------


class TestSessionRoleManagerPrintRoles:
    def test_line_format(self, rm: SessionRoleManager) -> None:
        rm.add_link("alice", "admin", S, "2020-12-31")
        rm.add_link("alice", "dev", S, "2021-06-30")
        lines = rm.print_roles()
        assert "alice < admin (until: 2020-12-31), dev (until: 2021-06-30)" in lines

    def test_role_without_sessions(self, rm: SessionRoleManager) -> None:
        rm.add_link("alice", "admin", S, E)
        assert "admin < " in rm.print_roles()

    def test_one_line_per_role(self, rm: SessionRoleManager) -> None:
        rm.add_link("a", "b", S, E)
        rm.add_link("c", "d", S, E)
        assert len(rm.print_roles()) == 4

    def test_empty_manager(self, rm: SessionRoleManager) -> None:
        assert rm.print_roles() == []

    def test_logs_at_info(self, rm: SessionRoleManager, caplog: pytest.LogCaptureFixture) -> None:
        rm.add_link("alice", "admin", S, E)
        with caplog.at_level(logging.INFO, logger="temporal_rbac.rbac.manager"):
            rm.print_roles()
        messages = [r.message for r in caplog.records if r.levelno == logging.INFO]
        assert f"alice < admin (until: {E})" in messages


# ---------------------------------------------------------------------------
# Strict mode
# ---------------------------------------------------------------------------


class TestSessionRoleManagerStrict:
    def test_add_link_wrong_arity_raises(self, strict_rm: SessionRoleManager) -> None:
        with pytest.raises(InvalidTemporalArgumentsError) as exc_info:
            strict_rm.add_link("u", "admin", S)
        assert exc_info.value.operation == "add_link"
        assert exc_info.value.expected == 2
        assert exc_info.value.received == 1

    def test_add_link_wrong_arity_does_not_mutate(self, strict_rm: SessionRoleManager) -> None:
        with pytest.raises(InvalidTemporalArgumentsError):
            strict_rm.add_link("u", "admin")
        assert len(strict_rm) == 0

    def test_has_link_wrong_arity_raises(self, strict_rm: SessionRoleManager) -> None:
        with pytest.raises(InvalidTemporalArgumentsError, match="has_link"):
            strict_rm.has_link("u", "u")

    def test_error_is_value_error(self) -> None:
        assert issubclass(InvalidTemporalArgumentsError, ValueError)

    def test_valid_calls_unchanged(self, strict_rm: SessionRoleManager) -> None:
        strict_rm.add_link("u", "admin", S, E)
        assert strict_rm.has_link("u", "admin", T) is True
        assert strict_rm.has_link("u", "ghost", T) is False

    def test_delete_link_never_raises(self, strict_rm: SessionRoleManager) -> None:
        strict_rm.add_link("u", "admin", S, E)
        strict_rm.delete_link("u", "admin", "only-one")
        assert strict_rm.get_roles("u") == []
