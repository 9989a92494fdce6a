"""Tests for Tiller address resolution (core/endpoint.py)."""

from __future__ import annotations

import pytest

from helm_cli.core.endpoint import DEFAULT_HOST, HOST_ENV_VAR, resolve_endpoint


class TestResolveEndpoint:
    def test_flag_beats_environment(self) -> None:
        assert resolve_endpoint("A", {HOST_ENV_VAR: "B"}) == "A"

    def test_environment_used_when_flag_empty(self) -> None:
        assert resolve_endpoint("", {HOST_ENV_VAR: "B"}) == "B"

    def test_default_when_both_empty(self) -> None:
        assert resolve_endpoint("", {HOST_ENV_VAR: ""}) == DEFAULT_HOST

    def test_default_when_env_missing(self) -> None:
        assert resolve_endpoint(None, {}) == DEFAULT_HOST

    def test_default_literal(self) -> None:
        assert DEFAULT_HOST == ":44134"

    def test_reads_process_environment_by_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(HOST_ENV_VAR, "tiller.example:44134")
        assert resolve_endpoint("") == "tiller.example:44134"

    def test_repeated_calls_are_identical(self) -> None:
        env = {HOST_ENV_VAR: "B"}
        assert resolve_endpoint("", env) == resolve_endpoint("", env)

    def test_does_not_mutate_environment(self) -> None:
        env = {HOST_ENV_VAR: ""}
        resolve_endpoint("A", env)
        assert env == {HOST_ENV_VAR: ""}
