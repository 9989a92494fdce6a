"""Tests for release rendering (cli/render.py)."""

from __future__ import annotations

from datetime import datetime

import pytest

from conftest import make_release
from helm_cli.cli.render import format_timestamp, print_release
from helm_cli.core.models import ReleaseInfo, ReleaseStatus


class TestFormatTimestamp:
    def test_ansic_layout_pads_day(self) -> None:
        assert format_timestamp(datetime(2016, 4, 5, 9, 7, 3)) == "Tue Apr  5 09:07:03 2016"

    def test_two_digit_day(self) -> None:
        assert format_timestamp(datetime(2016, 4, 15, 9, 7, 3)) == "Fri Apr 15 09:07:03 2016"

    def test_none_is_empty(self) -> None:
        assert format_timestamp(None) == ""


class TestPrintRelease:
    def test_quiet_prints_name_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_release(make_release(), verbose=False)
        assert capsys.readouterr().out == "myapp\n"

    def test_verbose_prints_four_labelled_lines(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        print_release(make_release(), verbose=True)
        assert capsys.readouterr().out.splitlines() == [
            "NAME:   myapp",
            "INFO:   Tue Apr  5 09:07:03 2016 DEPLOYED",
            "CHART:  mychart 1.0.0",
            "MANIFEST: kind: Pod",
        ]

    def test_verbose_without_timestamp(self, capsys: pytest.CaptureFixture[str]) -> None:
        release = make_release(info=ReleaseInfo(status=ReleaseStatus.FAILED))
        print_release(release, verbose=True)
        assert "INFO:    FAILED" in capsys.readouterr().out

    @pytest.mark.parametrize("verbose", [True, False])
    def test_none_prints_nothing(
        self, verbose: bool, capsys: pytest.CaptureFixture[str]
    ) -> None:
        print_release(None, verbose=verbose)
        assert capsys.readouterr().out == ""
