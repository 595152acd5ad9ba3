"""Tests for testing/analysis.py."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from gotestflow.runner.process import ProcessResult
from gotestflow.testing.analysis import (
    discover_test_names,
    find_cross_target_culprit,
    find_slowest_test,
    find_timed_out_tests,
    scan_test_names,
)
from gotestflow.testing.toolchain import GoToolchain

GO_TIMEOUT_PANIC = """=== RUN   TestQuick
--- PASS: TestQuick (0.00s)
=== RUN   TestHang
panic: test timed out after 2s
\trunning tests:
\t\tTestHang (2s)
\t\tTestOther (1s)

goroutine 17 [running]:
testing.(*M).startAlarm.func1()
"""


class TestFindSlowestTest:
    """Tests for find_slowest_test."""

    def test_slowest_above_threshold(self) -> None:
        out = (
            "--- PASS: TestA (0.50s)\n"
            "--- FAIL: TestB (3.20s)\n"
            "    --- PASS: TestA/sub (2.10s)\n"
        )
        assert find_slowest_test(out, 2.0) == ("TestB", 3.2)

    def test_below_threshold(self) -> None:
        assert find_slowest_test("--- PASS: TestA (1.99s)\n", 2.0) == ("", 0.0)

    def test_no_results(self) -> None:
        assert find_slowest_test("ok  \tx\t0.1s\n", 0.0) == ("", 0.0)


class TestFindTimedOutTests:
    """Tests for find_timed_out_tests."""

    def test_running_tests_block(self) -> None:
        assert find_timed_out_tests(GO_TIMEOUT_PANIC) == ["TestHang", "TestOther"]

    def test_last_unfinished_run(self) -> None:
        out = "=== RUN   TestA\n--- PASS: TestA (0.00s)\n=== RUN   TestB\n"
        assert find_timed_out_tests(out) == ["TestB"]

    def test_all_finished(self) -> None:
        out = "=== RUN   TestA\n--- PASS: TestA (0.00s)\n"
        assert find_timed_out_tests(out) == []

    def test_skipped_test_is_finished(self) -> None:
        out = (
            "=== RUN   TestA\n--- PASS: TestA (0.00s)\n"
            "=== RUN   TestB\n    b_test.go:5: needs a browser\n--- SKIP: TestB (0.00s)\n"
            "PASS\nok  \tgithub.com/x/y\t0.1s\n"
        )
        assert find_timed_out_tests(out) == []

    def test_empty(self) -> None:
        assert find_timed_out_tests("") == []


class TestTestNameDiscovery:
    """Tests for scan_test_names and discover_test_names."""

    def test_scan_dedupes_in_order(self) -> None:
        a = "func TestB(t *testing.T) {}\nfunc helper() {}\nfunc TestA(t *testing.T) {}\n"
        b = "func TestA(t *testing.T) {}\nfunc TestC(t *testing.T) {}\n"
        assert scan_test_names([a, b]) == ["TestB", "TestA", "TestC"]

    @pytest.mark.asyncio
    async def test_discover_reads_listed_files(self, tmp_path: Path) -> None:
        f = tmp_path / "w_test.go"
        f.write_text("func TestWasm(t *testing.T) {}\n", encoding="utf-8")
        runner = AsyncMock()
        runner.run.return_value = ProcessResult(
            [], 0, f"{f} {tmp_path / 'missing_test.go'} \n"
        )

        names = await discover_test_names(runner, GoToolchain(tmp_path))

        assert names == ["TestWasm"]
        assert runner.run.await_args.kwargs["env"]["GOOS"] == "js"

    @pytest.mark.asyncio
    async def test_discover_list_failure(self, tmp_path: Path) -> None:
        runner = AsyncMock()
        runner.run.return_value = ProcessResult([], 1, "boom")

        assert await discover_test_names(runner, GoToolchain(tmp_path)) == []


class TestFindCrossTargetCulprit:
    """Tests for find_cross_target_culprit."""

    @pytest.mark.asyncio
    async def test_reruns_until_one_times_out(self, tmp_path: Path) -> None:
        src = tmp_path / "w_test.go"
        src.write_text(
            "func TestOne(t *testing.T) {}\n"
            "func TestTwo(t *testing.T) {}\n"
            "func TestThree(t *testing.T) {}\n",
            encoding="utf-8",
        )
        ran: list[str] = []

        async def fake_run(argv: list[str], **kwargs: Any) -> ProcessResult:
            if argv[1] == "list":
                return ProcessResult(argv, 0, f"{src} ")
            name = argv[argv.index("-run") + 1]
            ran.append(name)
            return ProcessResult(argv, -1, "", timed_out=name == "^TestTwo$")

        runner = AsyncMock()
        runner.run.side_effect = fake_run

        assert await find_cross_target_culprit(runner, GoToolchain(tmp_path), 5) == ["TestTwo"]
        assert ran == ["^TestOne$", "^TestTwo$"]

    @pytest.mark.asyncio
    async def test_single_candidate_is_not_rerun(self, tmp_path: Path) -> None:
        src = tmp_path / "w_test.go"
        src.write_text("func TestOnly(t *testing.T) {}\n", encoding="utf-8")
        runner = AsyncMock()
        runner.run.return_value = ProcessResult([], 0, f"{src} ")

        assert await find_cross_target_culprit(runner, GoToolchain(tmp_path), 5) == ["TestOnly"]
        assert runner.run.await_count == 1

    @pytest.mark.asyncio
    async def test_no_culprit(self, tmp_path: Path) -> None:
        src = tmp_path / "w_test.go"
        src.write_text(
            "func TestOne(t *testing.T) {}\nfunc TestTwo(t *testing.T) {}\n", encoding="utf-8"
        )

        async def fake_run(argv: list[str], **kwargs: Any) -> ProcessResult:
            if argv[1] == "list":
                return ProcessResult(argv, 0, f"{src} ")
            return ProcessResult(argv, 0, "ok")

        runner = AsyncMock()
        runner.run.side_effect = fake_run

        assert await find_cross_target_culprit(runner, GoToolchain(tmp_path), 5) == []
