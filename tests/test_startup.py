"""Tests for the one-time startup initializer."""

from __future__ import annotations

import threading

from blob_namespace._startup import OneTimeInitializer, StartupResult, StartupStatus


def _ok() -> StartupResult:
    return StartupResult(StartupStatus.SUCCESS, detail="done")


class TestOneTimeInitializer:
    def test_runs_once(self) -> None:
        calls: list[int] = []

        def step() -> StartupResult:
            calls.append(1)
            return _ok()

        init = OneTimeInitializer()
        first = init.run(step)
        second = init.run(step)
        assert calls == [1]
        assert first is second
        assert init.done

    def test_failure_becomes_warning(self) -> None:
        boom = OSError("disk full")

        def step() -> StartupResult:
            raise boom

        result = OneTimeInitializer().run(step)
        assert result.status is StartupStatus.WARNING
        assert result.error is boom
        assert not result.ok

    def test_failure_not_retried(self) -> None:
        calls: list[int] = []

        def step() -> StartupResult:
            calls.append(1)
            raise RuntimeError("nope")

        init = OneTimeInitializer()
        init.run(step)
        init.run(step)
        assert calls == [1]

    def test_reset(self) -> None:
        init = OneTimeInitializer()
        init.run(_ok)
        init.reset()
        assert not init.done
        assert init.result is None

    def test_concurrent_callers_run_step_once(self) -> None:
        calls: list[int] = []
        gate = threading.Event()

        def step() -> StartupResult:
            gate.wait(timeout=5)
            calls.append(1)
            return _ok()

        init = OneTimeInitializer()
        results: list[StartupResult] = []
        threads = [threading.Thread(target=lambda: results.append(init.run(step))) for _ in range(8)]
        for t in threads:
            t.start()
        gate.set()
        for t in threads:
            t.join(timeout=5)
        assert calls == [1]
        assert len(results) == 8
        assert all(r is results[0] for r in results)


class TestStartupResult:
    def test_ok(self) -> None:
        assert StartupResult(StartupStatus.SUCCESS).ok
        assert StartupResult(StartupStatus.SKIPPED).ok
        assert not StartupResult(StartupStatus.WARNING).ok
