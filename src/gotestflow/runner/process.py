"""Subprocess execution with streamed output and a two-step deadline.

On deadline the child first receives SIGINT so ``go test`` can print its
timeout panic (which names the running tests), and is only killed if it is
still alive after ``KILL_GRACE_SEC``.
"""

from __future__ import annotations

import asyncio
import codecs
import contextlib
import os
import signal
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from gotestflow.config.constants import KILL_GRACE_SEC
from gotestflow.core.logging import get_logger

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

OutputCallback = Callable[[str], None]

_READ_SIZE = 4096
_NOT_FOUND_EXIT = 127


@dataclass
class ProcessResult:
    """Outcome of one external command."""

    argv: list[str]
    returncode: int
    output: str
    timed_out: bool = False
    duration_sec: float = 0.0

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and not self.timed_out


class ProcessRunner:
    """Runs commands with combined stdout/stderr capture."""

    def __init__(
        self,
        *,
        kill_grace_sec: float = KILL_GRACE_SEC,
        logger: BoundLogger | None = None,
    ) -> None:
        self._kill_grace_sec = kill_grace_sec
        self._log = logger or get_logger("process")

    async def run(
        self,
        argv: Sequence[str],
        *,
        cwd: Path | str,
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
        on_output: OutputCallback | None = None,
    ) -> ProcessResult:
        """Run argv to completion or until the deadline.

        Args:
            argv: Program and arguments.
            cwd: Working directory.
            env: Variables added on top of the current environment.
            timeout: Seconds before SIGINT is sent. None waits forever.
            on_output: Called with every decoded chunk as it arrives.

        Returns:
            ProcessResult. A missing executable yields exit code 127 with
            the OS error as output instead of raising.
        """
        cmd = list(argv)
        full_env = {**os.environ, **env} if env else None
        start = time.perf_counter()

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
                cwd=str(cwd),
                env=full_env,
            )
        except OSError as e:
            self._log.debug("process_spawn_failed", argv=cmd, error=str(e))
            return ProcessResult(
                argv=cmd,
                returncode=_NOT_FOUND_EXIT,
                output=f"{cmd[0]}: {e}\n",
                duration_sec=time.perf_counter() - start,
            )

        chunks: list[str] = []

        def emit(text: str) -> None:
            if not text:
                return
            chunks.append(text)
            if on_output is not None:
                on_output(text)

        self._log.debug("process_start", argv=cmd, pid=proc.pid, timeout=timeout)
        reader = asyncio.create_task(self._pump(proc, emit))
        timed_out = False
        try:
            try:
                await asyncio.wait_for(asyncio.shield(reader), timeout=timeout)
            except TimeoutError:
                timed_out = True
                self._log.info("process_deadline", argv=cmd, timeout=timeout)
                await self._stop(proc)
                try:
                    # A grandchild can keep the pipe open after the child exits.
                    await asyncio.wait_for(reader, timeout=self._kill_grace_sec)
                except TimeoutError:
                    self._log.warning("process_output_abandoned", argv=cmd)
            await proc.wait()
        finally:
            if proc.returncode is None:
                with contextlib.suppress(ProcessLookupError):
                    proc.kill()
            if not reader.done():
                reader.cancel()

        duration = time.perf_counter() - start
        returncode = proc.returncode if proc.returncode is not None else -1
        self._log.debug(
            "process_done",
            argv=cmd,
            returncode=returncode,
            timed_out=timed_out,
            duration_sec=round(duration, 3),
        )
        return ProcessResult(
            argv=cmd,
            returncode=returncode,
            output="".join(chunks),
            timed_out=timed_out,
            duration_sec=duration,
        )

    async def _pump(self, proc: asyncio.subprocess.Process, emit: OutputCallback) -> None:
        assert proc.stdout is not None
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while True:
            data = await proc.stdout.read(_READ_SIZE)
            if not data:
                break
            emit(decoder.decode(data))
        emit(decoder.decode(b"", final=True))

    async def _stop(self, proc: asyncio.subprocess.Process) -> None:
        """SIGINT, then SIGKILL after the grace period."""
        if proc.returncode is not None:
            return
        with contextlib.suppress(ProcessLookupError):
            proc.send_signal(signal.SIGINT)
        try:
            await asyncio.wait_for(proc.wait(), timeout=self._kill_grace_sec)
        except TimeoutError:
            self._log.info("process_killed", pid=proc.pid, grace_sec=self._kill_grace_sec)
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()
