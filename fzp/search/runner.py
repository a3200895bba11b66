"""Run the lister process under a timeout.

Both runners degrade every failure (missing binary, non-zero exit, timeout)
to an empty result and report the reason through the logger.
"""

import asyncio
import os
import subprocess

from ..config import SearchConfig
from ..utils import log_debug, log_verbose


def _split_output(output: bytes) -> list[str]:
    return os.fsdecode(output).splitlines()


class ProcessRunner:
    """Runs a command in ``cwd`` and returns its stdout lines."""

    def __init__(self, timeout_msec: int):
        self.timeout_msec = timeout_msec

    @property
    def timeout(self) -> float:
        return self.timeout_msec / 1000

    def execute(self, cmd: list[str], cwd: str) -> tuple[list[str], str | None]:
        """Returns (lines, error). Error is None on success."""
        raise NotImplementedError

    def run(self, cmd: list[str], cwd: str) -> list[str]:
        log_debug("Executing fd command: %s in cwd: %s", " ".join(cmd), cwd)
        lines, error = self.execute(cmd, cwd)
        if error:
            log_verbose("fd search failed: %s", error)
            return []
        return lines


class BlockingRunner(ProcessRunner):
    """Runs the process synchronously; the caller waits for it."""

    def execute(self, cmd, cwd):
        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            return [], f"timed out after {self.timeout_msec} ms"
        except (OSError, ValueError) as e:
            return [], f"could not start {cmd[0]}: {e}"

        if result.returncode != 0:
            return [], f"exited with code {result.returncode}"
        return _split_output(result.stdout), None


class AsyncRunner(ProcessRunner):
    """Runs the process on an asyncio loop with a hard timeout.

    When the timeout fires the process is killed and reaped and nothing it
    printed is returned, even if it was about to finish. Called synchronously
    from inside a running loop, it falls back to a blocking run.
    """

    async def execute_async(self, cmd: list[str], cwd: str) -> tuple[list[str], str | None]:
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=cwd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except (OSError, ValueError) as e:
            return [], f"could not start {cmd[0]}: {e}"

        try:
            stdout, _ = await asyncio.wait_for(proc.communicate(), self.timeout)
        except asyncio.TimeoutError:
            await _terminate(proc)
            return [], f"timed out after {self.timeout_msec} ms"
        except asyncio.CancelledError:
            await _terminate(proc)
            raise

        if proc.returncode != 0:
            return [], f"exited with code {proc.returncode}"
        return _split_output(stdout), None

    async def run_async(self, cmd: list[str], cwd: str) -> list[str]:
        log_debug("Executing fd command: %s in cwd: %s", " ".join(cmd), cwd)
        lines, error = await self.execute_async(cmd, cwd)
        if error:
            log_verbose("fd search failed: %s", error)
            return []
        return lines

    def execute(self, cmd, cwd):
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.execute_async(cmd, cwd))
        # asyncio.run cannot nest inside a running loop
        log_verbose("event loop already running, running fd synchronously")
        return BlockingRunner(self.timeout_msec).execute(cmd, cwd)


async def _terminate(proc: asyncio.subprocess.Process) -> None:
    if proc.returncode is None:
        try:
            proc.kill()
        except ProcessLookupError:
            pass
    await proc.wait()


def get_runner(config: SearchConfig) -> ProcessRunner:
    """Pick the runner for ``config.blocking``."""
    if config.blocking:
        return BlockingRunner(config.fd_timeout_msec)
    return AsyncRunner(config.fd_timeout_msec)
