"""gpg subprocess management.

Runs the external OpenPGP tool as a subprocess and captures its output
into a Result value. Designed so that a single call never raises for an
expected failure.

Behavior:
- Arguments are passed literally to the executable, never through a shell
- stdout and stderr are drained concurrently, then the process is awaited,
  so a tool that fills one pipe cannot deadlock against a full other pipe
- Captured lines are re-joined with "\\n" (no trailing newline)
- Exit code 0 → Success(stdout); non-zero → ProcessError(stderr, code)
- Launch failures (missing binary, permission denied) → ExceptionError
- Optional timeout, disabled by default; a hung tool then blocks the caller
"""

import asyncio
from typing import List, Optional, Sequence, Tuple

import structlog

from ..logging_setup import ensure_logging
from ..result import ExceptionError, ProcessError, Result, Success

logger = structlog.get_logger(__name__)

# Pipes are read in fixed-size chunks and split into lines here, so no
# single output line is bounded by the StreamReader line limit.
READ_CHUNK_BYTES = 64 * 1024


def _decode_line(raw_line: bytes) -> str:
    line = raw_line.decode("utf-8", errors="replace")
    if line.endswith("\r"):
        line = line[:-1]
    return line


class ProcessRunner:
    """Executes the external tool and returns a Result.

    Attributes:
        executable: Name or path of the tool, resolved through PATH.
        timeout_seconds: Maximum run time before the process is killed.
            None waits indefinitely.
    """

    def __init__(self, executable: str = "gpg", timeout_seconds: Optional[int] = None):
        ensure_logging()
        self.executable = executable
        self.timeout_seconds = timeout_seconds

    def run(self, arguments: Sequence[str]) -> Result[str]:
        """Run the tool and block until it exits.

        Args:
            arguments: Argument vector, excluding the executable itself.

        Returns:
            Success with stdout text, ProcessError, or ExceptionError.

        Raises:
            RuntimeError: If called from inside a running event loop. Such
                callers must await run_async() instead.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.run_async(arguments))
        raise RuntimeError(
            "ProcessRunner.run() cannot be called from a running event loop; "
            "await ProcessRunner.run_async() instead"
        )

    async def run_async(self, arguments: Sequence[str]) -> Result[str]:
        """Coroutine form of run() for callers that own an event loop."""
        arguments = [str(argument) for argument in arguments]
        logger.info(
            "Running external tool",
            command=" ".join([self.executable, *arguments]),
        )

        try:
            process = await self._start_process(arguments)
        except OSError as exc:
            return self._handle_os_error(exc)

        try:
            stdout, stderr = await self._collect_output(process)
        except asyncio.TimeoutError:
            return await self._handle_timeout(process)

        return self._build_result(process.returncode, stdout, stderr)

    async def _start_process(
        self, arguments: List[str]
    ) -> asyncio.subprocess.Process:
        """Launch the subprocess.

        Raises:
            OSError: If the executable cannot be found or started.
        """
        return await asyncio.create_subprocess_exec(
            self.executable,
            *arguments,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )

    async def _collect_output(
        self, process: asyncio.subprocess.Process
    ) -> Tuple[str, str]:
        """Drain both streams concurrently, then wait for exit.

        Raises:
            asyncio.TimeoutError: If a timeout is configured and exceeded.
        """
        stdout_lines: List[str] = []
        stderr_lines: List[str] = []

        async def drain(stream, name: str, sink: List[str]) -> None:
            async for line in self._read_stream(stream):
                sink.append(line)
                logger.debug("Tool output", stream=name, line=line)

        async def drain_and_wait() -> None:
            await asyncio.gather(
                drain(process.stdout, "stdout", stdout_lines),
                drain(process.stderr, "stderr", stderr_lines),
            )
            await process.wait()

        await asyncio.wait_for(drain_and_wait(), timeout=self.timeout_seconds)

        return "\n".join(stdout_lines), "\n".join(stderr_lines)

    async def _read_stream(self, stream: Optional[asyncio.StreamReader]):
        """Yield decoded lines without their terminators.

        A final line without a trailing newline is still yielded.
        """
        if stream is None:
            return

        pending = bytearray()
        while True:
            chunk = await stream.read(READ_CHUNK_BYTES)
            if not chunk:
                break
            pending.extend(chunk)
            newline_in_chunk = chunk.rfind(b"\n")
            if newline_in_chunk < 0:
                continue
            last_newline = len(pending) - len(chunk) + newline_in_chunk
            complete = bytes(pending[:last_newline])
            del pending[:last_newline + 1]
            for raw_line in complete.split(b"\n"):
                yield _decode_line(raw_line)

        if pending:
            yield _decode_line(bytes(pending))

    async def _handle_timeout(
        self, process: asyncio.subprocess.Process
    ) -> Result[str]:
        try:
            process.kill()
        except ProcessLookupError:
            # exited between the timeout and the kill
            pass
        await process.wait()
        logger.error(
            "External tool timed out",
            executable=self.executable,
            timeout_seconds=self.timeout_seconds,
        )
        return ExceptionError(
            description=f"Process timed out after {self.timeout_seconds}s"
        )

    def _handle_os_error(self, exc: OSError) -> Result[str]:
        logger.error(
            "Failed to start external tool",
            executable=self.executable,
            error=str(exc),
        )
        return ExceptionError(
            description=f"Failed to start {self.executable}: {exc}"
        )

    def _build_result(self, exit_code: int, stdout: str, stderr: str) -> Result[str]:
        if exit_code == 0:
            logger.info("External tool succeeded", executable=self.executable)
            return Success(stdout)

        logger.warning(
            "External tool failed",
            executable=self.executable,
            exit_code=exit_code,
        )
        return ProcessError(stderr=stderr, exit_code=exit_code)
