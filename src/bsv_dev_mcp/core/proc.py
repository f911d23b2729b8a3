from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import anyio

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Completed:
    returncode: int
    stdout: str
    stderr: str


@dataclass(frozen=True)
class NotInstalled:
    executable: str


@dataclass(frozen=True)
class TimedOut:
    timeout_s: float


ProcessOutcome = Union[Completed, NotInstalled, TimedOut]


async def run_tool(cmd: List[str], cwd: Path, timeout_s: float) -> ProcessOutcome:
    """
    Run an external command and describe how it ended.

    A missing executable and an expired timeout come back as values rather
    than exceptions; on timeout the child is killed by the cancelled scope.
    The caller must make sure ``cwd`` exists, otherwise it is reported as a
    missing executable.
    """
    start = time.perf_counter()
    logger.info("run: cwd=%s cmd=%s timeout=%.1fs", cwd, cmd, timeout_s)

    try:
        with anyio.fail_after(timeout_s):
            p = await anyio.run_process(cmd, cwd=str(cwd), check=False)
    except FileNotFoundError:
        logger.info("run: executable not found: %s", cmd[0])
        return NotInstalled(cmd[0])
    except TimeoutError:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.error("run: TIMEOUT elapsed=%.1fms cwd=%s cmd=%s", elapsed_ms, cwd, cmd)
        return TimedOut(timeout_s)
    except OSError as e:
        # exists but cannot be launched; report it the way a shell would
        logger.warning("run: cannot launch %s: %s", cmd[0], e)
        return Completed(126, "", f"{type(e).__name__}: {e}")

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    out = p.stdout.decode("utf-8", errors="replace")
    err = p.stderr.decode("utf-8", errors="replace")
    if p.returncode > 1:
        logger.warning("run: rc=%s elapsed=%.1fms stderr=%r", p.returncode, elapsed_ms, err.strip())
    else:
        logger.info("run: rc=%s elapsed=%.1fms out_len=%d", p.returncode, elapsed_ms, len(out))
    return Completed(p.returncode, out, err)
