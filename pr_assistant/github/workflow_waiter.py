"""
Workflow completion waiter for PR Assistant
Polls the workflow runs of a commit until a named run finishes or a deadline passes
"""

import asyncio
import logging
import time
from enum import Enum
from typing import Any, Awaitable, Callable, List, Optional

import httpx
from pydantic import ValidationError

from ..models.pr_models import WAIT_COMPLETED, WAIT_TIMEOUT, WorkflowRun
from .api_client import GitHubAPIClient

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[Any]]


class WaiterState(str, Enum):
    """States of a single wait"""
    POLLING = "polling"
    FOUND_TERMINAL = "found_terminal"
    TIMED_OUT = "timed_out"


class WorkflowCompletionWaiter:
    """
    Waits for a named workflow run on a commit to reach a terminal status.

    The only normal exit is finding the run with status ``completed``, in which
    case its conclusion is returned (``"completed"`` if GitHub reports none).
    Otherwise the waiter gives up at the deadline and returns ``"timeout"`` so
    the caller can continue. Failed or malformed queries count as "not found
    yet" and are polled again.
    """

    def __init__(
        self,
        github_client: GitHubAPIClient,
        clock: Optional[Clock] = None,
        sleep: Optional[Sleep] = None
    ):
        """
        Initialize waiter

        Args:
            github_client: Client used to list workflow runs
            clock: Monotonic clock in seconds, time.monotonic by default
            sleep: Async sleep function, asyncio.sleep by default
        """
        self.github_client = github_client
        self.clock = clock or time.monotonic
        self.sleep = sleep or asyncio.sleep
        self.state = WaiterState.POLLING
        self.poll_count = 0

    async def wait_for(
        self,
        workflow_name: str,
        head_sha: str,
        timeout: float,
        poll_interval: float
    ) -> str:
        """
        Poll until the named workflow run completes or the timeout elapses

        Args:
            workflow_name: Display name of the workflow run to wait for
            head_sha: Commit the run is associated with
            timeout: Total time to wait, in seconds
            poll_interval: Delay between polls, in seconds

        Returns:
            str: The run's conclusion, "completed" if it has none, or "timeout"
        """
        self.state = WaiterState.POLLING
        self.poll_count = 0
        deadline = self.clock() + timeout

        logger.info(f"Waiting for workflow '{workflow_name}' on commit {head_sha} (timeout {timeout:.0f}s)")

        while self.clock() < deadline:
            self.poll_count += 1
            run = await self._find_run(workflow_name, head_sha)

            if run is not None and run.is_terminal:
                self.state = WaiterState.FOUND_TERMINAL
                conclusion = run.conclusion or WAIT_COMPLETED
                logger.info(f"Workflow '{workflow_name}' completed with conclusion: {conclusion}")
                return conclusion

            if run is None:
                logger.info(f"Workflow '{workflow_name}' not found yet, checking again in {poll_interval:.0f}s")
            else:
                logger.info(f"Workflow '{workflow_name}' is {run.status}, checking again in {poll_interval:.0f}s")

            remaining = deadline - self.clock()
            if remaining <= 0:
                break
            await self.sleep(min(poll_interval, remaining))

        self.state = WaiterState.TIMED_OUT
        logger.warning(f"Timed out waiting for workflow '{workflow_name}', proceeding anyway")
        return WAIT_TIMEOUT

    async def _find_run(self, workflow_name: str, head_sha: str) -> Optional[WorkflowRun]:
        """Return the named run for the commit, or None if absent or the query failed"""
        try:
            response = await self.github_client.list_workflow_runs(head_sha)
        except httpx.HTTPError as e:
            logger.error(f"Error checking workflow status: {str(e)}")
            return None

        runs = self._extract_runs(response)
        if runs is None:
            logger.warning(f"Unexpected response from workflow runs API: {str(response)[:200]}")
            return None

        for run in runs:
            if run.name == workflow_name:
                return run
        return None

    @staticmethod
    def _extract_runs(response: Any) -> Optional[List[WorkflowRun]]:
        if not isinstance(response, dict) or not isinstance(response.get("workflow_runs"), list):
            return None

        runs = []
        for item in response["workflow_runs"]:
            if not isinstance(item, dict):
                continue
            try:
                runs.append(WorkflowRun(
                    name=item.get("name"),
                    status=item.get("status"),
                    conclusion=item.get("conclusion")
                ))
            except ValidationError as e:
                logger.warning(f"Skipping malformed workflow run entry: {e.error_count()} validation errors")
        return runs


__all__ = ["WorkflowCompletionWaiter", "WaiterState"]
