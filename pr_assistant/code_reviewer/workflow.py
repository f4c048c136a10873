"""
Code Reviewer Workflow for PR Assistant
LangGraph workflow that waits for the prerequisite CI workflow, reviews the PR diff and posts the review
"""

import logging
from typing import List, Optional
from dataclasses import dataclass, field

from langgraph.graph import StateGraph, END

from ..config.workflow_config import WaiterConfig
from ..github.api_client import GitHubAPIClient
from ..github.pr_diff import PullRequestDiffFetcher
from ..github.workflow_waiter import WorkflowCompletionWaiter
from ..llm.llm_client import PRAssistantLLMClient
from .prompts import CodeReviewerPrompts as prompts, NO_CHANGES_COMMENT

logger = logging.getLogger(__name__)


@dataclass
class CodeReviewerState:
    """State for the Code Reviewer workflow"""
    pr_number: int

    # Step 1: PR metadata
    head_sha: Optional[str] = None
    pr_title: Optional[str] = None

    # Step 2: Prerequisite workflow
    wait_result: Optional[str] = None

    # Step 3-5: Diff and review
    diff: str = ""
    review: str = ""
    comment_body: str = ""
    comment_posted: bool = False

    # Workflow metadata
    errors: List[str] = field(default_factory=list)


class CodeReviewerWorkflow:
    """
    LangGraph workflow posting an AI code review on a pull request.

    Steps:
    1. Fetch PR metadata to resolve the head commit
    2. Wait for the prerequisite workflow on that commit (skipped if unresolvable)
    3. Fetch the PR diff
    4. Post a fixed notice and stop if the diff is empty
    5. Ask the model for a review and post it as a comment
    """

    def __init__(self,
                 github_client: GitHubAPIClient,
                 llm_client: PRAssistantLLMClient,
                 waiter_config: Optional[WaiterConfig] = None,
                 waiter: Optional[WorkflowCompletionWaiter] = None):
        """
        Initialize Code Reviewer workflow

        Args:
            github_client: Client for the GitHub REST API
            llm_client: Client for the language model
            waiter_config: Prerequisite workflow settings
            waiter: Optional waiter, built from github_client when omitted
        """
        self.github_client = github_client
        self.llm_client = llm_client
        self.waiter_config = waiter_config or WaiterConfig()
        self.waiter = waiter or WorkflowCompletionWaiter(github_client)
        self.diff_fetcher = PullRequestDiffFetcher(github_client)

        self.workflow = self._build_workflow()

        logger.info("Initialized Code Reviewer Workflow")

    def _build_workflow(self) -> StateGraph:
        """Build the LangGraph workflow with conditional logic"""
        workflow = StateGraph(CodeReviewerState)

        workflow.add_node("fetch_pr_metadata", self._fetch_pr_metadata)
        workflow.add_node("wait_for_prerequisite", self._wait_for_prerequisite)
        workflow.add_node("fetch_diff", self._fetch_diff)
        workflow.add_node("post_no_changes", self._post_no_changes)
        workflow.add_node("generate_review", self._generate_review)
        workflow.add_node("post_review", self._post_review)

        workflow.set_entry_point("fetch_pr_metadata")
        workflow.add_conditional_edges("fetch_pr_metadata", self._route_after_metadata, {
            "wait_for_prerequisite": "wait_for_prerequisite",
            "fetch_diff": "fetch_diff"
        })
        workflow.add_edge("wait_for_prerequisite", "fetch_diff")
        workflow.add_conditional_edges("fetch_diff", self._route_after_diff, {
            "generate_review": "generate_review",
            "post_no_changes": "post_no_changes"
        })
        workflow.add_edge("generate_review", "post_review")
        workflow.add_edge("post_review", END)
        workflow.add_edge("post_no_changes", END)

        return workflow

    async def execute(self, pr_number: int) -> dict:
        """
        Execute the Code Reviewer workflow for a pull request

        Args:
            pr_number: Pull request number

        Returns:
            dict: Final workflow state values
        """
        initial_state = CodeReviewerState(pr_number=pr_number)

        try:
            app = self.workflow.compile()
            final_state = await app.ainvoke(initial_state)

            logger.info(f"Code Reviewer completed for PR #{pr_number}")
            return final_state

        except Exception as e:
            logger.error(f"Code Reviewer failed: {str(e)}")
            initial_state.errors.append(str(e))
            raise

    def _route_after_metadata(self, state: CodeReviewerState) -> str:
        if not self.waiter_config.enabled:
            logger.info("Waiting for prerequisite workflow is disabled")
            return "fetch_diff"
        if not state.head_sha:
            logger.info(f"No head commit SHA available, skipping wait for workflow '{self.waiter_config.workflow_name}'")
            return "fetch_diff"
        return "wait_for_prerequisite"

    def _route_after_diff(self, state: CodeReviewerState) -> str:
        if not state.diff:
            return "post_no_changes"
        return "generate_review"

    async def _fetch_pr_metadata(self, state: CodeReviewerState) -> CodeReviewerState:
        """Step 1: Fetch PR metadata"""
        logger.info(f"Step 1: Fetching metadata for PR #{state.pr_number}")
        summary = await self.diff_fetcher.fetch_metadata(state.pr_number)
        state.head_sha = summary.head_sha
        state.pr_title = summary.title
        return state

    async def _wait_for_prerequisite(self, state: CodeReviewerState) -> CodeReviewerState:
        """Step 2: Wait for the prerequisite workflow on the head commit"""
        logger.info(f"Step 2: Waiting for workflow '{self.waiter_config.workflow_name}'")
        state.wait_result = await self.waiter.wait_for(
            self.waiter_config.workflow_name,
            state.head_sha,
            timeout=self.waiter_config.timeout_seconds,
            poll_interval=self.waiter_config.poll_interval_seconds
        )
        return state

    async def _fetch_diff(self, state: CodeReviewerState) -> CodeReviewerState:
        """Step 3: Fetch the PR diff"""
        logger.info("Step 3: Fetching PR diff")
        state.diff = await self.diff_fetcher.fetch_diff(state.pr_number)
        return state

    async def _post_no_changes(self, state: CodeReviewerState) -> CodeReviewerState:
        """Step 4: Post the fixed notice for a PR without changes"""
        logger.info("No changes found in PR, posting notice")
        await self.github_client.post_issue_comment(state.pr_number, NO_CHANGES_COMMENT)
        state.comment_body = NO_CHANGES_COMMENT
        state.comment_posted = True
        return state

    async def _generate_review(self, state: CodeReviewerState) -> CodeReviewerState:
        """Step 5: Ask the model for a review of the diff"""
        logger.info("Step 5: Analyzing PR with the language model")
        response = await self.llm_client.generate_response(prompts.review_prompt(state.diff))
        state.review = response.content
        if response.tokens_used:
            logger.info(f"Review generated ({response.tokens_used} tokens)")
        return state

    async def _post_review(self, state: CodeReviewerState) -> CodeReviewerState:
        """Step 6: Post the review comment"""
        logger.info("Step 6: Posting review comment")
        state.comment_body = prompts.review_comment(state.review)
        await self.github_client.post_issue_comment(state.pr_number, state.comment_body)
        state.comment_posted = True
        logger.info("Review posted successfully")
        return state


def create_code_reviewer(
    github_client: Optional[GitHubAPIClient] = None,
    llm_client: Optional[PRAssistantLLMClient] = None,
    waiter_config: Optional[WaiterConfig] = None
) -> CodeReviewerWorkflow:
    """
    Factory function to create Code Reviewer workflow

    Args:
        github_client: Optional GitHub client, configured from the environment when omitted
        llm_client: Optional LLM client, configured from the environment when omitted
        waiter_config: Optional prerequisite workflow settings

    Returns:
        CodeReviewerWorkflow: Configured workflow
    """
    from ..config.llm_config import get_llm_config, DEFAULT_REVIEW_MODEL
    from ..config.workflow_config import get_waiter_config
    from ..github.api_client import create_github_client
    from ..llm.llm_client import create_llm_client

    return CodeReviewerWorkflow(
        github_client=github_client or create_github_client(),
        llm_client=llm_client or create_llm_client(get_llm_config(DEFAULT_REVIEW_MODEL)),
        waiter_config=waiter_config or get_waiter_config()
    )


__all__ = ["CodeReviewerWorkflow", "CodeReviewerState", "create_code_reviewer"]
