"""
Documentation Updater Workflow for PR Assistant
LangGraph workflow that asks the language model for documentation updates after a merge and writes them to disk
"""

import logging
import subprocess
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field

from langgraph.graph import StateGraph, END

from ..config.workflow_config import DocUpdaterConfig
from ..llm.llm_client import PRAssistantLLMClient
from ..models.pr_models import DocUpdatePlan
from .doc_store import apply_plan, find_documentation_files, read_documentation
from .git_changes import GitChangeReader
from .plan_parser import parse_doc_update_plan
from .prompts import DocUpdaterPrompts as prompts

logger = logging.getLogger(__name__)


@dataclass
class DocUpdaterState:
    """State for the Documentation Updater workflow"""
    pr_title: str = ""
    pr_body: str = ""

    # Step 1: Changed files
    merge_base: Optional[str] = None
    changed_files: List[str] = field(default_factory=list)

    # Step 2: Context
    changes: List[Dict[str, str]] = field(default_factory=list)
    existing_docs: Dict[str, str] = field(default_factory=dict)

    # Step 3: Plan
    raw_response: str = ""
    plan: Optional[Dict[str, Any]] = None

    # Step 4: Apply
    written_files: List[str] = field(default_factory=list)
    failed_files: List[str] = field(default_factory=list)
    summary: str = ""

    # Workflow metadata
    errors: List[str] = field(default_factory=list)


class DocUpdaterWorkflow:
    """
    LangGraph workflow proposing and applying documentation updates.

    Steps:
    1. Compute the merge base with the trunk and the changed non-documentation files
    2. Collect diffs of the first changed files and the current documentation
    3. Ask the model for a JSON update plan and validate it
    4. Write each planned file in full
    """

    def __init__(self,
                 llm_client: PRAssistantLLMClient,
                 config: Optional[DocUpdaterConfig] = None,
                 git_reader: Optional[GitChangeReader] = None):
        """
        Initialize Documentation Updater workflow

        Args:
            llm_client: Client for the language model
            config: Documentation updater settings
            git_reader: Optional git access, built from config when omitted
        """
        self.llm_client = llm_client
        self.config = config or DocUpdaterConfig()
        self.git_reader = git_reader or GitChangeReader(
            self.config.repo_root,
            trunk_ref=self.config.trunk_ref,
            doc_extension=self.config.doc_extension
        )

        self.workflow = self._build_workflow()

        logger.info("Initialized Documentation Updater Workflow")
        logger.info(f"Trunk ref: {self.config.trunk_ref}")
        logger.info(f"Repository root: {self.config.repo_root}")

    def _build_workflow(self) -> StateGraph:
        """Build the LangGraph workflow with conditional logic"""
        workflow = StateGraph(DocUpdaterState)

        workflow.add_node("find_changed_files", self._find_changed_files)
        workflow.add_node("collect_context", self._collect_context)
        workflow.add_node("generate_plan", self._generate_plan)
        workflow.add_node("apply_updates", self._apply_updates)

        workflow.set_entry_point("find_changed_files")
        workflow.add_conditional_edges("find_changed_files", self._route_after_changes, {
            "collect_context": "collect_context",
            "end": END
        })
        workflow.add_edge("collect_context", "generate_plan")
        workflow.add_conditional_edges("generate_plan", self._route_after_plan, {
            "apply_updates": "apply_updates",
            "end": END
        })
        workflow.add_edge("apply_updates", END)

        return workflow

    async def execute(self, pr_title: str = "", pr_body: str = "") -> dict:
        """
        Execute the Documentation Updater workflow

        Args:
            pr_title: Title of the merged pull request
            pr_body: Description of the merged pull request

        Returns:
            dict: Final workflow state values
        """
        initial_state = DocUpdaterState(pr_title=pr_title, pr_body=pr_body)

        try:
            app = self.workflow.compile()
            final_state = await app.ainvoke(initial_state)

            logger.info("Documentation Updater completed")
            return final_state

        except Exception as e:
            logger.error(f"Documentation Updater failed: {str(e)}")
            initial_state.errors.append(str(e))
            raise

    def _route_after_changes(self, state: DocUpdaterState) -> str:
        if not state.changed_files:
            logger.info("No code changes detected.")
            return "end"
        return "collect_context"

    def _route_after_plan(self, state: DocUpdaterState) -> str:
        if state.plan is None:
            return "end"
        if not state.plan.get("updates"):
            logger.info("No documentation updates needed.")
            if state.summary:
                logger.info(f"Summary: {state.summary}")
            return "end"
        return "apply_updates"

    async def _find_changed_files(self, state: DocUpdaterState) -> DocUpdaterState:
        """Step 1: Compute merge base and changed files"""
        logger.info(f"Step 1: Finding files changed since merge base with {self.config.trunk_ref}")

        try:
            state.merge_base = self.git_reader.merge_base()
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            error_msg = f"Error computing merge base: {str(e)}"
            logger.error(error_msg)
            state.errors.append(error_msg)
            return state

        state.changed_files = self.git_reader.changed_files(state.merge_base)
        if state.changed_files:
            logger.info(f"Changed files: {state.changed_files}")
        return state

    async def _collect_context(self, state: DocUpdaterState) -> DocUpdaterState:
        """Step 2: Collect diffs and existing documentation"""
        selected = state.changed_files[:self.config.max_files]
        if len(state.changed_files) > len(selected):
            logger.info(f"Step 2: Limiting diffs to the first {len(selected)} of {len(state.changed_files)} changed files")
        else:
            logger.info(f"Step 2: Collecting diffs for {len(selected)} changed files")

        changes = []
        for file in selected:
            diff = self.git_reader.file_diff(state.merge_base, file)
            if diff:
                changes.append({"file": file, "diff": diff})
        state.changes = changes

        doc_files = find_documentation_files(
            self.config.repo_root,
            doc_extension=self.config.doc_extension,
            excluded_dirs=self.config.excluded_dirs
        )
        state.existing_docs = read_documentation(self.config.repo_root, doc_files)

        logger.info(f"  - {len(state.changes)} file diffs")
        logger.info(f"  - {len(state.existing_docs)} documentation files")
        return state

    async def _generate_plan(self, state: DocUpdaterState) -> DocUpdaterState:
        """Step 3: Ask the model for a documentation update plan"""
        logger.info("Step 3: Analyzing changes with the language model")

        context = prompts.build_context(state.changes, state.existing_docs, state.pr_title, state.pr_body)
        response = await self.llm_client.generate_response(prompts.update_plan_prompt(context))
        state.raw_response = response.content
        logger.info("Model response received.")

        plan = parse_doc_update_plan(response.content)
        if plan is None:
            state.errors.append("Model response did not contain a valid documentation update plan")
            return state

        state.plan = plan.model_dump()
        state.summary = plan.summary
        return state

    async def _apply_updates(self, state: DocUpdaterState) -> DocUpdaterState:
        """Step 4: Write the planned documentation files"""
        plan = DocUpdatePlan.model_validate(state.plan)
        logger.info(f"Step 4: Applying {len(plan.updates)} documentation updates...")

        result = apply_plan(plan, self.config.repo_root, dry_run=self.config.dry_run)
        state.written_files = result.written
        state.failed_files = result.failed

        logger.info(f"Summary: {plan.summary}")
        return state


def create_doc_updater(
    llm_client: Optional[PRAssistantLLMClient] = None,
    config: Optional[DocUpdaterConfig] = None
) -> DocUpdaterWorkflow:
    """
    Factory function to create Documentation Updater workflow

    Args:
        llm_client: Optional LLM client, configured from the environment when omitted
        config: Optional documentation updater settings

    Returns:
        DocUpdaterWorkflow: Configured workflow
    """
    from ..config.llm_config import get_llm_config, DEFAULT_DOCS_MODEL
    from ..config.workflow_config import get_doc_updater_config
    from ..llm.llm_client import create_llm_client

    return DocUpdaterWorkflow(
        llm_client=llm_client or create_llm_client(get_llm_config(DEFAULT_DOCS_MODEL)),
        config=config or get_doc_updater_config()
    )


__all__ = ["DocUpdaterWorkflow", "DocUpdaterState", "create_doc_updater"]
