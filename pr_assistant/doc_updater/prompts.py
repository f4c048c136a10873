"""
Prompts for Documentation Updater workflow
"""

from typing import Dict, List


class DocUpdaterPrompts:
    """Collection of prompts for documentation updater workflow"""

    @staticmethod
    def build_context(
        changes: List[Dict[str, str]],
        existing_docs: Dict[str, str],
        pr_title: str,
        pr_body: str
    ) -> str:
        """Combine diffs, current documentation and PR metadata into one context block"""
        context = "## Changed Files and Diffs:\n\n"
        for change in changes:
            context += f"### {change['file']}\n```diff\n{change['diff']}\n```\n\n"

        context += "## Existing Documentation:\n\n"
        for file, content in existing_docs.items():
            context += f"### {file}\n```markdown\n{content}\n```\n\n"

        context += "## Pull Request Context:\n"
        context += f"Title: {pr_title}\n"
        context += f"Description: {pr_body or 'No description provided'}\n\n"
        return context

    @staticmethod
    def update_plan_prompt(context: str) -> str:
        """Prompt asking for a JSON documentation update plan"""
        return f"""{context}

Based on the code changes in this pull request, please update the documentation.

Instructions:
1. Analyze the code changes and determine what documentation needs to be updated
2. For each documentation file that needs changes, provide the COMPLETE updated content
3. If new documentation files should be created, specify the filename and full content
4. Focus on:
   - Updating setup/installation instructions if dependencies changed
   - Documenting new features or functionality
   - Updating API documentation for changed interfaces
   - Adding usage examples for new features
   - Updating configuration instructions
   - Removing documentation for deleted features

Respond in this JSON format:
{{
  "updates": [
    {{
      "file": "path/to/doc.md",
      "action": "update" or "create",
      "content": "full content of the updated/new file",
      "reason": "brief explanation of why this update is needed"
    }}
  ],
  "summary": "Brief summary of documentation changes made"
}}

If no documentation updates are needed, return:
{{
  "updates": [],
  "summary": "No documentation updates needed for these changes."
}}"""
