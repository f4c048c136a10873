"""
Prompts for Code Reviewer workflow
"""

REVIEW_COMMENT_HEADER = "## 🤖 AI Code Review\n\n"

NO_CHANGES_COMMENT = REVIEW_COMMENT_HEADER + "No changes found in this PR."


class CodeReviewerPrompts:
    """Collection of prompts for code reviewer workflow"""

    @staticmethod
    def review_prompt(diff: str) -> str:
        """Prompt asking for a markdown review of a pull request diff"""
        return f"""You are a code reviewer. Please review the following pull request diff and provide constructive feedback. Focus on:
- Code quality and best practices
- Potential bugs or issues
- Security concerns
- Performance improvements
- Readability and maintainability

Here's the diff:

```diff
{diff}
```

Provide a concise review with specific suggestions. Format your response in markdown."""

    @staticmethod
    def review_comment(review: str) -> str:
        """Comment body posted on the pull request"""
        return f"{REVIEW_COMMENT_HEADER}{review}"
