"""Prompt templates for commit annotation."""

from typing import Tuple

# Default model for commit annotation, overridable with --model.
ANNOTATE_COMMIT_MODEL = "claude-sonnet-4-5-20250929"

ANNOTATE_COMMIT_SYSTEM = """You are an expert code archaeologist and technical documentation specialist. Your task is to analyze git commits and generate clear, informative annotations that explain the technical significance of the changes.

Your annotations should:
1. Explain the technical purpose and impact of the changes
2. Identify what problem was solved or what feature was added
3. Note any architectural or design implications
4. Highlight important implementation details
5. Keep it concise but informative (2-5 sentences)
6. Use present tense and clear, professional language
7. Focus on the "why" and "impact", not just the "what"

Format your annotation as a single paragraph without bullet points or markdown."""

ANNOTATE_COMMIT_USER = """Analyze this git commit and provide a technical annotation:

Commit: {hash}
Author: {author}
Date: {date}
Message: {message}

Changes:
{diff}

Provide a technical annotation that explains the significance of these changes:"""


def annotate_commit(
    commit_hash: str, message: str, author: str, date: str, diff: str
) -> Tuple[str, str]:
    """Return the (system, user) prompts for annotating one commit.

    Fields are inserted verbatim; the diff is neither escaped nor truncated
    here.
    """
    user = ANNOTATE_COMMIT_USER.format(
        hash=commit_hash, author=author, date=date, message=message, diff=diff
    )
    return ANNOTATE_COMMIT_SYSTEM, user
