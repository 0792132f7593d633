"""Shared frontmatter parsing for markdown files.

This module provides a unified interface for parsing YAML frontmatter from
markdown content. Field defaults and validation are handled by callers.
"""

from dataclasses import dataclass

import frontmatter
import yaml


@dataclass(frozen=True)
class FrontmatterParseResult:
    """Result of parsing frontmatter from markdown content.

    Attributes:
        metadata: Parsed frontmatter mapping; empty when the file has none.
        body: Content after the frontmatter (always present).
        error: Error message if the YAML could not be parsed, None otherwise.
    """

    metadata: dict[str, object]
    body: str
    error: str | None

    @property
    def is_valid(self) -> bool:
        """Return True if frontmatter was absent or parsed successfully."""
        return self.error is None


def parse_markdown_frontmatter(content: str) -> FrontmatterParseResult:
    """Parse YAML frontmatter from markdown content.

    Handles these cases:
    - Valid frontmatter: returns metadata dict and body
    - No frontmatter: returns empty metadata and the whole content as body
    - Invalid YAML: returns error
    - Non-mapping frontmatter: returns empty metadata

    Args:
        content: The markdown file content.

    Returns:
        FrontmatterParseResult with metadata, body, and error fields.
    """
    try:
        post = frontmatter.loads(content)
    except yaml.YAMLError as e:
        return FrontmatterParseResult(
            metadata={},
            body=content,
            error=f"Invalid YAML: {e}",
        )

    if not isinstance(post.metadata, dict):
        return FrontmatterParseResult(metadata={}, body=post.content, error=None)

    return FrontmatterParseResult(
        metadata=dict(post.metadata),
        body=post.content,
        error=None,
    )
