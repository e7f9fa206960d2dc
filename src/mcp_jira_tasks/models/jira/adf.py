"""
Atlassian Document Format (ADF) utilities.

Jira Cloud's v3 API expects rich text fields (description, comment bodies)
as ADF documents and returns them in the same shape.
"""

from typing import Any


def text_to_adf(text: str) -> dict[str, Any]:
    """
    Wrap plain text in a single-paragraph ADF document.

    Args:
        text: Plain text to wrap

    Returns:
        ADF document containing the text verbatim
    """
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [
                    {
                        "type": "text",
                        "text": text,
                    }
                ],
            }
        ],
    }


def adf_to_text(adf_content: dict | list | str | None) -> str | None:
    """
    Convert Atlassian Document Format (ADF) content to plain text.

    This function recursively extracts text content from the ADF structure.

    Args:
        adf_content: ADF document (dict), content list, string, or None

    Returns:
        Plain text string or None if no content
    """
    if adf_content is None:
        return None

    if isinstance(adf_content, str):
        return adf_content

    if isinstance(adf_content, list):
        texts = []
        for item in adf_content:
            text = adf_to_text(item)
            if text:
                texts.append(text)
        return "\n".join(texts) if texts else None

    if isinstance(adf_content, dict):
        if adf_content.get("type") == "text":
            return adf_content.get("text", "")

        if adf_content.get("type") == "hardBreak":
            return "\n"

        content = adf_content.get("content")
        if content:
            return adf_to_text(content)

        return None

    return None
