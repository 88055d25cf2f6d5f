# The module is to define the response shapes of the blog-generation service.
# Author: Shibo Li
# Date: 2025-06-20
# Version: 0.1.0

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from bridge.utils.json_values import is_truthy


class ArticleSection(BaseModel):
    """One section of a generated article."""
    title: str = ""
    content: str = ""


class ClarificationNeeded(BaseModel):
    """The service needs answers to these questions before it can write."""
    kind: Literal["clarification"] = "clarification"
    questions: List[str]


class CompletedArticle(BaseModel):
    """
    A finished article. Every field is optional because the service only
    sends what it produced.
    Attributes:
        title (str): The article title.
        outline (List[str]): The outline items, in order.
        final_article (str): The full article text.
        sections (List[ArticleSection]): Per-section output, used when there is no final article.
    """
    kind: Literal["article"] = "article"
    title: Optional[str] = None
    outline: List[str] = Field(default_factory=list)
    final_article: Optional[str] = None
    sections: List[ArticleSection] = Field(default_factory=list)


class Unrecognized(BaseModel):
    """Any payload that is not a successful response with a data object."""
    kind: Literal["unrecognized"] = "unrecognized"
    raw: Any = None


BlogResponse = Union[ClarificationNeeded, CompletedArticle, Unrecognized]


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _sections(value: Any) -> List[ArticleSection]:
    if not isinstance(value, list):
        return []
    sections = []
    for item in value:
        if not isinstance(item, dict):
            continue
        sections.append(ArticleSection(
            title=_as_text(item.get("title", "")),
            content=_as_text(item.get("content", "")),
        ))
    return sections


def classify_blog_response(payload: Any) -> BlogResponse:
    """
    Resolves an untrusted JSON payload from the service into exactly one
    BlogResponse variant. Any present, truthy 'data' next to a truthy
    'success' is a success; a non-object 'data' yields an empty article.
    """
    if not isinstance(payload, dict) or not is_truthy(payload.get("success")):
        return Unrecognized(raw=payload)

    data = payload.get("data")
    if not is_truthy(data):
        return Unrecognized(raw=payload)
    if not isinstance(data, dict):
        return CompletedArticle()

    questions = data.get("questions")
    if is_truthy(data.get("need_clarification")) and isinstance(questions, list) and questions:
        return ClarificationNeeded(questions=[_as_text(q) for q in questions])

    title = data.get("title")
    final_article = data.get("final_article")
    outline = data.get("outline")
    return CompletedArticle(
        title=_as_text(title) if is_truthy(title) else None,
        outline=[_as_text(item) for item in outline] if isinstance(outline, list) else [],
        final_article=_as_text(final_article) if is_truthy(final_article) else None,
        sections=_sections(data.get("sections")),
    )
