# A tool dedicated to the blog-generation endpoint of the FastAPI/LangChain service.
# Author: Shibo Li
# Date: 2025-06-20
# Version: 0.1.0

import json
import httpx
from pydantic import BaseModel, Field
from typing import Any, Callable, Dict, List, Optional, Type
from .base_tool import BaseTool
from bridge.core.config import Settings, get_settings
from bridge.models.blog import (
    BlogResponse,
    ClarificationNeeded,
    CompletedArticle,
    classify_blog_response,
)
from bridge.models.common import ToolResult, UrlStr
from bridge.services.http_client import (
    HttpParseFailure,
    HttpStatusFailure,
    HttpSuccess,
    HttpTransportFailure,
    send_json_request,
)
from bridge.utils.logger import console

BLOG_GENERATE_PATH = "/api/v1/llm/blog/generate"

MISSING_BASE_URL_MESSAGE = (
    "Error: FastAPI base URL is not set.\n"
    "Set the fastapi_base_url parameter or the FASTAPI_BASE_URL environment variable."
)

class GenerateBlogInput(BaseModel):
    """Input model for the blog-generation tool."""
    fastapi_base_url: Optional[UrlStr] = Field(default=None, description="Base URL of the FastAPI server. Falls back to FASTAPI_BASE_URL.")
    keyword: str = Field(..., min_length=1, description="The blog keyword.")
    language: str = Field(default="ja", description="Language of the article.")
    target_audience: Optional[str] = Field(default=None, description="Target readers.")
    writing_style: Optional[str] = Field(default=None, description="Tone and writing style.")
    section_count: int = Field(default=4, ge=1, le=10, description="Number of sections (1-10).")
    provider: str = Field(default="openrouter", description="LLM provider used by the service.")
    model: Optional[str] = Field(default=None, description="Model used by the service.")
    clarification_answers: List[str] = Field(default_factory=list, description="Answers to previously returned clarification questions.")
    api_key: Optional[str] = Field(default=None, description="Bearer key for the FastAPI server. Falls back to FASTAPI_API_KEY.")

def blog_endpoint(base_url: str) -> str:
    """Appends the generation path to the base URL, dropping one trailing slash."""
    if base_url.endswith("/"):
        base_url = base_url[:-1]
    return f"{base_url}{BLOG_GENERATE_PATH}"

def render_blog_response(response: BlogResponse) -> str:
    """
    Formats a classified service response as the text returned to the caller.
    """
    if isinstance(response, ClarificationNeeded):
        output = "✅ Blog generation complete\n\n"
        output += "❓ Clarification needed:\n"
        for index, question in enumerate(response.questions, start=1):
            output += f"{index}. {question}\n"
        output += "\nAnswer the questions above and run again with the clarification_answers parameter.\n"
        return output

    if isinstance(response, CompletedArticle):
        output = "✅ Blog generation complete\n\n"
        if response.title:
            output += f"📝 Title: {response.title}\n\n"
        if response.outline:
            output += "📋 Outline:\n"
            for index, item in enumerate(response.outline, start=1):
                output += f"{index}. {item}\n"
            output += "\n"
        if response.final_article:
            output += f"📄 Final article:\n\n{response.final_article}"
        elif response.sections:
            output += "📄 Sections:\n\n"
            for section in response.sections:
                output += f"## {section.title}\n\n{section.content}\n\n"
        return output

    return f"Unexpected response format:\n{json.dumps(response.raw, indent=2, ensure_ascii=False)}"

class GenerateBlogTool(BaseTool):
    """
    Calls the blog-generation endpoint of the FastAPI/LangChain service and
    formats either its clarification questions or the finished article.
    """
    name: str = "generate_blog"
    description: str = "Generates a blog article for a keyword through the FastAPI/LangChain " \
    "blog-generation service. If the service asks clarification questions, answer them and " \
    "call again with clarification_answers."
    args_schema: Type[BaseModel] = GenerateBlogInput

    def __init__(self,
                 settings_provider: Callable[[], Settings] = get_settings,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__()
        self._settings_provider = settings_provider
        self._transport = transport

    def _build_payload(self, keyword: str, language: str, target_audience: Optional[str],
                       writing_style: Optional[str], section_count: int, provider: str,
                       model: Optional[str], clarification_answers: List[str]) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "keyword": keyword,
            "language": language,
            "section_count": section_count,
            "provider": provider,
            "clarification_answers": clarification_answers,
        }
        # Unset optionals are omitted, never sent as null.
        if target_audience:
            payload["target_audience"] = target_audience
        if writing_style:
            payload["writing_style"] = writing_style
        if model:
            payload["model"] = model
        return payload

    async def execute(self,
                      keyword: str,
                      fastapi_base_url: Optional[str] = None,
                      language: str = "ja",
                      target_audience: Optional[str] = None,
                      writing_style: Optional[str] = None,
                      section_count: int = 4,
                      provider: str = "openrouter",
                      model: Optional[str] = None,
                      clarification_answers: Optional[List[str]] = None,
                      api_key: Optional[str] = None) -> ToolResult:
        console.info(f"Executing tool '{self.name}' for keyword: '{keyword}'")

        settings = self._settings_provider()
        base_url = fastapi_base_url or settings.FASTAPI_BASE_URL
        auth_key = api_key or settings.FASTAPI_API_KEY

        if not base_url:
            console.error("Blog generation requested without a FastAPI base URL.")
            return ToolResult.from_text(MISSING_BASE_URL_MESSAGE)

        endpoint = blog_endpoint(base_url)
        payload = self._build_payload(
            keyword, language, target_audience, writing_style,
            section_count, provider, model, list(clarification_answers or []),
        )
        headers = {"Content-Type": "application/json"}
        if auth_key:
            headers["Authorization"] = f"Bearer {auth_key}"

        outcome = await send_json_request(
            "POST",
            endpoint,
            headers=headers,
            payload=payload,
            timeout=settings.HTTP_TIMEOUT,
            transport=self._transport,
        )

        if isinstance(outcome, HttpSuccess):
            response = classify_blog_response(outcome.data)
            console.success(f"Tool '{self.name}' received a '{response.kind}' response.")
            return ToolResult.from_text(render_blog_response(response))
        if isinstance(outcome, HttpStatusFailure):
            error_message = f"HTTP {outcome.status_code} - {outcome.reason}"
            detail = outcome.detail()
            if detail is not None:
                error_message += f"\nDetail: {json.dumps(detail, indent=2, ensure_ascii=False)}"
            console.error(f"Blog generation failed: {error_message}")
            return ToolResult.from_text(f"blog generation error: {error_message}")
        if isinstance(outcome, (HttpParseFailure, HttpTransportFailure)):
            return ToolResult.from_text(f"blog generation error occurred: {outcome.message}")
        raise TypeError(f"Unhandled HTTP outcome: {outcome!r}")
