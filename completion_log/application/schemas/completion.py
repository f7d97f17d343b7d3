"""Pydantic v2 schema (DTO) for the completion API request body."""

from typing import Any

from pydantic import BaseModel, Field


class CompletionPayload(BaseModel):
    """JSON body posted to the completion API.

    Exactly one of prompt_template, messages_template, compiled_prompt and
    compiled_messages is set; the record is validated before this is built.
    """

    log_id: str = Field(..., description="UUID identifying this completion log")
    template_name: str
    prompt_template: str | None = None
    messages_template: list[dict[str, Any]] | None = None
    prompt_arguments: dict[str, Any] | None = None
    model: str | None = None
    model_arguments: dict[str, Any] | None = None
    output: str | None = None
    compiled_prompt: str | None = None
    compiled_messages: list[dict[str, Any]] | None = None
    metadata: dict[str, Any] | None = None
    parser: str | None = None  # "fstring" | "handlebars" | free text

    model_config = {"protected_namespaces": ()}

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict with unset optional fields left out."""
        data = self.model_dump(mode="json")
        return {key: value for key, value in data.items() if value is not None}
