"""Domain entities for completion records — transport-independent.

A completion record describes one LLM invocation: the template (or the
compiled prompt) it was built from, the model that ran it, and what the
model produced. Exactly one prompt source is carried per record, either as
one of the four loose optional fields or as a ``PromptSource`` variant.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Union

from completion_log.domain.exceptions import ValidationError

PARSER_FSTRING = "fstring"
PARSER_HANDLEBARS = "handlebars"

TEMPLATE_NAME_REQUIRED = "Template name is required."
PROMPT_SOURCE_REQUIRED = (
    "Either promptTemplate, messagesTemplate, compiledPrompt, or compiledMessages is required."
)
PROMPT_SOURCE_EXCLUSIVE = (
    "Only one of promptTemplate, messagesTemplate, compiledPrompt, or compiledMessages is allowed."
)


@dataclass
class CompletionMessage:
    """A single chat message inside a messages template or compiled message list.

    Plain OpenAI-style dicts are accepted wherever a CompletionMessage is.
    """

    role: str  # "system" | "user" | "assistant" | "tool"
    content: str | list[dict[str, Any]] = ""
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.name:
            result["name"] = self.name
        return result


Message = Union[CompletionMessage, dict[str, Any]]


def serialize_messages(messages: list[Message]) -> list[dict[str, Any]]:
    """Convert messages to the dict shape sent over the wire."""
    return [m.to_dict() if isinstance(m, CompletionMessage) else dict(m) for m in messages]


# ── Prompt source variants ──


@dataclass(frozen=True)
class PromptTemplate:
    """Raw template text, to be resolved with ``prompt_arguments``."""

    value: str
    field_name: ClassVar[str] = "prompt_template"


@dataclass(frozen=True)
class MessagesTemplate:
    """Chat message skeleton, to be resolved with ``prompt_arguments``."""

    value: list[Message]
    field_name: ClassVar[str] = "messages_template"


@dataclass(frozen=True)
class CompiledPrompt:
    """Fully resolved prompt text."""

    value: str
    field_name: ClassVar[str] = "compiled_prompt"


@dataclass(frozen=True)
class CompiledMessages:
    """Fully resolved chat message list."""

    value: list[Message]
    field_name: ClassVar[str] = "compiled_messages"


PromptSource = Union[PromptTemplate, MessagesTemplate, CompiledPrompt, CompiledMessages]

_SOURCE_TYPES: tuple[type, ...] = (PromptTemplate, MessagesTemplate, CompiledPrompt, CompiledMessages)

# camelCase aliases accepted by CompletionRecord.from_mapping
_CAMEL_ALIASES = {
    "logId": "log_id",
    "templateName": "template_name",
    "promptTemplate": "prompt_template",
    "messagesTemplate": "messages_template",
    "promptArguments": "prompt_arguments",
    "modelArguments": "model_arguments",
    "compiledPrompt": "compiled_prompt",
    "compiledMessages": "compiled_messages",
}


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


@dataclass
class CompletionRecord:
    """One recorded LLM invocation, as reported to the completion API.

    ``template_name``, ``model`` and ``output`` are required by the API;
    only ``template_name`` and the prompt source are checked locally.
    ``log_id`` is filled with a fresh UUID at send time when left as None.
    """

    template_name: str = ""
    model: str | None = None
    output: str | None = None
    log_id: str | None = None
    prompt_template: str | None = None
    messages_template: list[Message] | None = None
    prompt_arguments: dict[str, Any] | None = None
    model_arguments: dict[str, Any] | None = None
    compiled_prompt: str | None = None
    compiled_messages: list[Message] | None = None
    metadata: dict[str, Any] | None = None
    parser: str | None = None  # PARSER_FSTRING | PARSER_HANDLEBARS | free text

    @classmethod
    def create(
        cls,
        *,
        template_name: str,
        source: PromptSource,
        model: str,
        output: str,
        **kwargs: Any,
    ) -> "CompletionRecord":
        """Build a record from a single prompt source variant."""
        if not isinstance(source, _SOURCE_TYPES):
            raise ValidationError(PROMPT_SOURCE_REQUIRED)
        return cls(
            template_name=template_name,
            model=model,
            output=output,
            **{source.field_name: source.value},
            **kwargs,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CompletionRecord":
        """Build a record from a loosely-shaped mapping.

        Keys may use either the snake_case field names or their camelCase
        wire aliases (``templateName``, ``promptTemplate``, ...).
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name not in known:
                raise ValidationError(f"Unknown completion field: {key}")
            values[name] = value
        return cls(**values)

    def prompt_source(self) -> PromptSource:
        """Collapse the four optional source fields into exactly one variant."""
        candidates: list[PromptSource | None] = [
            PromptTemplate(self.prompt_template) if self.prompt_template is not None else None,
            MessagesTemplate(self.messages_template) if self.messages_template is not None else None,
            CompiledPrompt(self.compiled_prompt) if self.compiled_prompt is not None else None,
            CompiledMessages(self.compiled_messages) if self.compiled_messages is not None else None,
        ]
        present = [c for c in candidates if c is not None]

        # An empty string counts as missing here but still counts below.
        if all(_is_blank(c.value) for c in present):
            raise ValidationError(PROMPT_SOURCE_REQUIRED)
        if len(present) > 1:
            raise ValidationError(PROMPT_SOURCE_EXCLUSIVE)
        return present[0]

    def validate(self) -> PromptSource:
        """Check the record rules in order; the first failure is raised."""
        if not self.template_name:
            raise ValidationError(TEMPLATE_NAME_REQUIRED)
        return self.prompt_source()
