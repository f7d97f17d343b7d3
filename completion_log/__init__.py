"""Client library for reporting LLM completions to a completion logging API."""

from completion_log.config import DEFAULT_API_URL, Settings, get_settings
from completion_log.domain.entities import (
    PARSER_FSTRING,
    PARSER_HANDLEBARS,
    CompiledMessages,
    CompiledPrompt,
    CompletionMessage,
    CompletionRecord,
    MessagesTemplate,
    PromptSource,
    PromptTemplate,
)
from completion_log.domain.exceptions import (
    CompletionLogError,
    ConfigurationError,
    TransmissionError,
    ValidationError,
)
from completion_log.infrastructure.completion_api import CompletionLogger
from completion_log.infrastructure.logging.log_config import setup_logging

__all__ = [
    "DEFAULT_API_URL",
    "PARSER_FSTRING",
    "PARSER_HANDLEBARS",
    "CompiledMessages",
    "CompiledPrompt",
    "CompletionLogError",
    "CompletionLogger",
    "CompletionMessage",
    "CompletionRecord",
    "ConfigurationError",
    "MessagesTemplate",
    "PromptSource",
    "PromptTemplate",
    "Settings",
    "TransmissionError",
    "ValidationError",
    "get_settings",
    "setup_logging",
]
