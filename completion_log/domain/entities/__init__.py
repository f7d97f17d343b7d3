from .completion import (
    PARSER_FSTRING,
    PARSER_HANDLEBARS,
    CompiledMessages,
    CompiledPrompt,
    CompletionMessage,
    CompletionRecord,
    MessagesTemplate,
    PromptSource,
    PromptTemplate,
    serialize_messages,
)

__all__ = [
    "PARSER_FSTRING",
    "PARSER_HANDLEBARS",
    "CompiledMessages",
    "CompiledPrompt",
    "CompletionMessage",
    "CompletionRecord",
    "MessagesTemplate",
    "PromptSource",
    "PromptTemplate",
    "serialize_messages",
]
