from .completion import CompletionPayload

__all__ = ["CompletionPayload"]
