"""Completion API infrastructure package."""

from .completion_logger import CompletionLogger, FailureHandler

__all__ = ["CompletionLogger", "FailureHandler"]
