"""Completion API client — reports completion records over HTTP.

Validates a completion record, maps it onto the snake_case wire payload
and posts it to the completion API using httpx. Transport failures are
logged and never raised: logging infrastructure must not break the
calling application.
"""

import logging
import uuid
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from completion_log.application.schemas import CompletionPayload
from completion_log.config import Settings, get_settings
from completion_log.domain.entities import CompletionRecord, serialize_messages
from completion_log.domain.exceptions import ConfigurationError, TransmissionError

logger = logging.getLogger(__name__)

# Callback invoked with the swallowed error after a failed transmission
FailureHandler = Callable[[TransmissionError], None]

API_KEY_MISSING = (
    "API key is missing. Please provide an API key or set the "
    "COMPLETION_API_KEY environment variable."
)


class CompletionLogger:
    """Infrastructure adapter — sends completion records to the completion API.

    Usage:
        completion_logger = CompletionLogger(api_key="...")
        await completion_logger.log(
            CompletionRecord(
                template_name="greeting",
                prompt_template="Hello, {{name}}",
                prompt_arguments={"name": "world"},
                model="gpt-4o-mini",
                output="Hello, world!",
                parser=PARSER_HANDLEBARS,
            )
        )
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_url: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        on_failure: FailureHandler | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()

        resolved_key = api_key if api_key is not None else settings.completion_api_key
        if not resolved_key:
            raise ConfigurationError(API_KEY_MISSING)

        self._api_key = resolved_key
        self._api_url = api_url if api_url is not None else settings.completion_api_url
        self._timeout = timeout if timeout is not None else settings.completion_api_timeout
        self._http_client = http_client
        self._on_failure = on_failure

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def api_url(self) -> str:
        return self._api_url

    def _get_headers(self) -> dict[str, str]:
        """Standard headers for completion API requests."""
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    @staticmethod
    def _build_payload(record: CompletionRecord, log_id: str) -> CompletionPayload:
        """Map a validated record onto the wire payload."""
        return CompletionPayload(
            log_id=log_id,
            template_name=record.template_name,
            prompt_template=record.prompt_template,
            messages_template=(
                serialize_messages(record.messages_template)
                if record.messages_template is not None
                else None
            ),
            prompt_arguments=record.prompt_arguments,
            model=record.model,
            model_arguments=record.model_arguments,
            output=record.output,
            compiled_prompt=record.compiled_prompt,
            compiled_messages=(
                serialize_messages(record.compiled_messages)
                if record.compiled_messages is not None
                else None
            ),
            metadata=record.metadata,
            parser=record.parser,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def log(self, record: CompletionRecord | Mapping[str, Any]) -> None:
        """Validate a completion record and send it to the completion API.

        Args:
            record: A CompletionRecord, or a mapping with its fields under
                    snake_case or camelCase keys.

        Raises:
            ValidationError: The record has no template name, or not exactly
                one of prompt_template, messages_template, compiled_prompt
                and compiled_messages. Raised before any network activity.
        """
        if not isinstance(record, CompletionRecord):
            record = CompletionRecord.from_mapping(record)
        record.validate()

        log_id = record.log_id if record.log_id is not None else str(uuid.uuid4())

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            payload = self._build_payload(record, log_id).to_wire()
            response = await client.post(
                self._api_url, headers=self._get_headers(), json=payload
            )

            if not response.is_success:
                self._raise_transmission_error(response)

            logger.info("Completion logged successfully: %s", self._decode_body(response))

        except TransmissionError as exc:
            self._report_failure(exc)
        except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as exc:
            self._report_failure(TransmissionError(f"{type(exc).__name__}: {exc}"))

        finally:
            if should_close:
                await client.aclose()

    def _report_failure(self, error: TransmissionError) -> None:
        logger.error("Error logging completion: %s", error)
        if self._on_failure is not None:
            self._on_failure(error)

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    def _raise_transmission_error(self, response: httpx.Response) -> None:
        """Raise TransmissionError from a non-2xx httpx Response."""
        try:
            data = response.json()
            error = data.get("error", {}) if isinstance(data, dict) else {}
            if isinstance(error, dict):
                message = error.get("message", response.text)
            else:
                message = str(error)
        except ValueError:
            message = response.text

        raise TransmissionError(message or response.reason_phrase, status_code=response.status_code)
