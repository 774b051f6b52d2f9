"""Base class and error taxonomy for hosted language model clients."""
import abc
import enum
from dataclasses import dataclass
from typing import Any, Mapping


class ErrorKind(str, enum.Enum):
    """Stable classification of every way one analysis call can fail."""

    CONFIGURATION = "configuration"
    EMPTY_RESPONSE = "empty_response"
    MALFORMED_RESPONSE = "malformed_response"
    TRANSMISSION = "transmission"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class GenerationOptions:
    """Request controls forwarded unchanged to the model backend."""

    system_instruction: str | None = None
    response_mime_type: str | None = None
    response_schema: Mapping[str, Any] | None = None
    thinking_budget: int | None = None


class ChatLogAnalysisError(RuntimeError):
    """Base error for chat log analysis failures."""

    kind: ErrorKind = ErrorKind.UNKNOWN


class ConfigurationError(ChatLogAnalysisError):
    """Raised when the API key is missing before any request is made."""

    kind = ErrorKind.CONFIGURATION


class EmptyResponseError(ChatLogAnalysisError):
    """Raised when the model returns no text."""

    kind = ErrorKind.EMPTY_RESPONSE


class MalformedResponseError(ChatLogAnalysisError):
    """Raised when the model text is not valid JSON."""

    kind = ErrorKind.MALFORMED_RESPONSE


class TransmissionFailure(ChatLogAnalysisError):
    """Raised when the client fails during the request; keeps the original message."""

    kind = ErrorKind.TRANSMISSION


class UnknownAnalysisError(ChatLogAnalysisError):
    """Raised when the client hands back something that is not a text payload."""

    kind = ErrorKind.UNKNOWN


ERROR_CLASSES: dict[ErrorKind, type[ChatLogAnalysisError]] = {
    ErrorKind.CONFIGURATION: ConfigurationError,
    ErrorKind.EMPTY_RESPONSE: EmptyResponseError,
    ErrorKind.MALFORMED_RESPONSE: MalformedResponseError,
    ErrorKind.TRANSMISSION: TransmissionFailure,
    ErrorKind.UNKNOWN: UnknownAnalysisError,
}


class BaseLLMClient(abc.ABC):
    """Abstract base class for hosted LLM clients."""

    @abc.abstractmethod
    async def generate(
        self, prompt: str, options: GenerationOptions | None = None
    ) -> str | None:
        """
        Send one prompt and return the raw response text.

        :param prompt: User prompt text
        :param options: Request controls (system instruction, schema, ...)
        :return: Response text, or None when the model produced no candidates
        """
        pass
