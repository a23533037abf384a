from typing import AsyncGenerator, Optional

from anthropic import AsyncAnthropic
from dotenv import load_dotenv

from ..base import ProviderAdapter
from ..errors import ErrorMapper
from ...models.provider import ProviderOptions
from ...models.upstream import ErrorPart, StreamPart
from ...observability.logging import ProviderLogger
from ...streaming.source import release_iterator
from .payloads import build_messages_payload
from .streaming import iter_message_parts

# Load environment variables
load_dotenv()


class AnthropicProvider(ProviderAdapter):
    """Messages API streaming for Anthropic models."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        provider_name: Optional[str] = "anthropic",
        requires_api_key: bool = True,
    ):
        super().__init__(api_key, base_url, timeout, provider_name, requires_api_key)
        self.logger = ProviderLogger(self.get_provider_name())

    @property
    def client(self) -> AsyncAnthropic:
        """Lazy initialization of the Anthropic client."""
        if self._client is None:
            self._client = AsyncAnthropic(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout,
            )
        return self._client

    async def stream_parts(
        self,
        model_id: str,
        options: ProviderOptions
    ) -> AsyncGenerator[StreamPart, None]:
        """Stream a message as upstream stream parts."""
        provider = self.get_provider_name()
        params = build_messages_payload(model_id, options)

        with self.logger.track_request("stream", model_id):
            try:
                stream = await self.client.messages.create(**params)
            except Exception as e:
                error = ErrorMapper.map_error(e, provider)
                self.logger.log_provider_error(
                    "Stream request failed", ErrorMapper.get_error_classification(error), model=model_id
                )
                if error.status_code is None:
                    raise error from e
                # The API answered; report the refusal in-band
                yield ErrorPart(error=error.message)
                return

            try:
                async for part in iter_message_parts(stream):
                    yield part
            except Exception as e:
                error = ErrorMapper.map_error(e, provider)
                self.logger.log_provider_error(
                    "Stream interrupted", ErrorMapper.get_error_classification(error), model=model_id
                )
                raise error from e
            finally:
                await release_iterator(stream)
