# censor/service/moderation.py

"""Async client for the OpenModerator content moderation API.

Text is classified by a configurable provider (OpenAI moderation, Google
Perspective or Google Natural Language); images are checked for NSFW
content. Requests authenticate with an ``x-api-key`` header.

Timeouts are set on the underlying HTTP client; cancellation and retries are
left to the caller.
"""

import logging
from typing import Any, Dict, List, Literal, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from censor.core.definitions import ModerationProvider
from censor.core.domain import ModerationResult
from censor.core.exceptions import MissingCredentialError, ModerationRequestError
from censor.service.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

ProviderName = Literal[
    "openai",
    "google-perspective-api",
    "google-natural-language-api",
]


class ProfanityCheckConfig(BaseModel):
    """Options forwarded with a text moderation request."""

    model_config = ConfigDict(populate_by_name=True)

    check_manual_profanity_list: bool = Field(
        default=False, alias="checkManualProfanityList"
    )
    provider: ProviderName = ModerationProvider.GOOGLE_PERSPECTIVE


class TextModerationResponse(BaseModel):
    """Response body of the text endpoint."""

    profane: bool = False
    type: List[str] = []


class ImageModerationResponse(BaseModel):
    """Response body of the image endpoint."""

    nsfw: bool = False
    types: List[str] = []


class OpenModeratorClient:
    """Client for the OpenModerator API."""

    TEXT_ENDPOINT = "/moderate/text"
    IMAGE_ENDPOINT = "/moderate/image"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: API key; falls back to the configured
                OPEN_MODERATOR_API_KEY
            base_url: API base URL, defaults to settings
            timeout: Request timeout in seconds, defaults to settings
            settings: Settings to read defaults from
            transport: Custom httpx transport
        """
        settings = settings or default_settings

        if api_key is None and settings.open_moderator_api_key is not None:
            api_key = settings.open_moderator_api_key.get_secret_value()

        self.api_key = api_key or None
        self.base_url = (base_url or settings.moderation_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.moderation_timeout
        self.client = httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=transport
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "OpenModeratorClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _require_api_key(self) -> str:
        if not self.api_key:
            logger.warning(
                "No API key found. Moderation calls will not work. "
                "Set OPEN_MODERATOR_API_KEY or pass api_key."
            )
            raise MissingCredentialError("OpenModerator API key is not set.")
        return self.api_key

    async def _post(self, endpoint: str, **kwargs: Any) -> Dict[str, Any]:
        """POSTs to an endpoint and returns the decoded JSON body.

        Raises:
            MissingCredentialError: If no API key is configured.
            ModerationRequestError: On transport errors, non-2xx statuses or
                an undecodable body.
        """
        api_key = self._require_api_key()

        try:
            response = await self.client.post(
                endpoint, headers={"x-api-key": api_key}, **kwargs
            )
            response.raise_for_status()
            data = response.json()

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(
                "Moderation API returned an error status",
                extra={"endpoint": endpoint, "status_code": status},
            )
            raise ModerationRequestError(
                f"Moderation API error: HTTP {status}", status_code=status
            ) from e

        except httpx.HTTPError as e:
            logger.error(
                "Error calling moderation API",
                exc_info=True,
                extra={"endpoint": endpoint},
            )
            raise ModerationRequestError(f"Moderation request failed: {e}") from e

        except ValueError as e:
            logger.error(
                "Moderation API returned invalid JSON", extra={"endpoint": endpoint}
            )
            raise ModerationRequestError("Moderation API returned invalid JSON") from e

        if not isinstance(data, dict):
            raise ModerationRequestError("Moderation API returned an unexpected body")

        return data

    async def moderate_text(
        self, text: str, config: Optional[ProfanityCheckConfig] = None
    ) -> ModerationResult:
        """Classifies text with the configured provider.

        Args:
            text: Text to evaluate
            config: Provider selection and manual list option

        Returns:
            ModerationResult with ``flag`` set when the text is profane
        """
        config = config or ProfanityCheckConfig()
        payload = {"prompt": text, "config": config.model_dump(by_alias=True)}

        logger.debug(
            "Sending text moderation request",
            extra={"text_length": len(text), "provider": config.provider},
        )

        data = await self._post(self.TEXT_ENDPOINT, json=payload)

        try:
            parsed = TextModerationResponse.model_validate(data)
        except PydanticValidationError as e:
            raise ModerationRequestError(
                "Unexpected text moderation response"
            ) from e

        return ModerationResult(
            flag=parsed.profane,
            categories=list(parsed.type),
            provider=config.provider,
            raw=data,
        )

    async def moderate_image(
        self,
        image: bytes,
        filename: str = "image",
        content_type: Optional[str] = None,
    ) -> ModerationResult:
        """Checks an image (jpg, png) for NSFW content.

        Args:
            image: Raw image bytes
            filename: Name sent with the multipart upload
            content_type: MIME type of the image

        Returns:
            ModerationResult with ``flag`` set when the image is NSFW
        """
        files = {
            "file": (filename, image, content_type or "application/octet-stream")
        }

        logger.debug("Sending image moderation request", extra={"size": len(image)})

        data = await self._post(self.IMAGE_ENDPOINT, files=files)

        try:
            parsed = ImageModerationResponse.model_validate(data)
        except PydanticValidationError as e:
            raise ModerationRequestError(
                "Unexpected image moderation response"
            ) from e

        return ModerationResult(
            flag=parsed.nsfw, categories=list(parsed.types), raw=data
        )
