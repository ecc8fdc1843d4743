"""Vision model client used to read asset tags from photos."""
import base64
import logging
from typing import Any, Dict, Optional

import httpx

from ...core.config import get_settings
from ...core.exceptions import ExtractionError
from ...domain.constants.media_constants import DEFAULT_IMAGE_MIME, ImageDetail
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class VisionTagClient:
    """
    Client for an OpenAI-compatible chat completions API with vision support.

    This client handles:
    - Encoding image bytes as base64 data URLs
    - Calling the chat completions API with one image and an instruction
    - Extracting the text answer from the response

    Every failure (missing API key, transport error, timeout, HTTP error
    status, malformed body) is raised as ExtractionError so callers can
    isolate it to the single image being processed.
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self._http_client = http_client
        self.api_key = api_key if api_key is not None else settings.vision_api_key
        self.api_url = api_url or settings.vision_api_url
        self.model = model or settings.vision_model
        self.max_tokens = max_tokens or settings.vision_max_tokens

        if not self.api_key:
            logger.warning("VISION_API_KEY not found in environment variables")

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = get_shared_http_client()
        return self._http_client

    @staticmethod
    def to_data_url(image_bytes: bytes, mime_type: Optional[str]) -> str:
        """
        Encode raw image bytes as a base64 data URL.

        Args:
            image_bytes: Image file content
            mime_type: Declared media type; image/jpeg when missing

        Returns:
            Data URL string (data:<mime>;base64,<payload>)
        """
        encoded = base64.b64encode(image_bytes).decode("utf-8")
        return f"data:{mime_type or DEFAULT_IMAGE_MIME};base64,{encoded}"

    def build_payload(
        self,
        image_bytes: bytes,
        mime_type: Optional[str],
        instruction: str,
        detail: ImageDetail = ImageDetail.AUTO,
    ) -> Dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": 0,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": instruction},
                        {
                            "type": "image_url",
                            "image_url": {
                                "url": self.to_data_url(image_bytes, mime_type),
                                "detail": detail.value,
                            },
                        },
                    ],
                }
            ],
        }

    async def extract_tag(
        self,
        image_bytes: bytes,
        mime_type: Optional[str],
        instruction: str,
        detail: ImageDetail = ImageDetail.AUTO,
    ) -> str:
        """
        Ask the vision model to read the asset tag in one image.

        Args:
            image_bytes: Image file content
            mime_type: Declared media type of the image
            instruction: Prompt describing the expected answer format
            detail: Requested image fidelity

        Returns:
            The model's raw text answer, stripped of surrounding whitespace
            (may be empty when the model found nothing)

        Raises:
            ExtractionError: If the call fails for any reason
        """
        if not self.api_key:
            raise ExtractionError("Vision API key not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = self.build_payload(image_bytes, mime_type, instruction, detail)

        logger.debug(f"Calling vision model {self.model} (detail={detail.value}, {len(image_bytes)} bytes)")

        try:
            response = await self.http_client.post(self.api_url, headers=headers, json=payload)
            response.raise_for_status()
            result = response.json()
        except httpx.HTTPStatusError as e:
            raise ExtractionError(
                f"Vision API error: {e.response.status_code} - {e.response.text[:200]}"
            ) from e
        except httpx.TimeoutException as e:
            raise ExtractionError("Vision API timeout") from e
        except httpx.HTTPError as e:
            raise ExtractionError(f"Vision API request failed: {e}") from e
        except ValueError as e:
            raise ExtractionError(f"Vision API returned invalid JSON: {e}") from e

        return self._content_from_response(result)

    @staticmethod
    def _content_from_response(result: Any) -> str:
        try:
            content = result["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ExtractionError(f"Malformed vision API response: missing {e}") from e

        if content is None:
            return ""
        if not isinstance(content, str):
            raise ExtractionError(f"Malformed vision API response: content is {type(content).__name__}")
        return content.strip()
