import httpx
import openai

from app.vision.client_base import BaseVisionClient
from app.vision.exceptions import VisionError, VisionNetworkError


class OpenAIClientAdapter(BaseVisionClient):
    """Vision client built on the OpenAI-compatible chat completions API.

    Images are sent as ``image_url`` data URLs, other documents (PDF) as
    inline ``file`` parts. The SDK's automatic retries are disabled so each
    request makes exactly one provider call.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def describe_document(
        self,
        *,
        model: str,
        prompt: str,
        document_b64: str,
        mime_type: str,
        filename: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": prompt},
                            self._document_part(document_b64, mime_type, filename),
                        ],
                    }
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise VisionNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise VisionNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise VisionError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise VisionError("AI returned empty response")
        return content

    @staticmethod
    def _document_part(document_b64: str, mime_type: str, filename: str) -> dict[str, object]:
        data_url = f"data:{mime_type};base64,{document_b64}"
        if mime_type.startswith("image/"):
            return {"type": "image_url", "image_url": {"url": data_url}}
        return {
            "type": "file",
            "file": {"filename": filename or "document.pdf", "file_data": data_url},
        }
