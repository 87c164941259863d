from app.vision.client_base import BaseVisionClient
from app.vision.factory import VisionClientFactory
from app.vision.openai_client_adapter import OpenAIClientAdapter

__all__ = ["BaseVisionClient", "OpenAIClientAdapter", "VisionClientFactory"]
