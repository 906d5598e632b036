"""
DALL-E connector.
"""

from ..base import connector_method
from ..chatgpt.client import OpenAIConnector
from . import methods


class DALLEConnector(OpenAIConnector):
    """Connector for OpenAI image generation, edits and variations."""

    name = "DALLE"
    requires_api_key = True

    def _get_client_timeout(self) -> float:
        return self.settings.media_timeout

    get_models = connector_method(methods.get_models)
    get_model = connector_method(methods.get_model)
    create_image = connector_method(methods.create_image)
    create_image_edit = connector_method(methods.create_image_edit)
    create_image_variation = connector_method(methods.create_image_variation)
