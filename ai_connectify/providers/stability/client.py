"""
Stability connector.
"""

from ...core.validation import validate_key_string
from ..base import BaseConnector, connector_method
from . import methods


class StabilityConnector(BaseConnector):
    """Connector for the Stability AI v2beta image, video and 3D API."""

    name = "Stability"
    requires_api_key = True

    def _get_base_url(self) -> str:
        return self.settings.stability_base_url

    def _get_client_timeout(self) -> float:
        return self.settings.media_timeout

    def set_client_id(self, client_id: str) -> None:
        """Identify the calling application (stability-client-id)."""
        validate_key_string(client_id, "A valid client ID must be provided")
        self._set_header("stability-client-id", client_id)

    def set_client_user_id(self, user_id: str) -> None:
        validate_key_string(user_id, "A valid user ID must be provided")
        self._set_header("stability-client-user-id", user_id)

    def set_client_version(self, client_version: str) -> None:
        validate_key_string(client_version, "A valid client version must be provided")
        self._set_header("stability-client-version", client_version)

    generate_image_ultra = connector_method(methods.generate_image_ultra)
    generate_image_core = connector_method(methods.generate_image_core)
    generate_image_diffusion = connector_method(methods.generate_image_diffusion)

    upscale_fast = connector_method(methods.upscale_fast)
    upscale_conservative = connector_method(methods.upscale_conservative)
    upscale_creative = connector_method(methods.upscale_creative)
    get_upscale_creative = connector_method(methods.get_upscale_creative)

    erase = connector_method(methods.erase)
    inpaint = connector_method(methods.inpaint)
    outpaint = connector_method(methods.outpaint)
    search_and_replace = connector_method(methods.search_and_replace)
    search_and_recolor = connector_method(methods.search_and_recolor)
    remove_background = connector_method(methods.remove_background)

    control_sketch = connector_method(methods.control_sketch)
    control_structure = connector_method(methods.control_structure)
    control_style = connector_method(methods.control_style)

    image_to_video = connector_method(methods.image_to_video)
    get_image_to_video = connector_method(methods.get_image_to_video)
    video_stable_fast = connector_method(methods.video_stable_fast)
