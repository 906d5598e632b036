"""
TensorFlow connector.

Runs models locally, so it needs no API key and no HTTP client. The
`tensorflow` package is imported on first use; constructing the connector
works without it installed.
"""

import asyncio
import importlib
import logging
from types import ModuleType
from typing import Any

from ...core.exceptions import AIConnectifyError, ConfigurationError, ValidationError

logger = logging.getLogger(__name__)


class TensorFlowConnector:
    """
    Key-less connector around a local TensorFlow installation.

    Unknown attributes are forwarded to the tensorflow module, so the connector
    can be used as `connector.constant([1, 2])` or `connector.keras`.
    """

    name = "TensorFlowNode"
    requires_api_key = False

    def __init__(self):
        self._tf: ModuleType | None = None
        self.model: Any = None
        self.model_path: str | None = None

    @property
    def tf(self) -> ModuleType:
        """The tensorflow module, imported on first access."""
        if self._tf is None:
            try:
                self._tf = importlib.import_module("tensorflow")
            except ImportError as e:
                raise ConfigurationError(
                    "TensorFlow is not installed; install ai-connectify[tensorflow]"
                ) from e
            logger.info(f"Loaded tensorflow {getattr(self._tf, '__version__', '?')}")
        return self._tf

    def __getattr__(self, name: str) -> Any:
        # Only called for attributes not found on the instance or class
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.tf, name)

    async def load_model(self, model_path: str | None = None) -> Any:
        """
        Load a saved Keras model.

        Args:
            model_path: Path of a .keras/.h5 file or SavedModel directory

        Returns:
            The loaded model, also kept as `self.model`
        """
        if not model_path:
            raise ValidationError("You must specify a model to use")
        tf = self.tf

        loop = asyncio.get_event_loop()
        try:
            model = await loop.run_in_executor(None, lambda: tf.keras.models.load_model(model_path))
        except Exception as e:
            raise AIConnectifyError(f"Unable to load model from path {model_path}: {e}", provider=self.name) from e

        self.model = model
        self.model_path = model_path
        return model

    async def predict(self, input_data: Any) -> Any:
        """
        Run the loaded model on `input_data`.

        Returns:
            The prediction as a numpy array
        """
        if input_data is None or (hasattr(input_data, "__len__") and len(input_data) == 0):
            raise ValidationError("You must specify the input data to use")
        if self.model is None:
            raise ConfigurationError("The model must be loaded before making predictions")
        tf = self.tf
        model = self.model

        loop = asyncio.get_event_loop()
        try:
            return await loop.run_in_executor(None, lambda: model.predict(tf.convert_to_tensor(input_data)))
        except Exception as e:
            logger.error(f"Error during prediction: {e}")
            raise AIConnectifyError(f"Error during prediction: {e}", provider=self.name) from e

    async def aclose(self) -> None:
        self.model = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
