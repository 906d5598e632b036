"""
OpenAI connectors.

OpenAIConnector holds the authentication shared by every OpenAI-hosted
provider (ChatGPT here, DALLE in its own package).
"""

from ...core.validation import validate_key_string
from ..base import BaseConnector, connector_method
from . import methods


class OpenAIConnector(BaseConnector):
    """Bearer auth plus the optional OpenAI-Organization / OpenAI-Project headers."""

    def __init__(self, api_key: str | None = None, **kwargs):
        super().__init__(api_key, **kwargs)
        if self.settings.openai_organization:
            self.set_organization_id(self.settings.openai_organization)
        if self.settings.openai_project:
            self.set_project_id(self.settings.openai_project)

    def _get_base_url(self) -> str:
        return self.settings.openai_base_url

    def set_organization_id(self, organization_id: str) -> None:
        """Scope subsequent requests to an OpenAI organization."""
        validate_key_string(organization_id, "A valid Organization ID must be provided")
        self._set_header("OpenAI-Organization", organization_id)

    def set_project_id(self, project_id: str) -> None:
        """Scope subsequent requests to an OpenAI project."""
        validate_key_string(project_id, "A valid Project ID must be provided")
        self._set_header("OpenAI-Project", project_id)


class ChatGPTConnector(OpenAIConnector):
    """Connector for OpenAI text, audio and fine-tuning endpoints."""

    name = "ChatGPT"
    requires_api_key = True

    def _get_client_timeout(self) -> float:
        # Speech and transcription responses carry audio
        return self.settings.media_timeout

    get_models = connector_method(methods.get_models)
    get_model = connector_method(methods.get_model)
    delete_fine_tuned_model = connector_method(methods.delete_fine_tuned_model)

    create_chat_completion = connector_method(methods.create_chat_completion)
    create_embeddings = connector_method(methods.create_embeddings)
    create_moderation = connector_method(methods.create_moderation)

    create_speech = connector_method(methods.create_speech)
    create_transcription = connector_method(methods.create_transcription)
    create_translation = connector_method(methods.create_translation)

    create_fine_tuning_job = connector_method(methods.create_fine_tuning_job)
    get_fine_tuning_jobs = connector_method(methods.get_fine_tuning_jobs)
    get_fine_tuning_job = connector_method(methods.get_fine_tuning_job)
    cancel_fine_tuning_job = connector_method(methods.cancel_fine_tuning_job)
    get_fine_tuning_job_events = connector_method(methods.get_fine_tuning_job_events)
    get_fine_tuning_job_checkpoints = connector_method(methods.get_fine_tuning_job_checkpoints)
