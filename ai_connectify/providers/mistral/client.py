"""
Mistral connector.
"""

from ..base import BaseConnector, connector_method
from . import methods


class MistralConnector(BaseConnector):
    """Connector for La Plateforme (Mistral AI) REST API."""

    name = "Mistral"
    requires_api_key = True

    def _get_base_url(self) -> str:
        return self.settings.mistral_base_url

    get_models = connector_method(methods.get_models)
    get_model = connector_method(methods.get_model)
    delete_fine_tuning_model = connector_method(methods.delete_fine_tuning_model)

    create_chat_completion = connector_method(methods.create_chat_completion)
    fim_completion = connector_method(methods.fim_completion)
    agents_completion = connector_method(methods.agents_completion)
    embeddings = connector_method(methods.embeddings)

    create_fine_tuning_job = connector_method(methods.create_fine_tuning_job)
    get_fine_tuning_jobs = connector_method(methods.get_fine_tuning_jobs)
    get_fine_tuning_job = connector_method(methods.get_fine_tuning_job)
    start_fine_tuning_job = connector_method(methods.start_fine_tuning_job)
    cancel_fine_tuning_job = connector_method(methods.cancel_fine_tuning_job)

    update_fine_tuning_model = connector_method(methods.update_fine_tuning_model)
    archive_fine_tuning_model = connector_method(methods.archive_fine_tuning_model)
    unarchive_fine_tuning_model = connector_method(methods.unarchive_fine_tuning_model)
