"""
Cohere connector.
"""

from ...core.validation import validate_string_input
from ..base import BaseConnector, connector_method
from . import methods


class CohereConnector(BaseConnector):
    """Connector for the Cohere v1/v2 REST API."""

    name = "Cohere"
    requires_api_key = True

    def __init__(self, api_key: str | None = None, **kwargs):
        super().__init__(api_key, **kwargs)
        if self.settings.cohere_client_name:
            self.set_client_name(self.settings.cohere_client_name)

    def _get_base_url(self) -> str:
        return self.settings.cohere_base_url

    def _get_default_headers(self) -> dict[str, str]:
        return {"Authorization": f"bearer {self.api_key}"}

    def set_client_name(self, client_name: str) -> None:
        """Send X-Client-Name on every subsequent request."""
        validate_string_input(client_name, "Cannot process the client name")
        self._set_header("X-Client-Name", client_name)

    check_api_key = connector_method(methods.check_api_key)

    chat = connector_method(methods.chat)
    classify = connector_method(methods.classify)
    embed = connector_method(methods.embed)
    rerank = connector_method(methods.rerank)
    tokenize = connector_method(methods.tokenize)
    detokenize = connector_method(methods.detokenize)

    get_models = connector_method(methods.get_models)
    get_model = connector_method(methods.get_model)

    create_connector = connector_method(methods.create_connector)
    get_connectors = connector_method(methods.get_connectors)
    get_connector = connector_method(methods.get_connector)
    update_connector = connector_method(methods.update_connector)
    delete_connector = connector_method(methods.delete_connector)
    authorize_connector = connector_method(methods.authorize_connector)

    create_dataset = connector_method(methods.create_dataset)
    get_datasets = connector_method(methods.get_datasets)
    get_dataset = connector_method(methods.get_dataset)
    get_dataset_usage = connector_method(methods.get_dataset_usage)
    delete_dataset = connector_method(methods.delete_dataset)

    create_embed_job = connector_method(methods.create_embed_job)
    get_embed_jobs = connector_method(methods.get_embed_jobs)
    get_embed_job = connector_method(methods.get_embed_job)
    cancel_embed_job = connector_method(methods.cancel_embed_job)

    create_fine_tuned_model = connector_method(methods.create_fine_tuned_model)
    get_fine_tuned_models = connector_method(methods.get_fine_tuned_models)
    get_fine_tuned_model = connector_method(methods.get_fine_tuned_model)
    update_fine_tuned_model = connector_method(methods.update_fine_tuned_model)
    delete_fine_tuned_model = connector_method(methods.delete_fine_tuned_model)
    get_fine_tuned_model_chronology = connector_method(methods.get_fine_tuned_model_chronology)
    get_fine_tuned_model_metrics = connector_method(methods.get_fine_tuned_model_metrics)
