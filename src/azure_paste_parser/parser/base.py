"""Result model for parsed Azure endpoint pastes.

The parser never raises; everything it could not make sense of is
reported through the warning codes below.
"""

from pydantic import BaseModel, ConfigDict, computed_field

WARNING_EMPTY_DEPLOYMENT = "azure.parse.warning.empty_deployment"
WARNING_EMPTY_API_VERSION = "azure.parse.warning.empty_api_version"
WARNING_CONFLICTING_DEPLOYMENTS = "azure.parse.warning.conflicting_deployments"
WARNING_CONFLICTING_API_VERSIONS = "azure.parse.warning.conflicting_api_versions"
WARNING_MULTIPLE_ENDPOINTS = "azure.parse.warning.multiple_endpoints"
WARNING_UNRECOGNIZED_ROUTE = "azure.parse.warning.unrecognized_route"
WARNING_TRANSLATIONS_ROUTE = "azure.parse.warning.translations_route"

WARNING_CODES = (
    WARNING_EMPTY_DEPLOYMENT,
    WARNING_EMPTY_API_VERSION,
    WARNING_CONFLICTING_DEPLOYMENTS,
    WARNING_CONFLICTING_API_VERSIONS,
    WARNING_MULTIPLE_ENDPOINTS,
    WARNING_UNRECOGNIZED_ROUTE,
    WARNING_TRANSLATIONS_ROUTE,
)


class ParseResult(BaseModel):
    """Fields recovered from a pasted URL or API reference snippet."""

    model_config = ConfigDict(frozen=True)

    endpoint: str | None = None  # scheme://host, lower-cased
    chat_deployment: str | None = None
    transcription_deployment: str | None = None
    chat_api_version: str | None = None
    transcription_api_version: str | None = None
    used_translations_route: bool = False
    warnings: tuple[str, ...] = ()

    @computed_field
    @property
    def did_parse_any(self) -> bool:
        return any(
            value is not None
            for value in (
                self.endpoint,
                self.chat_deployment,
                self.transcription_deployment,
                self.chat_api_version,
                self.transcription_api_version,
            )
        )
