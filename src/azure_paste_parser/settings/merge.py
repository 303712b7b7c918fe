"""Apply a parse result to an AzureConfig and describe the outcome."""

import logging

from pydantic import BaseModel

from azure_paste_parser.parser.base import ParseResult
from azure_paste_parser.parser.detect import should_parse
from azure_paste_parser.parser.endpoint import parse
from azure_paste_parser.settings.config import AzureConfig

logger = logging.getLogger(__name__)

FEEDBACK_NO_MATCH = "azure.parse.feedback.no_match"
FEEDBACK_SUCCESS = "azure.parse.feedback.success"
FEEDBACK_TRANSLATION_WARNING = "azure.parse.feedback.success_with_translation_warning"


class ParseFeedback(BaseModel):
    """Message key shown to the user after a paste."""

    key: str
    is_warning: bool


def apply_parse_result(config: AzureConfig, result: ParseResult) -> AzureConfig:
    """Return a copy of config with every non-empty parsed field applied."""
    update = {}
    if result.endpoint:
        update["endpoint"] = result.endpoint
    if result.chat_deployment:
        update["chat_deployment"] = result.chat_deployment
        update["summary_deployment"] = result.chat_deployment
    if result.transcription_deployment:
        update["transcription_deployment"] = result.transcription_deployment
    if result.chat_api_version:
        update["chat_api_version"] = result.chat_api_version
    if result.transcription_api_version:
        update["transcription_api_version"] = result.transcription_api_version

    logger.debug("Applying parsed fields: %s", sorted(update))
    return config.model_copy(update=update)


def feedback_for(result: ParseResult) -> ParseFeedback:
    """Pick the feedback key for a result.

    The translations route outranks generic warnings, which outrank
    plain success.
    """
    if not result.did_parse_any:
        return ParseFeedback(key=FEEDBACK_NO_MATCH, is_warning=True)
    if result.used_translations_route:
        return ParseFeedback(key=FEEDBACK_TRANSLATION_WARNING, is_warning=True)
    if result.warnings:
        return ParseFeedback(key=result.warnings[0], is_warning=True)
    return ParseFeedback(key=FEEDBACK_SUCCESS, is_warning=False)


def apply_pasted_text(
    config: AzureConfig, text: str, force: bool = False
) -> tuple[AzureConfig, ParseFeedback | None]:
    """Parse pasted text and merge it into config.

    Returns the config unchanged and no feedback when the input does not
    look worth parsing, unless force is set.
    """
    if not force and not should_parse(text):
        return config, None

    result = parse(text)
    feedback = feedback_for(result)
    if not result.did_parse_any:
        return config, feedback
    return apply_parse_result(config, result), feedback
