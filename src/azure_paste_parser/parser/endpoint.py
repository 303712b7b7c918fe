"""Azure OpenAI endpoint paste parser.

Extracts the endpoint host, deployment names and API versions from a
pasted resource URL, deployment URL or API reference snippet. The scan is
heuristic: the first match wins and every ambiguity is reported as a
warning code on the result.
"""

import logging
import re
from urllib.parse import unquote, unquote_plus, urlsplit

from .base import (
    ParseResult,
    WARNING_CONFLICTING_API_VERSIONS,
    WARNING_CONFLICTING_DEPLOYMENTS,
    WARNING_EMPTY_API_VERSION,
    WARNING_EMPTY_DEPLOYMENT,
    WARNING_MULTIPLE_ENDPOINTS,
    WARNING_TRANSLATIONS_ROUTE,
    WARNING_UNRECOGNIZED_ROUTE,
)

logger = logging.getLogger(__name__)

AZURE_HOST_SUFFIXES = (
    ".openai.azure.com",
    ".cognitiveservices.azure.com",
    ".services.ai.azure.com",
)

CHAT = "chat"
TRANSCRIPTION = "transcription"
TRANSLATION = "translation"
OTHER = "other"

_URL_PATTERN = re.compile(r"https?://[^\s\"'<>()\[\]{}`]+", re.IGNORECASE)
_ROUTE_PATTERN = re.compile(
    r"/openai/deployments/(?P<name>[^/?#&\s\"'()`]*)(?P<operation>/[^?#\s\"'<>()`]*)?",
    re.IGNORECASE,
)
_API_VERSION_PATTERN = re.compile(
    r"(?<![\w-])api-version=[\"']?(?P<value>[^&#\s\"'<>(),;`]*)", re.IGNORECASE
)
_BARE_HOST_PATTERN = re.compile(
    r"(?<![\w.-])(?:[a-z0-9-]+\.)+(?:openai|cognitiveservices|services\.ai)\.azure\.com(?![\w-]|\.\w)",
    re.IGNORECASE,
)
_PLACEHOLDER_PATTERN = re.compile(r"^[{<\[].*[}>\]]$")


def parse(text: str) -> ParseResult:
    """Parse pasted text into Azure OpenAI settings. Never raises."""
    text = text or ""
    warnings: list[str] = []
    deployments: dict[str, str | None] = {CHAT: None, TRANSCRIPTION: None}
    versions: dict[str, str | None] = {CHAT: None, TRANSCRIPTION: None}
    used_translations_route = False

    routes = list(_ROUTE_PATTERN.finditer(text))
    for match in routes:
        kind = _route_kind(match.group("operation"))
        logger.debug("Found %s route at offset %d", kind, match.start())
        if kind == TRANSLATION:
            used_translations_route = True
            _warn(warnings, WARNING_TRANSLATIONS_ROUTE)
        elif kind == OTHER:
            _warn(warnings, WARNING_UNRECOGNIZED_ROUTE)

        name = _clean(unquote(match.group("name")))
        if not name:
            _warn(warnings, WARNING_EMPTY_DEPLOYMENT)
            continue
        _assign(deployments, kind, name, warnings, WARNING_CONFLICTING_DEPLOYMENTS)

    unassociated = []
    for match in _API_VERSION_PATTERN.finditer(text):
        value = _clean(unquote_plus(match.group("value")))
        if not value:
            _warn(warnings, WARNING_EMPTY_API_VERSION)
            continue
        route = _preceding_route(routes, match.start())
        if route is None:
            unassociated.append(value)
        else:
            kind = _route_kind(route.group("operation"))
            _assign(versions, kind, value, warnings, WARNING_CONFLICTING_API_VERSIONS)

    # Versions outside any deployment route fill whatever is still missing.
    if unassociated:
        first = unassociated[0]
        for family in (CHAT, TRANSCRIPTION):
            if versions[family] is None:
                versions[family] = first
        if any(value != first for value in unassociated[1:]):
            logger.debug("Dropping unattached api-versions other than %r", first)
            _warn(warnings, WARNING_CONFLICTING_API_VERSIONS)

    endpoint = _find_endpoint(text, warnings)

    return ParseResult(
        endpoint=endpoint,
        chat_deployment=deployments[CHAT],
        transcription_deployment=deployments[TRANSCRIPTION],
        chat_api_version=versions[CHAT],
        transcription_api_version=versions[TRANSCRIPTION],
        used_translations_route=used_translations_route,
        warnings=tuple(warnings),
    )


def _route_kind(operation: str | None) -> str:
    op = (operation or "").lower().rstrip("/")
    if op.endswith("/audio/translations"):
        return TRANSLATION
    if op.endswith("/audio/transcriptions"):
        return TRANSCRIPTION
    if op.endswith("/completions"):
        return CHAT
    return OTHER


def _assign(
    slots: dict[str, str | None],
    kind: str,
    value: str,
    warnings: list[str],
    conflict_code: str,
) -> None:
    """Store a value for a route kind, keeping the first one on conflict."""
    if kind == OTHER:
        # Unknown operations only ever fill an empty chat slot.
        if slots[CHAT] is None:
            slots[CHAT] = value
        return

    family = CHAT if kind == CHAT else TRANSCRIPTION
    current = slots[family]
    if current is None:
        slots[family] = value
    elif current != value:
        logger.debug("Dropping %s value %r, keeping %r", family, value, current)
        _warn(warnings, conflict_code)


def _preceding_route(routes: list[re.Match], position: int) -> re.Match | None:
    nearest = None
    for route in routes:
        if route.start() >= position:
            break
        nearest = route
    return nearest


def _find_endpoint(text: str, warnings: list[str]) -> str | None:
    """Pick the endpoint host, preferring URLs that carry a deployment route.

    Only deployment-route URLs and Azure hosts qualify, so links to
    documentation pages that merely mention /openai/ are ignored.
    """
    with_route = []
    candidates = []
    for match in _URL_PATTERN.finditer(text):
        split = _split_url(match.group(0).rstrip(".,;:!?"))
        if split is None:
            continue
        endpoint, host, path = split
        has_route = _ROUTE_PATTERN.search(path) is not None
        if has_route:
            with_route.append(endpoint)
        if has_route or host.endswith(AZURE_HOST_SUFFIXES):
            candidates.append(endpoint)

    if not candidates:
        candidates = [f"https://{m.group(0).lower()}" for m in _BARE_HOST_PATTERN.finditer(text)]
    if not candidates:
        return None

    endpoint = with_route[0] if with_route else candidates[0]
    if len(set(candidates)) > 1:
        _warn(warnings, WARNING_MULTIPLE_ENDPOINTS)
    logger.debug("Using endpoint %s", endpoint)
    return endpoint


def _split_url(url: str) -> tuple[str, str, str] | None:
    try:
        parts = urlsplit(url)
        host = parts.hostname
        port = parts.port
    except ValueError:
        return None
    if not host:
        return None

    netloc = f"[{host}]" if ":" in host else host
    if port is not None:
        netloc = f"{netloc}:{port}"
    return f"{parts.scheme.lower()}://{netloc}", host, parts.path


def _clean(value: str) -> str:
    value = value.strip()
    if _PLACEHOLDER_PATTERN.match(value):
        return ""
    return value


def _warn(warnings: list[str], code: str) -> None:
    if code not in warnings:
        warnings.append(code)
