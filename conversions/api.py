import logging

from .providers import get_providers


logger = logging.getLogger(__name__)


def build_conversion_payloads(evt: dict, provider_targets=None) -> dict:
    """
    Public entrypoint. Build the request body for every configured destination.

    Returns ``{provider_name: body}``; destinations that decline the event
    (no consent) are left out. Sending the bodies is the caller's job.
    """
    targets = set(provider_targets or ())
    payloads = {}
    for provider in get_providers():
        if targets and provider.name not in targets:
            continue
        body = provider.build_event(evt)
        if body is None:
            logger.debug("Skipping %s for event %s: no consent", provider.name, evt.get("event_name"))
            continue
        payloads[provider.name] = body
    return payloads
