"""
Module for the subscription creation step.

Creates one webhook subscription and hands its id to the following steps.
Every failure (network error, unexpected status, incomplete body) ends in
None so the caller can count the step as failed and move on.
"""
import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from loadtest.api_client import APIClient
from loadtest.schemas import SubscriptionCreate, SubscriptionCreated, SubscriptionTarget

logger = logging.getLogger(__name__)

SUBSCRIPTIONS_ENDPOINT = "/api/v1/subscriptions/"
CHECK_NAME = "Subscription created"


def build_subscription_payload(
    application_id: str,
    event_types: List[str],
    target_url: str
) -> SubscriptionCreate:
    """Build the creation request with the fixed test values."""
    return SubscriptionCreate(
        application_id=application_id,
        event_types=list(event_types),
        target=SubscriptionTarget(url=target_url),
    )


def is_subscription_created(response: httpx.Response) -> bool:
    """201 with a body mentioning both created_at and subscription_id."""
    body = response.text
    return (
        response.status_code == 201
        and bool(body)
        and "created_at" in body
        and "subscription_id" in body
    )


def create_subscription(
    base_url: str,
    auth_token: str,
    application_id: str,
    event_types: List[str],
    target_url: str,
    client: Optional[APIClient] = None
) -> Optional[str]:
    """
    Create a subscription and return its id.

    Args:
        base_url (str): Base URL of the API
        auth_token (str): Authorization header value, sent as is
        application_id (str): Application owning the subscription
        event_types (List[str]): Event types the subscription listens to
        target_url (str): URL the events are delivered to
        client (APIClient, optional): Shared client for the request log
            and check tally; one is created and closed afterwards when
            omitted. base_url and auth_token apply either way

    Returns:
        str | None: The subscription_id from the response, or None if
        the request failed the creation check
    """
    payload = build_subscription_payload(application_id, event_types, target_url)

    owns_client = client is None
    if owns_client:
        client = APIClient(base_url, auth_token)

    try:
        response = client.post_json(
            SUBSCRIPTIONS_ENDPOINT,
            payload.model_dump(),
            base_url=base_url,
            auth_token=auth_token,
        )
        if not client.check(response, CHECK_NAME, is_subscription_created):
            return None

        try:
            created = SubscriptionCreated.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"[SUBSCRIPTION] Unexpected response body: {e}")
            return None
    finally:
        if owns_client:
            client.close()

    logger.info(
        f"[SUBSCRIPTION] Created {created.subscription_id} at {created.created_at}"
    )
    return created.subscription_id
