from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class SubscriptionTarget(BaseModel):
    """Delivery endpoint of a subscription"""
    type: str = "http"
    method: str = "POST"
    url: str
    headers: Dict[str, str] = Field(default_factory=dict)


class SubscriptionCreate(BaseModel):
    """Schema for creating a subscription"""
    is_enabled: bool = True
    metadata: Dict[str, str] = Field(default_factory=lambda: {"newKey": "New Value"})
    application_id: str
    description: str = "Ceci est un test"
    label_key: str = "all"
    label_value: str = "yes"
    event_types: List[str]
    target: SubscriptionTarget


class SubscriptionCreated(BaseModel):
    """Schema for the subscription creation response"""
    subscription_id: str
    created_at: Optional[Any] = None

    model_config = ConfigDict(extra="ignore")
