from pydantic import BaseModel
from typing import Optional, List


class AISettings(BaseModel):
    provider: str
    model: Optional[str]
    max_tokens: int
    temperature: float


class AISettingsUpdate(BaseModel):
    provider: Optional[str] = None
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None


class AvailableProvider(BaseModel):
    id: str
    name: str
    requires_key: bool
    default_model: Optional[str]


class SettingsResponse(BaseModel):
    ai: AISettings
    available_providers: List[AvailableProvider]
