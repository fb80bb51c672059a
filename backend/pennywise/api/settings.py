from fastapi import APIRouter, HTTPException
from pennywise.schemas.settings import (
    AISettings,
    AISettingsUpdate,
    SettingsResponse,
    AvailableProvider
)
from pennywise.ai.client import (
    MOCK_PROVIDER,
    PROVIDERS,
    get_completion_provider,
    reset_completion_provider,
)
from pennywise.config import settings

router = APIRouter(prefix="/settings", tags=["settings"])

AVAILABLE_PROVIDERS = [
    AvailableProvider(id=MOCK_PROVIDER, name="Mock (Offline)", requires_key=False, default_model=None)
] + [
    AvailableProvider(
        id=spec.name,
        name=spec.label,
        requires_key=spec.key_setting is not None,
        default_model=spec.default_model,
    )
    for spec in PROVIDERS.values()
]


def _current_ai_settings() -> AISettings:
    return AISettings(
        provider=settings.ai_provider,
        model=settings.ai_model,
        max_tokens=settings.ai_max_tokens,
        temperature=settings.ai_temperature,
    )


@router.get("", response_model=SettingsResponse)
def get_settings():
    return SettingsResponse(
        ai=_current_ai_settings(),
        available_providers=AVAILABLE_PROVIDERS
    )


@router.patch("/ai", response_model=AISettings)
def update_ai_settings(update: AISettingsUpdate):
    if update.provider is not None:
        provider = update.provider.strip().lower()
        if provider != MOCK_PROVIDER and provider not in PROVIDERS:
            raise HTTPException(status_code=400, detail=f"Unknown AI provider: {update.provider}")
        settings.ai_provider = provider
    if update.model is not None:
        settings.ai_model = update.model
    if update.max_tokens is not None:
        settings.ai_max_tokens = update.max_tokens
    if update.temperature is not None:
        settings.ai_temperature = update.temperature

    reset_completion_provider()

    return _current_ai_settings()


@router.post("/ai/test")
async def test_ai_connection():
    try:
        provider = get_completion_provider()
        completion = await provider.complete(
            [
                {"role": "system", "content": "You are a helpful assistant."},
                {"role": "user", "content": "Say 'OK' if you can hear me."},
            ],
            max_tokens=10
        )
        return {"status": "ok", "provider": completion.provider, "response": completion.content.strip()}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"AI connection failed: {str(e)}")
