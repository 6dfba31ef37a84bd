from typing import ClassVar

from receiptly.config.settings import Settings
from receiptly.extraction.base import BaseExtractor
from receiptly.extraction.client_base import BaseCategorizationClient
from receiptly.extraction.example_client_adapter import ExampleClientAdapter
from receiptly.extraction.extractor import FoodItemExtractor
from receiptly.extraction.openai_client_adapter import OpenAIClientAdapter
from receiptly.logging.events import BaseEventSink


class ExtractorFactory:
    """Creates the configured food item extractor."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(
        cls,
        settings: Settings,
        events: BaseEventSink | None = None,
    ) -> BaseExtractor:
        """Create a configured extractor from application settings."""
        provider = settings.categorization_provider.lower()
        client: BaseCategorizationClient
        if provider == "example":
            client = ExampleClientAdapter()
            model = "example"
        else:
            client = OpenAIClientAdapter(
                api_key=cls._resolve_api_key(provider, settings),
                timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
                base_url=cls._resolve_base_url(provider, settings),
            )
            model = cls._resolve_model_name(provider, settings)
        return FoodItemExtractor(
            client=client,
            model=model,
            temperature=settings.categorization_temperature,
            max_tokens=settings.categorization_max_tokens,
            events=events,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.categorization_openai_compatible_base_url or "").strip()
            if not url:
                raise ValueError(
                    "categorization_openai_compatible_base_url is required for "
                    "categorization_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown categorization provider '{provider}'. "
            f"Choose from: {cls.supported_providers()}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        return str(cls._provider_setting(provider, settings, "api_key"))

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        return str(cls._provider_setting(provider, settings, "model_name"))

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        value = cls._provider_setting(provider, settings, "timeout_seconds")
        return value if isinstance(value, int) and value > 0 else 30

    @classmethod
    def _provider_setting(cls, provider: str, settings: Settings, name: str) -> object:
        if provider not in cls.supported_providers():
            raise ValueError(
                f"Unknown categorization provider '{provider}'. "
                f"Choose from: {cls.supported_providers()}"
            )
        return getattr(settings, f"categorization_{provider}_{name}")
