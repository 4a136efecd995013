"""Steam Web API configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from dupefinder import __version__

from .env import optional_env_var, parse_non_negative_number
from .errors import MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

STEAM_API_BASE_URL = "https://api.steampowered.com"
STEAM_TIMEOUT_SECONDS = 15.0
REDACTED = "**REDACTED**"
USER_AGENT = f"dupefinder/{__version__}"


def _has_response(payload: object) -> bool:
    # private profiles and throttled calls answer with an empty "response" object
    return isinstance(payload, dict) and bool(payload.get("response"))


def _default_resilience(*, cache_ttl_seconds: float = 0.0) -> ResilienceConfig:
    # responses are only cached when a TTL is configured; scans otherwise see live data
    cache = (
        CacheConfig(
            backend="sqlite",
            default_ttl_seconds=cache_ttl_seconds,
            should_cache=_has_response,
        )
        if cache_ttl_seconds > 0
        else None
    )
    return ResilienceConfig(
        name="steam",
        base_url=STEAM_API_BASE_URL,
        timeout_seconds=STEAM_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
        cache=cache,
        default_headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
    )


@dataclass(frozen=True)
class SteamConfig:
    """Steam identity used to read the owned-games list and the wishlist.

    Both values may be absent at load time so the host can start and report its
    configuration; :meth:`require_credentials` is called before any request.
    """

    api_key: str | None
    user_id: str | None
    resilience: ResilienceConfig = field(default_factory=_default_resilience)

    def require_credentials(self) -> tuple[str, str]:
        api_key, user_id = self.api_key, self.user_id
        if not api_key or not user_id:
            missing = [
                name
                for name, value in (("STEAM_API_KEY", api_key), ("STEAM_USER_ID_64", user_id))
                if not value
            ]
            raise MissingConfigurationError.for_names(missing, context="Steam API key or user id")
        return api_key, user_id

    def censored(self) -> dict[str, object]:
        return {
            "STEAM_API_KEY": REDACTED if self.api_key else None,
            "STEAM_USER_ID_64": self.user_id,
            "base_url": self.resilience.base_url,
        }


def get_steam_config(*, resilience: ResilienceConfig | None = None) -> SteamConfig:
    return SteamConfig(
        api_key=optional_env_var("STEAM_API_KEY"),
        user_id=optional_env_var("STEAM_USER_ID_64"),
        resilience=resilience
        or _default_resilience(
            cache_ttl_seconds=parse_non_negative_number(
                optional_env_var("DUPEFINDER_HTTP_CACHE_TTL_SECONDS"), 0.0
            )
        ),
    )
