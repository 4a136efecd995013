"""Duplicate scan and scheduling defaults."""

from __future__ import annotations

from dataclasses import dataclass

from dupefinder.domain.similarity import SIMILARITY_THRESHOLD

from .env import optional_env_var, parse_flag, parse_non_negative_number

DEFAULT_INTERVAL_MINUTES = 24 * 60
DEFAULT_INITIAL_DELAY_SECONDS = 10.0
DEFAULT_DUPLICATE_TAG = "steam-duplicate"
DEFAULT_SIMILARITY_THRESHOLD = SIMILARITY_THRESHOLD


@dataclass(frozen=True, slots=True)
class ScanConfig:
    interval_minutes: float = DEFAULT_INTERVAL_MINUTES
    initial_delay_seconds: float = DEFAULT_INITIAL_DELAY_SECONDS
    sentinel_tag: str = DEFAULT_DUPLICATE_TAG
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    include_wishlist: bool = True

    @property
    def scheduled(self) -> bool:
        """Whether periodic scans are enabled (an interval of ``0`` disables them)."""
        return self.interval_minutes > 0

    def censored(self) -> dict[str, object]:
        return {
            "DUPEFINDER_INTERVAL_MINUTES": self.interval_minutes,
            "DUPEFINDER_INITIAL_DELAY_SECONDS": self.initial_delay_seconds,
            "DUPEFINDER_DUPLICATE_TAG": self.sentinel_tag,
            "DUPEFINDER_INCLUDE_WISHLIST": self.include_wishlist,
            "similarity_threshold": self.similarity_threshold,
        }


def get_scan_config() -> ScanConfig:
    return ScanConfig(
        interval_minutes=parse_non_negative_number(
            optional_env_var("DUPEFINDER_INTERVAL_MINUTES"), DEFAULT_INTERVAL_MINUTES
        ),
        initial_delay_seconds=parse_non_negative_number(
            optional_env_var("DUPEFINDER_INITIAL_DELAY_SECONDS"), DEFAULT_INITIAL_DELAY_SECONDS
        ),
        sentinel_tag=optional_env_var("DUPEFINDER_DUPLICATE_TAG") or DEFAULT_DUPLICATE_TAG,
        include_wishlist=parse_flag(optional_env_var("DUPEFINDER_INCLUDE_WISHLIST"), True),
    )
