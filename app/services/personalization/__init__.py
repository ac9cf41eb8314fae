"""
Chromalens Personalization

In-memory color usage tracking: daily history, frequency, streaks,
favorites, a deterministic color of the day, and mood palettes. State lives
on the tracker instance only; nothing is persisted.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Callable, Dict, List, Optional

from loguru import logger

from app.services.colors.converter import (
    get_color_temperature, get_nearest_named_color, hex_to_rgb, normalize_hex, rgb_to_hsl,
    round_half_up,
)

DEFAULT_MOST_USED_COLOR = "#3B82F6"
DEFAULT_MOOD = "calm"

DAILY_COLORS: List[str] = [
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7",
    "#DDA0DD", "#98D8C8", "#F7DC6F", "#BB8FCE", "#85C1E9",
    "#F8C471", "#82E0AA", "#F1948A", "#85C1E9", "#D7BDE2",
    "#A3E4D7", "#F9E79F", "#D5A6BD", "#AED6F1", "#A9DFBF",
]

MOOD_PALETTES: Dict[str, List[str]] = {
    "energetic": ["#FF6B6B", "#FF8E53", "#FFA726", "#FFEB3B", "#8BC34A"],
    "calm": ["#81C784", "#4FC3F7", "#64B5F6", "#9575CD", "#A1C4FD"],
    "creative": ["#E91E63", "#9C27B0", "#673AB7", "#3F51B5", "#FF5722"],
    "focused": ["#37474F", "#546E7A", "#607D8B", "#78909C", "#90A4AE"],
    "happy": ["#FFEB3B", "#FFC107", "#FF9800", "#FF5722", "#E91E63"],
    "mysterious": ["#1A237E", "#283593", "#303F9F", "#3949AB", "#3F51B5"],
}


@dataclass
class UsageEvent:
    """One tracked color selection."""
    color: str
    timestamp: datetime


@dataclass
class UsageStats:
    """Mutable usage bookkeeping owned by a ColorPersonalization instance.

    daily holds at most the most recent active day's events.
    """
    daily: Dict[date, List[UsageEvent]] = field(default_factory=dict)
    frequency: Counter = field(default_factory=Counter)
    streak: int = 0
    last_active_date: Optional[date] = None


class ColorPersonalization:
    """
    Tracks which colors a user inspects.

    Args:
        clock: Returns the current time; injectable for tests
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or datetime.now
        self.stats = UsageStats()

    def _today(self) -> date:
        return self._clock().date()

    def track_color_usage(self, color: str) -> bool:
        """
        Record that a color was used today.

        Returns:
            False (and records nothing) if the color cannot be parsed
        """
        normalized = normalize_hex(color)
        if normalized is None:
            logger.debug(f"Ignoring usage of invalid color {color!r}")
            return False

        now = self._clock()
        today = now.date()
        if today not in self.stats.daily:
            # Earlier days are kept only as frequency and streak
            self.stats.daily = {today: []}
        self.stats.daily[today].append(UsageEvent(normalized, now))
        self.stats.frequency[normalized] += 1
        self._update_streak()
        return True

    def _update_streak(self):
        today = self._today()
        yesterday = today - timedelta(days=1)

        if self.stats.daily.get(today):
            if self.stats.last_active_date == yesterday:
                self.stats.streak += 1
            elif self.stats.last_active_date != today:
                self.stats.streak = 1
            self.stats.last_active_date = today

    def get_usage_stats(self) -> Dict[str, Any]:
        """Today's count, most used color, current streak and distinct colors."""
        today_events = self.stats.daily.get(self._today(), [])

        most_used = DEFAULT_MOST_USED_COLOR
        if self.stats.frequency:
            # Counter.most_common keeps insertion order among equal counts
            most_used = self.stats.frequency.most_common(1)[0][0]

        return {
            "today_count": len(today_events),
            "most_used_color": most_used,
            "streak": self.stats.streak,
            "total_colors": len(self.stats.frequency),
        }

    def get_favorite_colors(self, limit: int = 10) -> List[str]:
        """Most frequently used colors, most used first."""
        if limit <= 0:
            return []
        return [color for color, _ in self.stats.frequency.most_common(limit)]

    def get_daily_color(self) -> Dict[str, str]:
        """Deterministic color for the current day of the year."""
        day_of_year = self._today().timetuple().tm_yday
        color = DAILY_COLORS[day_of_year % len(DAILY_COLORS)]
        return {"color": color, "name": get_nearest_named_color(color)}

    @staticmethod
    def get_mood_colors(mood: str) -> List[str]:
        """Palette for a mood; unknown moods fall back to calm."""
        return list(MOOD_PALETTES.get(mood, MOOD_PALETTES[DEFAULT_MOOD]))

    def analyze_preferences(self) -> Optional[Dict[str, Any]]:
        """
        Summarize tracked usage.

        Returns:
            Frequency-weighted average hue, warm/cool preference and diversity
            (distinct / total uses), or None if nothing has been tracked
        """
        if not self.stats.frequency:
            return None

        total = sum(self.stats.frequency.values())
        weighted_hue = 0
        warm = cool = 0
        for color, count in self.stats.frequency.items():
            rgb = hex_to_rgb(color)
            weighted_hue += rgb_to_hsl(*rgb).h * count
            temperature = get_color_temperature(*rgb)
            if temperature == "Warm":
                warm += count
            elif temperature == "Cool":
                cool += count

        return {
            "average_hue": round_half_up(weighted_hue / total),
            "temperature_preference": "Warm" if warm > cool else "Cool",
            "diversity": len(self.stats.frequency) / total,
        }

    def reset(self):
        """Forget all tracked usage."""
        self.stats = UsageStats()


# Global tracker instance
_personalization: Optional[ColorPersonalization] = None


def get_personalization() -> ColorPersonalization:
    """Get or create the process-wide tracker."""
    global _personalization
    if _personalization is None:
        _personalization = ColorPersonalization()
    return _personalization
