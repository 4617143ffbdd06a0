"""Config settings – publisher and logging settings."""
from __future__ import annotations

import dataclasses
import logging

from es_commons.config.settings.base import Settings
from es_commons.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class PublisherSettings(Settings):
    """Event publication settings, read from ``EVENTS_*`` variables.

    ``topics`` holds explicit ``aggregate=topic`` pairs; aggregates without
    an entry are published to ``<topic_prefix>.<aggregate>``.
    """

    _prefix = "EVENTS"

    bootstrap_servers: str = "localhost:9092"
    client_id: str = "es-commons"
    topic_prefix: str = ""
    topics: list[str] = dataclasses.field(default_factory=list)

    def _validate(self) -> None:
        for pair in self.topics:
            aggregate, sep, topic = pair.partition("=")
            if not sep or not aggregate.strip() or not topic.strip():
                raise InvalidSettingValueError(
                    self.env_key("topics"),
                    pair,
                    "expected 'aggregate=topic'",
                    settings=type(self).__name__,
                )

    def topic_map(self) -> dict[str, str]:
        """Explicit aggregate → topic mapping parsed from ``topics``."""
        mapping: dict[str, str] = {}
        for pair in self.topics:
            aggregate, _, topic = pair.partition("=")
            mapping[aggregate.strip().lower()] = topic.strip()
        return mapping


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Logging settings, read from ``LOG_*`` variables."""

    _prefix = "LOG"

    level: str = "INFO"
    json: bool = True

    def _validate(self) -> None:
        if not isinstance(logging.getLevelNamesMapping().get(self.level.upper()), int):
            raise InvalidSettingValueError(
                self.env_key("level"), self.level, "unknown log level", settings=type(self).__name__
            )

    @property
    def numeric_level(self) -> int:
        return logging.getLevelNamesMapping()[self.level.upper()]


__all__ = ["LoggingSettings", "PublisherSettings"]
