"""Entity registry: which collections the API exposes and how they are stored."""

from __future__ import annotations

from dataclasses import dataclass, field

from workboard.domain.field_mapping import FieldRule

JOB_LISTING_RULES = (
    FieldRule("title", "title", default="Job {id}"),
    FieldRule("logo_url", "logo"),
    FieldRule("telegram_user", "telegramUser"),
    FieldRule("status", "status", default="active"),
)

ACTIVE_FLAG_RULES = (FieldRule("is_active", "isActive"),)

ARTICLE_RULES = (
    FieldRule("logo_url", "logo"),
    FieldRule("full_info", "fullInfo"),
)


@dataclass(frozen=True)
class Entity:
    """A named collection backed by ``<data_dir>/<file_name>.json``."""

    name: str
    file_name: str
    rules: tuple[FieldRule, ...] = field(default_factory=tuple)


ENTITIES: tuple[Entity, ...] = (
    Entity("otc-europe-jobs", "otcEurope", JOB_LISTING_RULES),
    Entity("otc-asia-jobs", "otcAsia", JOB_LISTING_RULES),
    Entity("active-works", "activeWork", ACTIVE_FLAG_RULES),
    Entity("instant-works-bd", "instantWorkBD", ARTICLE_RULES),
    Entity("how-to-work-articles", "howToWork", ARTICLE_RULES),
)


def get_entity(name: str) -> Entity | None:
    for entity in ENTITIES:
        if entity.name == name:
            return entity
    return None
