"""Random catalog entity generation."""

from __future__ import annotations

import random
import uuid

from catalogd.core.models.entity import Entity, EntityKind, OperatingSystem, Source

NAME_PREFIXES = ["awesome", "cool", "super", "amazing", "great"]
NAME_SUFFIXES = ["dev", "code", "hack", "build", "deploy"]

DESCRIPTIONS = [
    "A powerful {} for development",
    "An efficient {} for cloud environments",
    "The best {} for team collaboration",
    "A flexible {} for any workflow",
    "An innovative {} with advanced features",
]

LOGO_URLS = [
    "https://registry.coder.com/template/icon/aws.svg",
    "https://registry.coder.com/template/icon/azure.png",
    "https://registry.coder.com/module/gateway.svg",
    "https://registry.coder.com/module/dotfiles.svg",
    "https://registry.coder.com/module/code.svg",
    "https://registry.coder.com/module/github.svg",
]

CONTRIBUTORS = [
    "Coder Team",
    "Community",
    "DevOps Group",
    "Platform Team",
    "Infrastructure Team",
]

TAGS = [
    "development", "cloud", "production", "testing", "staging",
    "docker", "kubernetes", "terraform", "aws", "gcp", "azure",
    "go", "python", "javascript", "typescript", "rust", "java",
    "web", "api", "frontend", "backend", "fullstack", "devops",
]

MAX_TAGS = 5


class EntityFactory:
    """Builds random modules and templates.

    Pass a seeded ``random.Random`` for reproducible output, ids included.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def create(self, kind: EntityKind) -> Entity:
        """Generate one entity of the given kind."""
        return Entity(
            id=self.entity_id(),
            name=self.name(kind),
            description=self.description(kind),
            logo=self.rng.choice(LOGO_URLS),
            contributor=self.rng.choice(CONTRIBUTORS),
            operating_system=self.rng.choice(list(OperatingSystem)),
            source=self.rng.choice(list(Source)),
            custom_tags=self.tags(),
        )

    def entity_id(self) -> str:
        return str(uuid.UUID(int=self.rng.getrandbits(128), version=4))

    def name(self, kind: EntityKind) -> str:
        prefix = self.rng.choice(NAME_PREFIXES)
        suffix = self.rng.choice(NAME_SUFFIXES)
        return f"{prefix}-{kind.value}-{suffix}-{self.rng.randrange(100)}"

    def description(self, kind: EntityKind) -> str:
        return self.rng.choice(DESCRIPTIONS).format(kind.value)

    def tags(self) -> tuple[str, ...]:
        """Pick 1 to MAX_TAGS distinct tags."""
        return tuple(self.rng.sample(TAGS, self.rng.randint(1, MAX_TAGS)))
