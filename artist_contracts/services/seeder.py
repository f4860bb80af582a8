"""Load the built-in template definitions into the store"""

import logging
from datetime import datetime
from typing import Iterable, Optional
from uuid import uuid4

from pydantic import BaseModel

from artist_contracts.data.templates import ALL_TEMPLATES
from artist_contracts.db.base import DatabaseInterface
from artist_contracts.models import ContractTemplate, TemplateDefinition

logger = logging.getLogger(__name__)


class SeedResult(BaseModel):
    """Template names per seeding outcome"""
    created: list[str] = []
    updated: list[str] = []
    skipped: list[str] = []


def seed_templates(
    db: DatabaseInterface,
    update: bool = True,
    definitions: Optional[Iterable[TemplateDefinition]] = None,
) -> SeedResult:
    """Insert missing templates (matched by name).

    With ``update``, a stored template is replaced when its version is older
    than the definition's; id and created_at are kept.
    """
    result = SeedResult()
    for definition in definitions if definitions is not None else ALL_TEMPLATES:
        existing = db.get_template_by_name(definition.name)

        if existing is None:
            template = ContractTemplate(id=str(uuid4()), **definition.model_dump())
            db.put_template(template)
            result.created.append(definition.name)
            logger.info(f"Created template: {definition.name}")
            continue

        if update and existing.version < definition.version:
            template = ContractTemplate(
                id=existing.id,
                created_at=existing.created_at,
                updated_at=datetime.now(),
                **definition.model_dump(),
            )
            db.put_template(template)
            result.updated.append(definition.name)
            logger.info(
                f"Updated template: {definition.name} (v{existing.version} -> v{definition.version})"
            )
            continue

        result.skipped.append(definition.name)
        logger.debug(f"Template up to date: {definition.name} (v{existing.version})")

    return result
