"""Shared model configuration and patch semantics."""

from copy import deepcopy
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys on the wire.

    Both the snake_case attribute name and the camelCase alias are accepted
    on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EntityPatch(CamelModel):
    """Partial update for an entity.

    A field left out of the payload is untouched. A field sent with a value
    replaces the stored one. A field sent as null clears nullable fields,
    empties list fields and is ignored for required scalar fields.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()
    list_fields: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, Any]:
        """Return the attribute updates this patch carries.

        Values are copies, so the patch can be reused without touching
        whatever it was applied to.
        """
        updates: dict[str, Any] = {}
        for name in self.model_fields_set:
            value = getattr(self, name)
            if value is None:
                if name in self.list_fields:
                    value = []
                elif name not in self.nullable_fields:
                    continue
            updates[name] = deepcopy(value)
        return updates
