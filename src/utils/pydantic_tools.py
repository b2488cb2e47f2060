from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseModelWithMethods(BaseModel):
    """Base model for wire records.

    Fields are declared in snake_case with the upstream spelling as alias, so records
    validate from the raw payload and from keyword arguments alike.
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self, by_alias: bool = True) -> dict[str, Any]:
        """Dump to a plain dict, using upstream field names by default."""
        return self.model_dump(by_alias=by_alias)
