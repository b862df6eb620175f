"""
Shared schema base.

Attributes are snake_case in Python and camelCase on the wire
(``trainerId``, ``trainingPlanId``...).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class MessageResponse(BaseModel):
    """Plain confirmation or error body."""
    message: str


# Range of an INTEGER column; ids and counts outside it cannot be stored or matched
INT32_MIN = -2_147_483_648
INT32_MAX = 2_147_483_647
