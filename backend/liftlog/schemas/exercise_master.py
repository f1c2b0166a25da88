from typing import Annotated
from pydantic import BaseModel, StringConstraints

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
MuscleGroupStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]

class ExerciseMasterCreate(BaseModel):
    name: NameStr
    muscle_group: MuscleGroupStr

class ExerciseMasterRead(BaseModel):
    id: int
    name: str
    muscle_group: str

    model_config = {"from_attributes": True}
