from pydantic import BaseModel, ConfigDict


class Employee(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    id: int
    name: str = ""
    position: str = ""
    salary: float = 0.0


class DeleteRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    delete_id: int
