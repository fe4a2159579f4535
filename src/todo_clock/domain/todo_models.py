from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from typing import Optional
import uuid

class TodoCreate(BaseModel):
    model_config = ConfigDict(strict=True)

    title: str

class TodoUpdate(BaseModel):
    # no coercion: "yes" or 1 is not a bool
    model_config = ConfigDict(strict=True)

    # None means "leave unchanged"
    title: Optional[str] = None
    completed: Optional[bool] = None

class Todo(BaseModel):
    id: str
    title: str
    completed: bool = False

def new_todo_id() -> str:
    return str(uuid.uuid4())
