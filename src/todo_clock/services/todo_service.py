import logging
from typing import List, Optional
from todo_clock.domain.errors import TodoNotFound
from todo_clock.domain.todo_models import Todo, TodoCreate, TodoUpdate

logger = logging.getLogger("todo_clock.todos")

class TodoService:
    def __init__(self, store):
        self.store = store

    async def list_todos(self) -> List[Todo]:
        return self.store.list()

    async def get_todo(self, todo_id: str) -> Optional[Todo]:
        return self.store.get(todo_id)

    async def create_todo(self, data: TodoCreate) -> Todo:
        todo = self.store.create(data)
        logger.info("todo.create", extra={"category": "todos", "event": "todo.create", "todo_id": todo.id, "title": todo.title})
        return todo

    async def update_todo(self, todo_id: str, data: TodoUpdate) -> Todo:
        try:
            todo = self.store.update(todo_id, data)
        except TodoNotFound:
            self._log_not_found("update", todo_id)
            raise
        logger.info(
            "todo.update",
            extra={
                "category": "todos",
                "event": "todo.update",
                "todo_id": todo_id,
                "fields": sorted(data.model_dump(exclude_none=True)),
            },
        )
        return todo

    async def delete_todo(self, todo_id: str) -> None:
        try:
            self.store.delete(todo_id)
        except TodoNotFound:
            self._log_not_found("delete", todo_id)
            raise
        logger.info("todo.delete", extra={"category": "todos", "event": "todo.delete", "todo_id": todo_id})

    def _log_not_found(self, op: str, todo_id: str) -> None:
        logger.warning(
            "todo.not_found",
            extra={"category": "todos", "event": "todo.not_found", "op": op, "todo_id": todo_id},
        )
