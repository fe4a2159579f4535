from __future__ import annotations
from typing import List, Optional

from todo_clock.domain.errors import TodoNotFound
from todo_clock.domain.todo_models import Todo, TodoCreate, TodoUpdate, new_todo_id
from todo_clock.infra.store.rwlock import ReadWriteLock

class InMemoryTodoStore:
    """
    Process-lifetime todo list, insertion ordered.
    Reads share the lock, writes hold it alone. Callers only ever see copies.
    """
    def __init__(self):
        self._todos: List[Todo] = []
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._todos)

    def list(self) -> List[Todo]:
        with self._lock.read_locked():
            return [t.model_copy() for t in self._todos]

    def get(self, todo_id: str) -> Optional[Todo]:
        with self._lock.read_locked():
            todo = self._find(todo_id)
            return todo.model_copy() if todo else None

    def create(self, data: TodoCreate) -> Todo:
        todo = Todo(id=new_todo_id(), title=data.title, completed=False)
        with self._lock.write_locked():
            self._todos.append(todo)
            return todo.model_copy()

    def update(self, todo_id: str, data: TodoUpdate) -> Todo:
        with self._lock.write_locked():
            todo = self._find(todo_id)
            if todo is None:
                raise TodoNotFound(todo_id)
            if data.title is not None:
                todo.title = data.title
            if data.completed is not None:
                todo.completed = data.completed
            return todo.model_copy()

    def delete(self, todo_id: str) -> None:
        with self._lock.write_locked():
            for pos, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    del self._todos[pos]
                    return
        raise TodoNotFound(todo_id)

    def _find(self, todo_id: str) -> Optional[Todo]:
        # caller holds the lock
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        return None
