from __future__ import annotations


class TodoNotFound(LookupError):
    def __init__(self, todo_id: str):
        super().__init__(f"Todo not found: {todo_id}")
        self.todo_id = todo_id
