from fastapi import APIRouter, Depends, Request, Response, status
from todo_clock.domain.todo_models import Todo, TodoCreate, TodoUpdate
from todo_clock.services.todo_service import TodoService

router = APIRouter(prefix="/api/todos", tags=["todos"])


def get_service(request: Request) -> TodoService:
    # Wired in main.create_app()
    return request.app.state.todo_service


@router.get("", response_model=list[Todo])
async def list_todos(svc: TodoService = Depends(get_service)):
    return await svc.list_todos()


@router.post("", response_model=Todo, status_code=status.HTTP_201_CREATED)
async def create_todo(payload: TodoCreate, svc: TodoService = Depends(get_service)):
    return await svc.create_todo(payload)


@router.put("/{todo_id}", response_model=Todo)
async def update_todo(todo_id: str, payload: TodoUpdate, svc: TodoService = Depends(get_service)):
    return await svc.update_todo(todo_id, payload)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_todo(todo_id: str, svc: TodoService = Depends(get_service)):
    await svc.delete_todo(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
