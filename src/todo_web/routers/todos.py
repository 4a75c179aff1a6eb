from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from ..dependencies import get_service
from ..schemas import MutationResult, TodoCreate, TodoList, TodoOut
from ..services import TodoService

router = APIRouter(
    prefix="/api/v1/todos",
    tags=["todos"],
)


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=TodoList,
    summary="List Todos",
    description="List all todos, most recently created first.",
    responses={
        200: {"description": "List retrieved successfully"},
        503: {"description": "Store unavailable"},
    },
)
def list_todos(service: TodoService = Depends(get_service)) -> TodoList:
    """
    List all todos.
    """
    return TodoList(items=[TodoOut(**it) for it in service.list_todos()])


# PUBLIC_INTERFACE
@router.post(
    "/",
    response_model=MutationResult,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description=(
        "Submit a new Todo item.\n\n"
        "- 201: the todo was created\n"
        "- 200: the title was blank and nothing was created\n"
        "- 503: the store failed and nothing was created"
    ),
    responses={
        201: {"description": "Todo created successfully"},
        200: {"description": "Blank title ignored"},
        503: {"description": "Todo could not be persisted"},
    },
)
def create_todo(
    payload: TodoCreate,
    response: Response,
    service: TodoService = Depends(get_service),
) -> MutationResult:
    """
    Create a new Todo.
    """
    result = service.submit_new_todo(payload.title)
    if result.error:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif not result.created:
        response.status_code = status.HTTP_200_OK
    return result
