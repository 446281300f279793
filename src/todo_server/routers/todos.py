from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from ..schemas import TodoCreate, TodoCreated, TodoOut, TodoUpdate
from ..settings import Settings
from ..store import TodoNotFoundError, TodoStore
from ..utils import parse_todo_id

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)

NOT_FOUND = "Not Found"


def _get_store(request: Request) -> TodoStore:
    """
    Dependency returning the store owned by the running application.
    """
    return request.app.state.store


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


def _require_id(raw_id: str) -> int:
    todo_id = parse_todo_id(raw_id)
    if todo_id is None:
        raise _not_found()
    return todo_id


# PUBLIC_INTERFACE
@router.get("/", response_model=List[TodoOut], response_model_exclude_unset=True, include_in_schema=False)
@router.get(
    "",
    response_model=List[TodoOut],
    response_model_exclude_unset=True,
    summary="List Todos",
    description=(
        "Return every stored todo in insertion order. Answers 404 when the store "
        "is empty unless EMPTY_LIST_NOT_FOUND is disabled."
    ),
    responses={
        200: {"description": "All todos"},
        404: {"description": "No todos stored"},
    },
)
def list_todos(
    store: TodoStore = Depends(_get_store),
    settings: Settings = Depends(_get_settings),
) -> List[TodoOut]:
    """
    List all todos.
    """
    try:
        items = store.list(allow_empty=not settings.empty_list_not_found)
    except TodoNotFoundError:
        raise _not_found()
    return [TodoOut(**it) for it in items]  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoOut,
    response_model_exclude_unset=True,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={
        200: {"description": "Todo found"},
        404: {"description": "Todo not found"},
    },
)
def get_todo(todo_id: str, store: TodoStore = Depends(_get_store)) -> TodoOut:
    """
    Retrieve a single Todo item by its ID.
    """
    try:
        item = store.get(_require_id(todo_id))
    except TodoNotFoundError:
        raise _not_found()
    return TodoOut(**item)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.post("/", response_model=TodoCreated, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post(
    "",
    response_model=TodoCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item and return its assigned id.",
    responses={
        201: {"description": "Todo created successfully"},
    },
)
def create_todo(
    payload: Optional[TodoCreate] = None,
    store: TodoStore = Depends(_get_store),
) -> TodoCreated:
    """
    Create a new Todo. A missing body creates a todo with no fields but an id.
    """
    fields = payload.to_fields() if payload is not None else {}
    return TodoCreated(id=store.create(fields))


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_class=PlainTextResponse,
    summary="Update Todo",
    description=(
        "Merge the supplied fields into an existing Todo item. Omitted fields keep "
        "their current values and the id never changes."
    ),
    responses={
        200: {"description": "Todo updated", "content": {"text/plain": {"example": "OK"}}},
        404: {"description": "Todo not found"},
    },
)
def update_todo(
    todo_id: str,
    payload: Optional[TodoUpdate] = None,
    store: TodoStore = Depends(_get_store),
) -> PlainTextResponse:
    """
    Partial update of a Todo item.
    """
    fields = payload.to_fields() if payload is not None else {}
    try:
        store.update(_require_id(todo_id), fields)
    except TodoNotFoundError:
        raise _not_found()
    return PlainTextResponse("OK")


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    response_class=PlainTextResponse,
    summary="Delete Todo",
    description="Delete a Todo item by ID.",
    responses={
        200: {"description": "Todo deleted", "content": {"text/plain": {"example": "OK"}}},
        404: {"description": "Todo not found"},
    },
)
def delete_todo(todo_id: str, store: TodoStore = Depends(_get_store)) -> PlainTextResponse:
    """
    Delete a Todo. Returns 200 "OK" on success, 404 if not found.
    """
    try:
        store.delete(_require_id(todo_id))
    except TodoNotFoundError:
        raise _not_found()
    return PlainTextResponse("OK")
