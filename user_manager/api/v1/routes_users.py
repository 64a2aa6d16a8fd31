# File: user_manager/api/v1/routes_users.py

"""
User CRUD endpoints.

Business rule failures raised by ``UserService`` are turned into 400
envelopes by the handlers in ``responses.py``; these routes only decide
between success and not-found.
"""

from fastapi import APIRouter, Depends, Path, Query, status

from user_manager.api.deps import get_user_service, require_token
from user_manager.api.v1.responses import failure, success
from user_manager.db.schema import MAX_ID
from user_manager.schemas.result import Result
from user_manager.schemas.user import UserCreate, UserUpdate
from user_manager.services.user_service import UserService

router = APIRouter(dependencies=[Depends(require_token)])


@router.post(
    "/create",
    response_model=Result,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    created = service.create(payload)
    return success("Usuário criado com sucesso!", created)


@router.put("/update", response_model=Result, summary="Update user")
def update_user(payload: UserUpdate, service: UserService = Depends(get_user_service)):
    updated = service.update(payload)
    return success("Usuário atualizado com sucesso!", updated)


@router.delete("/remove/{user_id}", response_model=Result, summary="Remove user")
def remove_user(
    user_id: int = Path(..., ge=0, le=MAX_ID),
    service: UserService = Depends(get_user_service),
):
    if not service.remove(user_id):
        return failure(status.HTTP_404_NOT_FOUND, "Nenhum usuário removido com o ID informado!")
    return success("Usuário removido com sucesso!")


@router.get("/get/{user_id}", response_model=Result, summary="Get user by id")
def get_user(
    user_id: int = Path(..., ge=0, le=MAX_ID),
    service: UserService = Depends(get_user_service),
):
    user = service.get_by_id(user_id)
    if user is None:
        return failure(status.HTTP_404_NOT_FOUND, "Nenhum usuário encontrado com o ID informado!")
    return success("Usuário encontrado com sucesso!", user)


@router.get("/get-all", response_model=Result, summary="List users")
def get_all_users(service: UserService = Depends(get_user_service)):
    users = service.get_all()
    if not users:
        return failure(status.HTTP_404_NOT_FOUND, "Nenhum usuário encontrado!")
    return success("Usuários encontrados com sucesso!", users)


@router.get("/get-by-email", response_model=Result, summary="Get user by email")
def get_user_by_email(
    email: str = Query(...),
    service: UserService = Depends(get_user_service),
):
    user = service.get_by_email(email)
    if user is None:
        return failure(status.HTTP_404_NOT_FOUND, "Nenhum usuário encontrado com o email informado!")
    return success("Usuário encontrado com sucesso!", user)


@router.get("/search-by-name", response_model=Result, summary="Search users by name")
def search_users_by_name(
    name: str = Query(...),
    service: UserService = Depends(get_user_service),
):
    users = service.search_by_name(name)
    if not users:
        return failure(status.HTTP_404_NOT_FOUND, "Nenhum usuário encontrado com o nome informado!")
    return success("Usuários encontrados com sucesso!", users)


@router.get("/search-by-email", response_model=Result, summary="Search users by email")
def search_users_by_email(
    email: str = Query(...),
    service: UserService = Depends(get_user_service),
):
    users = service.search_by_email(email)
    if not users:
        return failure(status.HTTP_404_NOT_FOUND, "Nenhum usuário encontrado com o email informado!")
    return success("Usuários encontrados com sucesso!", users)
