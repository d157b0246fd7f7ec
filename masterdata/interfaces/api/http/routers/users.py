"""
===============================================================================
CRC CARD — interfaces/api/http/routers/users.py
===============================================================================

Class/Module:
    User Router

Responsibilities:
    - Expose HTTP endpoints for the user master table.
    - Convert HTTP requests -> use-case inputs (raw form mappings).
    - Translate UseCaseError -> RFC7807 via error_mapping.
    - Paginate list results and render CSV exports.

Collaborators:
    - application.usecases.users (Create/Update/Delete/Get/List)
    - application.csv_export.users_to_csv
    - crosscutting.pagination.build_page
    - container (DI factories)
    - schemas.users (pydantic DTOs)

Patterns:
    - Controller / Router
    - Adapter (HTTP -> UseCase)
===============================================================================
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from .....application.csv_export import users_to_csv
from .....application.usecases.users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from .....container import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
)
from .....crosscutting.config import get_settings
from .....crosscutting.error_responses import internal_error
from .....crosscutting.pagination import build_page
from .....domain.entities import User, UserRole, UserStatus
from .....domain.filtering import UserSearchSpec
from ..dependencies import csv_response, parse_enum_filter, resolve_page_size
from ..error_mapping import raise_use_case_error
from ..schemas.users import CreateUserReq, UpdateUserReq, UserRes, UsersPageRes

router = APIRouter()


# =============================================================================
# Internal helpers
# =============================================================================


def _to_user_res(user: User) -> UserRes:
    return UserRes.model_validate(user, from_attributes=True)


def _search_spec(
    keyword: Optional[str], role: Optional[str], status: Optional[str]
) -> UserSearchSpec:
    return UserSearchSpec(
        keyword=keyword,
        role=parse_enum_filter(role, UserRole, "role"),
        status=parse_enum_filter(status, UserStatus, "status"),
    )


def _list_users(use_case: ListUsersUseCase, spec: UserSearchSpec) -> List[User]:
    result = use_case.execute(spec)
    if result.error is not None:
        raise_use_case_error(result.error)
    return list(result.users)


def _user_or_raise(result) -> User:
    if result.error is not None:
        raise_use_case_error(result.error)
    if result.user is None:
        raise internal_error("User operation returned no user.")
    return result.user


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/users", response_model=UsersPageRes, tags=["users"])
def list_users(
    keyword: Optional[str] = Query(None, description="Matches name, email, department"),
    role: Optional[str] = Query(None, description="Role or ALL"),
    status: Optional[str] = Query(None, description="Status or ALL"),
    page: int = Query(0, ge=0, description="Zero-based page index"),
    page_size: Optional[int] = Query(None, description="5, 10, 25 or 50"),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    size = resolve_page_size(page_size)
    users = _list_users(use_case, _search_spec(keyword, role, status))

    result_page = build_page(users, page, size)
    return UsersPageRes(
        items=[_to_user_res(u) for u in result_page.items],
        page_info=result_page.page_info,
    )


# Declared before /users/{user_id} so the literal path wins.
@router.get("/users/export.csv", tags=["users"])
def export_users_csv(
    keyword: Optional[str] = Query(None),
    role: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    users = _list_users(use_case, _search_spec(keyword, role, status))
    limit = get_settings().csv_export_max_rows
    return csv_response(users_to_csv(users[:limit]), "users.csv")


@router.get("/users/{user_id}", response_model=UserRes, tags=["users"])
def get_user(
    user_id: UUID,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
):
    return _to_user_res(_user_or_raise(use_case.execute(user_id)))


@router.post("/users", response_model=UserRes, status_code=201, tags=["users"])
def create_user(
    req: CreateUserReq,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
):
    return _to_user_res(_user_or_raise(use_case.execute(req.to_raw())))


@router.patch("/users/{user_id}", response_model=UserRes, tags=["users"])
def update_user(
    user_id: UUID,
    req: UpdateUserReq,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
):
    return _to_user_res(_user_or_raise(use_case.execute(user_id, req.to_raw())))


@router.delete("/users/{user_id}", status_code=204, tags=["users"])
def delete_user(
    user_id: UUID,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
):
    result = use_case.execute(user_id)
    if result.error is not None:
        raise_use_case_error(result.error)
    return Response(status_code=204)
