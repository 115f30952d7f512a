# taskhub/routers/user.py
from typing import List

from fastapi import APIRouter, Depends

from taskhub.routers.deps import get_user_service
from taskhub.schemas import SuccessResponse, UserOut
from taskhub.services import UserService
from taskhub.utils.auth import get_current_claims
from taskhub.utils.responses import success_response

router = APIRouter(dependencies=[Depends(get_current_claims)])


@router.get("", response_model=SuccessResponse[List[UserOut]])
def list_users(service: UserService = Depends(get_user_service)):
    """Everyone in the shared workspace, e.g. to pick an assignee"""
    users = service.list_users()
    return success_response([UserOut.model_validate(u) for u in users], "Users retrieved successfully")
