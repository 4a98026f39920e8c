from fastapi import APIRouter, HTTPException, Depends, status
from typing import List
from schemas.user import UserCreate, UserUpdate, User
from crud import user_crud
from config.database import get_db, Database
from routes.deps import require_session

router = APIRouter(
    prefix="/users",
    tags=["users"],
    dependencies=[Depends(require_session)]
)


@router.get("/", response_model=List[User])
async def get_all_users(db: Database = Depends(get_db)):
    return await user_crud.get_all_users(db)


@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate, db: Database = Depends(get_db)):
    return await user_crud.create_user(db, user)


@router.get("/therapists/active", response_model=List[User])
async def get_active_therapists(db: Database = Depends(get_db)):
    return await user_crud.get_active_therapists(db)


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: str, db: Database = Depends(get_db)):
    user = await user_crud.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.put("/{user_id}", response_model=User)
async def update_user(user_id: str, user_data: UserUpdate, db: Database = Depends(get_db)):
    user = await user_crud.update_user(db, user_id, user_data)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.delete("/{user_id}")
async def delete_user(user_id: str, db: Database = Depends(get_db)):
    if not await user_crud.delete_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return {"message": "User deleted successfully"}
