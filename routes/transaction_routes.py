from fastapi import APIRouter, HTTPException, Depends, status
from typing import List
from schemas.transaction import Transaction, TransactionCreate
from crud import transaction_crud
from config.database import get_db, Database
from routes.deps import require_session

# Sales are append-only: there is no update or delete route
router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
    dependencies=[Depends(require_session)]
)


@router.post("/", response_model=Transaction, status_code=status.HTTP_201_CREATED)
async def create_transaction(sale: TransactionCreate, db: Database = Depends(get_db)):
    return await transaction_crud.create_transaction(db, sale)


@router.get("/", response_model=List[Transaction])
async def get_recent_transactions(db: Database = Depends(get_db)):
    return await transaction_crud.get_recent_transactions(db)


@router.get("/{transaction_id}", response_model=Transaction)
async def get_transaction(transaction_id: str, db: Database = Depends(get_db)):
    transaction = await transaction_crud.get_transaction(db, transaction_id)
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction
