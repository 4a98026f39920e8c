from typing import List, Optional
import logging
from pymongo import DESCENDING
from schemas.transaction import Transaction, TransactionCreate, generate_transaction_id
from schemas.common import utcnow
from config.database import Database
from services.errors import IntegrityViolationError

logger = logging.getLogger(__name__)

# Tolerance for floating point money arithmetic
EPSILON = 0.01

RECENT_LIMIT = 100


def check_totals(sale: TransactionCreate):
    """Recompute the sale's arithmetic and refuse anything that does not add up.

    subtotal must equal the sum of price * quantity, total must equal
    max(0, subtotal - discount), and the discount must lie in [0, subtotal].
    """
    items_total = sum(item.price * item.quantity for item in sale.items)
    if abs(items_total - sale.subtotal) > EPSILON:
        raise IntegrityViolationError(
            f"Subtotal does not match items total: expected {items_total:.2f}, got {sale.subtotal:.2f}"
        )

    if sale.discount < 0:
        raise IntegrityViolationError("Discount cannot be negative")
    if sale.discount > sale.subtotal:
        raise IntegrityViolationError(
            f"Discount cannot exceed subtotal: discount {sale.discount:.2f}, subtotal {sale.subtotal:.2f}"
        )

    expected_total = max(0.0, sale.subtotal - sale.discount)
    if abs(expected_total - sale.total) > EPSILON:
        raise IntegrityViolationError(
            f"Total does not match subtotal minus discount: expected {expected_total:.2f}, got {sale.total:.2f}"
        )


async def create_transaction(db: Database, sale: TransactionCreate) -> Transaction:
    """Record a sale. Transactions are written once and never modified."""
    try:
        check_totals(sale)
    except IntegrityViolationError as e:
        logger.warning(f"Rejected transaction for customer {sale.customer.id}: {e.message}")
        raise

    transaction_dict = sale.model_dump()
    transaction_dict["transaction_id"] = generate_transaction_id(sale.customer.name)
    transaction_dict["date"] = utcnow()
    transaction_dict["status"] = "completed"
    transaction_dict["created_at"] = transaction_dict["date"]

    await db.transactions.insert_one(transaction_dict)
    logger.info(
        f"Recorded transaction {transaction_dict['transaction_id']}: total {sale.total:.2f} "
        f"({sale.payment_method}) by therapist {sale.therapist.id}"
    )
    return Transaction(**transaction_dict)


async def get_transaction(db: Database, transaction_id: str) -> Optional[Transaction]:
    transaction = await db.transactions.find_one({"transaction_id": transaction_id})
    return Transaction(**transaction) if transaction else None


async def get_recent_transactions(db: Database, limit: int = RECENT_LIMIT) -> List[Transaction]:
    transactions = await db.transactions.find().sort("date", DESCENDING).limit(limit).to_list(length=None)
    return [Transaction(**transaction) for transaction in transactions]


async def find_transactions(db: Database, query: dict) -> List[Transaction]:
    transactions = await db.transactions.find(query).sort("date", DESCENDING).to_list(length=None)
    return [Transaction(**transaction) for transaction in transactions]
