from typing import Literal, get_args

from models import db


EventType = Literal["INCOME", "OUTCOME"]
EVENT_TYPES = get_args(EventType)

# Numeric(12, 2)
VALUE_SCALE = 2


class FinancialEvent(db.Model):
    """
    One ledger entry. Rows are written once and never updated;
    the sign of the entry comes from `type`, `value` is a magnitude.
    """

    __tablename__ = "financialEvents"

    id = db.Column(db.Integer, primary_key=True)

    # Ownership
    user_id = db.Column("userId", db.Integer, db.ForeignKey("users.id"), index=True, nullable=False)

    value = db.Column(db.Numeric(12, VALUE_SCALE), nullable=False)
    type = db.Column(db.String(10), nullable=False)  # INCOME | OUTCOME

    __table_args__ = (
        db.CheckConstraint("value >= 0", name="ck_financial_event_value"),
        db.CheckConstraint(
            "type IN ({})".format(", ".join(f"'{t}'" for t in EVENT_TYPES)),
            name="ck_financial_event_type",
        ),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "value": float(self.value),
            "type": self.type,
        }
