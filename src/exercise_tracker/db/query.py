"""Parameterized query building for exercise logs."""

from dataclasses import dataclass
from datetime import date

SELECT_EXERCISES = "SELECT id, user_id, description, duration, date FROM exercises"


@dataclass
class LogQuery:
    """Filter for a user's exercise log.

    Date bounds are inclusive. A limit of None means no cap.
    """

    user_id: str
    date_from: date | None = None
    date_to: date | None = None
    limit: int | None = None

    def predicates(self) -> list[tuple[str, object]]:
        """WHERE clauses paired with their bound values."""
        preds: list[tuple[str, object]] = [("user_id = ?", self.user_id)]
        if self.date_from is not None:
            preds.append(("date >= ?", self.date_from.isoformat()))
        if self.date_to is not None:
            preds.append(("date <= ?", self.date_to.isoformat()))
        return preds

    def build(self) -> tuple[str, list]:
        """Build the SQL text and its parameter list."""
        preds = self.predicates()
        sql = (
            f"{SELECT_EXERCISES}"
            f" WHERE {' AND '.join(clause for clause, _ in preds)}"
            " ORDER BY date, rowid"
        )
        params = [value for _, value in preds]
        if self.limit is not None:
            sql += " LIMIT ?"
            params.append(self.limit)
        return sql, params
