from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class LoanInputs:
    """Validated loan parameters for one calculation."""
    interest_rate: float
    principal: float
    term_years: int
    fees: float = 0.0


@dataclass(frozen=True)
class AmortizationResult:
    monthly_payment: float
    total_interest: float
    total_amount: float
    # Number of monthly payments the totals were computed over
    payment_count: int


@dataclass(frozen=True)
class ComparisonEntry:
    """A calculation saved to the comparison table."""
    id: int
    inputs: LoanInputs
    result: AmortizationResult

    def to_row(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "interest_rate": self.inputs.interest_rate,
            "principal": self.inputs.principal,
            "term_years": self.inputs.term_years,
            "fees": self.inputs.fees,
            "monthly_payment": self.result.monthly_payment,
            "total_interest": self.result.total_interest,
            "total_amount": self.result.total_amount,
        }
