"""Comparison store for saved mortgage calculations.

Holds the scenarios a user adds to the side-by-side comparison table. Every
entry is recomputed from its own inputs when it is added, so what is stored
always matches those inputs.
"""
import itertools
from typing import Callable, Optional, Tuple

import pandas as pd

from mortgage_calc.data_structures import ComparisonEntry, LoanInputs
from mortgage_calc.services.amortization import calculate


COMPARISON_COLUMNS = [
    "id", "interest_rate", "principal", "term_years", "fees",
    "monthly_payment", "total_interest", "total_amount",
]


class ComparisonStore:
    """Ordered, in-memory collection of comparison entries.
    
    Entries keep their insertion order, which is also the display order.
    Ids are unique for the lifetime of the store and never reused after
    removal.
    
    Attributes:
        id_factory: Zero-argument callable returning strictly increasing ids.
    """
    
    def __init__(self, id_factory: Callable[[], int] = None):
        """Initialize ComparisonStore.
        
        Args:
            id_factory: Optional id generator. Defaults to a counter starting at 1.
        """
        self.id_factory = id_factory or itertools.count(1).__next__
        self._entries = []
    
    def add(self, inputs: LoanInputs) -> ComparisonEntry:
        """Recompute the result for inputs and append a new entry.
        
        Args:
            inputs: Validated loan inputs.
            
        Returns:
            The newly created ComparisonEntry.
        """
        entry = ComparisonEntry(id=self.id_factory(), inputs=inputs, result=calculate(inputs))
        self._entries.append(entry)
        return entry
    
    def remove(self, entry_id) -> None:
        """Remove the entry with the given id. Unknown ids are ignored."""
        self._entries = [entry for entry in self._entries if entry.id != entry_id]
    
    def get(self, entry_id) -> Optional[ComparisonEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None
    
    def list(self) -> Tuple[ComparisonEntry, ...]:
        """Snapshot of all entries in insertion order."""
        return tuple(self._entries)
    
    def count(self) -> int:
        return len(self._entries)
    
    def __len__(self):
        return len(self._entries)
    
    def __iter__(self):
        return iter(self.list())
    
    def to_frame(self) -> pd.DataFrame:
        """Get the entries as a DataFrame, one row per entry.
        
        Returns:
            DataFrame with COMPARISON_COLUMNS, in insertion order.
        """
        return pd.DataFrame([entry.to_row() for entry in self._entries], columns=COMPARISON_COLUMNS)
