"""Common interface of the analysis components."""

from abc import ABC, abstractmethod
from typing import Any


class BaseAnalyser(ABC):
    """Two-step analysis over a :class:`~algae_tlbx.data.views.DatasetView`.

    ``fit()`` does the computation and returns ``self`` so calls chain;
    ``result()`` packs the outcome into a frozen dataclass. Neither step touches
    the view's frame: filtered or imputed tables are new objects.

    Datasets expose one ``make_*`` factory per analyzer, e.g.::

        >>> res = AlgaeDataset.from_csv().make_missing_value_filter(prop=0.2).fit().result()
        >>> res.flagged_indices
    """

    @abstractmethod
    def fit(self) -> "BaseAnalyser":
        """Run the analysis and return self."""
        ...

    @abstractmethod
    def result(self) -> Any:
        """Frozen result of the last :meth:`fit`.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        ...
