"""Named view translation."""

from typing import Any

import logfire

from qeta.domain.repository.question import QuestionQuery
from qeta.domain.value import QuestionOrderBy


# Named listing shortcuts and the filters they force
NAMED_VIEWS: dict[str, dict[str, Any]] = {
    "unanswered": {"random": True, "no_answers": True},
    "incorrect": {"random": True, "no_correct_answer": True},
    "hot": {"include_trend": True, "order_by": QuestionOrderBy.TREND},
}


class ViewTranslator:
    """Turns a named view plus raw filters into a canonical query."""

    def __init__(self, views: dict[str, dict[str, Any]] | None = None) -> None:
        """Initialize view translator.

        Args:
            views: View table, defaults to NAMED_VIEWS
        """
        self.views = NAMED_VIEWS if views is None else views

    def translate(self, view: str | None, filters: QuestionQuery) -> QuestionQuery:
        """Merge the overrides of a named view over caller filters.

        Overrides win over conflicting filters. Unknown or missing views
        return the filters unchanged.

        Args:
            view: Named view, e.g. "hot"
            filters: Caller supplied filters

        Returns:
            Canonical query descriptor
        """
        overrides = self.views.get(view, {}) if view else {}
        if not overrides:
            return filters

        logfire.debug("Applying named view", view=view, overrides=list(overrides))
        return filters.model_copy(update=overrides)
