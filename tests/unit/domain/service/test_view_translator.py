"""Unit tests for ViewTranslator."""

from qeta.domain.repository import QuestionQuery
from qeta.domain.service import ViewTranslator
from qeta.domain.value import QuestionOrderBy, SortDirection


class TestTranslate:
    """Tests for translate method."""

    def test_unanswered_forces_random_and_no_answers(self):
        """The unanswered view should pick one question without answers."""
        query = ViewTranslator().translate("unanswered", QuestionQuery(limit=5))

        assert query.random is True
        assert query.no_answers is True
        assert query.limit == 5

    def test_incorrect_forces_no_correct_answer(self):
        """The incorrect view should exclude questions with a correct answer."""
        query = ViewTranslator().translate("incorrect", QuestionQuery())

        assert query.random is True
        assert query.no_correct_answer is True

    def test_hot_orders_by_trend(self):
        """The hot view should order by trend and populate it."""
        query = ViewTranslator().translate(
            "hot", QuestionQuery(order_by=QuestionOrderBy.VIEWS, tags=["backstage"])
        )

        assert query.order_by == QuestionOrderBy.TREND
        assert query.include_trend is True
        # Caller filters the view doesn't mention survive
        assert query.tags == ["backstage"]

    def test_unknown_view_returns_filters_unchanged(self):
        """Unknown views should behave like a plain listing."""
        filters = QuestionQuery(author="user:default/alice", order=SortDirection.ASC)

        assert ViewTranslator().translate("trending", filters) == filters

    def test_no_view_returns_filters_unchanged(self):
        """A missing view should return the caller filters."""
        filters = QuestionQuery(no_votes=True)

        assert ViewTranslator().translate(None, filters) == filters

    def test_custom_view_table(self):
        """Views come from the table the translator was built with."""
        translator = ViewTranslator(views={"mine": {"favorite": True}})

        assert translator.translate("mine", QuestionQuery()).favorite is True
        assert translator.translate("hot", QuestionQuery()).include_trend is False
