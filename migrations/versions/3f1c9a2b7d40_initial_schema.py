"""initial_schema

Create the schema for the Q&A content store:
- Questions (with view counter)
- Answers (at most one correct answer per question)
- Comments (on a question or an answer)
- Votes (one row per voter and target, score +1 or -1)
- Favorites
- Tags and entity references

Revision ID: 3f1c9a2b7d40
Revises:
Create Date: 2026-10-17 10:12:44.518230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created() -> sa.Column:
    return sa.Column(
        "created",
        sa.TIMESTAMP(),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        _created(),
        sa.Column("updated", sa.TIMESTAMP(), nullable=True),
        sa.Column("updated_by", sa.String(255), nullable=True),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_questions_author", "questions", ["author"])
    op.create_index(
        "idx_questions_created", "questions", [sa.text("created DESC")]
    )

    # ========================================================================
    # ANSWERS table
    # ========================================================================
    op.create_table(
        "answers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("correct", sa.Boolean(), nullable=False, server_default="false"),
        _created(),
        sa.Column("updated", sa.TIMESTAMP(), nullable=True),
        sa.Column("updated_by", sa.String(255), nullable=True),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])
    op.create_index(
        "uq_answers_one_correct",
        "answers",
        ["question_id"],
        unique=True,
        postgresql_where=sa.text("correct"),
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=True),
        sa.Column("answer_id", sa.Integer(), nullable=True),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _created(),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["answer_id"], ["answers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "(question_id IS NULL) <> (answer_id IS NULL)",
            name="ck_comments_one_parent",
        ),
    )
    op.create_index("idx_comments_question_id", "comments", ["question_id"])
    op.create_index("idx_comments_answer_id", "comments", ["answer_id"])

    # ========================================================================
    # VOTES tables
    # ========================================================================
    op.create_table(
        "question_votes",
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.Column("score", sa.SmallInteger(), nullable=False),
        _created(),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("author", "question_id", name="pk_question_votes"),
        sa.CheckConstraint("score IN (-1, 1)", name="ck_question_votes_score"),
    )
    op.create_index(
        "idx_question_votes_question_id", "question_votes", ["question_id"]
    )

    op.create_table(
        "answer_votes",
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("answer_id", sa.Integer(), nullable=False),
        sa.Column("score", sa.SmallInteger(), nullable=False),
        _created(),
        sa.ForeignKeyConstraint(["answer_id"], ["answers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("author", "answer_id", name="pk_answer_votes"),
        sa.CheckConstraint("score IN (-1, 1)", name="ck_answer_votes_score"),
    )
    op.create_index("idx_answer_votes_answer_id", "answer_votes", ["answer_id"])

    # ========================================================================
    # FAVORITES table
    # ========================================================================
    op.create_table(
        "user_favorite_questions",
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=False),
        _created(),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint(
            "author", "question_id", name="pk_user_favorite_questions"
        ),
    )

    # ========================================================================
    # TAGS tables
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tag", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tag", name="tags_tag_key"),
    )

    op.create_table(
        "question_tags",
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("question_id", "tag_id", name="pk_question_tags"),
    )
    op.create_index("idx_question_tags_tag_id", "question_tags", ["tag_id"])

    # ========================================================================
    # ENTITY REFERENCES table
    # ========================================================================
    op.create_table(
        "question_entities",
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.Column("entity_ref", sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint(
            "question_id", "entity_ref", name="pk_question_entities"
        ),
    )
    op.create_index(
        "idx_question_entities_entity_ref", "question_entities", ["entity_ref"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("question_entities")
    op.drop_table("question_tags")
    op.drop_table("tags")
    op.drop_table("user_favorite_questions")
    op.drop_table("answer_votes")
    op.drop_table("question_votes")
    op.drop_table("comments")
    op.drop_table("answers")
    op.drop_table("questions")
