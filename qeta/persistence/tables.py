"""SQLAlchemy table definitions for the Q&A content store.

They match the schema defined in Alembic migrations. Everything attached
to a question cascades on delete.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    SmallInteger,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("content", Text, nullable=False),
    Column("author", String(255), nullable=False),  # Viewer reference
    Column("created", TIMESTAMP, nullable=False, server_default=text("NOW()")),
    Column("updated", TIMESTAMP, nullable=True),
    Column("updated_by", String(255), nullable=True),
    Column("views", Integer, nullable=False, server_default="0"),
)

Index("idx_questions_author", questions_table.c.author)
Index("idx_questions_created", questions_table.c.created.desc())

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "question_id",
        Integer,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("correct", Boolean, nullable=False, server_default="false"),
    Column("created", TIMESTAMP, nullable=False, server_default=text("NOW()")),
    Column("updated", TIMESTAMP, nullable=True),
    Column("updated_by", String(255), nullable=True),
)

Index("idx_answers_question_id", answers_table.c.question_id)
# At most one correct answer per question
Index(
    "uq_answers_one_correct",
    answers_table.c.question_id,
    unique=True,
    postgresql_where=answers_table.c.correct,
)

# ============================================================================
# COMMENTS TABLE (on a question or an answer, never both)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "question_id",
        Integer,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "answer_id",
        Integer,
        ForeignKey("answers.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("author", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("created", TIMESTAMP, nullable=False, server_default=text("NOW()")),
    CheckConstraint(
        "(question_id IS NULL) <> (answer_id IS NULL)", name="ck_comments_one_parent"
    ),
)

Index("idx_comments_question_id", comments_table.c.question_id)
Index("idx_comments_answer_id", comments_table.c.answer_id)

# ============================================================================
# VOTES TABLES (one row per voter and target)
# ============================================================================
question_votes_table = Table(
    "question_votes",
    metadata,
    Column("author", String(255), nullable=False),
    Column(
        "question_id",
        Integer,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("score", SmallInteger, nullable=False),
    Column("created", TIMESTAMP, nullable=False, server_default=text("NOW()")),
    PrimaryKeyConstraint("author", "question_id", name="pk_question_votes"),
    CheckConstraint("score IN (-1, 1)", name="ck_question_votes_score"),
)

Index("idx_question_votes_question_id", question_votes_table.c.question_id)

answer_votes_table = Table(
    "answer_votes",
    metadata,
    Column("author", String(255), nullable=False),
    Column(
        "answer_id",
        Integer,
        ForeignKey("answers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("score", SmallInteger, nullable=False),
    Column("created", TIMESTAMP, nullable=False, server_default=text("NOW()")),
    PrimaryKeyConstraint("author", "answer_id", name="pk_answer_votes"),
    CheckConstraint("score IN (-1, 1)", name="ck_answer_votes_score"),
)

Index("idx_answer_votes_answer_id", answer_votes_table.c.answer_id)

# ============================================================================
# FAVORITES TABLE
# ============================================================================
favorites_table = Table(
    "user_favorite_questions",
    metadata,
    Column("author", String(255), nullable=False),
    Column(
        "question_id",
        Integer,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("created", TIMESTAMP, nullable=False, server_default=text("NOW()")),
    PrimaryKeyConstraint("author", "question_id", name="pk_user_favorite_questions"),
)

# ============================================================================
# TAGS TABLES
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("tag", String(255), nullable=False, unique=True),
)

question_tags_table = Table(
    "question_tags",
    metadata,
    Column(
        "question_id",
        Integer,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False
    ),
    PrimaryKeyConstraint("question_id", "tag_id", name="pk_question_tags"),
)

Index("idx_question_tags_tag_id", question_tags_table.c.tag_id)

# ============================================================================
# ENTITY REFERENCES TABLE
# ============================================================================
question_entities_table = Table(
    "question_entities",
    metadata,
    Column(
        "question_id",
        Integer,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("entity_ref", String(255), nullable=False),
    PrimaryKeyConstraint("question_id", "entity_ref", name="pk_question_entities"),
)

Index("idx_question_entities_entity_ref", question_entities_table.c.entity_ref)
