"""Strongly typed identifiers for Q&A domain entities.

Content identifiers are integers assigned by the content store. Viewers
are identified by an opaque reference string such as "user:default/alice".
"""

from typing import NewType

QuestionId = NewType("QuestionId", int)
AnswerId = NewType("AnswerId", int)
CommentId = NewType("CommentId", int)
TagId = NewType("TagId", int)
ViewerId = NewType("ViewerId", str)
