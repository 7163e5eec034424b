"""
Alumni assistant prompt.

Defines the persona and assembles the context document plus the user's
question into the system/user message pair sent to the chat model.

Dependencies: langchain_core.prompts, backend.core.context
System role: Prompt template for the alumni assistant
"""

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from backend.core.context.aggregator import ContextBundle
from backend.core.context.formatters import (
    format_directory,
    format_events,
    format_fundraising,
    format_internships,
    format_mentorship,
    format_notifications,
)

SYSTEM_PROMPT = """You are an AI Alumni Assistant. Present data clearly in HTML,
using light-themed cards, bold text, emojis, and line breaks. Be polite and conversational.
When displaying lists, use well-formatted HTML with proper styling."""

USER_TEMPLATE = """Alumni database:
{context}

User question: {question}"""

ALUMNI_ASSISTANT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", USER_TEMPLATE),
])


def build_context(bundle: ContextBundle) -> str:
    """
    Render the whole bundle as one HTML document.

    Section order is fixed: events, fundraising, internships,
    notifications, mentorship, alumni directory.

    Args:
        bundle: Collection data for this request

    Returns:
        str: HTML context document
    """
    return f"""
<h2>📢 Alumni Dashboard</h2>

<h3>📅 Events:</h3>
{format_events(bundle.events)}

<h3>💰 Fundraising:</h3>
{format_fundraising(bundle.fundraising)}

<h3>💼 Internships:</h3>
{format_internships(bundle.internships)}

<h3>🔔 Notifications:</h3>
{format_notifications(bundle.notifications)}

<h3>🧑‍🏫 Mentorship Programs:</h3>
{format_mentorship(bundle.mentorships)}

<h3>🎓 Alumni Directory:</h3>
{format_directory(bundle.users)}
"""


def build_messages(bundle: ContextBundle, question: str) -> list[BaseMessage]:
    """
    Build the chat model request for one question.

    Args:
        bundle: Collection data for this request
        question: End-user question, passed through unchanged

    Returns:
        list[BaseMessage]: System persona message, then the user message
    """
    return ALUMNI_ASSISTANT_PROMPT.invoke({
        "context": build_context(bundle),
        "question": question,
    }).to_messages()
