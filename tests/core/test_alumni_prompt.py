"""
Test suite for the alumni assistant prompt builder.

Covers section order, labelled user content and the system persona.

System role: Verification of prompt assembly
"""

from langchain_core.messages import HumanMessage, SystemMessage

from backend.core.context.aggregator import ContextBundle
from backend.core.context.prompt import SYSTEM_PROMPT, build_context, build_messages


class TestBuildContext:
    """Test suite for build_context."""

    def test_empty_bundle_should_contain_every_empty_sentence(self) -> None:
        context = build_context(ContextBundle())

        for sentence in [
            "<p>No upcoming events.</p>",
            "<p>No fundraising campaigns.</p>",
            "<p>No internships available.</p>",
            "<p>No notifications.</p>",
            "<p>No mentorship programs.</p>",
            "<p>No alumni directory data.</p>",
        ]:
            assert sentence in context

    def test_sections_should_follow_fixed_order(self) -> None:
        context = build_context(ContextBundle())

        headings = [
            "Alumni Dashboard",
            "Events:",
            "Fundraising:",
            "Internships:",
            "Notifications:",
            "Mentorship Programs:",
            "Alumni Directory:",
        ]
        positions = [context.index(heading) for heading in headings]
        assert positions == sorted(positions)

    def test_records_should_land_in_their_sections(self, sample_event: dict, sample_user: dict) -> None:
        bundle = ContextBundle(
            events=[sample_event],
            users=[sample_user],
            mentorships=[{"mentorName": "Dr. Mehta", "expertise": "AI"}],
        )

        context = build_context(bundle)

        assert context.index("Events:") < context.index("Reunion") < context.index("Fundraising:")
        assert context.index("Mentorship Programs:") < context.index("Dr. Mehta") < context.index("Alumni Directory:")
        assert context.index("Alumni Directory:") < context.index("Asha Rao")
        assert "<p>No upcoming events.</p>" not in context


class TestBuildMessages:
    """Test suite for build_messages."""

    def test_should_return_system_then_user_message(self) -> None:
        messages = build_messages(ContextBundle(), "Hello")

        assert len(messages) == 2
        assert isinstance(messages[0], SystemMessage)
        assert isinstance(messages[1], HumanMessage)
        assert messages[0].content == SYSTEM_PROMPT

    def test_user_message_should_label_context_and_question(self, sample_event: dict) -> None:
        bundle = ContextBundle(events=[sample_event])

        user_content = build_messages(bundle, "Hello")[1].content

        assert user_content.startswith("Alumni database:\n")
        assert user_content.endswith("\n\nUser question: Hello")
        assert "Reunion" in user_content
        assert build_context(bundle) in user_content

    def test_braces_in_records_should_pass_through_unchanged(self) -> None:
        bundle = ContextBundle(notifications=[{"title": "{placeholder}", "message": "use {name}"}])

        user_content = build_messages(bundle, "What is {new}?")[1].content

        assert "{placeholder}" in user_content
        assert "use {name}" in user_content
        assert user_content.endswith("User question: What is {new}?")

    def test_persona_should_request_html_cards(self) -> None:
        assert "AI Alumni Assistant" in SYSTEM_PROMPT
        assert "HTML" in SYSTEM_PROMPT
