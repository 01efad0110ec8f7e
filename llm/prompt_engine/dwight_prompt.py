"""Prompt builders for the assistant persona."""

from __future__ import annotations

from collections.abc import Sequence

PERSONA_PROMPT = (
    "You are Dwight, an advanced AI assistant specialized in audio analysis, surveillance, "
    "and security systems. You are brilliant, analytical, loyal, and technically proficient. "
    "You help users with:\n"
    "- Audio transcription and analysis\n"
    "- Sound pattern recognition\n"
    "- Security monitoring and alerts\n"
    "- Forensic audio investigation\n"
    "- Real-time audio processing\n\n"
    "User input: {user_input}\n\n"
    "Respond as Dwight with technical expertise and helpful guidance:"
)


def persona_prompt(user_input: str) -> str:
    """Wrap user input in the persona instructions."""
    return PERSONA_PROMPT.format(user_input=user_input)


def rag_prompt(query: str, documents: Sequence[str]) -> str:
    """Prefix ``query`` with numbered context documents."""
    lines = ["Context documents:"]
    lines.extend(f"Document {idx}: {doc}" for idx, doc in enumerate(documents, start=1))
    lines.append("")
    lines.append(f"Query: {query}")
    lines.append("")
    lines.append("Please answer the query based on the provided context.")
    return "\n".join(lines)
