"""
Interactive terminal chat against a running Student Helper API.

Usage:
    python -m studyhelper_app.client.cli --url http://localhost:8000
"""

import argparse
from typing import Optional

from .formatter import CHOICE_LABELS, render_message
from .session import ChatSession, HttpTransport


def choice_from_label(label: str, choices) -> str:
    """Map "b" / "B" to the second choice; anything else is taken literally."""
    label = label.strip()
    if len(label) == 1 and label.upper() in CHOICE_LABELS[:len(choices)]:
        return choices[CHOICE_LABELS.index(label.upper())]
    return label


def read_line(prompt: str) -> Optional[str]:
    """input() that returns None on Ctrl-D / Ctrl-C instead of raising."""
    try:
        return input(prompt)
    except (EOFError, KeyboardInterrupt):
        print()
        return None


def run(session: ChatSession) -> None:
    print("Student Helper - ask a question, or type /quit to exit.")
    while True:
        text = read_line("> ")
        if text is None or text.strip() == "/quit":
            break

        reply = session.send(text)
        if reply is None:
            continue
        print(render_message(reply))

        if reply.type == "quiz" and reply.quiz_data is not None and reply.quiz_data.choices:
            answer = read_line("Your answer: ")
            if answer is None:
                break
            session.answer_quiz(len(session.messages) - 1, choice_from_label(answer, reply.quiz_data.choices))
            print(render_message(reply))


def main() -> None:
    parser = argparse.ArgumentParser(description="Student Helper terminal chat")
    parser.add_argument("--url", default="http://localhost:8000", help="Base URL of the API")
    parser.add_argument("--timeout", type=float, default=60.0, help="Request timeout in seconds")
    args = parser.parse_args()

    run(ChatSession(transport=HttpTransport(args.url, timeout=args.timeout)))


if __name__ == "__main__":
    main()
