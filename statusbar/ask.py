"""Command that posts a question to the question service."""

from __future__ import annotations

import argparse
import sys
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass

ASK_URL = "http://localhost:4343/ask"


class AskError(OSError):
    """Raised when the question service cannot be reached."""


@dataclass(frozen=True)
class Answer:
    status: str
    body: str


def ask(question: str, url: str = ASK_URL) -> Answer:
    """Post ``question`` as a form value and return the reply."""
    data = urllib.parse.urlencode({"question": question}).encode("ascii")
    try:
        with urllib.request.urlopen(urllib.request.Request(url, data=data, method="POST")) as resp:
            return Answer(f"{resp.status} {resp.reason}", resp.read().decode("utf-8", "replace"))
    except urllib.error.HTTPError as exc:
        with exc:
            return Answer(f"{exc.code} {exc.reason}", exc.read().decode("utf-8", "replace"))
    except OSError as exc:
        raise AskError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """Ask the question given on the command line and print the reply."""
    parser = argparse.ArgumentParser(prog="ask", description="asks a question to the ai")
    parser.add_argument("question", nargs="+")
    parser.add_argument("--url", default=ASK_URL)
    args = parser.parse_args(argv)
    try:
        answer = ask(args.question[0], args.url)
    except AskError as exc:
        print(f"ask: {exc}", file=sys.stderr)
        return 1
    print(answer.status)
    print(answer.body)
    return 0