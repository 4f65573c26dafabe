#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Example usage of the joblog package.

Runs the same small job under different handlers to show verbosity
filtering, file output and database rows.
"""

import tempfile
from pathlib import Path

from joblog import (
    DatabaseHandler,
    Document,
    FileHandler,
    PackageName,
    TerminalHandler,
    Verbosity,
    Version,
    VersionRange,
    compose,
    debug,
    error,
    info,
    interpret,
    render,
    warn,
)
from joblog.store import InMemoryDocumentStore


def resolve() -> str:
    """A pretend dependency resolution job."""
    package = PackageName("text-utils")
    wanted = VersionRange(lower=Version.parse("1.2"), upper=Version.parse("2"))
    debug(Document.text("cache hit for ") + render(package))
    info(Document.text("resolving ") + render(package) + " " + render(wanted))
    warn("disk low")
    error(Document.text("no candidate for ") + render(package))
    return "done"


def main():
    """Demonstrate the handlers."""

    print("=" * 60)
    print("joblog examples")
    print("=" * 60)
    print()

    print("Example 1: TerminalHandler with NORMAL verbosity (no debug)")
    print("-" * 60)
    interpret(TerminalHandler(Verbosity.NORMAL), resolve)
    print()

    print("Example 2: TerminalHandler with VERBOSE verbosity")
    print("-" * 60)
    interpret(TerminalHandler(Verbosity.VERBOSE), resolve)
    print()

    print("Example 3: terminal + file at once")
    print("-" * 60)
    with tempfile.TemporaryDirectory() as tmp:
        log_file = Path(tmp) / "resolve.log"
        handler = compose(TerminalHandler(Verbosity.QUIET), FileHandler(Verbosity.VERBOSE, log_file))
        interpret(handler, resolve)
        print(log_file.read_text(encoding="utf-8"))

    print("Example 4: DatabaseHandler")
    print("-" * 60)
    store = InMemoryDocumentStore()
    store.connect()
    interpret(DatabaseHandler(store, job_id="job-42"), resolve)
    for row in store.documents("logs"):
        print(f"  [{row['level']}] {row['jobId']}: {row['message']}")


if __name__ == "__main__":
    main()
