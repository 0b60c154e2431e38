#!/usr/bin/env python3
"""
Walk a document through the editorial workflow.

Run with DEBUG logging to see every transition the state machine makes.
"""

import logging

from draftmachine import Document


def setup_logging():
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main():
    doc = Document()

    doc.add_text("I ate a salad for lunch today")

    # Drafts are hidden from readers
    assert doc.content() == ""

    doc.request_review()
    assert doc.content() == ""

    # The reviewer sends it back to draft
    doc.reject()
    assert doc.content() == ""

    doc.request_review()
    assert doc.content() == ""

    # Text can only be added while in Draft
    doc.add_text("I ate pizza for lunch today")

    # Two approvals publish the document
    doc.approve()
    assert doc.content() == ""

    doc.approve()
    assert doc.content() == "I ate a salad for lunch today"

    print(f"Published: {doc.content()!r}")


if __name__ == "__main__":
    setup_logging()
    main()
